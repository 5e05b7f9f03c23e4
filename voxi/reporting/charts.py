from typing import List, Dict, Any

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from voxi.analysis import transforms
from voxi.labels import t

CHART_COLORS = ["#3B82F6", "#8B5CF6", "#10B981", "#F59E0B", "#EF4444",
                "#6366F1", "#14B8A6", "#F97316", "#EC4899", "#84CC16"]
SENTIMENT_COLORS = {
    "positive": "#10B981",
    "neutral": "#6B7280",
    "negative": "#EF4444",
}

def _topic_layout(fig, y_title):
    fig.update_layout(
        xaxis=dict(tickangle=-45, title=None),
        yaxis=dict(title=y_title),
        margin=dict(l=10, r=10, t=40, b=10),
    )
    return fig

def plot_topic_duration(rows: List[Dict[str, Any]], lang: str = "zh"):
    df = pd.DataFrame(rows)
    fig = px.bar(df, x="topic", y="avg_duration", title=t("charts.avgDuration", lang),
                 color_discrete_sequence=[CHART_COLORS[0]])
    fig.update_traces(hovertemplate="%{x}<br>%{y:.1f}s<extra></extra>")
    return _topic_layout(fig, t("labels.duration", lang))

def plot_topic_count(rows: List[Dict[str, Any]], lang: str = "zh"):
    df = pd.DataFrame(rows)
    fig = px.bar(df, x="topic", y="count", title=t("charts.callCount", lang),
                 color_discrete_sequence=[CHART_COLORS[1]])
    return _topic_layout(fig, t("labels.callCount", lang))

def plot_sentiment_pie(rows: List[Dict[str, Any]], lang: str = "zh"):
    totals = transforms.overall_sentiment(rows)
    df = pd.DataFrame({
        "Sentiment": [t(f"labels.{k}", lang) for k in totals],
        "Count": list(totals.values()),
    })
    color_map = {t(f"labels.{k}", lang): c for k, c in SENTIMENT_COLORS.items()}
    fig = px.pie(df, names="Sentiment", values="Count", color="Sentiment",
                 color_discrete_map=color_map, title=t("charts.sentiment", lang))
    fig.update_traces(textinfo="label+percent")
    fig.update_layout(margin=dict(l=10, r=10, t=40, b=10))
    return fig

def plot_negative_ratio(rows: List[Dict[str, Any]], lang: str = "zh"):
    df = pd.DataFrame(rows)
    fig = px.bar(df, x="topic", y="negative_ratio", title=t("charts.negativeRatio", lang),
                 color_discrete_sequence=[SENTIMENT_COLORS["negative"]])
    fig.update_traces(hovertemplate="%{x}<br>%{y:.1%}<extra></extra>")
    fig = _topic_layout(fig, t("labels.percentage", lang))
    fig.update_yaxes(range=[0, 1], tickformat=".0%")
    return fig

def plot_hourly_distribution(all_peak_hours: List[Dict[str, Any]], lang: str = "zh"):
    df = pd.DataFrame(transforms.complete_hourly(all_peak_hours))
    fig = px.line(df, x="hour_label", y="call_count", markers=True,
                  title=t("charts.callDistribution", lang),
                  color_discrete_sequence=[CHART_COLORS[0]])
    fig.update_layout(xaxis=dict(title=None), yaxis=dict(title=t("labels.callCount", lang)),
                      margin=dict(l=10, r=10, t=40, b=10))
    return fig

def plot_top_peak_hours(all_peak_hours: List[Dict[str, Any]], lang: str = "zh"):
    df = pd.DataFrame(transforms.top_peak_hours(all_peak_hours), columns=["hour_range", "call_count"])
    fig = px.bar(df, x="hour_range", y="call_count", title=t("charts.peakHours", lang),
                 color_discrete_sequence=[CHART_COLORS[2]])
    return _topic_layout(fig, t("labels.callCount", lang))

def plot_hourly_percentage(all_peak_hours: List[Dict[str, Any]], lang: str = "zh"):
    df = pd.DataFrame(transforms.complete_hourly(all_peak_hours))
    fig = px.bar(df, x="hour_label", y="percentage", title=t("charts.callDistributionPercentage", lang),
                 color_discrete_sequence=[CHART_COLORS[3]])
    fig.update_traces(hovertemplate="%{x}<br>%{y}%<extra></extra>")
    return _topic_layout(fig, t("labels.percentage", lang))

def plot_growth_ratio(growing_topics: List[Dict[str, Any]], lang: str = "zh"):
    rows = transforms.growth_chart_rows(growing_topics, new_label=t("labels.newTopic", lang))
    df = pd.DataFrame(rows, columns=["topic", "growth_ratio_numeric", "growth_display"])
    fig = px.bar(df, x="topic", y="growth_ratio_numeric", text="growth_display",
                 title=t("charts.growthRate", lang),
                 color_discrete_sequence=[CHART_COLORS[4]])
    return _topic_layout(fig, t("labels.growthRate", lang))

def plot_monthly_trends(trends: List[Dict[str, Any]], growing_topics: List[Dict[str, Any]], lang: str = "zh"):
    wide = transforms.monthly_trend_table(trends)
    fig = go.Figure()
    for i, topic in enumerate(transforms.top_topics(growing_topics)):
        if topic not in wide.columns:
            continue
        fig.add_trace(go.Scatter(
            x=wide["month"], y=wide[topic], name=topic, mode="lines+markers",
            connectgaps=False, line=dict(color=CHART_COLORS[i % len(CHART_COLORS)]),
        ))
    fig.update_layout(
        title=t("charts.monthlyTrends", lang),
        xaxis=dict(title=t("labels.month", lang)),
        yaxis=dict(title=t("labels.frequency", lang), tickformat=".2%"),
        margin=dict(l=10, r=10, t=40, b=10),
    )
    return fig
