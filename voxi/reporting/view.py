import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from voxi.analysis.shapes import ResponseKind, classify_response
from voxi.labels import t
from voxi.reporting import charts
from voxi.reporting.tables import build_table, columns_for
from voxi.utils import get_logger

logger = get_logger(__name__)

@dataclass
class StatCard:
    label: str
    value: Any
    caption: Optional[str] = None

@dataclass
class InsightView:
    kind: ResponseKind
    figures: List[Any] = field(default_factory=list)
    table: Optional[pd.DataFrame] = None
    stats: List[StatCard] = field(default_factory=list)
    raw: Optional[str] = None

def build_view(payload: Any, lang: str = "zh") -> InsightView:
    """
    Turn a service payload into what the page draws: stat cards, Plotly
    figures, and the detailed table. Payloads no template recognises come
    back as indented JSON in ``raw``.
    """
    kind = classify_response(payload)
    logger.info(f"Rendering {kind.value} view")

    if kind == ResponseKind.NONE:
        return InsightView(kind=kind)

    if kind == ResponseKind.RAW:
        return InsightView(kind=kind, raw=json.dumps(payload, indent=2, ensure_ascii=False, default=str))

    if kind == ResponseKind.PEAK_HOURS:
        return _peak_hours_view(payload, lang)

    if kind == ResponseKind.GROWING_TOPICS:
        return _growing_topics_view(payload, lang)

    rows = payload["result"]
    table = build_table(rows, columns_for(kind, lang))
    if kind == ResponseKind.TOPIC_DURATION:
        figures = [charts.plot_topic_duration(rows, lang)]
    elif kind == ResponseKind.SENTIMENT:
        figures = [charts.plot_sentiment_pie(rows, lang), charts.plot_negative_ratio(rows, lang)]
    else:
        figures = [charts.plot_topic_count(rows, lang)]
    return InsightView(kind=kind, figures=figures, table=table)

def _mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}

def _rows(value: Any) -> List[Dict[str, Any]]:
    # rows that are not objects would break the chart builders
    if not isinstance(value, list):
        return []
    return [row for row in value if isinstance(row, Mapping)]

def _peak_hours_view(payload: Dict[str, Any], lang: str) -> InsightView:
    hours = _rows(payload.get("all_peak_hours"))
    peak = _mapping(payload.get("peak_hour"))
    statistics = _mapping(payload.get("statistics"))

    total_calls = statistics.get("total_calls")
    stats = [
        StatCard(t("stats.peakMoment", lang), peak.get("hour_display")),
        StatCard(t("stats.totalCalls", lang),
                 f"{total_calls:,}" if isinstance(total_calls, int) else total_calls,
                 statistics.get("date_range")),
        StatCard(t("stats.activeHours", lang), statistics.get("total_active_hours")),
        StatCard(t("stats.avgPerHour", lang), statistics.get("average_calls_per_hour")),
    ]
    figures = [
        charts.plot_hourly_distribution(hours, lang),
        charts.plot_top_peak_hours(hours, lang),
        charts.plot_hourly_percentage(hours, lang),
    ]
    table = build_table(hours, columns_for(ResponseKind.PEAK_HOURS, lang))
    return InsightView(kind=ResponseKind.PEAK_HOURS, figures=figures, table=table, stats=stats)

def _growing_topics_view(payload: Dict[str, Any], lang: str) -> InsightView:
    topics = _rows(payload.get("growing_topics"))
    trends = _rows(payload.get("monthly_topic_trends"))
    stats = [
        StatCard(t("stats.currentMonth", lang), payload.get("current_month")),
        StatCard(t("stats.historicalMonths", lang), payload.get("historical_months")),
        StatCard(t("stats.growingTopics", lang), len(topics)),
    ]
    figures = [
        charts.plot_growth_ratio(topics, lang),
        charts.plot_monthly_trends(trends, topics, lang),
    ]
    table = build_table(topics, columns_for(ResponseKind.GROWING_TOPICS, lang))
    return InsightView(kind=ResponseKind.GROWING_TOPICS, figures=figures, table=table, stats=stats)
