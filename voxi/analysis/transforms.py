from typing import List, Dict, Any

import pandas as pd

from voxi.utils import hour_display, hour_range

NEW_TOPIC_GROWTH = 10

def complete_hourly(all_peak_hours: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Expand the busy hours returned by the service to a full 0-23 day.
    Hours the service left out get zero calls.
    """
    # first row wins when an hour repeats
    by_hour = {}
    for h in all_peak_hours or []:
        by_hour.setdefault(h.get("hour"), h)
    rows = []
    for hour in range(24):
        existing = by_hour.get(hour)
        if existing:
            row = dict(existing)
            row["hour_label"] = existing.get("hour_display", hour_display(hour))
        else:
            row = {
                "hour": hour,
                "hour_display": hour_display(hour),
                "hour_range": hour_range(hour),
                "call_count": 0,
                "percentage": 0,
                "hour_label": hour_display(hour),
            }
        rows.append(row)
    return rows

def top_peak_hours(all_peak_hours: List[Dict[str, Any]], n: int = 5) -> List[Dict[str, Any]]:
    # The service already orders these busiest first
    return list((all_peak_hours or [])[:n])

def overall_sentiment(rows: List[Dict[str, Any]]) -> Dict[str, float]:
    totals = {"positive": 0, "neutral": 0, "negative": 0}
    for row in rows or []:
        for key in totals:
            totals[key] += row.get(key, 0) or 0
    return totals

def growth_chart_rows(growing_topics: List[Dict[str, Any]], new_label: str = "New Topic") -> List[Dict[str, Any]]:
    rows = []
    for topic in growing_topics or []:
        ratio = topic.get("growth_ratio")
        row = dict(topic)
        if ratio == "new":
            row["growth_ratio_numeric"] = NEW_TOPIC_GROWTH
            row["growth_display"] = new_label
        else:
            row["growth_ratio_numeric"] = ratio
            row["growth_display"] = f"{ratio}x"
        rows.append(row)
    return rows

def monthly_trend_table(trends: List[Dict[str, Any]]) -> pd.DataFrame:
    """
    One row per month (sorted ascending), one column per topic.
    A topic absent in a month is left as NaN so the line has a gap.
    """
    df = pd.DataFrame(trends or [], columns=["month", "topic", "frequency"])
    if df.empty:
        return pd.DataFrame(columns=["month"])
    wide = df.pivot_table(index="month", columns="topic", values="frequency", aggfunc="last")
    wide = wide.sort_index().reset_index()
    wide.columns.name = None
    return wide

def top_topics(growing_topics: List[Dict[str, Any]], n: int = 5) -> List[str]:
    return [t.get("topic") for t in (growing_topics or [])[:n]]
