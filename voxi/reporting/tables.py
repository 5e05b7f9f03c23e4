from dataclasses import dataclass
from numbers import Number
from typing import Any, Callable, Dict, List, Optional

import pandas as pd

from voxi.analysis.shapes import ResponseKind
from voxi.labels import t

@dataclass
class TableColumn:
    key: str
    title: str
    render: Optional[Callable[[Any], Any]] = None

def _is_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)

def fraction_percent(digits: int) -> Callable[[Any], str]:
    """0.1234 -> '12.34%' for digits=2; non-numbers are shown as '<value>%'."""
    def render(value):
        if _is_number(value):
            return f"{value * 100:.{digits}f}%"
        return f"{value}%"
    return render

def percent_suffix(value) -> str:
    return f"{value}%"

def one_decimal(value):
    return f"{value:.1f}" if _is_number(value) else value

def growth_ratio_renderer(lang: str) -> Callable[[Any], str]:
    def render(value):
        return t("labels.newTopic", lang) if value == "new" else f"{value}x"
    return render

def growing_flag(value) -> str:
    return "✅" if value else "❌"

def columns_for(kind: ResponseKind, lang: str = "zh") -> List[TableColumn]:
    if kind == ResponseKind.PEAK_HOURS:
        return [
            TableColumn("hour_range", t("labels.timeRange", lang)),
            TableColumn("call_count", t("labels.callCount", lang)),
            TableColumn("percentage", t("labels.percentage", lang), percent_suffix),
        ]
    if kind == ResponseKind.GROWING_TOPICS:
        return [
            TableColumn("topic", t("labels.topic", lang)),
            TableColumn("current_frequency", t("labels.currentFreq", lang), fraction_percent(2)),
            TableColumn("current_count", t("labels.currentCount", lang)),
            TableColumn("historical_avg_frequency", t("labels.historicalAvg", lang), fraction_percent(2)),
            TableColumn("growth_ratio", t("labels.growthRate", lang), growth_ratio_renderer(lang)),
            TableColumn("is_growing", t("labels.isGrowing", lang), growing_flag),
        ]
    if kind == ResponseKind.TOPIC_DURATION:
        return [
            TableColumn("topic", t("labels.topic", lang)),
            TableColumn("avg_duration", t("labels.avgDuration", lang), one_decimal),
            TableColumn("count", t("labels.callCount", lang)),
        ]
    if kind == ResponseKind.SENTIMENT:
        return [
            TableColumn("topic", t("labels.topic", lang)),
            TableColumn("positive", t("labels.positive", lang)),
            TableColumn("neutral", t("labels.neutral", lang)),
            TableColumn("negative", t("labels.negative", lang)),
            TableColumn("total", t("labels.total", lang)),
            TableColumn("negative_ratio", t("labels.negativeRatio", lang), fraction_percent(1)),
        ]
    if kind == ResponseKind.TOPIC_COUNT:
        return [
            TableColumn("topic", t("labels.topic", lang)),
            TableColumn("count", t("labels.callCount", lang)),
        ]
    return []

def build_table(rows: List[Dict[str, Any]], columns: List[TableColumn]) -> pd.DataFrame:
    """Rendered table: column titles as headers, cell values passed through each column's renderer."""
    records = []
    for row in rows or []:
        record = {}
        for col in columns:
            value = row.get(col.key)
            record[col.title] = col.render(value) if col.render else value
        records.append(record)
    return pd.DataFrame(records, columns=[c.title for c in columns])
