from enum import Enum
from collections.abc import Mapping
from typing import Any

from voxi.utils import get_logger

logger = get_logger(__name__)

class ResponseKind(str, Enum):
    NONE = "none"
    PEAK_HOURS = "peak_hours"
    GROWING_TOPICS = "growing_topics"
    TOPIC_DURATION = "topic_duration"
    SENTIMENT = "sentiment"
    TOPIC_COUNT = "topic_count"
    RAW = "raw"

def classify_response(payload: Any) -> ResponseKind:
    """
    Decide which template renders a payload. Checks run in a fixed order, so
    a payload carrying both ``peak_hour`` and ``result`` is a peak-hours one.
    For ``result`` lists only the first row is inspected.
    """
    if payload is None:
        return ResponseKind.NONE
    if not isinstance(payload, Mapping):
        return ResponseKind.RAW

    if _truthy(payload.get("peak_hour")):
        kind = ResponseKind.PEAK_HOURS
    elif _truthy(payload.get("growing_topics")) and _truthy(payload.get("monthly_topic_trends")):
        kind = ResponseKind.GROWING_TOPICS
    else:
        kind = _classify_result(payload.get("result"))

    logger.debug(f"Classified response as {kind.value}")
    return kind

def _truthy(value: Any) -> bool:
    """
    Truthiness as the service's JSON consumers see it: empty lists and
    objects count as present, only null, false, 0, NaN and "" do not.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True

def _classify_result(result: Any) -> ResponseKind:
    if not isinstance(result, list) or not result:
        return ResponseKind.RAW
    first = result[0]
    if not isinstance(first, Mapping):
        return ResponseKind.RAW
    if "avg_duration" in first:
        return ResponseKind.TOPIC_DURATION
    if "positive" in first:
        return ResponseKind.SENTIMENT
    if "count" in first:
        return ResponseKind.TOPIC_COUNT
    return ResponseKind.RAW
