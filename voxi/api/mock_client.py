import copy
from typing import Dict, Any

from .interface import InsightSource
from .questions import (
    DURATION_QUESTION,
    COMMON_TOPICS_QUESTION,
    SENTIMENT_QUESTION,
    GROWING_TOPICS_QUESTION,
    PEAK_HOURS_QUESTION,
)

MOCK_RESPONSES: Dict[str, Dict[str, Any]] = {
    DURATION_QUESTION: {
        "result": [
            {"topic": "Refund Request", "avg_duration": 412.6, "count": 138},
            {"topic": "Technical Support", "avg_duration": 388.2, "count": 254},
            {"topic": "Billing Inquiry", "avg_duration": 301.9, "count": 311},
            {"topic": "Account Access", "avg_duration": 215.4, "count": 97},
            {"topic": "Delivery Status", "avg_duration": 148.0, "count": 186},
        ],
        "insight": "Refund requests and technical support calls run the longest.",
    },
    COMMON_TOPICS_QUESTION: {
        "result": [
            {"topic": "Billing Inquiry", "count": 311},
            {"topic": "Technical Support", "count": 254},
            {"topic": "Delivery Status", "count": 186},
            {"topic": "Refund Request", "count": 138},
            {"topic": "Account Access", "count": 97},
        ],
    },
    SENTIMENT_QUESTION: {
        "result": [
            {"topic": "Billing Inquiry", "positive": 120, "neutral": 131, "negative": 60, "total": 311, "negative_ratio": 0.193},
            {"topic": "Technical Support", "positive": 71, "neutral": 98, "negative": 85, "total": 254, "negative_ratio": 0.335},
            {"topic": "Refund Request", "positive": 22, "neutral": 46, "negative": 70, "total": 138, "negative_ratio": 0.507},
        ],
    },
    GROWING_TOPICS_QUESTION: {
        "current_month": "2024-06",
        "current_month_calls": 842,
        "historical_months": 5,
        "growing_topics": [
            {"topic": "Subscription Cancellation", "current_frequency": 0.0712, "current_count": 60,
             "historical_avg_frequency": 0.0, "growth_ratio": "new", "is_growing": True},
            {"topic": "Refund Request", "current_frequency": 0.1639, "current_count": 138,
             "historical_avg_frequency": 0.0921, "growth_ratio": 1.78, "is_growing": True},
            {"topic": "Technical Support", "current_frequency": 0.3017, "current_count": 254,
             "historical_avg_frequency": 0.2455, "growth_ratio": 1.23, "is_growing": True},
        ],
        "monthly_topic_trends": [
            {"month": "2024-05", "topic": "Refund Request", "frequency": 0.1012},
            {"month": "2024-06", "topic": "Refund Request", "frequency": 0.1639},
            {"month": "2024-05", "topic": "Technical Support", "frequency": 0.2610},
            {"month": "2024-06", "topic": "Technical Support", "frequency": 0.3017},
            {"month": "2024-06", "topic": "Subscription Cancellation", "frequency": 0.0712},
        ],
    },
    PEAK_HOURS_QUESTION: {
        "peak_hour": {"hour_display": "10:00", "call_count": 164, "percentage": "19.5"},
        "statistics": {
            "total_calls": 842,
            "date_range": "2024-06-01 ~ 2024-06-30",
            "total_active_hours": 9,
            "average_calls_per_hour": 93.6,
        },
        "all_peak_hours": [
            {"hour": 10, "hour_display": "10:00", "hour_range": "10:00-10:59", "call_count": 164, "percentage": 19.5},
            {"hour": 14, "hour_display": "14:00", "hour_range": "14:00-14:59", "call_count": 151, "percentage": 17.9},
            {"hour": 11, "hour_display": "11:00", "hour_range": "11:00-11:59", "call_count": 133, "percentage": 15.8},
            {"hour": 15, "hour_display": "15:00", "hour_range": "15:00-15:59", "call_count": 112, "percentage": 13.3},
            {"hour": 9, "hour_display": "09:00", "hour_range": "09:00-09:59", "call_count": 98, "percentage": 11.6},
            {"hour": 16, "hour_display": "16:00", "hour_range": "16:00-16:59", "call_count": 71, "percentage": 8.4},
            {"hour": 13, "hour_display": "13:00", "hour_range": "13:00-13:59", "call_count": 55, "percentage": 6.5},
            {"hour": 17, "hour_display": "17:00", "hour_range": "17:00-17:59", "call_count": 38, "percentage": 4.5},
            {"hour": 12, "hour_display": "12:00", "hour_range": "12:00-12:59", "call_count": 20, "percentage": 2.4},
        ],
    },
}

# Free-text questions get a payload no template recognises, so it renders as raw JSON
MOCK_SUMMARY = {
    "summary": "Based on your query, I've analyzed the customer service call data from your database.",
    "data": [
        {"metric": "Total Calls", "value": "2,847", "change": "+15% from last month"},
        {"metric": "Average Duration", "value": "8.3 minutes", "change": "-2% from last month"},
        {"metric": "Resolution Rate", "value": "87%", "change": "+5% from last month"},
    ],
}

class MockInsightClient(InsightSource):
    def fetch(self, question: str) -> Dict[str, Any]:
        payload = MOCK_RESPONSES.get(question)
        if payload is None:
            payload = dict(MOCK_SUMMARY, query=question)
        return copy.deepcopy(payload)
