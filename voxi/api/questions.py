"""
Maps a question to the analytics endpoint that answers it.

The five predefined questions each have a dedicated endpoint that takes an
empty JSON body. Anything else is free text and goes to ``auto_route``,
which picks the analysis on the server side.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List

AUTO_ROUTE_ENDPOINT = "auto_route"

DURATION_QUESTION = "What topics usually lead to longer call durations?"
COMMON_TOPICS_QUESTION = "What are the most common call topics?"
SENTIMENT_QUESTION = "What is the sentiment distribution by topic?"
GROWING_TOPICS_QUESTION = "What topics are growing in popularity this month?"
PEAK_HOURS_QUESTION = "What are the peak call hours throughout the day?"

# Insertion order is the order the chips are shown in
PREDEFINED_QUESTIONS: Dict[str, str] = {
    DURATION_QUESTION: "topic_duration_insight_local",
    COMMON_TOPICS_QUESTION: "processed_topic_count_local",
    SENTIMENT_QUESTION: "processed_topic_sentiment_distribution_local",
    GROWING_TOPICS_QUESTION: "growing_topics_local",
    PEAK_HOURS_QUESTION: "peak_call_hours_local",
}

QUESTION_TRANSLATIONS_ZH: Dict[str, str] = {
    DURATION_QUESTION: "哪些话题通常导致更长的通话时间？",
    COMMON_TOPICS_QUESTION: "最常见的通话话题是什么？",
    SENTIMENT_QUESTION: "按话题划分的情感分布如何？",
    GROWING_TOPICS_QUESTION: "本月哪些话题越来越受欢迎？",
    PEAK_HOURS_QUESTION: "一天中的通话高峰时段是什么时候？",
}


@dataclass(frozen=True)
class InsightRequest:
    endpoint: str
    payload: Dict[str, Any] = field(default_factory=dict)


def predefined_questions() -> List[str]:
    return list(PREDEFINED_QUESTIONS)


def is_predefined(question: str) -> bool:
    return question in PREDEFINED_QUESTIONS


def resolve_request(question: str) -> InsightRequest:
    """
    Exact-match lookup: a predefined question with a trailing space or
    different casing is treated as free text.
    """
    endpoint = PREDEFINED_QUESTIONS.get(question)
    if endpoint:
        return InsightRequest(endpoint=endpoint, payload={})
    return InsightRequest(endpoint=AUTO_ROUTE_ENDPOINT, payload={"query": question})


def display_question(question: str, lang: str = "zh") -> str:
    if lang == "zh":
        return QUESTION_TRANSLATIONS_ZH.get(question, question)
    return question
