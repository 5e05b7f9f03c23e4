from voxi.analysis.shapes import ResponseKind
from voxi.api.mock_client import MOCK_RESPONSES
from voxi.api.questions import (
    DURATION_QUESTION,
    COMMON_TOPICS_QUESTION,
    SENTIMENT_QUESTION,
    GROWING_TOPICS_QUESTION,
    PEAK_HOURS_QUESTION,
)
from voxi.reporting.tables import fraction_percent, one_decimal, percent_suffix
from voxi.reporting.view import build_view

def test_topic_duration_view():
    view = build_view(MOCK_RESPONSES[DURATION_QUESTION], "en")
    assert view.kind == ResponseKind.TOPIC_DURATION
    assert len(view.figures) == 1
    assert list(view.table.columns) == ["Topic", "Average Duration (s)", "Call Count"]
    assert view.table.iloc[0].tolist() == ["Refund Request", "412.6", 138]

def test_topic_count_view():
    view = build_view(MOCK_RESPONSES[COMMON_TOPICS_QUESTION], "en")
    assert view.kind == ResponseKind.TOPIC_COUNT
    assert len(view.figures) == 1
    assert list(view.table.columns) == ["Topic", "Call Count"]
    assert len(view.table) == 5

def test_sentiment_view():
    view = build_view(MOCK_RESPONSES[SENTIMENT_QUESTION], "en")
    assert view.kind == ResponseKind.SENTIMENT
    assert len(view.figures) == 2
    assert view.figures[0].data[0].type == "pie"
    assert list(view.table["Negative Ratio"]) == ["19.3%", "33.5%", "50.7%"]

def test_growing_topics_view():
    view = build_view(MOCK_RESPONSES[GROWING_TOPICS_QUESTION], "zh")
    assert view.kind == ResponseKind.GROWING_TOPICS
    assert len(view.figures) == 2
    first = view.table.iloc[0]
    assert first["增长率"] == "新话题"
    assert first["当前频率"] == "7.12%"
    assert first["是否增长"] == "✅"
    assert view.table.iloc[1]["增长率"] == "1.78x"
    assert [s.label for s in view.stats] == ["当前月份", "历史记录分析月份数", "快速增长话题数"]
    assert [s.value for s in view.stats] == ["2024-06", 5, 3]
    # one trend line per top topic present in the monthly data
    assert {trace.name for trace in view.figures[1].data} == {
        "Subscription Cancellation", "Refund Request", "Technical Support"}

def test_peak_hours_view():
    view = build_view(MOCK_RESPONSES[PEAK_HOURS_QUESTION], "en")
    assert view.kind == ResponseKind.PEAK_HOURS
    assert len(view.figures) == 3
    assert len(view.figures[0].data[0].x) == 24
    assert len(view.figures[1].data[0].x) == 5
    assert list(view.table.columns) == ["Time Range", "Call Count", "Percentage"]
    assert view.table.iloc[0].tolist() == ["10:00-10:59", 164, "19.5%"]
    stats = {s.label: s for s in view.stats}
    assert stats["Peak Hour"].value == "10:00"
    assert stats["Total Calls"].value == "842"
    assert stats["Total Calls"].caption == "2024-06-01 ~ 2024-06-30"

def test_percentage_chart_covers_the_whole_day_in_order():
    view = build_view(MOCK_RESPONSES[PEAK_HOURS_QUESTION], "en")
    percentage = view.figures[2].data[0]
    assert list(percentage.x) == [f"{h:02d}:00" for h in range(24)]
    assert percentage.y[10] == 19.5
    assert percentage.y[3] == 0

def test_monthly_trend_lines_keep_gaps():
    view = build_view(MOCK_RESPONSES[GROWING_TOPICS_QUESTION], "en")
    assert [trace.connectgaps for trace in view.figures[1].data] == [False, False, False]

def test_growing_view_with_nothing_growing():
    payload = {
        "current_month": "2024-07",
        "historical_months": 6,
        "growing_topics": [],
        "monthly_topic_trends": [{"month": "2024-07", "topic": "Billing", "frequency": 0.2}],
    }
    view = build_view(payload, "en")
    assert view.kind == ResponseKind.GROWING_TOPICS
    assert view.table.empty
    assert view.stats[2].value == 0
    assert len(view.figures[1].data) == 0

def test_peak_view_tolerates_odd_peak_fields():
    view = build_view({"peak_hour": "10:00", "statistics": "n/a"}, "en")
    assert view.kind == ResponseKind.PEAK_HOURS
    assert view.stats[0].value is None
    assert view.stats[1].value is None
    assert len(view.figures[0].data[0].x) == 24

    view = build_view({"peak_hour": {}}, "en")
    assert view.kind == ResponseKind.PEAK_HOURS
    assert view.table.empty

def test_raw_and_empty():
    view = build_view({"summary": "hello"}, "en")
    assert view.kind == ResponseKind.RAW
    assert view.figures == []
    assert view.table is None
    assert '"summary": "hello"' in view.raw

    view = build_view(None)
    assert view.kind == ResponseKind.NONE
    assert view.raw is None

def test_renderers_pass_through_non_numbers():
    assert fraction_percent(2)(0.5) == "50.00%"
    assert fraction_percent(1)("n/a") == "n/a%"
    assert one_decimal(3.14159) == "3.1"
    assert one_decimal("slow") == "slow"
    assert percent_suffix(12.5) == "12.5%"
