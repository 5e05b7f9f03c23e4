import math

from voxi.analysis import transforms

HOURS = [
    {"hour": 14, "hour_display": "14:00", "hour_range": "14:00-14:59", "call_count": 30, "percentage": 60.0},
    {"hour": 9, "hour_display": "09:00", "hour_range": "09:00-09:59", "call_count": 20, "percentage": 40.0},
]

def test_complete_hourly_fills_the_day():
    rows = transforms.complete_hourly(HOURS)
    assert len(rows) == 24
    assert [r["hour"] for r in rows] == list(range(24))

    assert rows[3] == {
        "hour": 3,
        "hour_display": "03:00",
        "hour_range": "03:00-03:59",
        "call_count": 0,
        "percentage": 0,
        "hour_label": "03:00",
    }
    assert rows[14]["call_count"] == 30
    assert rows[14]["hour_label"] == "14:00"
    assert rows[9]["percentage"] == 40.0

def test_complete_hourly_does_not_mutate_input():
    transforms.complete_hourly(HOURS)
    assert "hour_label" not in HOURS[0]

def test_complete_hourly_empty():
    rows = transforms.complete_hourly([])
    assert sum(r["call_count"] for r in rows) == 0
    assert rows[23]["hour_range"] == "23:00-23:59"

def test_top_peak_hours_keeps_service_order():
    many = [{"hour": h, "call_count": 24 - h} for h in range(8)]
    top = transforms.top_peak_hours(many)
    assert [r["hour"] for r in top] == [0, 1, 2, 3, 4]
    assert transforms.top_peak_hours(HOURS) == HOURS

def test_overall_sentiment():
    rows = [
        {"topic": "A", "positive": 3, "neutral": 2, "negative": 1},
        {"topic": "B", "positive": 1, "neutral": 0, "negative": 4},
    ]
    assert transforms.overall_sentiment(rows) == {"positive": 4, "neutral": 2, "negative": 5}

def test_growth_chart_rows():
    rows = transforms.growth_chart_rows(
        [{"topic": "A", "growth_ratio": "new"}, {"topic": "B", "growth_ratio": 1.5}],
        new_label="新话题",
    )
    assert rows[0]["growth_ratio_numeric"] == 10
    assert rows[0]["growth_display"] == "新话题"
    assert rows[1]["growth_ratio_numeric"] == 1.5
    assert rows[1]["growth_display"] == "1.5x"

def test_monthly_trend_table_pivots_and_sorts():
    trends = [
        {"month": "2024-06", "topic": "A", "frequency": 0.3},
        {"month": "2024-04", "topic": "A", "frequency": 0.1},
        {"month": "2024-05", "topic": "B", "frequency": 0.2},
    ]
    wide = transforms.monthly_trend_table(trends)
    assert list(wide["month"]) == ["2024-04", "2024-05", "2024-06"]
    assert set(wide.columns) == {"month", "A", "B"}
    assert wide.loc[wide["month"] == "2024-06", "A"].iloc[0] == 0.3
    assert math.isnan(wide.loc[wide["month"] == "2024-04", "B"].iloc[0])

def test_monthly_trend_table_empty():
    assert list(transforms.monthly_trend_table([]).columns) == ["month"]

def test_top_topics():
    topics = [{"topic": f"T{i}"} for i in range(7)]
    assert transforms.top_topics(topics) == ["T0", "T1", "T2", "T3", "T4"]

def test_complete_hourly_first_duplicate_wins():
    rows = transforms.complete_hourly([
        {"hour": 8, "hour_display": "08:00", "hour_range": "08:00-08:59", "call_count": 12, "percentage": 60.0},
        {"hour": 8, "hour_display": "08:00", "hour_range": "08:00-08:59", "call_count": 3, "percentage": 15.0},
    ])
    assert rows[8]["call_count"] == 12
