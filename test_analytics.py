"""
Tests for the pandas session analytics.
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.analytics import build_session_dashboard
from core.analytics.metrics import compute_outcome_counts, compute_topic_summary
from core.analytics.queries import load_events_df
from core.statistics import SessionStatistics


def make_stats():
    moments = iter(
        datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=i) for i in range(100)
    )
    stats = SessionStatistics(total_topics=5, clock=lambda: next(moments))
    stats.start()
    stats.mark_topic_studied("inheritance")
    stats.record_correct()
    stats.record_incorrect()
    stats.record_skip()
    stats.mark_topic_studied("interface")
    stats.record_correct()
    stats.record_correct()
    return stats


def test_events_frame_columns_and_order():
    df = load_events_df(make_stats())
    assert list(df.columns) == ["timestamp", "topic", "outcome"]
    assert list(df["outcome"]) == ["correct", "incorrect", "skipped", "correct", "correct"]
    assert df["timestamp"].is_monotonic_increasing


def test_empty_session_dashboard():
    stats = SessionStatistics(total_topics=5)
    dashboard = build_session_dashboard(stats)
    assert dashboard.answered == 0
    assert (dashboard.correct, dashboard.incorrect, dashboard.skipped) == (0, 0, 0)
    assert dashboard.topic_summary.empty
    assert dashboard.cumulative_accuracy.empty


def test_outcome_counts_include_every_outcome():
    stats = SessionStatistics(total_topics=5)
    stats.record_correct()
    counts = compute_outcome_counts(load_events_df(stats))
    assert counts.to_dict() == {"correct": 1, "incorrect": 0, "skipped": 0}


def test_topic_summary():
    summary = compute_topic_summary(load_events_df(make_stats()))
    assert set(summary.index) == {"inheritance", "interface"}
    assert summary.loc["inheritance", "correct"] == 1
    assert summary.loc["inheritance", "skipped"] == 1
    assert summary.loc["inheritance", "answered"] == 2
    assert summary.loc["inheritance", "accuracy"] == pytest.approx(50.0)
    assert summary.loc["interface", "incorrect"] == 0
    assert summary.loc["interface", "accuracy"] == pytest.approx(100.0)


def test_dashboard_figures():
    dashboard = build_session_dashboard(make_stats())
    assert dashboard.answered == 4
    assert (dashboard.correct, dashboard.incorrect, dashboard.skipped) == (3, 1, 1)
    assert dashboard.accuracy_percent == pytest.approx(75.0)
    assert dashboard.topics_studied == ["inheritance", "interface"]
    assert list(dashboard.cumulative_accuracy.round(1)) == [100.0, 50.0, 66.7, 75.0]
