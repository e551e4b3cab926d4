"""
Service layer to assemble the session statistics dashboard.
"""

from __future__ import annotations

from core.analytics.metrics import (
    compute_cumulative_accuracy,
    compute_outcome_counts,
    compute_topic_summary,
)
from core.analytics.queries import load_events_df
from core.analytics.types import SessionDashboard
from core.statistics import SessionStatistics


def build_session_dashboard(stats: SessionStatistics) -> SessionDashboard:
    """
    Build all figures and tables needed by the statistics page.
    """
    events_df = load_events_df(stats)
    counts = compute_outcome_counts(events_df)

    return SessionDashboard(
        answered=stats.answered,
        correct=int(counts["correct"]),
        incorrect=int(counts["incorrect"]),
        skipped=int(counts["skipped"]),
        accuracy_percent=stats.accuracy_percent(),
        overall_progress=stats.overall_progress(),
        elapsed=stats.formatted_elapsed(),
        topics_studied=list(stats.topics_studied),
        topic_summary=compute_topic_summary(events_df),
        cumulative_accuracy=compute_cumulative_accuracy(events_df),
    )
