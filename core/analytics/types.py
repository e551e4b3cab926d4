"""
Types for session analytics.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class SessionDashboard:
    """
    Precomputed figures and tables for the statistics page.
    """
    answered: int
    correct: int
    incorrect: int
    skipped: int
    accuracy_percent: float
    overall_progress: float
    elapsed: str
    topics_studied: list[str]
    topic_summary: pd.DataFrame
    cumulative_accuracy: pd.Series
