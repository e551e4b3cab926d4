"""
Metric computations for session analytics.
"""

from __future__ import annotations

import pandas as pd

from core.analytics.constants import OUTCOMES


SUMMARY_COLUMNS = [*OUTCOMES, "answered", "accuracy"]


def compute_outcome_counts(events_df: pd.DataFrame) -> pd.Series:
    """
    Count events per outcome, always including every outcome.
    """
    if events_df.empty:
        return pd.Series(0, index=OUTCOMES, dtype="int64")
    counts = events_df["outcome"].value_counts()
    return counts.reindex(OUTCOMES, fill_value=0).astype("int64")


def compute_topic_summary(events_df: pd.DataFrame) -> pd.DataFrame:
    """
    Per-topic outcome counts and accuracy (percent of answered, skips excluded).
    """
    if events_df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    counts = (
        events_df.groupby(["topic", "outcome"], sort=False)
        .size()
        .unstack(fill_value=0)
        .reindex(columns=OUTCOMES, fill_value=0)
        .astype("int64")
    )
    counts["answered"] = counts["correct"] + counts["incorrect"]
    answered = counts["answered"].where(counts["answered"] > 0)
    counts["accuracy"] = (counts["correct"] / answered * 100.0).fillna(0.0).round(1)
    counts.index.name = "topic"
    return counts[SUMMARY_COLUMNS]


def compute_cumulative_accuracy(events_df: pd.DataFrame) -> pd.Series:
    """
    Running accuracy after each answered question (skips excluded).
    """
    if events_df.empty:
        return pd.Series(dtype="float64")

    answered = events_df[events_df["outcome"] != "skipped"]
    if answered.empty:
        return pd.Series(dtype="float64")

    hits = (answered["outcome"] == "correct").astype("int64").cumsum()
    totals = pd.Series(range(1, len(answered) + 1), index=answered.index)
    running = (hits / totals * 100.0).astype("float64")
    return running.reset_index(drop=True)
