"""
Data-loading helpers for analytics.
"""

from __future__ import annotations

import pandas as pd

from core.analytics.constants import EVENT_COLUMNS, UNKNOWN_TOPIC
from core.statistics import SessionStatistics


def load_events_df(stats: SessionStatistics) -> pd.DataFrame:
    """
    Load a session's recorded outcomes into a dataframe ordered by time.
    """
    if not stats.events:
        return pd.DataFrame(columns=EVENT_COLUMNS)

    df = pd.DataFrame(
        [
            {"timestamp": event.timestamp, "topic": event.topic, "outcome": event.outcome}
            for event in stats.events
        ]
    )
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True, errors="coerce")
    df["topic"] = df["topic"].fillna(UNKNOWN_TOPIC)
    df = df.sort_values("timestamp", kind="stable").reset_index(drop=True)
    return df
