"""
Constants for session analytics.
"""

from __future__ import annotations

from typing import Final


EVENT_COLUMNS: Final[list[str]] = ["timestamp", "topic", "outcome"]

OUTCOMES: Final[list[str]] = ["correct", "incorrect", "skipped"]

OUTCOME_LABELS: Final[dict[str, str]] = {
    "correct": "Correct",
    "incorrect": "Incorrect",
    "skipped": "Skipped",
}

UNKNOWN_TOPIC: Final[str] = "(no topic)"
