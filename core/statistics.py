"""
Session statistics.

Counters, studied topics and session timing for one learner. The engine only
sees the StatisticsRecorder protocol; everything else here serves the
presentation and analytics layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Literal, Optional, Protocol

from core.constants import ACCURACY_BONUS_FACTOR, TOTAL_TOPICS


Outcome = Literal["correct", "incorrect", "skipped"]


class StatisticsRecorder(Protocol):
    """What the topic exercise reports to. Return values are ignored."""

    def record_correct(self) -> None: ...

    def record_incorrect(self) -> None: ...

    def record_skip(self) -> None: ...

    def mark_topic_studied(self, topic: str) -> None: ...


@dataclass(frozen=True)
class AnswerEvent:
    """One recorded outcome, tagged with the topic current at the time."""
    timestamp: datetime
    topic: Optional[str]
    outcome: Outcome


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionStatistics:
    """
    In-memory statistics recorder for a single learner session.
    """

    def __init__(
        self,
        total_topics: int = TOTAL_TOPICS,
        clock: Callable[[], datetime] = _utc_now
    ):
        self.total_topics = total_topics
        self._clock = clock
        self.started_at: Optional[datetime] = None
        self.finished_at: Optional[datetime] = None
        self.correct = 0
        self.incorrect = 0
        self.skipped = 0
        self.answered = 0
        self.topics_studied: list[str] = []
        self.current_topic: Optional[str] = None
        self.events: list[AnswerEvent] = []

    # ---- Timer ----

    def start(self) -> None:
        self.started_at = self._clock()
        self.finished_at = None

    def finish(self) -> None:
        self.finished_at = self._clock()

    def is_active(self) -> bool:
        return self.started_at is not None and self.finished_at is None

    def elapsed_seconds(self) -> int:
        if self.started_at is None:
            return 0
        end = self.finished_at or self._clock()
        return int((end - self.started_at).total_seconds())

    def formatted_elapsed(self) -> str:
        seconds = self.elapsed_seconds()
        minutes, remainder = divmod(seconds, 60)
        if minutes > 0:
            return f"{minutes}m {remainder}s"
        return f"{seconds}s"

    # ---- Recorder protocol ----

    def record_correct(self) -> None:
        self.correct += 1
        self.answered += 1
        self._log("correct")

    def record_incorrect(self) -> None:
        self.incorrect += 1
        self.answered += 1
        self._log("incorrect")

    def record_skip(self) -> None:
        # skips do not count as answered
        self.skipped += 1
        self._log("skipped")

    def mark_topic_studied(self, topic: str) -> None:
        if topic is None or not topic.strip():
            return
        formatted = topic.strip().lower()
        if formatted not in self.topics_studied:
            self.topics_studied.append(formatted)
        self.current_topic = formatted

    def _log(self, outcome: Outcome) -> None:
        self.events.append(
            AnswerEvent(timestamp=self._clock(), topic=self.current_topic, outcome=outcome)
        )

    # ---- Derived figures ----

    def accuracy_percent(self) -> float:
        if self.answered == 0:
            return 0.0
        return self.correct / self.answered * 100.0

    def overall_progress(self) -> float:
        """
        Share of topics studied, plus a small bonus for accuracy, capped at 100.
        """
        if self.total_topics <= 0:
            return 0.0
        progress = len(self.topics_studied) / self.total_topics * 100.0
        if self.answered > 0:
            progress = min(100.0, progress + self.accuracy_percent() * ACCURACY_BONUS_FACTOR)
        return progress

    def reset(self) -> None:
        """Clear counters and topics. The session timer keeps running."""
        self.correct = 0
        self.incorrect = 0
        self.skipped = 0
        self.answered = 0
        self.topics_studied = []
        self.current_topic = None
        self.events = []

    def summary_line(self) -> str:
        return (
            f"Questions: {self.answered} | Correct: {self.correct} ({self.accuracy_percent():.1f}%) | "
            f"Incorrect: {self.incorrect} | Skipped: {self.skipped} | "
            f"Time: {self.formatted_elapsed()} | Topics: {len(self.topics_studied)}/{self.total_topics}"
        )
