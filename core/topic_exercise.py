"""
Topic Exercise - Session Engine

Owns one topic's ordered question list, the current position and the
navigation history. States are "at question i" for every valid i; going back
to the menu is a hard reset to position 0 with an empty history.

Transitions:
- advance: legal while a next question exists; remembers the current position
- retreat: legal while position > 0; restores the remembered position, or
  steps back by one when nothing is remembered
- return_to_menu: always legal

Outcomes are forwarded to a StatisticsRecorder supplied by the caller.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from core import catalog_repo
from core.constants import (
    DEFAULT_ORDERING,
    HISTORY_CAPACITY,
    PROGRESS_BAR_CELLS,
    SORT_DELAY_SECONDS,
)
from core.errors import NavigationError, QuestionLoadError
from core.navigation_history import NavigationHistory
from core.questions import FillCodeQuestion, Question
from core.sequencer import OrderingPolicy, reorder
from core.statistics import StatisticsRecorder


logger = logging.getLogger(__name__)

QuestionLoader = Callable[[str], list[Question]]


class Navigable(Protocol):
    """Navigation commands offered to the presentation layer."""

    def advance(self) -> None: ...

    def retreat(self) -> None: ...

    def return_to_menu(self) -> None: ...


@dataclass(frozen=True)
class AnswerFeedback:
    """What to show the learner after a submission."""
    correct: bool
    canonical_answer: str
    explanation: str
    hint: Optional[str] = None


class TopicExercise:
    """
    Practice session over one topic.
    """

    def __init__(
        self,
        topic: str,
        recorder: StatisticsRecorder,
        loader: QuestionLoader = catalog_repo.load_questions,
        ordering: OrderingPolicy | str = DEFAULT_ORDERING,
        rng: Optional[random.Random] = None,
        sort_delay: float = SORT_DELAY_SECONDS,
    ):
        self.topic = topic
        self._recorder = recorder
        self._loader = loader
        self._rng = rng
        self._sort_delay = sort_delay
        self.ordering = OrderingPolicy.parse(ordering)
        self._questions: list[Question] = []
        self._position = 0
        self._history = NavigationHistory(HISTORY_CAPACITY)

    # ---- Loading / Ordering ----

    def load_questions(self) -> None:
        """
        Load the topic's questions and apply the current ordering.

        Raises:
            QuestionLoadError: unknown or empty topic; the exercise is unchanged
        """
        questions = list(self._loader(self.topic))
        if not questions:
            raise QuestionLoadError(f"Topic has no questions: {self.topic}")

        self._questions = questions
        self._position = 0
        self._history = NavigationHistory(max(HISTORY_CAPACITY, len(questions)))
        self.apply_ordering(self.ordering)
        self._recorder.mark_topic_studied(self.topic)
        logger.info("Topic %s loaded with %d questions", self.topic, len(questions))

    def apply_ordering(self, policy: OrderingPolicy | str) -> None:
        """
        Reorder the live question list in place.

        The position is kept, so after a mid-session reorder the current
        position may point at a different question.
        """
        policy = OrderingPolicy.parse(policy)
        if self._sort_delay > 0:
            time.sleep(self._sort_delay)
        self.ordering = reorder(self._questions, policy, self._rng)
        logger.debug("Topic %s ordered %s", self.topic, self.ordering.value)

    # ---- Navigation ----

    def advance(self) -> None:
        if not self.has_next():
            logger.debug("Advance refused at position %d of %d", self._position, len(self._questions))
            raise NavigationError("There is no next question.")
        self._history.push(self._position)
        self._position += 1

    def retreat(self) -> None:
        if not self.has_previous():
            logger.debug("Retreat refused at position %d", self._position)
            raise NavigationError("There is no previous question.")
        if not self._history.is_empty():
            self._position = self._history.pop()
        else:
            self._position -= 1

    def return_to_menu(self) -> None:
        self._position = 0
        self._history.clear()

    def has_next(self) -> bool:
        return self._position < len(self._questions) - 1

    def has_previous(self) -> bool:
        return self._position > 0

    # ---- Answering ----

    def current_question(self) -> Optional[Question]:
        if 0 <= self._position < len(self._questions):
            return self._questions[self._position]
        return None

    def submit_answer(self, answer: Optional[str]) -> bool:
        """
        Check an answer against the current question and record the outcome.
        Returns False without recording when there is no current question.
        """
        question = self.current_question()
        if question is None:
            return False

        correct = question.verify(answer)
        if correct:
            self._recorder.record_correct()
        else:
            self._recorder.record_incorrect()
        return correct

    def skip(self) -> None:
        """Record a skip. The caller advances separately if it wants to."""
        self._recorder.record_skip()

    def feedback_for(self, correct: bool, question: Optional[Question] = None) -> Optional[AnswerFeedback]:
        question = question or self.current_question()
        if question is None:
            return None
        hint = None
        if not correct and isinstance(question, FillCodeQuestion):
            hint = question.hint()
        return AnswerFeedback(
            correct=correct,
            canonical_answer=question.canonical_answer(),
            explanation=question.explanation,
            hint=hint,
        )

    # ---- Progress ----

    @property
    def position(self) -> int:
        return self._position

    @property
    def questions(self) -> tuple[Question, ...]:
        return tuple(self._questions)

    @property
    def history(self) -> tuple[int, ...]:
        return self._history.snapshot()

    def __len__(self) -> int:
        return len(self._questions)

    def progress(self) -> float:
        if not self._questions:
            return 0.0
        return (self._position + 1) / len(self._questions) * 100

    def progress_bar(self) -> str:
        percent = self.progress()
        filled = int(percent / (100 / PROGRESS_BAR_CELLS))
        cells = "█" * filled + "░" * (PROGRESS_BAR_CELLS - filled)
        return f"[{cells}] {percent:.1f}% ({self._position + 1}/{len(self._questions)})"

    def summary(self) -> str:
        rule = "=" * 50
        return "\n".join([
            rule,
            f"    TOPIC SUMMARY: {self.topic.upper()}",
            rule,
            f"Questions in topic: {len(self._questions)}",
            f"Current progress: {self.progress():.1f}%",
            f"Ordering: {self.ordering.value}",
            rule,
        ])
