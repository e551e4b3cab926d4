"""
Activity registry: one activity per question kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.activities import (
    AbstractActivity,
    FillCodeActivity,
    IdentifyErrorActivity,
    MultipleChoiceActivity,
)
from core.questions import Question, QuestionKind


@dataclass(frozen=True)
class ActivitySpec:
    """
    Activity configuration for a question kind.
    """
    kind: QuestionKind
    description: str
    activity_factory: Callable[[Question], AbstractActivity]


ACTIVITY_SPECS: dict[QuestionKind, ActivitySpec] = {
    QuestionKind.MULTIPLE_CHOICE: ActivitySpec(
        kind=QuestionKind.MULTIPLE_CHOICE,
        description="Pick the correct option",
        activity_factory=MultipleChoiceActivity,
    ),
    QuestionKind.FILL_CODE: ActivitySpec(
        kind=QuestionKind.FILL_CODE,
        description="Type only the word or expression that replaces ______",
        activity_factory=FillCodeActivity,
    ),
    QuestionKind.IDENTIFY_ERROR: ActivitySpec(
        kind=QuestionKind.IDENTIFY_ERROR,
        description="Choose the justification that names the defect",
        activity_factory=IdentifyErrorActivity,
    ),
}


def get_activity_spec(kind: QuestionKind) -> ActivitySpec:
    return ACTIVITY_SPECS[kind]


def build_activity(question: Question) -> AbstractActivity:
    return get_activity_spec(question.kind).activity_factory(question)
