"""
Question factory.

Builds a variant from its kind and a positional payload:
- multiple_choice: 4 options + correct letter
- fill_code: template + answer
- identify_error: code + 4 options + correct justification
"""

from __future__ import annotations

from typing import Sequence

from core.errors import InvalidQuestionError
from core.questions.types import Difficulty, QuestionKind
from core.questions.variants import (
    FillCodeQuestion,
    IdentifyErrorQuestion,
    MultipleChoiceQuestion,
    Question,
)


PAYLOAD_SIZES = {
    QuestionKind.MULTIPLE_CHOICE: 5,
    QuestionKind.FILL_CODE: 2,
    QuestionKind.IDENTIFY_ERROR: 6,
}


def validate_payload(kind: QuestionKind, data: Sequence[str] | None) -> bool:
    if data is None:
        return False
    return len(data) == PAYLOAD_SIZES.get(kind, -1)


def create_question(
    kind: QuestionKind | str,
    difficulty: Difficulty | str | int,
    prompt: str,
    data: Sequence[str],
    explanation: str
) -> Question:
    """
    Build a question, raising InvalidQuestionError on a malformed payload.
    """
    try:
        kind = QuestionKind(kind)
    except ValueError:
        raise InvalidQuestionError(f"Unsupported question kind: {kind!r}") from None

    if not validate_payload(kind, data):
        raise InvalidQuestionError(f"Invalid data for question of kind: {kind.value}")

    if kind == QuestionKind.MULTIPLE_CHOICE:
        return MultipleChoiceQuestion(
            prompt=prompt,
            difficulty=difficulty,
            explanation=explanation,
            options=tuple(data[:4]),
            correct=data[4],
        )
    if kind == QuestionKind.FILL_CODE:
        return FillCodeQuestion(
            prompt=prompt,
            difficulty=difficulty,
            explanation=explanation,
            template=data[0],
            answer=data[1],
        )
    return IdentifyErrorQuestion(
        prompt=prompt,
        difficulty=difficulty,
        explanation=explanation,
        code=data[0],
        options=tuple(data[1:5]),
        correct=data[5],
    )
