"""
Questions - quiz items and answer checking.

Quick start:
    from core import questions

    q = questions.create_question(
        "fill_code", "medium", "Complete the getter", ["return ______;", "name"], "Return the field."
    )
    q.verify(" Name ")  # True
"""

from core.questions.types import Difficulty, QuestionKind
from core.questions.variants import (
    Question,
    MultipleChoiceQuestion,
    FillCodeQuestion,
    IdentifyErrorQuestion,
)
from core.questions.factory import create_question, validate_payload


__all__ = [
    # Enums
    "Difficulty",
    "QuestionKind",

    # Variants
    "Question",
    "MultipleChoiceQuestion",
    "FillCodeQuestion",
    "IdentifyErrorQuestion",

    # Factory
    "create_question",
    "validate_payload",
]
