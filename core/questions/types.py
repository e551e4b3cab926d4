"""
Difficulty tiers and question kinds.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class Difficulty(IntEnum):
    """Difficulty tier. The integer value is the ordering weight."""
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def weight(self) -> int:
        return int(self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def hint(self) -> str:
        return DIFFICULTY_HINTS[self]

    @classmethod
    def parse(cls, value: object) -> "Difficulty":
        """
        Accept a member, its weight, or its name in any case.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {value!r}") from None


DIFFICULTY_HINTS = {
    Difficulty.EASY: "Think of the basic keyword behind the concept.",
    Difficulty.MEDIUM: "Consider the exact Java syntax.",
    Difficulty.HARD: "Read the whole snippet before answering.",
}


class QuestionKind(str, Enum):
    """Kind tag carried by every question."""
    MULTIPLE_CHOICE = "multiple_choice"
    FILL_CODE = "fill_code"
    IDENTIFY_ERROR = "identify_error"

    @property
    def label(self) -> str:
        return KIND_LABELS[self]


KIND_LABELS = {
    QuestionKind.MULTIPLE_CHOICE: "Multiple Choice",
    QuestionKind.FILL_CODE: "Complete the Code",
    QuestionKind.IDENTIFY_ERROR: "Identify the Error",
}
