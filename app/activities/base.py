"""
Abstract Base Activity

Defines the interface for question activities (one per question kind).
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.ui.card_style import DIFFICULTY_COLORS
from core.questions import Question


class AbstractActivity(ABC):
    """
    Abstract base class for question activities.

    Subclasses should implement:
    - render_question()
    - render_answer_input()
    - get_presentation_mode()
    """

    def __init__(self, question: Question):
        """
        Initialize activity.

        Args:
            question: The question currently shown
        """
        self.question = question

    def corner_text(self) -> str:
        return f"{self.question.kind.label} · {self.question.difficulty.label}"

    def corner_color(self) -> str:
        return DIFFICULTY_COLORS[self.question.difficulty.name]

    @abstractmethod
    def render_question(self) -> None:
        """Render the question card."""
        pass

    @abstractmethod
    def render_answer_input(self, key: str) -> Optional[str]:
        """Render the answer widget and return the current answer text, if any."""
        pass

    @abstractmethod
    def get_presentation_mode(self) -> str:
        """Return the presentation mode identifier (the question kind)."""
        pass
