"""
Identify Error Activity

Practice spotting the defect in a Java snippet.
"""

from __future__ import annotations

from typing import Optional

from app.activities.base import AbstractActivity
from app.activities.options import render_option_picker
from app.ui.card_style import IDENTIFY_ERROR_STYLE
from app.ui.question_card import render_question_card


class IdentifyErrorActivity(AbstractActivity):
    """
    Identify-the-error activity.

    For each card:
    - show the flawed snippet
    - offer four justifications, exactly one of which names the defect
    """

    def render_question(self) -> None:
        render_question_card(
            main_text=self.question.prompt,
            corner_text=self.corner_text(),
            corner_color=self.corner_color(),
            code=self.question.code,
            style=IDENTIFY_ERROR_STYLE,
        )

    def render_answer_input(self, key: str) -> Optional[str]:
        index = render_option_picker(self.question.options, key)
        if index is None:
            return None
        return self.question.option_answer(index)

    def get_presentation_mode(self) -> str:
        return "identify_error"
