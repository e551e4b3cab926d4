"""
Multiple Choice Activity

Four lettered options; the learner picks one.
"""

from typing import Optional

from app.activities.base import AbstractActivity
from app.activities.options import render_option_picker
from app.ui.card_style import MULTIPLE_CHOICE_STYLE
from app.ui.question_card import render_question_card


class MultipleChoiceActivity(AbstractActivity):
    """
    Multiple choice activity - prompt on the card, options as a radio group.
    """

    def render_question(self) -> None:
        render_question_card(
            main_text=self.question.prompt,
            corner_text=self.corner_text(),
            corner_color=self.corner_color(),
            style=MULTIPLE_CHOICE_STYLE,
        )

    def render_answer_input(self, key: str) -> Optional[str]:
        index = render_option_picker(self.question.options, key)
        if index is None:
            return None
        return self.question.option_answer(index)

    def get_presentation_mode(self) -> str:
        return "multiple_choice"
