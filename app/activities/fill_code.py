"""
Fill Code Activity

Learning mode: complete a Java snippet by typing the missing piece.
"""

from typing import Optional

import streamlit as st

from app.activities.base import AbstractActivity
from app.ui.card_style import FILL_CODE_STYLE
from app.ui.question_card import render_question_card


class FillCodeActivity(AbstractActivity):
    """
    Fill-in-the-blank activity.

    Renders the prompt and the template, then a free-text input.
    """

    def render_question(self) -> None:
        render_question_card(
            main_text=self.question.prompt,
            corner_text=self.corner_text(),
            corner_color=self.corner_color(),
            code=self.question.template,
            style=FILL_CODE_STYLE,
        )

    def render_answer_input(self, key: str) -> Optional[str]:
        answer = st.text_input("Your answer", key=key, placeholder="e.g. extends")
        return answer or None

    def get_presentation_mode(self) -> str:
        return "fill_code"
