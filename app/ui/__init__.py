"""UI Components for the OOP Trainer"""

from app.ui.question_card import render_question_card
from app.ui.session_stats import render_session_stats, render_session_overview
from app.ui.answer_feedback import render_answer_feedback

__all__ = [
    "render_question_card",
    "render_session_stats",
    "render_session_overview",
    "render_answer_feedback",
]
