"""
Answer Feedback UI

Renders the verdict for the last submission.
"""

import streamlit as st

from core.topic_exercise import AnswerFeedback


def render_answer_feedback(feedback: AnswerFeedback) -> None:
    """
    Render correct/incorrect feedback with the reference answer.

    Args:
        feedback: Result of the last submission
    """
    if feedback.correct:
        st.success("✅ Correct! Well done.")
        with st.expander("📖 Explanation"):
            st.markdown(feedback.explanation)
        return

    st.error("❌ Incorrect.")
    if feedback.hint:
        st.caption(f"💡 Hint: {feedback.hint}")
    st.markdown(f"**Correct answer:** `{feedback.canonical_answer}`")
    st.markdown(f"**Explanation:** {feedback.explanation}")
