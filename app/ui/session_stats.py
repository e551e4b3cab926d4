"""
Session Statistics UI

Renders topic progress metrics and the back-to-menu control.
"""

import streamlit as st


def render_session_stats() -> bool:
    """
    Render progress metrics and the menu button for the active topic.

    Returns:
        True if the menu button was clicked, False otherwise
    """
    exercise = st.session_state.exercise
    if exercise is None:
        return False

    statistics = st.session_state.statistics

    col1, col2, col3, col4 = st.columns([2, 2, 2, 1])

    with col1:
        st.metric("Question", f"{exercise.position + 1}/{len(exercise)}")

    with col2:
        st.metric("Answered", statistics.answered)

    with col3:
        if statistics.answered > 0:
            st.metric("Accuracy", f"{statistics.accuracy_percent():.0f}%")

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("↩️", help="Back to topic menu", use_container_width=True):
            return True

    st.progress(min(1.0, exercise.progress() / 100), text=exercise.progress_bar())
    st.divider()
    return False


def render_session_overview():
    """Render the one-line session summary above the topic menu."""
    statistics = st.session_state.statistics
    if statistics.answered > 0 or statistics.skipped > 0:
        st.info(statistics.summary_line())
