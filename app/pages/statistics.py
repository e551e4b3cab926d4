"""
Statistics page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import reset_statistics
from core.analytics import OUTCOME_LABELS, build_session_dashboard


def render_statistics_page() -> None:
    st.subheader("Session Statistics")

    dashboard = build_session_dashboard(st.session_state.statistics)
    st.caption(f"Session time: {dashboard.elapsed}")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Answered", f"{dashboard.answered:,}")
    with col2:
        st.metric("Accuracy", f"{dashboard.accuracy_percent:.1f}%")
    with col3:
        st.metric(
            "Overall Progress",
            f"{dashboard.overall_progress:.1f}%",
            help="Share of topics studied plus a small bonus for accuracy",
        )

    count_cols = st.columns(3)
    for column, outcome in zip(count_cols, ("correct", "incorrect", "skipped")):
        with column:
            st.metric(OUTCOME_LABELS[outcome], getattr(dashboard, outcome))

    st.markdown("### Topics")
    if dashboard.topics_studied:
        st.markdown(", ".join(topic.capitalize() for topic in dashboard.topics_studied))
    else:
        st.info("No topics studied yet.")

    if dashboard.topic_summary.empty:
        st.info("No answers recorded yet.")
    else:
        st.dataframe(
            dashboard.topic_summary.rename(columns=str.capitalize),
            use_container_width=True,
        )

    st.markdown("### Accuracy Over Time")
    if dashboard.cumulative_accuracy.empty:
        st.info("Answer a few questions to see the accuracy trend.")
    else:
        st.line_chart(dashboard.cumulative_accuracy.rename("accuracy_percent").to_frame())

    st.markdown("<br>", unsafe_allow_html=True)
    if st.button("Reset Statistics", help="Clear counters and studied topics. The session timer keeps running."):
        reset_statistics()
        st.rerun()
