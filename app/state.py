"""
Streamlit session state initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core.catalog_repo import list_topics
from core.constants import DEFAULT_ORDERING
from core.statistics import SessionStatistics


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "statistics" not in st.session_state:
        statistics = SessionStatistics(total_topics=len(list_topics()))
        statistics.start()
        st.session_state.statistics = statistics
    if "exercise" not in st.session_state:
        st.session_state.exercise = None
    if "activity" not in st.session_state:
        st.session_state.activity = None
    if "feedback" not in st.session_state:
        st.session_state.feedback = None
    if "answered_position" not in st.session_state:
        st.session_state.answered_position = None
    if "ordering" not in st.session_state:
        st.session_state.ordering = DEFAULT_ORDERING
    if "answer_nonce" not in st.session_state:
        st.session_state.answer_nonce = 0
    if "finished_summary" not in st.session_state:
        st.session_state.finished_summary = None
