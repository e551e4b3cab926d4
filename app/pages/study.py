"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.activity_registry import get_activity_spec
from app.session_controller import (
    back_to_menu,
    go_back,
    go_next,
    reorder_questions,
    skip_question,
    start_topic,
    submit_answer,
)
from app.ui import (
    render_answer_feedback,
    render_session_overview,
    render_session_stats,
)
from core.catalog_repo import list_topics
from core.sequencer import OrderingPolicy


ORDERING_CHOICES = list(OrderingPolicy)


def render_study_page() -> None:
    """
    Render the study flow (topic menu or active topic).
    """
    if st.session_state.exercise is None:
        _render_intro_screen()
    else:
        _render_active_session()


def _ordering_select(label: str, key: str) -> OrderingPolicy:
    current = OrderingPolicy.parse(st.session_state.ordering)
    return st.selectbox(
        label,
        ORDERING_CHOICES,
        index=ORDERING_CHOICES.index(current),
        format_func=lambda policy: policy.label,
        key=key,
    )


def _render_intro_screen() -> None:
    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("☕ OOP Practice Trainer")
    st.markdown("<br>", unsafe_allow_html=True)

    if st.session_state.finished_summary:
        st.success("🎉 Topic complete!")
        st.code(st.session_state.finished_summary, language=None)

    render_session_overview()

    st.markdown("### 📚 Topics")
    st.markdown("Choose a topic and how its questions should be ordered:")

    policy = _ordering_select("Question order", key="intro_ordering")

    topics = list_topics()
    columns = st.columns(2)
    for index, (name, title) in enumerate(topics):
        with columns[index % 2]:
            if st.button(title, type="primary", use_container_width=True, key=f"topic_{name}"):
                start_topic(name, policy.value)
                if st.session_state.exercise is not None:
                    st.rerun()


def _render_active_session() -> None:
    exercise = st.session_state.exercise
    activity = st.session_state.activity

    if render_session_stats():
        back_to_menu()
        st.rerun()

    if activity is None:
        st.info("No question at this position.")
        return

    activity.render_question()

    answered = st.session_state.answered_position == exercise.position
    mode = activity.get_presentation_mode()
    key = f"answer_{mode}_{exercise.position}_{st.session_state.answer_nonce}"
    answer = activity.render_answer_input(key)
    st.caption(get_activity_spec(activity.question.kind).description)

    col_submit, col_skip = st.columns(2)
    with col_submit:
        if st.button("Submit", type="primary", use_container_width=True, disabled=answered, key="submit_button"):
            if answer is None:
                st.warning("Choose or type an answer first.")
            else:
                submit_answer(answer)
                st.rerun()
    with col_skip:
        if st.button("Skip", use_container_width=True, disabled=answered, key="skip_button"):
            skip_question()
            st.rerun()

    if st.session_state.feedback is not None:
        render_answer_feedback(st.session_state.feedback)

    st.markdown("<br>", unsafe_allow_html=True)
    col_prev, col_next = st.columns(2)
    with col_prev:
        if st.button("⬅️ Previous", use_container_width=True, disabled=not exercise.has_previous(), key="previous_button"):
            if go_back():
                st.rerun()
    with col_next:
        if st.button("Next ➡️", use_container_width=True, disabled=not exercise.has_next(), key="next_button"):
            if go_next():
                st.rerun()

    with st.expander("⚙️ Reorder questions"):
        policy = _ordering_select("Order by", key="session_ordering")
        st.caption("The current position is kept; the question shown may change.")
        if st.button("Apply order"):
            reorder_questions(policy.value)
            st.rerun()

    with st.expander("Topic summary"):
        st.code(exercise.summary(), language=None)
