"""
Session lifecycle helpers for the Streamlit app.

Every handler mutates the TopicExercise held in session_state and refreshes
the activity for the question now at the current position. Navigation and
loading errors are shown to the learner and never propagate further.
"""

from __future__ import annotations

import logging

import streamlit as st

from app.activity_registry import build_activity
from core.errors import NavigationError, QuestionError
from core.sequencer import OrderingPolicy
from core.topic_exercise import TopicExercise


logger = logging.getLogger(__name__)


def start_topic(topic: str, ordering: str) -> None:
    """
    Load a topic and open its first question.
    """
    statistics = st.session_state.statistics
    if not statistics.is_active():
        statistics.start()

    exercise = TopicExercise(topic, statistics, ordering=ordering)
    policy = OrderingPolicy.parse(ordering)
    try:
        with st.spinner(f"Ordering questions ({policy.label.lower()})..."):
            exercise.load_questions()
    except (QuestionError, FileNotFoundError) as exc:
        logger.warning("Could not start topic %s: %s", topic, exc)
        st.error(f"Could not load topic: {exc}")
        return

    st.session_state.exercise = exercise
    st.session_state.ordering = policy.value
    st.session_state.finished_summary = None
    load_current_question()


def load_current_question() -> None:
    """
    Build the activity for the current question and clear stale feedback.
    """
    exercise: TopicExercise = st.session_state.exercise
    question = exercise.current_question() if exercise else None
    st.session_state.activity = build_activity(question) if question else None
    st.session_state.feedback = None
    st.session_state.answered_position = None
    # New widget keys so the previous answer does not carry over
    st.session_state.answer_nonce += 1


def submit_answer(answer: str | None) -> None:
    exercise: TopicExercise = st.session_state.exercise
    question = exercise.current_question()
    correct = exercise.submit_answer(answer)
    st.session_state.feedback = exercise.feedback_for(correct, question)
    st.session_state.answered_position = exercise.position


def skip_question() -> bool:
    """
    Record a skip and move on. Skipping the last question finishes the
    topic and returns to the menu with the topic summary.

    Returns:
        True if the exercise moved to the next question
    """
    exercise: TopicExercise = st.session_state.exercise
    exercise.skip()
    if exercise.has_next():
        exercise.advance()
        load_current_question()
        return True
    finish_topic()
    return False


def go_next() -> bool:
    try:
        st.session_state.exercise.advance()
    except NavigationError as exc:
        st.warning(str(exc))
        return False
    load_current_question()
    return True


def go_back() -> bool:
    try:
        st.session_state.exercise.retreat()
    except NavigationError as exc:
        st.warning(str(exc))
        return False
    load_current_question()
    return True


def reorder_questions(policy: str) -> None:
    """
    Re-sort the live question list. The position is kept, so the question
    shown afterwards may change.
    """
    exercise: TopicExercise = st.session_state.exercise
    exercise.apply_ordering(policy)
    st.session_state.ordering = exercise.ordering.value
    load_current_question()


def back_to_menu() -> None:
    """
    Leave the topic. Position and history are reset.
    """
    exercise: TopicExercise = st.session_state.exercise
    if exercise is not None:
        exercise.return_to_menu()
    st.session_state.exercise = None
    st.session_state.activity = None
    st.session_state.feedback = None
    st.session_state.answered_position = None


def reset_statistics() -> None:
    st.session_state.statistics.reset()


def finish_topic() -> None:
    """
    Keep the topic summary for the menu screen, then leave the topic.
    """
    exercise: TopicExercise = st.session_state.exercise
    st.session_state.finished_summary = exercise.summary()
    logger.info("Topic %s finished", exercise.topic)
    back_to_menu()
