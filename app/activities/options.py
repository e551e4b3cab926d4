"""
Shared option picker for lettered questions.
"""

from __future__ import annotations

from typing import Optional, Sequence

import streamlit as st

from core.constants import OPTION_LETTERS


def render_option_picker(options: Sequence[str], key: str) -> Optional[int]:
    """
    Render lettered options as a radio group.

    Returns:
        Index of the selected option, or None when nothing is selected
    """
    labels = [f"{letter}) {option}" for letter, option in zip(OPTION_LETTERS, options)]
    choice = st.radio(
        "Answer",
        labels,
        index=None,
        key=key,
        label_visibility="collapsed",
    )
    if choice is None:
        return None
    return labels.index(choice)
