"""
Question Card UI Component

Renders the prompt of a question, with an optional code block.
"""

from __future__ import annotations

import html

import streamlit as st
from app.ui.card_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    DEFAULT_CARD_STYLE,
    CardStyle,
)


def render_question_card(
    main_text: str,
    corner_text: str = "",
    corner_color: str | None = None,
    code: str | None = None,
    style: CardStyle | None = None,
) -> None:
    """
    Render a question card.

    Args:
        main_text: Question prompt (center)
        corner_text: Optional text in top-right corner (kind and difficulty)
        corner_color: CSS color for the corner text
        code: Optional Java snippet rendered below the card
        style: Optional style preset
    """
    resolved_style = style or DEFAULT_CARD_STYLE
    corner_color = corner_color or resolved_style.corner_color

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 12px; right: 18px; '
            f'font-size: {resolved_style.corner_font_size}; color: {corner_color}; '
            f'font-style: {resolved_style.corner_style};">{html.escape(corner_text)}</div>'
        )

    main_html = (
        f'<p style="font-size: {resolved_style.main_font_size}; color: {resolved_style.main_color}; '
        f'font-weight: {resolved_style.main_weight}; margin: 0; text-align: center; '
        'line-height: 1.4; max-width: 100%; overflow-wrap: anywhere;">'
        f"{html.escape(main_text)}</p>"
    )

    card_html = (
        f'<div style="background-color: {resolved_style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}</div>'
    )

    st.markdown(card_html, unsafe_allow_html=True)

    if code:
        st.code(code, language="java")
