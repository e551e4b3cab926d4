"""
Question card style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "28px 24px"
CARD_MIN_HEIGHT = "160px"
PROMPT_BG_COLOR = "#f0f2f6"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "1.5em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_MAIN_WEIGHT = "normal"
DEFAULT_CORNER_FONT_SIZE = "0.85em"
DEFAULT_CORNER_COLOR = "#666"
DEFAULT_CORNER_STYLE = "italic"


@dataclass(frozen=True)
class CardStyle:
    """
    Visual style preset for question cards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    main_weight: str = DEFAULT_MAIN_WEIGHT
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    corner_style: str = DEFAULT_CORNER_STYLE
    bg_color: str = PROMPT_BG_COLOR


DEFAULT_CARD_STYLE = CardStyle()


# ---- Difficulty Accents ----

DIFFICULTY_COLORS = {
    "EASY": "#15803d",
    "MEDIUM": "#b45309",
    "HARD": "#b91c1c",
}


# ---- Kind Presets ----

MULTIPLE_CHOICE_STYLE = CardStyle()

FILL_CODE_STYLE = CardStyle(
    main_font_size="1.35em",
)

IDENTIFY_ERROR_STYLE = CardStyle(
    main_font_size="1.35em",
    bg_color="#fdf2f2",
)
