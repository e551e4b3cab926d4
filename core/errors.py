"""
Exceptions raised by the practice engine.

Navigation and loading errors are recoverable at the presentation boundary.
History capacity faults are programming errors and live in
core.navigation_history.
"""

from __future__ import annotations


class QuestionError(Exception):
    """Base class for question and catalog problems."""


class QuestionLoadError(QuestionError):
    """Unknown topic, or a topic whose question set is empty."""


class InvalidQuestionError(QuestionError, ValueError):
    """A question cannot be built from the supplied data."""


class NavigationError(Exception):
    """Requested move is not possible from the current position."""
