"""
Analytics package exports.
"""

from core.analytics.constants import OUTCOME_LABELS
from core.analytics.service import build_session_dashboard
from core.analytics.types import SessionDashboard

__all__ = [
    "OUTCOME_LABELS",
    "build_session_dashboard",
    "SessionDashboard",
]
