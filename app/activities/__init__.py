"""Question Activities for the OOP Trainer"""

from app.activities.base import AbstractActivity
from app.activities.multiple_choice import MultipleChoiceActivity
from app.activities.fill_code import FillCodeActivity
from app.activities.identify_error import IdentifyErrorActivity

__all__ = [
    "AbstractActivity",
    "MultipleChoiceActivity",
    "FillCodeActivity",
    "IdentifyErrorActivity",
]
