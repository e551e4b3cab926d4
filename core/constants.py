"""
Engine Constants and Settings

All tunable values for the practice engine in one place.
Environment overrides are read once at import time (a .env file is honoured).
"""

import os

from dotenv import load_dotenv

load_dotenv()


# ---- Navigation ----

# Maximum number of remembered positions per exercise.
# The engine raises this to the question count when a topic is larger.
HISTORY_CAPACITY = int(os.getenv("HISTORY_CAPACITY", "100"))


# ---- Answer Checking ----

# Fraction of canonical-answer tokens that must appear in a free-text
# completion for it to count as correct.
PARTIAL_MATCH_THRESHOLD = 0.6

# Letters used to label the four options of a question
OPTION_LETTERS = ("A", "B", "C", "D")


# ---- Ordering ----

DEFAULT_ORDERING = os.getenv("DEFAULT_ORDERING", "randomized")

# Cosmetic pause shown as "sorting in progress" (seconds, 0 disables)
SORT_DELAY_SECONDS = float(os.getenv("SORT_DELAY_SECONDS", "0"))


# ---- Progress / Statistics ----

PROGRESS_BAR_CELLS = 10
TOTAL_TOPICS = int(os.getenv("TOTAL_TOPICS", "5"))

# Share of the accuracy percentage added to overall progress as a bonus
ACCURACY_BONUS_FACTOR = 0.1


# ---- Logging ----

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
