"""
Sequencer - Question Ordering

Reorders a topic's question list in place:
- ascending: easiest first
- descending: hardest first
- randomized: uniform shuffle (also used for unknown policy names)

The sorts are a last-element-pivot partition exchange on difficulty weight.
They are not stable: questions of equal weight may swap places.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from core.questions import Question


logger = logging.getLogger(__name__)

_rng = random.Random()


class OrderingPolicy(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"
    RANDOMIZED = "randomized"

    @property
    def label(self) -> str:
        return POLICY_LABELS[self]

    @classmethod
    def parse(cls, name: object) -> "OrderingPolicy":
        """
        Resolve a policy name, ignoring case. Unknown names fall back to
        RANDOMIZED.
        """
        if isinstance(name, cls):
            return name
        key = str(name or "").strip().lower()
        key = POLICY_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            logger.warning("Unrecognized ordering policy %r, using randomized order", name)
            return cls.RANDOMIZED


POLICY_LABELS = {
    OrderingPolicy.ASCENDING: "Easiest first",
    OrderingPolicy.DESCENDING: "Hardest first",
    OrderingPolicy.RANDOMIZED: "Shuffled",
}

POLICY_ALIASES = {
    "random": "randomized",
    "shuffled": "randomized",
    "shuffle": "randomized",
}


def seed(value: int) -> None:
    """Reseed the module-level generator used when no rng is passed."""
    _rng.seed(value)


def reorder(
    questions: list[Question],
    policy: OrderingPolicy | str,
    rng: Optional[random.Random] = None
) -> OrderingPolicy:
    """
    Reorder `questions` in place and return the policy actually applied.
    """
    policy = OrderingPolicy.parse(policy)
    if questions is None or len(questions) <= 1:
        return policy

    if policy == OrderingPolicy.ASCENDING:
        _quicksort(questions, 0, len(questions) - 1, ascending=True)
    elif policy == OrderingPolicy.DESCENDING:
        _quicksort(questions, 0, len(questions) - 1, ascending=False)
    else:
        shuffle(questions, rng)

    logger.debug("Reordered %d questions (%s)", len(questions), policy.value)
    return policy


def shuffle(questions: list[Question], rng: Optional[random.Random] = None) -> None:
    (rng or _rng).shuffle(questions)


def _quicksort(questions: list[Question], low: int, high: int, ascending: bool) -> None:
    # Recurse into the smaller side and loop on the larger one so that long
    # runs of equal weights cannot exhaust the recursion limit.
    while low < high:
        pivot_index = _partition(questions, low, high, ascending)
        if pivot_index - low < high - pivot_index:
            _quicksort(questions, low, pivot_index - 1, ascending)
            low = pivot_index + 1
        else:
            _quicksort(questions, pivot_index + 1, high, ascending)
            high = pivot_index - 1


def _partition(questions: list[Question], low: int, high: int, ascending: bool) -> int:
    """
    Move every item that belongs before the pivot (last element) to the low
    side and return the pivot's final index.
    """
    pivot_weight = questions[high].weight
    i = low - 1

    for j in range(low, high):
        weight = questions[j].weight
        goes_low = weight <= pivot_weight if ascending else weight >= pivot_weight
        if goes_low:
            i += 1
            _swap(questions, i, j)

    _swap(questions, i + 1, high)
    return i + 1


def _swap(questions: list[Question], i: int, j: int) -> None:
    questions[i], questions[j] = questions[j], questions[i]
