"""
Navigation history for a topic exercise.

A bounded LIFO of previously visited positions. Going back pops the exact
position that was current before the last advance.
"""

from __future__ import annotations

from typing import Optional

from core.constants import HISTORY_CAPACITY


class NavigationHistoryError(RuntimeError):
    """History misuse. Indicates an engine bug, not a user mistake."""


class HistoryFullError(NavigationHistoryError):
    pass


class HistoryEmptyError(NavigationHistoryError):
    pass


class NavigationHistory:
    """
    Fixed-capacity stack of positions.

    Pushing onto a full history raises HistoryFullError; the oldest entry is
    never dropped.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self._capacity = capacity
        self._entries: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, position: int) -> None:
        if self.is_full():
            raise HistoryFullError(f"Navigation history is full ({self._capacity} entries)")
        self._entries.append(position)

    def pop(self) -> int:
        if self.is_empty():
            raise HistoryEmptyError("Navigation history is empty")
        return self._entries.pop()

    def peek(self) -> int:
        if self.is_empty():
            raise HistoryEmptyError("Navigation history is empty")
        return self._entries[-1]

    def clear(self) -> None:
        self._entries = []

    def is_empty(self) -> bool:
        return not self._entries

    def is_full(self) -> bool:
        return len(self._entries) >= self._capacity

    def size(self) -> Optional[int]:
        """Number of entries, or None when the history is empty."""
        return len(self._entries) or None

    def snapshot(self) -> tuple[int, ...]:
        """Entries from bottom to top."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NavigationHistory(capacity={self._capacity}, entries={self._entries!r})"
