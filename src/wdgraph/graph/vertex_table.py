"""Growable array of unique vertex labels.

Labels live in a fixed-size slot list that grows by roughly a quarter
each time it fills up.  The slot index of a label is its *handle*: the
integer the adjacency index uses to refer to it.  Handles stay dense
(0..last_index), so removing a label shifts every later label down one
slot and the handles with it.

Lookup is a linear scan using ``==``.  Labels only need value equality,
not hashing, which is why this is not a dict.
"""
from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100
GROWTH_PERCENT = 25


def grown_capacity(capacity: int) -> int:
    """Capacity after one growth step: old + 1 + 25% of old."""
    return capacity + 1 + capacity * GROWTH_PERCENT // 100


class VertexTable(Generic[T]):
    """Dense, growable slot array of distinct labels."""

    __slots__ = ("_slots", "_last")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._slots: list[T | None] = [None] * capacity
        self._last = -1

    # ---- mutation --------------------------------------------------------

    def add(self, label: T) -> int:
        """Append *label* unless an equal one exists.  Returns its handle."""
        existing = self.index_of(label)
        if existing is not None:
            return existing
        if self._last == len(self._slots) - 1:
            self._grow()
        self._last += 1
        self._slots[self._last] = label
        return self._last

    def remove_at(self, handle: int) -> T:
        """Remove the label at *handle* and close the gap."""
        if not 0 <= handle <= self._last:
            raise IndexError(f"handle {handle} out of range")
        label = self._slots[handle]
        for i in range(handle + 1, self._last + 1):
            self._slots[i - 1] = self._slots[i]
        self._slots[self._last] = None
        self._last -= 1
        return label  # type: ignore[return-value]

    def clear(self) -> None:
        for i in range(self._last + 1):
            self._slots[i] = None
        self._last = -1

    def _grow(self) -> None:
        new_slots: list[T | None] = [None] * grown_capacity(len(self._slots))
        new_slots[: self._last + 1] = self._slots[: self._last + 1]
        self._slots = new_slots

    # ---- queries ---------------------------------------------------------

    def index_of(self, label: T) -> int | None:
        """Handle of the first slot equal to *label*, or None."""
        for i in range(self._last + 1):
            if label == self._slots[i]:
                return i
        return None

    def label(self, handle: int) -> T:
        if not 0 <= handle <= self._last:
            raise IndexError(f"handle {handle} out of range")
        return self._slots[handle]  # type: ignore[return-value]

    def view(self) -> list[T]:
        """Independent copy of the labels in handle order."""
        return self._slots[: self._last + 1]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._last == -1

    @property
    def last_index(self) -> int:
        return self._last

    @property
    def capacity(self) -> int:
        return len(self._slots)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, label: object) -> bool:
        return self.index_of(label) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.view())

    def __len__(self) -> int:
        return self._last + 1

    def __repr__(self) -> str:
        return f"VertexTable(size={len(self)}, capacity={self.capacity})"
