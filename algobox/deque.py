"""A fixed-capacity double-ended queue stored in a circular array."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class DequeFull(IndexError):
    """Raised when inserting into a full deque."""


class DequeEmpty(IndexError):
    """Raised when removing from or peeking into an empty deque."""


class CircularDeque:
    """A double-ended queue of at most ``capacity`` items in a ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_full(self) -> bool:
        """Tell whether no more items fit."""
        return (
            self._front == 0 and self._rear == self._capacity - 1
        ) or self._front == self._rear + 1

    def is_empty(self) -> bool:
        """Tell whether the deque holds no items."""
        return self._front == -1

    def insert_front(self, key: Any) -> None:
        """Add ``key`` before the current front."""
        if self.is_full():
            raise DequeFull("Overflow")
        if self.is_empty():
            self._front = self._rear = 0
        elif self._front == 0:
            self._front = self._capacity - 1
        else:
            self._front -= 1
        self._slots[self._front] = key

    def insert_rear(self, key: Any) -> None:
        """Add ``key`` after the current rear."""
        if self.is_full():
            raise DequeFull("Overflow")
        if self.is_empty():
            self._front = self._rear = 0
        elif self._rear == self._capacity - 1:
            self._rear = 0
        else:
            self._rear += 1
        self._slots[self._rear] = key

    def delete_front(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise DequeEmpty("Queue Underflow")
        value = self._slots[self._front]
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._front == self._capacity - 1:
            self._front = 0
        else:
            self._front += 1
        return value

    def delete_rear(self) -> Any:
        """Remove and return the rear item."""
        if self.is_empty():
            raise DequeEmpty("Underflow")
        value = self._slots[self._rear]
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._rear == 0:
            self._rear = self._capacity - 1
        else:
            self._rear -= 1
        return value

    def peek_front(self) -> Any:
        """Return the front item without removing it."""
        if self.is_empty():
            raise DequeEmpty("Underflow")
        return self._slots[self._front]

    def peek_rear(self) -> Any:
        """Return the rear item without removing it."""
        if self.is_empty() or self._rear < 0:
            raise DequeEmpty("Underflow")
        return self._slots[self._rear]

    def _indices(self) -> range | list[int]:
        if self.is_empty():
            return range(0)
        if self._rear >= self._front:
            return range(self._front, self._rear + 1)
        return [*range(self._front, self._capacity), *range(self._rear + 1)]

    def __iter__(self) -> Iterator[Any]:
        return (self._slots[i] for i in self._indices())

    def __len__(self) -> int:
        return len(self._indices())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self._capacity})"