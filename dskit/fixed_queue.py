"""A linear (non-circular) queue over a fixed number of slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when every slot of the queue has been used."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


class LinearQueue:
    """Queue whose slots are not reused: after ``capacity`` enqueues it is full,
    even if items have since been dequeued."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise QueueFullError if no slot is left."""
        if len(self._slots) == self.capacity:
            raise QueueFullError("Queue is Full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise QueueEmptyError if empty."""
        if self._front >= len(self._slots):
            raise QueueEmptyError("Queue is Empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front