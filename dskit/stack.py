"""A fixed-capacity LIFO stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when popping or peeking an empty stack."""


class BoundedStack:
    """Stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Push ``value``; raise StackOverflow if the stack is full."""
        if len(self._items) == self.capacity:
            raise StackOverflow("Stack Overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item; raise StackUnderflow if empty."""
        if not self._items:
            raise StackUnderflow("Stack Underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflow("Stack is Empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)