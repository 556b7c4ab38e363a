"""A singly linked list of values, with merging and palindrome checks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import chain
from typing import Any, Optional


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list that keeps a tail reference for O(1) appends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the start of the list."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if absent."""
        prev: Optional[_Node] = None
        node = self._head
        while node is not None and node.data != value:
            prev, node = node, node.next
        if node is None:
            raise ValueError(f"{value!r} not found in list")
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1

    def extend(self, other: Iterable[Any]) -> None:
        """Append every value of ``other`` to the end of this list."""
        for value in list(other):
            self.append(value)

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[_Node] = None
        node = self._head
        self._tail = node
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self._head = prev

    def is_palindrome(self) -> bool:
        """Return True if the values read the same in both directions."""
        values = list(self)
        return values == values[::-1]

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def merge_lists(first: LinkedList, second: LinkedList) -> LinkedList:
    """Return a new list holding the values of ``first`` followed by ``second``."""
    return LinkedList(chain(first, second))