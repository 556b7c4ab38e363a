"""Searching, editing and counting helpers for sequences.

Positions are counted from 1, as in a numbered list.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(items: Iterable[Any], key: Any) -> int:
    """Return the position of the first item equal to ``key``.

    Raise ValueError if no item matches.
    """
    for position, item in enumerate(items, start=1):
        if item == key:
            return position
    raise ValueError(f"{key!r} not found")


def insert_at(items: Sequence[Any], position: int, value: Any) -> list[Any]:
    """Return a copy of ``items`` with ``value`` placed at ``position``."""
    if not 1 <= position <= len(items) + 1:
        raise IndexError(f"position {position} out of range")
    result = list(items)
    result.insert(position - 1, value)
    return result


def delete_at(items: Sequence[Any], position: int) -> list[Any]:
    """Return a copy of ``items`` without the element at ``position``."""
    if not 1 <= position <= len(items):
        raise IndexError(f"position {position} out of range")
    result = list(items)
    del result[position - 1]
    return result


def find_duplicates(items: Iterable[Any]) -> list[Any]:
    """Return every element that occurs again later in ``items``.

    An element seen n times appears n - 1 times in the result.
    """
    seen: set[Any] = set()
    later_repeats: list[Any] = []
    for item in reversed(list(items)):
        if item in seen:
            later_repeats.append(item)
        seen.add(item)
    return later_repeats[::-1]


def split_even_odd(items: Iterable[int]) -> tuple[list[int], list[int]]:
    """Return the even and the odd numbers, each in their original order."""
    evens: list[int] = []
    odds: list[int] = []
    for number in items:
        (evens if number % 2 == 0 else odds).append(number)
    return evens, odds


def concatenate(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return the elements of ``first`` followed by those of ``second``."""
    return [*first, *second]


def repeated_frequencies(items: Iterable[Any]) -> dict[Any, int]:
    """Map each value seen more than once to its count, in ascending order."""
    counts = Counter(items)
    return {value: count for value, count in sorted(counts.items()) if count > 1}


def elements_repeated_twice(items: Iterable[Any]) -> list[Any]:
    """Return the values that occur exactly twice, in order of first appearance."""
    counts = Counter(items)
    return [value for value, count in counts.items() if count == 2]


def repeated_characters(text: str) -> list[tuple[str, int, int]]:
    """Return ``(char, i, j)`` for each index i whose character recurs, where
    j is the next index holding the same character."""
    next_index: dict[str, int] = {}
    found: list[tuple[str, int, int]] = []
    for index in reversed(range(len(text))):
        char = text[index]
        if char in next_index:
            found.append((char, index, next_index[char]))
        next_index[char] = index
    return found[::-1]


def is_alphabetic(text: str) -> bool:
    """Return True if every character is an ASCII letter (True for "")."""
    return all(char.isascii() and char.isalpha() for char in text)