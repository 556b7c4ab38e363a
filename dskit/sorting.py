"""Classic comparison sorts. Each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def sort_string(text: str) -> str:
    """Return the characters of ``text`` in ascending code-point order."""
    return "".join(sorted(text))


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    result: list[Any] = []
    for item in items:
        position = len(result)
        while position > 0 and result[position - 1] > item:
            position -= 1
        result.insert(position, item)
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low
    for j in range(low, high):
        if values[j] <= pivot:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quick sort using the last element of each range as the pivot."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(values, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return values


def _sift_down(values: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with a max-heap built in place."""
    values = list(items)
    size = len(values)
    for root in reversed(range(size // 2)):
        _sift_down(values, size, root)
    for end in reversed(range(1, size)):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, end, 0)
    return values