"""A fixed-size hash table of integer keys using linear probing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class TableFullError(Exception):
    """Raised when no free slot is left for a key."""


class LinearProbingTable:
    """Open-addressing table: a key goes to ``key % size`` or the next free slot."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._slots: list[Optional[int]] = [None] * size

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self.size
        return ((start + step) % self.size for step in range(self.size))

    def insert(self, key: int) -> int:
        """Store ``key`` and return the slot index it landed in."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise TableFullError(f"Hash table is full! Cannot insert {key}")

    def find(self, key: int) -> int:
        """Return the slot index of ``key``; raise KeyError if it is absent."""
        for index in self._probe(key):
            stored = self._slots[index]
            if stored is None:
                break
            if stored == key:
                return index
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        try:
            self.find(key)
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[Optional[int]]:
        """Iterate over the slots in index order; empty slots yield None."""
        return iter(self._slots)