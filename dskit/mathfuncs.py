"""Factorials and Fibonacci numbers."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return n!; raise ValueError for negative ``n``."""
    if n < 0:
        raise ValueError("Factorial not defined for negative numbers.")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting from 0."""
    series: list[int] = []
    current, following = 0, 1
    for _ in range(count):
        series.append(current)
        current, following = following, current + following
    return series


def fibonacci_sum(count: int) -> int:
    """Return the sum of the first ``count`` Fibonacci numbers."""
    return sum(fibonacci_series(count))