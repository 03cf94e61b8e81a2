"""Number sequences."""

from __future__ import annotations


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting from 0 and 1."""
    terms: list[int] = []
    current, following = 0, 1
    for _ in range(count):
        terms.append(current)
        current, following = following, current + following
    return terms