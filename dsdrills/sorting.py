"""Bubble sort and quick sort, each returning a new ascending list."""

from __future__ import annotations

from typing import Any, Iterable


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by repeated adjacent swaps."""
    items = list(values)
    for settled in range(len(items) - 1):
        for j in range(len(items) - settled - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around its last element; return its final index."""
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by quick sort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items