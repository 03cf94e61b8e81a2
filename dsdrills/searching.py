"""Linear and binary search over sequences."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def linear_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to ``target``, or None."""
    return next((index for index, item in enumerate(items) if item == target), None)


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in the ascending ``items``, or None."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = (left + right) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return None