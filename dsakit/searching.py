"""Searching in sequences and checking sortedness."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if target < value:
            high = mid - 1
        else:
            low = mid + 1
    return None


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first occurrence of ``target``, or None."""
    return next((index for index, value in enumerate(items) if value == target), None)


def is_sorted(items: Sequence[Any]) -> bool:
    """Return True if ``items`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(items))