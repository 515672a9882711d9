"""Classic comparison sorts plus counting sort, each returning a new list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BubbleSortResult:
    """The sorted values and how many comparisons bubble sort made."""

    items: list[Any]
    comparisons: int


def bubble_sort(items: Iterable[Any]) -> BubbleSortResult:
    """Sort with bubble sort, stopping early once a pass makes no swap."""
    result = list(items)
    comparisons = 0
    size = len(result)
    for sorted_tail in range(1, size):
        swapped = False
        for j in range(size - sorted_tail):
            comparisons += 1
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return BubbleSortResult(result, comparisons)


def counting_sort(items: Iterable[int], max_value: int) -> list[int]:
    """Stably sort integers in ``0..max_value`` by counting occurrences."""
    values = list(items)
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    counts = [0] * (max_value + 1)
    for value in values:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} is outside the range 0..{max_value}")
        counts[value] += 1
    running = 0
    for value, count in enumerate(counts):
        running += count
        counts[value] = running
    output = [0] * len(values)
    for value in reversed(values):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each value into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by recursively splitting in half and merging the sorted halves."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list[Any], start: int, end: int) -> int:
    """Partition around ``values[start]`` and return the pivot's final index."""
    pivot = values[start]
    i, j = start, end
    while i < j:
        while i <= end and values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[start], values[j] = values[j], values[start]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with quicksort, using the first element of each range as pivot."""
    values = list(items)
    ranges = [(0, len(values) - 1)]
    while ranges:
        start, end = ranges.pop()
        if start < end:
            pivot = _partition(values, start, end)
            ranges.append((start, pivot - 1))
            ranges.append((pivot + 1, end))
    return values


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining value into place."""
    result = list(items)
    size = len(result)
    for i in range(size - 1):
        smallest = min(range(i, size), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result