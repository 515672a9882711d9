"""A binary max-heap plus array-level heapify and heap sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HeapNode:
    """One slot of a heap together with its neighbours in the tree."""

    value: Any
    parent: Any | None
    left: Any | None
    right: Any | None


def heapify(items: MutableSequence[Any], size: int, position: int) -> None:
    """Sift ``items[position]`` down so the subtree rooted there is a max-heap.

    Only the first ``size`` elements of ``items`` take part in the heap.
    """
    if not 0 <= size <= len(items):
        raise ValueError(f"heap size {size} does not fit a sequence of {len(items)} items")
    if position < 0:
        raise IndexError(f"position {position} is negative")
    while True:
        largest = position
        left, right = 2 * position + 1, 2 * position + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == position:
            return
        items[position], items[largest] = items[largest], items[position]
        position = largest


def build_heap(items: MutableSequence[Any]) -> None:
    """Rearrange ``items`` in place into max-heap order."""
    size = len(items)
    for position in reversed(range(size // 2)):
        heapify(items, size, position)


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``items`` in ascending order."""
    result = list(items)
    build_heap(result)
    for end in range(len(result) - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        heapify(result, end, 0)
    return result


class MaxHeap:
    """A binary max-heap kept in a list."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value``, sifting it up past smaller parents."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not items[parent] < items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop(self) -> Any:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            heapify(items, len(items), 0)
        return top

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in their array order."""
        return iter(list(self._items))

    def nodes(self) -> Iterator[HeapNode]:
        """Yield every slot in array order with its parent and children."""
        items = self._items
        size = len(items)

        def at(index: int) -> Any | None:
            return items[index] if 0 <= index < size else None

        for index, value in enumerate(items):
            parent = at((index - 1) // 2) if index > 0 else None
            yield HeapNode(value, parent, at(2 * index + 1), at(2 * index + 2))