"""A fixed-capacity circular queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueFullError(IndexError):
    """Raised when enqueuing into a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class CircularQueue:
    """A first-in first-out queue stored in a ring of fixed size."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any | None] = [None] * capacity
        self._front = 0
        self._rear = -1
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return self._count == self.capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear, wrapping around the ring."""
        if self.is_full():
            raise QueueFullError("the queue is full")
        self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("the queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return value

    def slots(self) -> list[Any | None]:
        """Return the raw ring storage; vacant slots hold None."""
        return list(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        capacity = self.capacity
        snapshot = list(self._slots)
        for offset in range(self._count):
            yield snapshot[(self._front + offset) % capacity]