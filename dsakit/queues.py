"""Bounded queues and small queue algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

__all__ = [
    "QueueFullError",
    "QueueEmptyError",
    "ArrayQueue",
    "CyclicQueue",
    "DoubleEndedQueue",
    "first_negative_in_windows",
    "reverse_queue",
    "reverse_first_k",
]


class QueueFullError(Exception):
    """Raised when pushing onto a queue that has no room left."""


class QueueEmptyError(Exception):
    """Raised when reading from a queue that holds nothing."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return capacity


class ArrayQueue:
    """FIFO queue over a fixed run of slots.

    Slots are consumed by every push and only reclaimed once the queue is
    completely emptied, so the queue can report full while holding fewer
    than ``capacity`` items.
    """

    def __init__(self, capacity: int = 10001) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()
        self._slots_used = 0

    def push(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(value)
        self._slots_used += 1

    def pop(self) -> Any:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        value = self._items.popleft()
        if not self._items:
            self._slots_used = 0
        return value

    def front(self) -> Any:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._slots_used == self.capacity

    def __len__(self) -> int:
        return len(self._items)


class CyclicQueue:
    """FIFO ring buffer holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        if len(self._items) == self.capacity:
            raise QueueFullError("queue is full")
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear without removing anything."""
        return iter(list(self._items))


class DoubleEndedQueue:
    """Bounded queue that accepts and yields items at both ends."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    def _ensure_room(self) -> None:
        if len(self._items) == self.capacity:
            raise QueueFullError("queue is full")

    def _ensure_items(self) -> None:
        if not self._items:
            raise QueueEmptyError("queue is empty")

    def push_front(self, value: Any) -> None:
        self._ensure_room()
        self._items.appendleft(value)

    def push_rear(self, value: Any) -> None:
        self._ensure_room()
        self._items.append(value)

    def pop_front(self) -> Any:
        self._ensure_items()
        return self._items.popleft()

    def pop_rear(self) -> Any:
        self._ensure_items()
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def first_negative_in_windows(values: Iterable[int], k: int) -> list[int]:
    """Return the first negative number of every window of size ``k``.

    Windows without a negative number contribute 0.
    """
    items = list(values)
    if k < 1 or k > len(items):
        raise ValueError(f"window size must be between 1 and {len(items)}, got {k}")
    negatives: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(items):
        if negatives and index - negatives[0] >= k:
            negatives.popleft()
        if value < 0:
            negatives.append(index)
        if index >= k - 1:
            result.append(items[negatives[0]] if negatives else 0)
    return result


def reverse_queue(queue: Iterable[Any]) -> deque[Any]:
    """Return a new queue holding the items in reverse order."""
    stack = list(queue)
    return deque(reversed(stack))


def reverse_first_k(queue: Iterable[Any], k: int) -> deque[Any]:
    """Return a new queue with its first ``k`` items reversed, the rest in place."""
    items = list(queue)
    if k < 0 or k > len(items):
        raise ValueError(f"k must be between 0 and {len(items)}, got {k}")
    head = items[:k]
    head.reverse()
    return deque(head + items[k:])