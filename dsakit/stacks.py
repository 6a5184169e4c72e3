"""Bounded stacks and small stack algorithms.

Functions that take a stack accept any iterable ordered from bottom to top
and return a new list in the same orientation, with the top as the last item.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = [
    "StackOverflowError",
    "StackUnderflowError",
    "BoundedStack",
    "TwoStacks",
    "delete_middle",
    "reverse_stack",
    "sort_stack",
    "reverse_string",
    "prime_factors_descending",
]


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that has no room left."""


class StackUnderflowError(Exception):
    """Raised when reading from a stack that holds nothing."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return capacity


class BoundedStack:
    """LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def insert_at_bottom(self, value: Any) -> None:
        """Place ``value`` beneath every item already on the stack."""
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.insert(0, value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from bottom to top without removing anything."""
        return iter(list(self._items))


class TwoStacks:
    """Two stacks sharing one block of ``capacity`` slots from opposite ends."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._first: list[Any] = []
        self._second: list[Any] = []

    def _ensure_room(self) -> None:
        if len(self._first) + len(self._second) >= self.capacity:
            raise StackOverflowError("stack is full")

    def push1(self, value: Any) -> None:
        self._ensure_room()
        self._first.append(value)

    def push2(self, value: Any) -> None:
        self._ensure_room()
        self._second.append(value)

    def pop1(self) -> Any:
        if not self._first:
            raise StackUnderflowError("first stack is empty")
        return self._first.pop()

    def pop2(self) -> Any:
        if not self._second:
            raise StackUnderflowError("second stack is empty")
        return self._second.pop()


def delete_middle(stack: Iterable[Any]) -> list[Any]:
    """Remove the item ``len // 2`` places below the top."""
    items = list(stack)
    if not items:
        raise StackUnderflowError("stack is empty")
    del items[len(items) - 1 - len(items) // 2]
    return items


def reverse_stack(stack: Iterable[Any]) -> list[Any]:
    """Return the stack turned upside down."""
    return list(reversed(list(stack)))


def sort_stack(stack: Iterable[Any]) -> list[Any]:
    """Return the stack sorted so that the smallest item is on top."""
    return sorted(stack, reverse=True)


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return "".join(reversed(text))


def prime_factors_descending(number: int) -> list[int]:
    """Return the prime factors of ``number``, with repeats, largest first."""
    if number < 1:
        raise ValueError(f"number must be positive, got {number}")
    factors: list[int] = []
    divisor = 2
    while number != 1:
        while number % divisor == 0:
            factors.append(divisor)
            number //= divisor
        divisor += 1
    factors.reverse()
    return factors