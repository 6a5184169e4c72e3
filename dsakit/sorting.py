"""Classic comparison sorts.

Every function takes any iterable of mutually comparable items and returns a
new list in ascending order. The input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["bubble_sort", "insertion_sort", "selection_sort", "quick_sort"]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        for j in range(unsorted_end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    """Lomuto partition around the last item; return the pivot's final index."""
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by recursive partitioning around the last element of each range."""
    items = list(values)

    def sort_range(low: int, high: int) -> None:
        while low < high:
            key = _partition(items, low, high)
            # Recurse into the smaller side to bound recursion depth.
            if key - low < high - key:
                sort_range(low, key - 1)
                low = key + 1
            else:
                sort_range(key + 1, high)
                high = key - 1

    sort_range(0, len(items) - 1)
    return items