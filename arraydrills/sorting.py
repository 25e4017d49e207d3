"""Classic comparison sorts.

Every function accepts any iterable of mutually comparable items and returns
a new sorted list, leaving its input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly pushing the largest remaining item to the end.

    Stops early as soon as a full pass makes no swap, so already sorted
    input takes a single pass.
    """
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(unsorted_end):
            if items[j + 1] < items[j]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by sliding each item left until it sits in its place."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by swapping the smallest remaining item into the front."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    items = list(values)
    if len(items) <= 1:
        return items
    split = (len(items) + 1) // 2
    return _merge(merge_sort(items[:split]), merge_sort(items[split:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    """Place items[low] at its final position and return that position."""
    pivot = items[low]
    i, j = low, high
    while i < j:
        while i <= high and items[i] <= pivot:
            i += 1
        while j >= low and items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def _quick_sort(items: list[Any], low: int, high: int) -> None:
    # Recurse into the smaller side and loop over the larger one to keep
    # the recursion depth logarithmic.
    while low < high:
        pivot = _partition(items, low, high)
        if pivot - low < high - pivot:
            _quick_sort(items, low, pivot - 1)
            low = pivot + 1
        else:
            _quick_sort(items, pivot + 1, high)
            high = pivot - 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first item of each range."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items