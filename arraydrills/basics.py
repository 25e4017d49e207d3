"""Basic array exercises: extremes, ordering checks, rotation and unions."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise
from typing import Any


def max_element(values: Sequence[Any]) -> Any:
    """Return the largest item, scanning once.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("max_element() of an empty sequence")
    best = values[0]
    for item in values:
        if item > best:
            best = item
    return best


def _max_from(values: Sequence[Any], index: int, best: Any) -> Any:
    if index == len(values):
        return best
    return _max_from(values, index + 1, max(values[index], best))


def max_element_recursive(values: Sequence[Any]) -> Any:
    """Return the largest item, walking the sequence recursively.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("max_element_recursive() of an empty sequence")
    return _max_from(values, 1, values[0])


def second_smallest_and_largest(values: Sequence[Any]) -> tuple[Any, Any]:
    """Return (second smallest, second largest) found in one pass.

    A repeated extreme counts as its own runner-up, so ``[5, 5]`` gives
    ``(5, 5)``. An entry is None when no such value exists.
    """
    largest = second_largest = float("-inf")
    smallest = second_smallest = float("inf")
    for item in values:
        if item >= largest:
            second_largest, largest = largest, item
        elif second_largest < item < largest:
            second_largest = item

        if item <= smallest:
            second_smallest, smallest = smallest, item
        elif smallest < item < second_smallest:
            second_smallest = item

    return (
        None if second_smallest == float("inf") else second_smallest,
        None if second_largest == float("-inf") else second_largest,
    )


def is_sorted(values: Sequence[Any]) -> bool:
    """Tell whether the sequence is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def remove_duplicates(values: list[Any]) -> int:
    """Collapse runs of equal items of a sorted list in place.

    The list is cut down to its distinct items, in their original order,
    and their count is returned.
    """
    if not values:
        return 0
    write = 0
    for item in values:
        if item != values[write]:
            write += 1
            values[write] = item
    del values[write + 1 :]
    return write + 1


def rotate_left_by_one_brute(values: Sequence[Any]) -> list[Any]:
    """Return a new list with every item moved one place to the left."""
    if not values:
        return []
    return [*values[1:], values[0]]


def rotate_left_by_one_optimal(values: list[Any]) -> list[Any]:
    """Rotate the list one place to the left in place and return it."""
    if values:
        first = values[0]
        values[:-1] = values[1:]
        values[-1] = first
    return values


def rotate_right_brute(values: Sequence[Any], k: int) -> list[Any]:
    """Return a new list rotated k places to the right."""
    n = len(values)
    if n == 0:
        return []
    k %= n
    rotated: list[Any] = [None] * n
    for i, item in enumerate(values):
        rotated[(i + k) % n] = item
    return rotated


def rotate_left_brute(values: Sequence[Any], k: int) -> list[Any]:
    """Return a new list rotated k places to the left."""
    n = len(values)
    if n == 0:
        return []
    k %= n
    return [values[(i + k) % n] for i in range(n)]


def _rotate_by_reversal(values: Sequence[Any], split: int) -> list[Any]:
    items = list(values)
    items[:split] = items[:split][::-1]
    items[split:] = items[split:][::-1]
    items.reverse()
    return items


def rotate_right_optimal(values: Sequence[Any], k: int) -> list[Any]:
    """Return a copy rotated k places to the right using three reversals."""
    n = len(values)
    if n == 0:
        return []
    return _rotate_by_reversal(values, n - k % n)


def rotate_left_optimal(values: Sequence[Any], k: int) -> list[Any]:
    """Return a copy rotated k places to the left using three reversals."""
    n = len(values)
    if n == 0:
        return []
    return _rotate_by_reversal(values, k % n)


def move_zeros_to_end_brute(values: Sequence[int]) -> list[int]:
    """Return a new list with the non-zero items first, then the zeros."""
    non_zero = [item for item in values if item != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def move_zeros_to_end_optimal(values: Sequence[int]) -> list[int]:
    """Return a copy with zeros moved to the end by two-pointer swapping."""
    items = list(values)
    write = 0
    for read, item in enumerate(items):
        if item != 0:
            items[read], items[write] = items[write], items[read]
            write += 1
    return items


def find_element(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first item equal to target, or -1."""
    for index, item in enumerate(values):
        if item == target:
            return index
    return -1


def union_with_set(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Return the distinct items of both sequences in ascending order."""
    return sorted(set(first) | set(second))


def union_without_set(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences into their sorted union of distinct items."""
    n, m = len(first), len(second)
    i = j = 0
    union: list[Any] = []

    while i < n and j < m:
        while i + 1 < n and first[i] == first[i + 1]:
            i += 1
        while j + 1 < m and second[j] == second[j + 1]:
            j += 1
        if first[i] < second[j]:
            union.append(first[i])
            i += 1
        elif first[i] > second[j]:
            union.append(second[j])
            j += 1
        else:
            union.append(first[i])
            i += 1
            j += 1

    while i < n:
        while i + 1 < n and first[i] == first[i + 1]:
            i += 1
        union.append(first[i])
        i += 1

    while j < m:
        while j + 1 < m and second[j] == second[j + 1]:
            j += 1
        union.append(second[j])
        j += 1

    return union