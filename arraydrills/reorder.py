"""Rearranging arrays: sorting 0/1/2, alternating signs, next permutation, leaders."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def sort_012_brute(values: Sequence[int]) -> list[int]:
    """Return the values sorted with the general-purpose sort."""
    return sorted(values)


def sort_012_better(values: Sequence[int]) -> list[int]:
    """Return the values sorted by counting zeros and ones.

    Every value that is neither 0 nor 1 is written back as 2.
    """
    zeros = sum(1 for item in values if item == 0)
    ones = sum(1 for item in values if item == 1)
    twos = len(values) - zeros - ones
    return [0] * zeros + [1] * ones + [2] * twos


def sort_012_optimal(values: Sequence[int]) -> list[int]:
    """Return the values sorted in a single Dutch-national-flag pass.

    Values other than 0 and 1 are treated as 2 and kept as they are.
    """
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def _split_by_sign(values: Sequence[int]) -> tuple[list[int], list[int]]:
    positives = [item for item in values if item >= 0]
    negatives = [item for item in values if item < 0]
    if len(positives) != len(negatives):
        raise ValueError("values must hold as many negative as non-negative numbers")
    return positives, negatives


def rearrange_by_sign_brute(values: Sequence[int]) -> list[int]:
    """Return the values alternating non-negative and negative, starting non-negative.

    The relative order within each sign is kept. Zero counts as non-negative.
    Raises ValueError when the two groups differ in size.
    """
    positives, negatives = _split_by_sign(values)
    return [item for pair in zip(positives, negatives) for item in pair]


def rearrange_by_sign_optimal(values: Sequence[int]) -> list[int]:
    """Return the same arrangement as rearrange_by_sign_brute, placing in one pass.

    Raises ValueError when the two groups differ in size.
    """
    negative_count = sum(1 for item in values if item < 0)
    if 2 * negative_count != len(values):
        raise ValueError("values must hold as many negative as non-negative numbers")
    result = [0] * len(values)
    positive_slot, negative_slot = 0, 1
    for item in values:
        if item < 0:
            result[negative_slot] = item
            negative_slot += 2
        else:
            result[positive_slot] = item
            positive_slot += 2
    return result


def next_permutation(values: Sequence[Any]) -> list[Any]:
    """Return the next lexicographically greater arrangement of the values.

    The last arrangement wraps round to the first, that is, ascending order.
    """
    items = list(values)
    n = len(items)
    dip = next((i for i in range(n - 2, -1, -1) if items[i] < items[i + 1]), None)
    if dip is None:
        items.reverse()
        return items
    swap = next(j for j in range(n - 1, dip, -1) if items[j] > items[dip])
    items[dip], items[swap] = items[swap], items[dip]
    items[dip + 1 :] = items[dip + 1 :][::-1]
    return items


def leaders_brute(values: Sequence[Any]) -> list[Any]:
    """Return the items that no later item exceeds, in their original order."""
    return [
        item
        for index, item in enumerate(values)
        if all(later <= item for later in values[index + 1 :])
    ]


def leaders_optimal(values: Sequence[Any]) -> list[Any]:
    """Return the last item and every item strictly greater than all after it.

    Scans from the right once; the result keeps the original order.
    """
    if not values:
        return []
    current = values[-1]
    found = [current]
    for item in reversed(values[:-1]):
        if item > current:
            current = item
            found.append(current)
    found.reverse()
    return found