"""Merging overlapping intervals and merging two sorted lists in place."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from heapq import merge
from typing import Any


def merge_intervals(intervals: Iterable[Sequence[Any]]) -> list[list[Any]]:
    """Return the overlapping [start, end] intervals merged, in ascending order.

    Intervals that share an end point are merged too.
    """
    merged: list[list[Any]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def merge_sorted_arrays_brute(first: list[Any], second: list[Any]) -> None:
    """Merge two sorted lists in place through a combined list.

    Afterwards first holds the smallest len(first) items and second the rest,
    both in ascending order.
    """
    combined = list(merge(first, second))
    first[:] = combined[: len(first)]
    second[:] = combined[len(first) :]


def merge_sorted_arrays_optimal(first: list[Any], second: list[Any]) -> None:
    """Merge two sorted lists in place without a combined list.

    Swaps the largest items of first with the smallest of second while they
    are out of order, then sorts each list.
    """
    left, right = len(first) - 1, 0
    while left >= 0 and right < len(second) and first[left] > second[right]:
        first[left], second[right] = second[right], first[left]
        left -= 1
        right += 1
    first.sort()
    second.sort()