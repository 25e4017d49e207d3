"""Majority elements: values occurring more than n/2 or n/3 times."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Any

_UNSET = object()


def _occurrences(values: Sequence[Any], target: Any) -> int:
    return sum(1 for item in values if item == target)


def majority_element_brute(values: Sequence[Any]) -> Any | None:
    """Return the value occurring more than len(values) // 2 times, counting each.

    Returns None when there is no such value.
    """
    half = len(values) // 2
    for item in values:
        if _occurrences(values, item) > half:
            return item
    return None


def majority_element_better(values: Sequence[Any]) -> Any | None:
    """Return the majority value using a count of every value, or None."""
    half = len(values) // 2
    counts = Counter(values)
    return next((value for value in sorted(counts) if counts[value] > half), None)


def majority_element_optimal(values: Sequence[Any]) -> Any | None:
    """Return the majority value by Moore's voting, verified by a second pass.

    Returns None when there is no such value.
    """
    candidate: Any = _UNSET
    votes = 0
    for item in values:
        if votes == 0:
            candidate = item
            votes = 1
        elif item == candidate:
            votes += 1
        else:
            votes -= 1
    if candidate is not _UNSET and _occurrences(values, candidate) > len(values) // 2:
        return candidate
    return None


def majority_elements_third_brute(values: Sequence[Any]) -> list[Any]:
    """Return the values occurring more than len(values) // 3 times.

    They are listed in order of first appearance; there are at most two.
    """
    third = len(values) // 3
    found: list[Any] = []
    for item in values:
        if found and found[0] == item:
            continue
        if _occurrences(values, item) > third:
            found.append(item)
            if len(found) == 2:
                break
    return found


def majority_elements_third_better(values: Sequence[Any]) -> list[Any]:
    """Return the values occurring more than len(values) // 3 times, in ascending order."""
    third = len(values) // 3
    counts = Counter(values)
    return [value for value in sorted(counts) if counts[value] > third]


def majority_elements_third_optimal(values: Sequence[Any]) -> list[Any]:
    """Return the values occurring more than len(values) // 3 times.

    Uses two-candidate voting and a verifying pass; there are at most two.
    """
    first: Any = _UNSET
    second: Any = _UNSET
    first_votes = second_votes = 0
    for item in values:
        if first_votes == 0 and item != second:
            first, first_votes = item, 1
        elif second_votes == 0 and item != first:
            second, second_votes = item, 1
        elif item == first:
            first_votes += 1
        elif item == second:
            second_votes += 1
        else:
            first_votes -= 1
            second_votes -= 1

    third = len(values) // 3
    return [
        candidate
        for candidate in (first, second)
        if candidate is not _UNSET and _occurrences(values, candidate) > third
    ]