"""Unique triplets summing to zero and unique quadruplets summing to a target.

Every function returns the distinct combinations as ascending tuples, the
list itself in lexicographic order. Inputs are never modified.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def triplet_sum_zero_brute(values: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return the unique triplets summing to zero, trying every combination."""
    found = {
        tuple(sorted(triple))
        for triple in combinations(values, 3)
        if sum(triple) == 0
    }
    return sorted(found)


def triplet_sum_zero_better(values: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return the unique triplets summing to zero, looking up the third in a set."""
    found: set[tuple[int, ...]] = set()
    for i, first in enumerate(values):
        seen: set[int] = set()
        for second in values[i + 1 :]:
            third = -(first + second)
            if third in seen:
                found.add(tuple(sorted((first, second, third))))
            seen.add(second)
    return sorted(found)  # type: ignore[return-value]


def triplet_sum_zero_optimal(values: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return the unique triplets summing to zero with sorting and two pointers."""
    items = sorted(values)
    n = len(items)
    found: list[tuple[int, int, int]] = []
    for i in range(n):
        if i and items[i] == items[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = items[i] + items[j] + items[k]
            if total > 0:
                k -= 1
            elif total < 0:
                j += 1
            else:
                found.append((items[i], items[j], items[k]))
                j += 1
                k -= 1
                while j < k and items[j] == items[j - 1]:
                    j += 1
                while j < k and items[k] == items[k + 1]:
                    k -= 1
    return found


def four_sum_brute(values: Sequence[int], target: int) -> list[tuple[int, int, int, int]]:
    """Return the unique quadruplets summing to target, trying every combination."""
    found = {
        tuple(sorted(quad))
        for quad in combinations(values, 4)
        if sum(quad) == target
    }
    return sorted(found)


def four_sum_better(values: Sequence[int], target: int) -> list[tuple[int, int, int, int]]:
    """Return the unique quadruplets summing to target, finding the fourth in a set."""
    found: set[tuple[int, ...]] = set()
    n = len(values)
    for i in range(n):
        for j in range(i + 1, n):
            seen: set[int] = set()
            for third in values[j + 1 :]:
                fourth = target - (values[i] + values[j] + third)
                if fourth in seen:
                    found.add(tuple(sorted((values[i], values[j], third, fourth))))
                seen.add(third)
    return sorted(found)  # type: ignore[return-value]


def four_sum_optimal(values: Sequence[int], target: int) -> list[tuple[int, int, int, int]]:
    """Return the unique quadruplets summing to target with sorting and two pointers."""
    items = sorted(values)
    n = len(items)
    found: list[tuple[int, int, int, int]] = []
    for i in range(n):
        if i and items[i] == items[i - 1]:
            continue
        for j in range(i + 1, n):
            if j != i + 1 and items[j] == items[j - 1]:
                continue
            k, m = j + 1, n - 1
            while k < m:
                total = items[i] + items[j] + items[k] + items[m]
                if total > target:
                    m -= 1
                elif total < target:
                    k += 1
                else:
                    found.append((items[i], items[j], items[k], items[m]))
                    k += 1
                    m -= 1
                    while k < m and items[k] == items[k - 1]:
                        k += 1
                    while k < m and items[m] == items[m + 1]:
                        m -= 1
    return found