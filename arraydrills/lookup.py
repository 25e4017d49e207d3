"""Finding a particular item: the missing number, the unpaired value,
the longest run of ones and a pair with a given sum."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import groupby
from operator import xor


def missing_number_brute(values: Sequence[int]) -> int:
    """Return the number in 1..len(values)+1 that is absent, checking each in turn.

    The input must hold distinct numbers from that range with exactly one left out.
    """
    n = len(values) + 1
    return next(
        candidate
        for candidate in range(1, n + 1)
        if all(item != candidate for item in values)
    )


def missing_number_better_time(values: Sequence[int]) -> int:
    """Return the absent number using a count of every value seen."""
    counts = Counter(values)
    return next(
        candidate
        for candidate in range(1, len(values) + 2)
        if counts[candidate] == 0
    )


def missing_number_better_space(values: Sequence[int]) -> int:
    """Return the absent number by sorting a copy and looking for a gap."""
    items = sorted(values)
    if not items or items[0] != 1:
        return 1
    for current, following in zip(items, items[1:]):
        if current != following - 1:
            return current + 1
    return len(items) + 1


def missing_number_via_sum(values: Sequence[int]) -> int:
    """Return the absent number as the expected total minus the actual one."""
    n = len(values) + 1
    return n * (n + 1) // 2 - sum(values)


def missing_number_via_xor(values: Sequence[int]) -> int:
    """Return the absent number by cancelling every present one with XOR."""
    present = reduce(xor, values, 0)
    expected = reduce(xor, range(1, len(values) + 2), 0)
    return present ^ expected


def max_consecutive_ones(values: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(values) if key == 1),
        default=0,
    )


def single_number_brute(values: Sequence[int]) -> int:
    """Return the value that occurs once, comparing every pair of positions.

    When several values occur once the last of them is returned; when none
    does, 0 is returned.
    """
    answer = 0
    for i, item in enumerate(values):
        if all(other != item for j, other in enumerate(values) if j != i):
            answer = item
    return answer


def single_number_better_space(values: Sequence[int]) -> int:
    """Return the value that occurs once by sorting a copy and walking it in pairs.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("single_number_better_space() of an empty sequence")
    items = sorted(values)
    for first, second in zip(items[::2], items[1::2]):
        if first != second:
            return first
    return items[-1]


def single_number_better_time(values: Sequence[int]) -> int:
    """Return the smallest value that occurs once, or 0 if there is none."""
    counts = Counter(values)
    return next((value for value in sorted(counts) if counts[value] == 1), 0)


def single_number_optimal(values: Sequence[int]) -> int:
    """Return the unpaired value by XOR-ing everything together."""
    return reduce(xor, values, 0)


def two_sum_nested_loops(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices (i, j), i < j, of the first pair summing to target.

    Pairs are tried in order of i, then j. Returns None when no pair exists.
    """
    for i, first in enumerate(values):
        for j in range(i + 1, len(values)):
            if first + values[j] == target:
                return i, j
    return None


def two_sum_with_map(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices (i, j), i < j, of a pair summing to target, in one pass.

    The pair found is the one whose second index is smallest. Returns None
    when no pair exists.
    """
    seen: dict[int, int] = {}
    for index, item in enumerate(values):
        partner = target - item
        if partner in seen:
            return seen[partner], index
        seen[item] = index
    return None