"""Subarray questions answered with running sums and running XORs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def longest_subarray_sum_k_brute(values: Sequence[int], k: int) -> int:
    """Return the length of the longest subarray summing to k, trying every start."""
    best = 0
    for start in range(len(values)):
        total = 0
        for end in range(start, len(values)):
            total += values[end]
            if total == k:
                best = max(best, end - start + 1)
    return best


def longest_subarray_sum_k_prefix(values: Sequence[int], k: int) -> int:
    """Return the length of the longest subarray summing to k using prefix sums.

    Works for negative values too.
    """
    best = 0
    first_seen: dict[int, int] = {}
    total = 0
    for index, item in enumerate(values):
        total += item
        if total == k:
            best = max(best, index + 1)
        earlier = first_seen.get(total - k)
        if earlier is not None:
            best = max(best, index - earlier)
        first_seen.setdefault(total, index)
    return best


def longest_subarray_sum_k_window(values: Sequence[int], k: int) -> int:
    """Return the length of the longest subarray summing to k with a sliding window.

    Only correct when no value is negative.
    """
    best = 0
    total = 0
    left = 0
    for right, item in enumerate(values):
        total += item
        while left <= right and total > k:
            total -= values[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def count_subarrays_sum_k_brute(values: Sequence[int], k: int) -> int:
    """Count the non-empty subarrays summing to k, trying every start."""
    count = 0
    for start in range(len(values)):
        total = 0
        for item in values[start:]:
            total += item
            if total == k:
                count += 1
    return count


def count_subarrays_sum_k_optimal(values: Sequence[int], k: int) -> int:
    """Count the non-empty subarrays summing to k with a count of prefix sums."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for item in values:
        total += item
        count += seen[total - k]
        seen[total] += 1
    return count


def longest_zero_sum_subarray_brute(values: Sequence[int]) -> int:
    """Return the length of the longest subarray summing to zero, trying every start."""
    best = 0
    for start in range(len(values)):
        total = 0
        for end in range(start, len(values)):
            total += values[end]
            if total == 0:
                best = max(best, end - start + 1)
    return best


def longest_zero_sum_subarray_optimal(values: Sequence[int]) -> int:
    """Return the length of the longest subarray summing to zero in one pass."""
    best = 0
    first_seen: dict[int, int] = {}
    total = 0
    for index, item in enumerate(values):
        total += item
        if total == 0:
            best = index + 1
        elif total in first_seen:
            best = max(best, index - first_seen[total])
        else:
            first_seen[total] = index
    return best


def count_subarrays_xor_k_brute(values: Sequence[int], k: int) -> int:
    """Count the non-empty subarrays whose XOR is k, trying every start."""
    count = 0
    for start in range(len(values)):
        running = 0
        for item in values[start:]:
            running ^= item
            if running == k:
                count += 1
    return count


def count_subarrays_xor_k_optimal(values: Sequence[int], k: int) -> int:
    """Count the non-empty subarrays whose XOR is k with a count of prefix XORs."""
    seen = Counter({0: 1})
    running = 0
    count = 0
    for item in values:
        running ^= item
        count += seen[running ^ k]
        seen[running] += 1
    return count