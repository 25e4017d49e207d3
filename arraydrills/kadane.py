"""Maximum subarray sum (Kadane's algorithm) and the best single stock trade."""

from __future__ import annotations

from collections.abc import Sequence


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray, trying every start.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("max_subarray_sum_brute() of an empty sequence")
    best = values[0]
    for start in range(len(values)):
        total = 0
        for item in values[start:]:
            total += item
            best = max(best, total)
    return best


def max_subarray_sum_optimal(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray in one pass.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("max_subarray_sum_optimal() of an empty sequence")
    best = values[0]
    total = 0
    for item in values:
        total += item
        best = max(best, total)
        if total < 0:
            total = 0
    return best


def max_subarray_bounds(values: Sequence[int]) -> tuple[int, int]:
    """Return (start, end), both inclusive, of a subarray with the largest sum.

    Of several such subarrays the one found first by Kadane's scan is given.
    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("max_subarray_bounds() of an empty sequence")
    best: int | None = None
    total = 0
    start = 0
    bounds = (0, 0)
    for index, item in enumerate(values):
        if total == 0:
            start = index
        total += item
        if best is None or total > best:
            best = total
            bounds = (start, index)
        if total < 0:
            total = 0
    return bounds


def max_profit_brute(prices: Sequence[int]) -> int:
    """Return the best profit of buying on one day and selling on a later one.

    Returns 0 when no trade makes money.
    """
    best = 0
    for buy_day, buy_price in enumerate(prices):
        for sell_price in prices[buy_day + 1 :]:
            best = max(best, sell_price - buy_price)
    return best


def max_profit_optimal(prices: Sequence[int]) -> int:
    """Return the best single-trade profit, tracking the lowest price so far.

    Returns 0 when no trade makes money.
    """
    if not prices:
        return 0
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best