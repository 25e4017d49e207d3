from functools import reduce
from operator import xor

from hypothesis import given
from hypothesis import strategies as st
import pytest

from arraydrills.subarray_sums import (
    count_subarrays_sum_k_brute,
    count_subarrays_sum_k_optimal,
    count_subarrays_xor_k_brute,
    count_subarrays_xor_k_optimal,
    longest_subarray_sum_k_brute,
    longest_subarray_sum_k_prefix,
    longest_subarray_sum_k_window,
    longest_zero_sum_subarray_brute,
    longest_zero_sum_subarray_optimal,
)

small_ints = st.lists(st.integers(min_value=-10, max_value=10), max_size=30)
non_negative = st.lists(st.integers(min_value=0, max_value=10), max_size=30)
targets = st.integers(min_value=-20, max_value=40)


@given(non_negative, st.integers(min_value=0, max_value=40))
def test_longest_sum_k_all_agree_on_non_negative(values, k):
    expected = longest_subarray_sum_k_brute(values, k)
    assert longest_subarray_sum_k_prefix(values, k) == expected
    assert longest_subarray_sum_k_window(values, k) == expected


@given(small_ints, targets)
def test_longest_sum_k_prefix_matches_brute_with_negatives(values, k):
    assert longest_subarray_sum_k_prefix(values, k) == longest_subarray_sum_k_brute(values, k)


@given(small_ints, targets)
def test_longest_sum_k_has_witness(values, k):
    length = longest_subarray_sum_k_prefix(values, k)
    assert 0 <= length <= len(values)
    if length:
        assert any(
            sum(values[start : start + length]) == k
            for start in range(len(values) - length + 1)
        )


@given(st.lists(st.integers(min_value=-10, max_value=10), min_size=1, max_size=30))
def test_longest_sum_k_whole_array(values):
    assert longest_subarray_sum_k_prefix(values, sum(values)) == len(values)


def test_longest_sum_k_window_example():
    assert longest_subarray_sum_k_window([2, 3, 5, 1, 9], 10) == 3


@given(small_ints, targets)
def test_count_sum_k_agree(values, k):
    assert count_subarrays_sum_k_optimal(values, k) == count_subarrays_sum_k_brute(values, k)


@given(st.lists(st.integers(min_value=-10, max_value=10), min_size=1, max_size=30))
def test_count_sum_k_whole_array_counted(values):
    assert count_subarrays_sum_k_optimal(values, sum(values)) >= 1


@given(st.integers(min_value=0, max_value=20))
def test_count_sum_zero_of_zeros(n):
    # every non-empty subarray of zeros sums to zero
    assert count_subarrays_sum_k_optimal([0] * n, 0) == n * (n + 1) // 2


def test_count_sum_k_example():
    assert count_subarrays_sum_k_optimal([1, 1, 1], 2) == 2


@given(small_ints)
def test_longest_zero_sum_agree(values):
    expected = longest_zero_sum_subarray_brute(values)
    assert longest_zero_sum_subarray_optimal(values) == expected
    assert longest_subarray_sum_k_brute(values, 0) == expected


def test_longest_zero_sum_example():
    assert longest_zero_sum_subarray_optimal([1, -1, 3, 2, -2, -8, 1, 7, 10, 23]) == 5


@given(st.lists(st.integers(min_value=0, max_value=15), max_size=30), st.integers(min_value=0, max_value=15))
def test_count_xor_k_agree(values, k):
    assert count_subarrays_xor_k_optimal(values, k) == count_subarrays_xor_k_brute(values, k)


@given(st.lists(st.integers(min_value=0, max_value=15), min_size=1, max_size=30))
def test_count_xor_whole_array_counted(values):
    assert count_subarrays_xor_k_optimal(values, reduce(xor, values, 0)) >= 1


@pytest.mark.parametrize(
    "func",
    [
        count_subarrays_sum_k_brute,
        count_subarrays_sum_k_optimal,
        count_subarrays_xor_k_brute,
        count_subarrays_xor_k_optimal,
        longest_subarray_sum_k_brute,
        longest_subarray_sum_k_prefix,
        longest_subarray_sum_k_window,
    ],
)
def test_empty_input_gives_zero(func):
    assert func([], 0) == 0