import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.basics import (
    find_element,
    is_sorted,
    max_element,
    max_element_recursive,
    move_zeros_to_end_brute,
    move_zeros_to_end_optimal,
    remove_duplicates,
    rotate_left_brute,
    rotate_left_by_one_brute,
    rotate_left_by_one_optimal,
    rotate_left_optimal,
    rotate_right_brute,
    rotate_right_optimal,
    second_smallest_and_largest,
    union_with_set,
    union_without_set,
)

ints = st.integers(min_value=-1000, max_value=1000)


# --- maximum -------------------------------------------------------------

@pytest.mark.parametrize("find_max", [max_element, max_element_recursive])
def test_max_of_small_list(find_max):
    assert find_max([3, -7, 12, 4]) == 12


@pytest.mark.parametrize("find_max", [max_element, max_element_recursive])
def test_max_of_empty_raises(find_max):
    with pytest.raises(ValueError):
        find_max([])


@given(st.lists(ints, min_size=1))
def test_max_agrees_with_builtin(data):
    assert max_element(data) == max(data)
    assert max_element_recursive(data) == max(data)


# --- second smallest and largest -----------------------------------------

def test_second_smallest_and_largest_distinct():
    assert second_smallest_and_largest([1, 2, 3, 4, 5]) == (2, 4)


def test_second_with_repeated_extreme():
    assert second_smallest_and_largest([5, 5]) == (5, 5)


def test_second_of_single_item_is_missing():
    assert second_smallest_and_largest([7]) == (None, None)


@given(st.lists(ints, min_size=2, unique=True))
def test_second_matches_sorted_for_distinct(data):
    ordered = sorted(data)
    assert second_smallest_and_largest(data) == (ordered[1], ordered[-2])


# --- sortedness ----------------------------------------------------------

def test_is_sorted_allows_equal_neighbours():
    assert is_sorted([1, 2, 2, 3]) is True


def test_is_sorted_detects_descent():
    assert is_sorted([1, 3, 2]) is False


@given(st.lists(ints))
def test_is_sorted_matches_sorted_copy(data):
    assert is_sorted(data) == (data == sorted(data))
    assert is_sorted(sorted(data)) is True


# --- remove duplicates ---------------------------------------------------

def test_remove_duplicates_in_place():
    data = [1, 1, 2, 2, 2, 3]
    count = remove_duplicates(data)
    assert count == 3
    assert data == [1, 2, 3]


def test_remove_duplicates_empty():
    data = []
    assert remove_duplicates(data) == 0
    assert data == []


@given(st.lists(ints))
def test_remove_duplicates_leaves_distinct_sorted(data):
    data.sort()
    expected = sorted(set(data))
    count = remove_duplicates(data)
    assert count == len(expected)
    assert data == expected


# --- rotation by one -----------------------------------------------------

def test_rotate_left_by_one_brute():
    data = [1, 2, 3, 4]
    assert rotate_left_by_one_brute(data) == [2, 3, 4, 1]
    assert data == [1, 2, 3, 4]


def test_rotate_left_by_one_optimal_mutates():
    data = [1, 2, 3, 4]
    result = rotate_left_by_one_optimal(data)
    assert result is data
    assert data == [2, 3, 4, 1]


@given(st.lists(ints))
def test_rotate_by_one_variants_agree(data):
    assert rotate_left_by_one_brute(data) == rotate_left_by_one_optimal(list(data))


# --- rotation by k -------------------------------------------------------

def test_rotate_right_worked_example():
    data = [1, 2, 3, 4, 5, 6]
    assert rotate_right_brute(data, 2) == [5, 6, 1, 2, 3, 4]
    assert rotate_right_optimal(data, 2) == [5, 6, 1, 2, 3, 4]


def test_rotate_left_worked_example():
    data = [1, 2, 3, 4, 5, 6]
    assert rotate_left_brute(data, 2) == [3, 4, 5, 6, 1, 2]
    assert rotate_left_optimal(data, 2) == [3, 4, 5, 6, 1, 2]


@pytest.mark.parametrize(
    "rotate",
    [rotate_right_brute, rotate_left_brute, rotate_right_optimal, rotate_left_optimal],
)
def test_rotate_empty(rotate):
    assert rotate([], 3) == []


@given(st.lists(ints, min_size=1), st.integers(min_value=0, max_value=50))
def test_rotations_agree_and_invert(data, k):
    right = rotate_right_brute(data, k)
    left = rotate_left_brute(data, k)
    assert rotate_right_optimal(data, k) == right
    assert rotate_left_optimal(data, k) == left
    assert rotate_left_brute(right, k) == data
    assert rotate_right_optimal(left, k) == data


@given(st.lists(ints, min_size=1))
def test_rotation_by_length_is_identity(data):
    assert rotate_right_brute(data, len(data)) == data
    assert rotate_left_optimal(data, len(data)) == data


# --- move zeros ----------------------------------------------------------

def test_move_zeros_example():
    data = [0, 1, 0, 3, 12]
    assert move_zeros_to_end_brute(data) == [1, 3, 12, 0, 0]
    assert move_zeros_to_end_optimal(data) == [1, 3, 12, 0, 0]
    assert data == [0, 1, 0, 3, 12]


@given(st.lists(st.integers(min_value=-3, max_value=3)))
def test_move_zeros_invariants(data):
    brute = move_zeros_to_end_brute(data)
    optimal = move_zeros_to_end_optimal(data)
    non_zero = [x for x in data if x != 0]
    assert brute == optimal
    assert brute[: len(non_zero)] == non_zero
    assert all(x == 0 for x in brute[len(non_zero):])
    assert len(brute) == len(data)


# --- find element --------------------------------------------------------

def test_find_element_missing():
    assert find_element([1, 2, 3], 115) == -1


@given(st.lists(ints, min_size=1), st.data())
def test_find_element_returns_first_match(data, draw):
    target = draw.draw(st.sampled_from(data))
    index = find_element(data, target)
    assert data[index] == target
    assert target not in data[:index]


# --- union ---------------------------------------------------------------

def test_union_example():
    first, second = [1, 1, 2, 3], [2, 4]
    assert union_with_set(first, second) == [1, 2, 3, 4]
    assert union_without_set(first, second) == [1, 2, 3, 4]


def test_union_with_empty_side():
    assert union_without_set([], [2, 2, 5]) == [2, 5]
    assert union_without_set([1, 1], []) == [1]


@given(st.lists(ints), st.lists(ints))
def test_union_variants_agree(first, second):
    first.sort()
    second.sort()
    expected = sorted(set(first) | set(second))
    assert union_with_set(first, second) == expected
    assert union_without_set(first, second) == expected