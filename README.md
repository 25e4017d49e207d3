# arraydrills

A collection of classic array and sorting exercises. Most problems come in
several versions, from a straightforward brute-force solution to an optimal
one, so you can compare approaches and check them against each other.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `arraydrills.sorting`: `bubble_sort`, `insertion_sort`, `merge_sort`,
  `quick_sort`, `selection_sort`. Each takes any iterable and returns a new
  sorted list.
- `arraydrills.basics`: `max_element`, `max_element_recursive`,
  `second_smallest_and_largest`, `is_sorted`, `remove_duplicates` (shortens a
  sorted list in place and returns the count of distinct items), left rotation
  by one, rotation left or right by `k`, moving zeros to the end,
  `find_element` (index or `-1`), and the union of two sorted sequences.
- `arraydrills.lookup`: the missing number in `1..n`, `max_consecutive_ones`,
  the number that appears once, and two sum (`two_sum_nested_loops`,
  `two_sum_with_map`, returning an index pair or `None`).
- `arraydrills.subarray_sums`: longest subarray with sum `k`, counting
  subarrays with sum `k`, longest zero-sum subarray, counting subarrays with
  XOR `k`.
- `arraydrills.majority`: the element appearing more than n/2 times (or
  `None`), and the elements appearing more than n/3 times.
- `arraydrills.kadane`: `max_subarray_sum_brute`, `max_subarray_sum_optimal`,
  `max_subarray_bounds`, and the best single stock trade (`max_profit_brute`,
  `max_profit_optimal`).
- `arraydrills.reorder`: sorting 0s, 1s and 2s, alternating by sign,
  `next_permutation`, and leaders (`leaders_brute`, `leaders_optimal`).
- `arraydrills.matrix`: setting rows and columns to zero, rotating a square
  matrix by 90 degrees clockwise, and `spiral_order`.
- `arraydrills.pascal`: `n_choose_r`, single entries, single rows and whole
  triangles of Pascal's triangle, numbered from 1.
- `arraydrills.k_sum`: unique triplets summing to zero and unique quadruplets
  summing to a target, as ascending tuples in lexicographic order.
- `arraydrills.merging`: `merge_intervals`, and merging two sorted lists in
  place (`merge_sorted_arrays_brute`, `merge_sorted_arrays_optimal`).

## Example

```python
from arraydrills.sorting import merge_sort
from arraydrills.kadane import max_subarray_sum_optimal, max_subarray_bounds
from arraydrills.pascal import pascal_triangle_additive

merge_sort([5, 2, 9, 1])                                   # [1, 2, 5, 9]
max_subarray_sum_optimal([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
max_subarray_bounds([-2, 1, -3, 4, -1, 2, 1, -5, 4])       # (3, 6)
pascal_triangle_additive(4)  # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
```

## Notes on the variants

The `brute`, `better` and `optimal` versions of a problem agree on
well-formed input, but a few differ in the details:

- `majority_elements_third_brute` lists its results in order of first
  appearance; `majority_elements_third_better` lists them in ascending order.
- When several values occur once, `single_number_brute` gives the last of
  them and `single_number_better_time` the smallest.
- `rotate_left_by_one_optimal` and `rotate_90_optimal` change the list they
  are given; the other rotation functions return new lists.

Functions given an empty sequence where no answer exists, such as
`max_element` or `max_subarray_sum_optimal`, raise `ValueError`.

## What it does not do

This is a library of functions only. It has no command-line program: there
is nothing that reads numbers from standard input and prints the results.
Call the functions from your own code or from the Python prompt.