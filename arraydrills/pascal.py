"""Pascal's triangle: single entries, single rows and whole triangles.

Rows and columns are numbered from 1, so the apex is entry (1, 1).
"""

from __future__ import annotations

from math import factorial


def n_choose_r(n: int, r: int) -> int:
    """Return the binomial coefficient C(n, r) by a running product.

    Gives 0 when r exceeds n. Raises ValueError for negative arguments.
    """
    if n < 0 or r < 0:
        raise ValueError("n and r must be non-negative")
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def _check_position(row: int, col: int) -> None:
    if row < 1 or not 1 <= col <= row:
        raise ValueError(f"no entry at row {row}, column {col}")


def pascal_element_brute(row: int, col: int) -> int:
    """Return the entry at (row, col) from three factorials.

    Raises ValueError when the position lies outside the triangle.
    """
    _check_position(row, col)
    return factorial(row - 1) // (factorial(col - 1) * factorial(row - col))


def pascal_element_optimal(row: int, col: int) -> int:
    """Return the entry at (row, col) as C(row - 1, col - 1).

    Raises ValueError when the position lies outside the triangle.
    """
    _check_position(row, col)
    return n_choose_r(row - 1, col - 1)


def _check_row(n: int) -> None:
    if n < 1:
        raise ValueError(f"row number must be at least 1, not {n}")


def pascal_row_brute(n: int) -> list[int]:
    """Return row n, working out every entry separately.

    Raises ValueError when n is less than 1.
    """
    _check_row(n)
    return [n_choose_r(n - 1, col) for col in range(n)]


def pascal_row_optimal(n: int) -> list[int]:
    """Return row n, deriving each entry from the one before it.

    Raises ValueError when n is less than 1.
    """
    _check_row(n)
    row = [1]
    current = 1
    for i in range(1, n):
        current = current * (n - i) // i
        row.append(current)
    return row


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"number of rows must not be negative, not {n}")


def pascal_triangle_brute(n: int) -> list[list[int]]:
    """Return the first n rows, computing every entry as a binomial coefficient.

    Raises ValueError when n is negative.
    """
    _check_count(n)
    return [[n_choose_r(row - 1, col) for col in range(row)] for row in range(1, n + 1)]


def pascal_triangle_row_by_row(n: int) -> list[list[int]]:
    """Return the first n rows, building each row with pascal_row_optimal.

    Raises ValueError when n is negative.
    """
    _check_count(n)
    return [pascal_row_optimal(row) for row in range(1, n + 1)]


def pascal_triangle_additive(n: int) -> list[list[int]]:
    """Return the first n rows, each entry the sum of the two above it.

    Raises ValueError when n is negative.
    """
    _check_count(n)
    triangle: list[list[int]] = []
    previous: list[int] = []
    for _ in range(n):
        row = [1, *(a + b for a, b in zip(previous, previous[1:]))]
        if previous:
            row.append(1)
        triangle.append(row)
        previous = row
    return triangle