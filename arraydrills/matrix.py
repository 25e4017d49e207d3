"""Matrix exercises: zeroing rows and columns, rotation and spiral order."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Matrix = list[list[Any]]


def set_matrix_zero_brute(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return a copy where the row and column of every zero are set to zero.

    Zeroes each affected row and column directly for every zero found.
    """
    result = [list(row) for row in matrix]
    zeros = [
        (i, j) for i, row in enumerate(matrix) for j, item in enumerate(row) if item == 0
    ]
    for i, j in zeros:
        for row in result:
            row[j] = 0
        result[i] = [0] * len(result[i])
    return result


def set_matrix_zero_better(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the same result as set_matrix_zero_brute using row and column marks."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, item in enumerate(row) if item == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else item for j, item in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def set_matrix_zero_optimal(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the same result, keeping the marks in the first row and column."""
    result = [list(row) for row in matrix]
    if not result or not result[0]:
        return result
    rows, cols = len(result), len(result[0])
    first_col_zero = False

    for i in range(rows):
        for j in range(cols):
            if result[i][j] == 0:
                result[i][0] = 0
                if j != 0:
                    result[0][j] = 0
                else:
                    first_col_zero = True

    for i in range(1, rows):
        for j in range(1, cols):
            if result[i][0] == 0 or result[0][j] == 0:
                result[i][j] = 0

    if result[0][0] == 0:
        result[0] = [0] * cols
    if first_col_zero:
        for row in result:
            row[0] = 0
    return result


def _require_square(matrix: Sequence[Sequence[Any]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return n


def rotate_90_brute(matrix: Sequence[Sequence[Any]]) -> Matrix:
    """Return a new square matrix rotated 90 degrees clockwise.

    Raises ValueError when the matrix is not square.
    """
    _require_square(matrix)
    return [list(column) for column in zip(*reversed(matrix))]


def rotate_90_optimal(matrix: Matrix) -> Matrix:
    """Rotate a square matrix 90 degrees clockwise in place and return it.

    Transposes, then reverses every row. Raises ValueError when the matrix
    is not square.
    """
    n = _require_square(matrix)
    for i in range(n):
        for j in range(i):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()
    return matrix


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the items read clockwise in a spiral from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    order: list[Any] = []

    while top <= bottom and left <= right:
        order.extend(matrix[top][left : right + 1])
        top += 1

        order.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1

        if top <= bottom:
            order.extend(matrix[bottom][j] for j in range(right, left - 1, -1))
            bottom -= 1

        if left <= right:
            order.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1

    return order