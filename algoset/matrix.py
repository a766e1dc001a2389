"""Operations on rectangular integer matrices given as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain

Matrix = Sequence[Sequence[int]]

_INT16_MIN = -32768


def largest_row_sum(matrix: Matrix) -> int:
    """Return the largest row sum, never less than the 16-bit minimum."""
    return max(chain([_INT16_MIN], (sum(row) for row in matrix)))


def rotate_90_clockwise(matrix: Matrix) -> list[list[int]]:
    """Return a new matrix that is ``matrix`` turned a quarter turn clockwise."""
    return [list(row) for row in zip(*reversed(matrix))]


def column_sums(matrix: Matrix) -> list[int]:
    """Return the sum of each column, left to right."""
    return [sum(column) for column in zip(*matrix)]


def contains(matrix: Matrix, key: int) -> bool:
    """Tell whether ``key`` occurs anywhere in the matrix."""
    return any(key in row for row in matrix)


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the elements in clockwise spiral order from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    total = len(matrix) * len(matrix[0])
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []

    def walk(cells):
        for r, c in cells:
            if len(result) >= total:
                return
            result.append(matrix[r][c])

    while len(result) < total:
        walk((top, c) for c in range(left, right + 1))
        top += 1
        walk((r, right) for r in range(top, bottom + 1))
        right -= 1
        walk((bottom, c) for c in range(right, left - 1, -1))
        bottom -= 1
        walk((r, left) for r in range(bottom, top - 1, -1))
        left += 1
    return result


def wave_order(matrix: Matrix) -> list[int]:
    """Return columns top to bottom and bottom to top in turn, left to right."""
    result: list[int] = []
    for index, column in enumerate(zip(*matrix)):
        result.extend(reversed(column) if index % 2 else column)
    return result


def bump_first_match(matrix: list[list[int]], key: int, amount: int = 3) -> bool:
    """Add ``amount`` to the first cell equal to ``key``, in row-major order.

    The matrix is changed in place. Returns whether a cell was changed.
    """
    for row in matrix:
        for col, value in enumerate(row):
            if value == key:
                row[col] = value + amount
                return True
    return False