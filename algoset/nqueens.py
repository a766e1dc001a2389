"""Placements of n non-attacking queens on an n by n board."""

from __future__ import annotations


def n_queens(n: int) -> list[list[int]]:
    """Return every solution as a flattened row-major board of 0s and 1s.

    Queens are placed column by column, trying rows from the top, so the
    solutions come in that search order. A non-positive ``n`` gives none.
    """
    if n <= 0:
        return []
    solutions: list[list[int]] = []
    board = [[0] * n for _ in range(n)]
    rows: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()

    def place(col: int) -> None:
        if col == n:
            solutions.append([cell for row in board for cell in row])
            return
        for row in range(n):
            if row in rows or row - col in falling or row + col in rising:
                continue
            board[row][col] = 1
            rows.add(row)
            falling.add(row - col)
            rising.add(row + col)
            place(col + 1)
            board[row][col] = 0
            rows.discard(row)
            falling.discard(row - col)
            rising.discard(row + col)

    place(0)
    return solutions