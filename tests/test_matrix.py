import pytest

from algoset.matrix import (
    bump_first_match,
    column_sums,
    contains,
    largest_row_sum,
    rotate_90_clockwise,
    spiral_order,
    wave_order,
)

SQUARE = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
RECT = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]


def _flat(matrix):
    return [x for row in matrix for x in row]


def test_largest_row_sum_picks_the_heavy_row():
    assert largest_row_sum([[0, 0], [10, 0], [1, 1]]) == 10


def test_largest_row_sum_is_at_least_every_row():
    result = largest_row_sum(RECT)
    assert all(result >= sum(row) for row in RECT)
    assert result in [sum(row) for row in RECT]


def test_largest_row_sum_empty_gives_floor():
    assert largest_row_sum([]) == -32768


def test_rotate_known_value():
    assert rotate_90_clockwise(SQUARE) == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


def test_rotate_four_times_is_identity():
    m = SQUARE
    for _ in range(4):
        m = rotate_90_clockwise(m)
    assert m == SQUARE


def test_rotate_does_not_mutate_input():
    original = [row[:] for row in SQUARE]
    rotate_90_clockwise(SQUARE)
    assert SQUARE == original


def test_column_sums_single_nonzero_row():
    assert column_sums([[1, 2, 3], [0, 0, 0], [0, 0, 0]]) == [1, 2, 3]


def test_column_sums_total_matches():
    assert sum(column_sums(SQUARE)) == sum(_flat(SQUARE))


@pytest.mark.parametrize("key,expected", [(3, True), (5, True), (42, False)])
def test_contains(key, expected):
    assert contains(SQUARE, key) is expected


def test_spiral_known_value():
    assert spiral_order(SQUARE) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@pytest.mark.parametrize("matrix", [SQUARE, RECT, [[1]], [[1, 2], [3, 4]]])
def test_spiral_is_permutation_starting_with_first_row(matrix):
    result = spiral_order(matrix)
    assert sorted(result) == sorted(_flat(matrix))
    assert result[: len(matrix[0])] == list(matrix[0])


def test_spiral_single_row_and_column():
    assert spiral_order([[4, 5, 6]]) == [4, 5, 6]
    assert spiral_order([[4], [5], [6]]) == [4, 5, 6]


def test_spiral_empty():
    assert spiral_order([]) == []


@pytest.mark.parametrize("matrix", [SQUARE, RECT])
def test_wave_is_permutation_starting_with_first_column(matrix):
    result = wave_order(matrix)
    assert sorted(result) == sorted(_flat(matrix))
    assert result[: len(matrix)] == [row[0] for row in matrix]
    assert result[len(matrix) : 2 * len(matrix)] == [row[1] for row in reversed(matrix)]


def test_wave_single_row_and_column():
    assert wave_order([[4, 5, 6]]) == [4, 5, 6]
    assert wave_order([[4], [5], [6]]) == [4, 5, 6]


def test_bump_first_match_changes_only_first():
    m = [[1, 3], [3, 3]]
    assert bump_first_match(m, 3) is True
    assert m == [[1, 3 + 3], [3, 3]]


def test_bump_first_match_custom_amount():
    m = [[2, 7]]
    assert bump_first_match(m, 7, amount=10) is True
    assert m[0][1] == 17


def test_bump_first_match_absent_leaves_matrix():
    m = [[1, 2], [4, 5]]
    assert bump_first_match(m, 3) is False
    assert m == [[1, 2], [4, 5]]