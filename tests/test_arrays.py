from collections import Counter
from itertools import combinations

import pytest

from algoset.arrays import (
    add_digit_arrays,
    bubble_sort,
    has_unique_occurrences,
    intersection,
    is_sorted_and_rotated,
    move_zeroes,
    pair_sums,
    reverse_in_place,
    rotate,
    second_largest,
    second_smallest,
    sort_012,
    sort_binary,
    sort_breaks,
    sorted_intersection,
    swap_alternate,
    triplet_sums,
)


def _digits(number):
    return [int(ch) for ch in str(number)]


def _number(digits):
    return int("".join(map(str, digits)))


def test_intersection_source_case():
    assert sorted(intersection([1, 2, 2, 1], [2, 2])) == [2]


def test_intersection_matches_set_semantics():
    a = [4, 9, 5, 4, 1]
    b = [9, 4, 9, 8, 4, 7]
    result = intersection(a, b)
    assert sorted(result) == sorted(set(a) & set(b))
    assert len(result) == len(set(result))


def test_intersection_disjoint():
    assert intersection([1, 2], [3, 4]) == []


def test_sorted_intersection_source_case():
    a = [1, 2, 2, 2, 2, 3, 4, 5]
    b = [2, 2, 2, 2, 3, 4]
    assert sorted_intersection(a, b) == sorted(set(a) & set(b))


def test_sorted_intersection_empty_input():
    assert sorted_intersection([], [1, 2]) == []


def test_sort_breaks_sorted_list():
    assert sort_breaks([10, 20, 30, 40, 50, 60, 70, 80, 90, 100]) == 1


@pytest.mark.parametrize(
    "values, expected",
    [
        ([10, 20, 30, 40, 50, 60, 70, 80, 90, 100], True),
        ([30, 40, 50, 10, 20], True),
        ([5, 5, 5], True),
        ([1, 3, 2, 4], False),
    ],
)
def test_is_sorted_and_rotated(values, expected):
    assert is_sorted_and_rotated(values) is expected


def test_sort_breaks_empty_raises():
    with pytest.raises(ValueError):
        sort_breaks([])


def test_move_zeroes_keeps_order():
    values = [1, 2, 3, 4, 0, 0, 0, 9, 8, 6, 0, 0, 3, 6, 9]
    original = list(values)
    move_zeroes(values)
    nonzero = [v for v in original if v != 0]
    assert values == nonzero + [0] * original.count(0)


def test_pair_sums_source_case():
    assert pair_sums([1, 2, 3, 6, 9, 3, 10, 4], 5) == [(1, 4), (2, 3), (2, 3)]


def test_pair_sums_invariants():
    values = [3, -1, 7, 2, 5, 0, 4, 4]
    result = pair_sums(values, 7)
    assert result == sorted(result)
    assert all(a + b == 7 and a <= b for a, b in result)
    assert len(result) == sum(1 for a, b in combinations(values, 2) if a + b == 7)


def test_reverse_in_place():
    values = [10, 20, 30, 40, 50, 60, 70, 80]
    original = list(values)
    reverse_in_place(values)
    assert values == original[::-1]


def test_rotate_right():
    values = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    original = list(values)
    rotate(values, 4)
    assert values == original[-4:] + original[:-4]


def test_rotate_full_turn_is_identity():
    values = [1, 2, 3]
    rotate(values, 3)
    assert values == [1, 2, 3]


def test_rotate_empty():
    values = []
    rotate(values, 5)
    assert values == []


def test_bubble_sort():
    values = [34, 89, 76, 45, 23, 87, 16, 10, 90, 92]
    expected = sorted(values)
    bubble_sort(values)
    assert values == expected


def test_second_largest_and_smallest():
    values = [34, 89, 76, 45, 23, 87, 16, 10, 90, 92, 92, 10]
    distinct = sorted(set(values))
    assert second_largest(values) == distinct[-2]
    assert second_smallest(values) == distinct[1]


def test_second_extremes_need_two_distinct():
    with pytest.raises(ValueError):
        second_largest([5, 5, 5])
    with pytest.raises(ValueError):
        second_smallest([])


def test_sort_binary():
    values = [0, 1, 0, 1, 1, 1, 1, 0, 0, 0, 0]
    expected = sorted(values)
    sort_binary(values)
    assert values == expected


def test_sort_binary_all_zeros():
    values = [0, 0, 0]
    sort_binary(values)
    assert values == [0, 0, 0]


def test_sort_012():
    values = [0, 1, 2, 0, 0, 1, 2, 2, 0, 0, 2, 2, 1]
    expected = sorted(values)
    sort_012(values)
    assert values == expected


def test_sort_rejects_stray_values():
    with pytest.raises(ValueError):
        sort_binary([0, 2, 1])
    with pytest.raises(ValueError):
        sort_012([0, 3, 1])


def test_add_digit_arrays_source_case():
    first = [9, 4, 0, 2, 9, 9, 9, 9, 9]
    second = [1, 6, 9, 4, 9, 4, 7]
    assert add_digit_arrays(first, second) == _digits(_number(first) + _number(second))


@pytest.mark.parametrize("a, b", [(99, 1), (1, 999), (0, 0), (12345, 67890)])
def test_add_digit_arrays_matches_integer_sum(a, b):
    assert _number(add_digit_arrays(_digits(a), _digits(b))) == a + b


def test_swap_alternate_even_length():
    values = [10, 20, 30, 40, 50, 60, 70, 80]
    swap_alternate(values)
    assert values == [20, 10, 40, 30, 60, 50, 80, 70]


def test_swap_alternate_odd_length_keeps_last():
    values = [1, 2, 3]
    swap_alternate(values)
    assert values == [2, 1, 3]


def test_triplet_sums_source_case():
    result = triplet_sums([1, 2, 3, 4, 5, 6, 7, 8, 9], 9)
    assert result == [(1, 2, 6), (1, 3, 5), (2, 3, 4)]


def test_triplet_sums_invariants():
    values = [5, -2, 3, 0, 7, 1, 4]
    result = triplet_sums(values, 6)
    assert result == sorted(result)
    assert all(sum(t) == 6 and list(t) == sorted(t) for t in result)
    assert len(result) == sum(1 for t in combinations(values, 3) if sum(t) == 6)


def test_triplet_sums_none_found():
    assert triplet_sums([1, 2], 3) == []


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 2, 1, 1, 3], True),
        ([1, 2], False),
        ([-1, -1, -2, -2, -3], False),
        ([1, 1, 1, 2, 2, 3, 4, 4, 4, 4, 9, 9, 9, 9, 9, 9, 9], True),
        ([7], True),
    ],
)
def test_has_unique_occurrences(values, expected):
    assert has_unique_occurrences(values) is expected


def test_has_unique_occurrences_agrees_with_counter():
    values = [3, 3, 3, 8, 8, 1, 1000, 1000, 1000, 1000]
    counts = list(Counter(values).values())
    assert has_unique_occurrences(values) == (len(counts) == len(set(counts)))