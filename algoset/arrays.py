"""Classic list exercises: intersections, rotations, partitions and sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values found in both inputs, in order of first appearance in ``second``."""
    lookup = set(first)
    common: dict[int, None] = {}
    for value in second:
        if value in lookup:
            common[value] = None
    return list(common)


def sorted_intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the distinct common values of two ascending lists, ascending."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a == b:
            if not result or result[-1] != a:
                result.append(a)
            i += 1
            j += 1
        elif a < b:
            i += 1
        else:
            j += 1
    return result


def sort_breaks(values: Sequence[int]) -> int:
    """Count the descents, treating the list as circular (last to first included)."""
    if not values:
        raise ValueError("cannot inspect an empty list")
    count = sum(1 for a, b in zip(values, values[1:]) if a > b)
    if values[-1] > values[0]:
        count += 1
    return count


def is_sorted_and_rotated(values: Sequence[int]) -> bool:
    """Tell whether the list is an ascending list rotated by some amount."""
    return sort_breaks(values) <= 1


def move_zeroes(values: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the others."""
    insert_at = 0
    for index, value in enumerate(values):
        if value != 0:
            values[insert_at], values[index] = values[index], values[insert_at]
            insert_at += 1


def pair_sums(values: Sequence[int], key: int) -> list[tuple[int, int]]:
    """Return every pair of positions whose values add up to ``key``, as sorted value pairs."""
    pairs = [
        (min(a, b), max(a, b)) for a, b in combinations(values, 2) if a + b == key
    ]
    return sorted(pairs)


def reverse_in_place(values: list[int]) -> None:
    """Reverse the list in place."""
    start, end = 0, len(values) - 1
    while start < end:
        values[start], values[end] = values[end], values[start]
        start += 1
        end -= 1


def rotate(values: list[int], k: int) -> None:
    """Rotate the list right by ``k`` places in place."""
    if not values:
        return
    shift = k % len(values)
    values[:] = values[len(values) - shift:] + values[: len(values) - shift]


def bubble_sort(values: list[int]) -> None:
    """Sort the list ascending in place, stopping early once a pass swaps nothing."""
    n = len(values)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            return


def second_largest(values: Iterable[int]) -> int:
    """Return the largest value strictly below the maximum."""
    distinct = set(values)
    if len(distinct) < 2:
        raise ValueError("need at least two distinct values")
    distinct.remove(max(distinct))
    return max(distinct)


def second_smallest(values: Iterable[int]) -> int:
    """Return the smallest value strictly above the minimum."""
    distinct = set(values)
    if len(distinct) < 2:
        raise ValueError("need at least two distinct values")
    distinct.remove(min(distinct))
    return min(distinct)


def _check_allowed(values: Iterable[int], allowed: frozenset[int]) -> Counter[int]:
    counts = Counter(values)
    stray = set(counts) - allowed
    if stray:
        raise ValueError(f"unexpected values: {sorted(stray)}")
    return counts


def sort_binary(values: list[int]) -> None:
    """Sort a list of zeros and ones in place."""
    counts = _check_allowed(values, frozenset({0, 1}))
    values[:] = [0] * counts[0] + [1] * counts[1]


def sort_012(values: list[int]) -> None:
    """Sort a list of zeros, ones and twos in place."""
    counts = _check_allowed(values, frozenset({0, 1, 2}))
    values[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def add_digit_arrays(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two numbers given as decimal digit lists, most significant digit first."""
    digits: list[int] = []
    carry = 0
    a, b = list(reversed(first)), list(reversed(second))
    for index in range(max(len(a), len(b))):
        total = carry
        total += a[index] if index < len(a) else 0
        total += b[index] if index < len(b) else 0
        carry, digit = divmod(total, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    digits.reverse()
    return digits


def swap_alternate(values: list[int]) -> None:
    """Swap each element at an even position with its right neighbour, in place."""
    for index in range(0, len(values) - 1, 2):
        values[index], values[index + 1] = values[index + 1], values[index]


def triplet_sums(values: Sequence[int], key: int) -> list[tuple[int, int, int]]:
    """Return every triple of positions whose values add up to ``key``, as sorted value triples."""
    triples = [
        tuple(sorted(triple)) for triple in combinations(values, 3) if sum(triple) == key
    ]
    return sorted(triples)


def has_unique_occurrences(values: Iterable[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = list(Counter(values).values())
    return len(set(counts)) == len(counts)