"""Bit manipulation and small counting helpers over integer lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def complement_bits(n: int) -> list[int]:
    """Return the binary digits of ``n`` with every bit flipped, most significant first."""
    _require_non_negative(n)
    if n == 0:
        return [1]
    return [0 if ch == "1" else 1 for ch in format(n, "b")]


def count_set_bits(n: int) -> int:
    """Return the number of 1 bits in ``n``."""
    _require_non_negative(n)
    return bin(n).count("1")


def find_duplicate(values: Sequence[int]) -> int:
    """Find the repeated value in a list holding 1..n-1 with one value twice."""
    return reduce(xor, values, 0) ^ reduce(xor, range(1, len(values)), 0)


def find_unique(values: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, values, 0)


def frequencies(values: Iterable[int]) -> dict[int, int]:
    """Map each value to how often it occurs, in order of first appearance."""
    return dict(Counter(values))


def frequencies_are_unique(values: Iterable[int]) -> bool:
    """Tell whether no two distinct values occur the same number of times."""
    counts = frequencies(values).values()
    return len(set(counts)) == len(counts)


def find_duplicates(values: Iterable[int]) -> list[int]:
    """Return every repeated occurrence of a value, in the order met."""
    seen: set[int] = set()
    duplicates: list[int] = []
    for value in values:
        if value in seen:
            duplicates.append(value)
        else:
            seen.add(value)
    return duplicates