"""Binary-search based routines over sorted lists and integer ranges."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return None


def first_occurrence(values: Sequence[int], key: int) -> int | None:
    """Return the lowest index of ``key`` in the ascending ``values``, or None."""
    index = bisect_left(values, key)
    if index < len(values) and values[index] == key:
        return index
    return None


def last_occurrence(values: Sequence[int], key: int) -> int | None:
    """Return the highest index of ``key`` in the ascending ``values``, or None."""
    index = bisect_right(values, key) - 1
    if index >= 0 and values[index] == key:
        return index
    return None


def integer_sqrt(n: int) -> int:
    """Return the largest integer whose square does not exceed ``n``."""
    if n < 0:
        raise ValueError(f"cannot take the square root of a negative number: {n}")
    return math.isqrt(n)


def precise_sqrt(n: int, precision: int = 5) -> float:
    """Approximate the square root of ``n`` from below to ``precision`` decimal places.

    Each decimal place is found by stepping up from the current answer while
    the square stays below ``n``.
    """
    answer = float(integer_sqrt(n))
    factor = 1.0
    for _ in range(precision):
        factor /= 10
        candidate = answer
        while candidate * candidate < n:
            answer = candidate
            candidate += factor
    return answer


def is_allocation_possible(pages: Sequence[int], students: int, limit: int) -> bool:
    """Tell whether the books, kept in order, fit ``students`` readers at ``limit`` pages each."""
    student_count = 1
    page_sum = 0
    for count in pages:
        if page_sum + count <= limit:
            page_sum += count
        else:
            student_count += 1
            if student_count > students:
                return False
            page_sum = count
    return True


def min_pages(pages: Sequence[int], students: int) -> int:
    """Return the smallest page limit that lets ``students`` readers share the books in order."""
    if not pages:
        raise ValueError("at least one book is required")
    if students < 1:
        raise ValueError(f"at least one student is required, got {students}")
    low, high = max(pages), sum(pages)
    while low < high:
        mid = (low + high) // 2
        if is_allocation_possible(pages, students, mid):
            high = mid
        else:
            low = mid + 1
    return low