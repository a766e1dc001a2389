"""Binary max-heaps, in-place heapify, and k-way merging with a min-heap."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import count
from typing import Optional


@dataclass
class MaxHeap:
    """A max-heap kept in a list, the largest value at the front."""

    _values: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._values)

    def insert(self, value: int) -> None:
        """Add ``value`` and sift it up towards the root."""
        values = self._values
        values.append(value)
        index = len(values) - 1
        while index > 0:
            parent = (index - 1) // 2
            if values[parent] < values[index]:
                values[parent], values[index] = values[index], values[parent]
                index = parent
            else:
                return

    def delete_root(self) -> int:
        """Remove and return the largest value.

        The last value takes the root's place and is sifted down.
        """
        values = self._values
        if not values:
            raise IndexError("nothing to delete from an empty heap")
        root = values[0]
        last = values.pop()
        if values:
            values[0] = last
            sift_down(values, len(values), 0)
        return root

    def items(self) -> list[int]:
        """Return the values in their stored heap order."""
        return list(self._values)


def sift_down(values: list[int], size: int, index: int) -> None:
    """Move ``values[index]`` down until neither child within ``size`` is larger."""
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` arranged as a max-heap."""
    heap = list(values)
    for index in range(len(heap) // 2 - 1, -1, -1):
        sift_down(heap, len(heap), index)
    return heap


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional["ListNode"]:
        """Build a linked list holding ``values`` in order."""
        head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def __iter__(self):
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def merge_k_sorted_lists(
    heads: Iterable[Optional[ListNode]],
) -> Optional[ListNode]:
    """Relink the nodes of several ascending lists into one ascending list."""
    tiebreak = count()
    pending = [(head.val, next(tiebreak), head) for head in heads if head is not None]
    heapq.heapify(pending)
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    while pending:
        _, _, node = heapq.heappop(pending)
        if node.next is not None:
            heapq.heappush(pending, (node.next.val, next(tiebreak), node.next))
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    if tail is not None:
        tail.next = None
    return head


def merge_k_sorted_arrays(arrays: Iterable[Sequence[int]]) -> list[int]:
    """Merge several ascending lists into one ascending list."""
    return list(heapq.merge(*arrays))