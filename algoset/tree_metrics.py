"""Whole-tree measurements: height, balance, leaves, diameter and shape checks."""

from __future__ import annotations

from typing import Optional

from algoset.tree import Node


def _is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None


def height(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def is_balanced(root: Optional[Node]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one.

    Heights are recomputed at every node.
    """
    if root is None:
        return True
    return (
        is_balanced(root.left)
        and is_balanced(root.right)
        and abs(height(root.left) - height(root.right)) <= 1
    )


def _balance(root: Optional[Node]) -> tuple[bool, int]:
    """Return (balanced, height) for the subtree in one pass."""
    if root is None:
        return True, 0
    left_ok, left_height = _balance(root.left)
    right_ok, right_height = _balance(root.right)
    balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
    return balanced, max(left_height, right_height) + 1


def is_balanced_fast(root: Optional[Node]) -> bool:
    """Same answer as :func:`is_balanced`, computing heights alongside the check."""
    return _balance(root)[0]


def count_leaves(root: Optional[Node]) -> int:
    """Return the number of nodes that have no children."""
    count = 0
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        if _is_leaf(node):
            count += 1
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return count


def diameter(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest path between any two nodes."""
    if root is None:
        return 0
    through_root = height(root.left) + 1 + height(root.right)
    return max(diameter(root.left), diameter(root.right), through_root)


def _diameter_and_height(root: Optional[Node]) -> tuple[int, int]:
    if root is None:
        return 0, 0
    left_diameter, left_height = _diameter_and_height(root.left)
    right_diameter, right_height = _diameter_and_height(root.right)
    best = max(left_diameter, right_diameter, left_height + right_height + 1)
    return best, max(left_height, right_height) + 1


def diameter_fast(root: Optional[Node]) -> int:
    """Same answer as :func:`diameter`, computing heights alongside it."""
    return _diameter_and_height(root)[0]


def _sum_tree(root: Optional[Node]) -> tuple[bool, int]:
    if root is None or _is_leaf(root):
        return True, 0
    left_ok, left_sum = _sum_tree(root.left)
    right_ok, right_sum = _sum_tree(root.right)
    if left_ok and right_ok and root.data == left_sum + right_sum:
        return True, root.data + left_sum + right_sum
    return False, 0


def is_sum_tree(root: Optional[Node]) -> bool:
    """Tell whether each inner node equals the sum carried up by its subtrees.

    A leaf or missing child carries zero; a valid inner node carries its own
    value plus what its subtrees carried.
    """
    return _sum_tree(root)[0]


def are_identical(first: Optional[Node], second: Optional[Node]) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if first is None or second is None:
        return first is None and second is None
    return (
        first.data == second.data
        and are_identical(first.left, second.left)
        and are_identical(first.right, second.right)
    )