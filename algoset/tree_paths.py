"""Path-based questions on binary trees: sums, ancestors and bloodlines."""

from __future__ import annotations

from typing import Optional

from algoset.tree import Node


def count_k_sum_paths(root: Optional[Node], k: int) -> int:
    """Count downward paths (ancestor to descendant, single nodes included) summing to ``k``."""
    path: list[int] = []

    def visit(node: Optional[Node]) -> int:
        if node is None:
            return 0
        path.append(node.data)
        found = visit(node.left) + visit(node.right)
        running = 0
        for value in reversed(path):
            running += value
            if running == k:
                found += 1
        path.pop()
        return found

    return visit(root)


def _path_to(root: Optional[Node], value: int) -> Optional[list[Node]]:
    """Return the nodes from ``root`` down to the first preorder match of ``value``."""
    if root is None:
        return None
    if root.data == value:
        return [root]
    for child in (root.left, root.right):
        below = _path_to(child, value)
        if below is not None:
            return [root, *below]
    return None


def kth_ancestor(root: Optional[Node], k: int, value: int) -> Optional[Node]:
    """Return the node ``k`` levels above the first node holding ``value``.

    Returns None when ``value`` is not in the tree. When ``k`` is not between
    1 and the depth of that node, the node itself is returned.
    """
    path = _path_to(root, value)
    if path is None:
        return None
    if 1 <= k < len(path):
        return path[-1 - k]
    return path[-1]


def lowest_common_ancestor(
    root: Optional[Node], first: int, second: int
) -> Optional[Node]:
    """Return the deepest node having both values in its subtree.

    If only one value is present, the node holding it is returned; if
    neither is, None.
    """
    if root is None:
        return None
    if root.data in (first, second):
        return root
    left = lowest_common_ancestor(root.left, first, second)
    right = lowest_common_ancestor(root.right, first, second)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _with_and_without(root: Optional[Node]) -> tuple[int, int]:
    """Return (best sum taking root, best sum skipping root)."""
    if root is None:
        return 0, 0
    left_with, left_without = _with_and_without(root.left)
    right_with, right_without = _with_and_without(root.right)
    taking = root.data + left_without + right_without
    skipping = max(left_with, left_without) + max(right_with, right_without)
    return taking, skipping


def max_non_adjacent_sum(root: Optional[Node]) -> int:
    """Return the largest sum of nodes chosen so that no parent and child are both taken."""
    return max(_with_and_without(root))


def _longest(root: Optional[Node]) -> tuple[int, int]:
    """Return (length, sum) of the longest root-to-end path, larger sum on ties."""
    if root is None:
        return 0, 0
    length, total = max(_longest(root.left), _longest(root.right))
    return length + 1, total + root.data


def sum_of_longest_bloodline(root: Optional[Node]) -> int:
    """Return the sum along the longest root-to-leaf path, the largest such sum on ties."""
    return _longest(root)[1]