"""Binary tree nodes, builders and traversals."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

EMPTY = -1


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _next_value(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("ran out of values while building the tree") from None


def build_tree(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from a preorder listing where -1 marks a missing child."""
    stream = iter(values)

    def build() -> Optional[Node]:
        data = _next_value(stream)
        if data == EMPTY:
            return None
        node = Node(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_from_level_order(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from a level-order listing where -1 marks a missing node.

    Each dequeued node reads its left child, then its right child.
    """
    stream = iter(values)
    data = _next_value(stream)
    if data == EMPTY:
        return None
    root = Node(data)
    pending: deque[Node] = deque([root])
    while pending:
        current = pending.popleft()
        left = _next_value(stream)
        if left != EMPTY:
            current.left = Node(left)
            pending.append(current.left)
        right = _next_value(stream)
        if right != EMPTY:
            current.right = Node(right)
            pending.append(current.right)
    return root


def inorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, root, right order."""
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def preorder(root: Optional[Node]) -> list[int]:
    """Return the values in root, left, right order."""
    if root is None:
        return []
    return [root.data] + preorder(root.left) + preorder(root.right)


def postorder(root: Optional[Node]) -> list[int]:
    """Return the values in root, right subtree, left subtree order."""
    if root is None:
        return []
    return [root.data] + postorder(root.right) + postorder(root.left)


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Return the values level by level, each level left to right."""
    if root is None:
        return []
    levels: list[list[int]] = []
    current = [root]
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _predecessor(current: Node) -> Node:
    pred = current.left
    assert pred is not None
    while pred.right is not None and pred.right is not current:
        pred = pred.right
    return pred


def morris_inorder(root: Optional[Node]) -> list[int]:
    """Inorder traversal by temporary threading; the tree is restored afterwards."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.data)
            current = current.right
            continue
        pred = _predecessor(current)
        if pred.right is None:
            pred.right = current
            current = current.left
        else:
            pred.right = None
            result.append(current.data)
            current = current.right
    return result


def _horizontal_walk(root: Optional[Node]) -> Iterator[tuple[Node, int, int]]:
    """Yield (node, horizontal distance, depth) in breadth-first order."""
    if root is None:
        return
    pending: deque[tuple[Node, int, int]] = deque([(root, 0, 0)])
    while pending:
        node, distance, depth = pending.popleft()
        yield node, distance, depth
        if node.left is not None:
            pending.append((node.left, distance - 1, depth + 1))
        if node.right is not None:
            pending.append((node.right, distance + 1, depth + 1))


def top_view(root: Optional[Node]) -> list[int]:
    """Return the first node met at each horizontal distance, left to right."""
    seen: dict[int, int] = {}
    for node, distance, _ in _horizontal_walk(root):
        seen.setdefault(distance, node.data)
    return [seen[distance] for distance in sorted(seen)]


def bottom_view(root: Optional[Node]) -> list[int]:
    """Return the last node met at each horizontal distance, left to right."""
    seen: dict[int, int] = {}
    for node, distance, _ in _horizontal_walk(root):
        seen[distance] = node.data
    return [seen[distance] for distance in sorted(seen)]


def _side_view(root: Optional[Node], from_right: bool) -> list[int]:
    result: list[int] = []

    def visit(node: Optional[Node], level: int) -> None:
        if node is None:
            return
        if level == len(result):
            result.append(node.data)
        first, second = (node.right, node.left) if from_right else (node.left, node.right)
        visit(first, level + 1)
        visit(second, level + 1)

    visit(root, 0)
    return result


def left_view(root: Optional[Node]) -> list[int]:
    """Return the leftmost value of each level, top to bottom."""
    return _side_view(root, from_right=False)


def right_view(root: Optional[Node]) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return _side_view(root, from_right=True)


def _is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None


def boundary_traversal(root: Optional[Node]) -> list[int]:
    """Return the root, the left edge, the leaves, then the right side bottom up.

    The left edge follows left children, falling back to right ones. The right
    part lists every non-leaf node below the root's right child, visiting the
    right subtree before the left and each node after its children.
    """
    if root is None:
        return []
    result = [root.data]

    def left_edge(node: Optional[Node]) -> None:
        while node is not None and not _is_leaf(node):
            result.append(node.data)
            node = node.left if node.left is not None else node.right

    def leaves(node: Optional[Node]) -> None:
        if node is None:
            return
        if _is_leaf(node):
            result.append(node.data)
        leaves(node.left)
        leaves(node.right)

    def right_side(node: Optional[Node]) -> None:
        if node is None or _is_leaf(node):
            return
        right_side(node.right)
        right_side(node.left)
        result.append(node.data)

    left_edge(root.left)
    leaves(root.left)
    leaves(root.right)
    right_side(root.right)
    return result


def vertical_order(root: Optional[Node]) -> list[int]:
    """Return values column by column, left to right, each column top to bottom."""
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    for node, distance, depth in _horizontal_walk(root):
        columns[distance][depth].append(node.data)
    return [
        value
        for distance in sorted(columns)
        for depth in sorted(columns[distance])
        for value in columns[distance][depth]
    ]


def zigzag_traversal(root: Optional[Node]) -> list[int]:
    """Return level order values, alternating left-to-right and right-to-left."""
    result: list[int] = []
    for index, level in enumerate(level_order(root)):
        result.extend(reversed(level) if index % 2 else level)
    return result