"""Adjacency-list graphs with breadth-first and depth-first traversals."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class Graph:
    """A graph stored as a mapping from each vertex to its neighbours."""

    adjacency: dict[int, list[int]] = field(default_factory=dict)

    def add_edge(self, u: int, v: int, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless ``directed``."""
        self.adjacency.setdefault(u, []).append(v)
        if not directed:
            self.adjacency.setdefault(v, []).append(u)

    def format_adjacency(self) -> str:
        """Render one line per vertex as ``u->a,b,``."""
        return "".join(
            f"{vertex}->" + "".join(f"{n}," for n in neighbours) + "\n"
            for vertex, neighbours in self.adjacency.items()
        )


def bfs_traversal(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices reachable from vertex 0 in breadth-first order."""
    if not adjacency:
        return []
    order: list[int] = []
    visited = {0}
    pending = deque([0])
    while pending:
        vertex = pending.popleft()
        order.append(vertex)
        for neighbour in adjacency[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)
    return order


def dfs_components(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Return the connected components of an undirected graph in depth-first order.

    Components are started from vertices 0, 1, ... in turn.
    """
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited: set[int] = set()
    components: list[list[int]] = []
    for start in range(vertex_count):
        if start in visited:
            continue
        component = [start]
        visited.add(start)
        stack = [iter(adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    component.append(neighbour)
                    stack.append(iter(adjacency[neighbour]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components