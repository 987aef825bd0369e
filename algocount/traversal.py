"""Depth-first and breadth-first traversal of an undirected graph given as an adjacency matrix.

Both traversals report the connected components in visit order, whether a cycle
exists, and how many adjacency-matrix entries were examined.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TraversalResult:
    """Components in visit order, whether a cycle was seen, and the entries examined."""

    components: list[list[int]]
    has_cycle: bool
    count: int

    @property
    def component_count(self) -> int:
        return len(self.components)

    @property
    def order(self) -> list[int]:
        """All vertices in the order they were visited."""
        return [vertex for component in self.components for vertex in component]


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def dfs_connectivity(matrix: Sequence[Sequence[int]]) -> TraversalResult:
    """Depth-first search from each unvisited vertex in index order."""
    adj = _square(matrix)
    size = len(adj)
    visited = [False] * size
    components: list[list[int]] = []
    has_cycle = False
    count = 0

    for root in range(size):
        if visited[root]:
            continue
        visited[root] = True
        component = [root]
        # Each frame: vertex, its parent, next neighbour index to examine.
        stack = [[root, -1, 0]]
        while stack:
            frame = stack[-1]
            vertex, parent, neighbour = frame
            if neighbour == size:
                stack.pop()
                continue
            frame[2] = neighbour + 1
            count += 1
            if not adj[vertex][neighbour]:
                continue
            if visited[neighbour]:
                if neighbour != parent:
                    has_cycle = True
            else:
                visited[neighbour] = True
                component.append(neighbour)
                stack.append([neighbour, vertex, 0])
        components.append(component)

    return TraversalResult(components, has_cycle, count)


def bfs_connectivity(matrix: Sequence[Sequence[int]]) -> TraversalResult:
    """Breadth-first search from each unvisited vertex in index order."""
    adj = _square(matrix)
    size = len(adj)
    visited = [False] * size
    components: list[list[int]] = []
    has_cycle = False
    count = 0

    for root in range(size):
        if visited[root]:
            continue
        visited[root] = True
        component: list[int] = []
        queue = deque([(root, -1)])
        while queue:
            vertex, parent = queue.popleft()
            component.append(vertex)
            for neighbour, edge in enumerate(adj[vertex]):
                count += 1
                if not edge:
                    continue
                if visited[neighbour]:
                    if neighbour != parent:
                        has_cycle = True
                else:
                    visited[neighbour] = True
                    queue.append((neighbour, vertex))
        components.append(component)

    return TraversalResult(components, has_cycle, count)


def _path_graph(size: int) -> list[list[int]]:
    return [[1 if abs(i - j) == 1 else 0 for j in range(size)] for i in range(size)]


def _complete_graph(size: int) -> list[list[int]]:
    return [[1 if i != j else 0 for j in range(size)] for i in range(size)]


def _plot(traverse, prefix: str) -> dict[str, list[tuple[int, int]]]:
    best, worst = [], []
    for size in range(1, 11):
        best.append((size, traverse(_path_graph(size)).count))
        worst.append((size, traverse(_complete_graph(size)).count))
    return {f"{prefix}Best.txt": best, f"{prefix}Worst.txt": worst}


def dfs_plot_data() -> dict[str, list[tuple[int, int]]]:
    """Counts for path graphs (best) and complete graphs (worst) of 1..10 vertices."""
    return _plot(dfs_connectivity, "dfsadjMat")


def bfs_plot_data() -> dict[str, list[tuple[int, int]]]:
    """Counts for path graphs (best) and complete graphs (worst) of 1..10 vertices."""
    return _plot(bfs_connectivity, "bfsadjMat")