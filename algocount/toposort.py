"""Topological sorting of a directed graph by depth-first search and by source removal."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class CycleError(ValueError):
    """The graph has a cycle, so it has no topological order."""

    def __init__(self, count: int) -> None:
        super().__init__("cycle exists: cannot perform topological sorting")
        self.count = count


@dataclass(frozen=True)
class TopoResult:
    """A topological order and the number of adjacency-matrix entries examined."""

    order: list[int]
    count: int


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def dfs_topological_sort(matrix: Sequence[Sequence[int]]) -> TopoResult:
    """Order vertices by reverse finishing time; raises CycleError on a back edge."""
    adj = _square(matrix)
    size = len(adj)
    visited = [False] * size
    on_path = [False] * size
    finished: list[int] = []
    count = 0

    for root in range(size):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [[root, 0]]
        while stack:
            frame = stack[-1]
            vertex, neighbour = frame
            if neighbour == size:
                finished.append(vertex)
                on_path[vertex] = False
                stack.pop()
                continue
            frame[1] = neighbour + 1
            count += 1
            if not adj[vertex][neighbour]:
                continue
            if on_path[neighbour]:
                raise CycleError(count)
            if not visited[neighbour]:
                visited[neighbour] = on_path[neighbour] = True
                stack.append([neighbour, 0])

    return TopoResult(finished[::-1], count)


def source_removal_sort(matrix: Sequence[Sequence[int]]) -> TopoResult:
    """Repeatedly remove vertices of in-degree zero; raises CycleError if any remain."""
    adj = _square(matrix)
    size = len(adj)
    indegree = [sum(1 for row in adj if row[column]) for column in range(size)]
    order = [vertex for vertex in range(size) if indegree[vertex] == 0]
    count = 0
    position = 0
    while position < len(order):
        vertex = order[position]
        position += 1
        for neighbour, edge in enumerate(adj[vertex]):
            count += 1
            if edge:
                indegree[neighbour] -= 1
                if indegree[neighbour] == 0:
                    order.append(neighbour)
    if len(order) < size:
        raise CycleError(count)
    return TopoResult(order, count)


def _linear_dag(size: int) -> list[list[int]]:
    return [[1 if j == i + 1 else 0 for j in range(size)] for i in range(size)]


def _complete_dag(size: int) -> list[list[int]]:
    return [[1 if i < j else 0 for j in range(size)] for i in range(size)]


def _plot(sort, prefix: str) -> dict[str, list[tuple[int, int]]]:
    best, worst = [], []
    for size in range(1, 11):
        best.append((size, sort(_linear_dag(size)).count))
        worst.append((size, sort(_complete_dag(size)).count))
    return {f"{prefix}Best.txt": best, f"{prefix}Worst.txt": worst}


def dfs_plot_data() -> dict[str, list[tuple[int, int]]]:
    """Counts for a linear DAG (best) and a complete DAG (worst) of 1..10 vertices."""
    return _plot(dfs_topological_sort, "dfsMatTopSort")


def source_removal_plot_data() -> dict[str, list[tuple[int, int]]]:
    """Counts for a linear DAG (best) and a complete DAG (worst) of 1..10 vertices."""
    return _plot(source_removal_sort, "srcrmMatTopSort")