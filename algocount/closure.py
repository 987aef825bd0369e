"""Warshall's transitive closure and Floyd's all-pairs shortest paths with operation counts."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

INF = math.inf
"""Weight that marks the absence of an edge in Floyd's cost matrix."""


@dataclass(frozen=True)
class ClosureResult:
    """The resulting matrix and the number of inner-loop steps performed."""

    matrix: list[list]
    count: int


def _square(matrix: Sequence[Sequence]) -> list[list]:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("matrix must be square")
    return rows


def warshall(matrix: Sequence[Sequence[int]]) -> ClosureResult:
    """Transitive closure of an adjacency matrix; entries reachable become 1."""
    reach = _square(matrix)
    size = len(reach)
    count = 0
    for k in range(size):
        row_k = reach[k]
        for row in reach:
            for j in range(size):
                count += 1
                if row[k] and row_k[j]:
                    row[j] = 1
    return ClosureResult(reach, count)


def floyd(matrix: Sequence[Sequence[float]]) -> ClosureResult:
    """Shortest path lengths between all pairs; INF marks no path."""
    dist = _square(matrix)
    size = len(dist)
    count = 0
    for k in range(size):
        row_k = dist[k]
        for row in dist:
            for j in range(size):
                count += 1
                through = row[k]
                onward = row_k[j]
                if through != INF and onward != INF and through + onward < row[j]:
                    row[j] = through + onward
    return ClosureResult(dist, count)


def warshall_plot_data() -> dict[str, list[tuple[int, int]]]:
    """Counts for directed cycles of 1..10 vertices."""
    series = []
    for size in range(1, 11):
        graph = [
            [
                0 if i == j else 1 if j == i + 1 or (i == size - 1 and j == 0) else 0
                for j in range(size)
            ]
            for i in range(size)
        ]
        series.append((size, warshall(graph).count))
    return {"Warshall.txt": series}


def floyd_plot_data() -> dict[str, list[tuple[int, int]]]:
    """Counts for unit-weight chains of 2..10 vertices."""
    series = []
    for size in range(2, 11):
        graph = [
            [0 if i == j else 1 if j == i + 1 else INF for j in range(size)]
            for i in range(size)
        ]
        series.append((size, floyd(graph).count))
    return {"Floyd.txt": series}