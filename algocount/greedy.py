"""Prim's minimum spanning tree and Dijkstra's shortest paths over an array-backed min-heap.

A matrix entry of None, -1 or infinity means there is no edge.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


class CountingHeap:
    """A binary min-heap of tuples ordered by their first element.

    ``count`` grows by one on every sift-down step of a pop; with
    ``count_sift_up`` it also grows on every swap made by a push.
    """

    def __init__(self, *, count_sift_up: bool = False) -> None:
        self._entries: list[tuple[Any, ...]] = []
        self._count_sift_up = count_sift_up
        self.count = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, entry: tuple[Any, ...]) -> None:
        """Add an entry, moving it up while it is smaller than its parent."""
        entries = self._entries
        entries.append(entry)
        position = len(entries) - 1
        while position > 0:
            parent = (position - 1) // 2
            if not entries[position][0] < entries[parent][0]:
                break
            if self._count_sift_up:
                self.count += 1
            entries[position], entries[parent] = entries[parent], entries[position]
            position = parent

    def pop(self) -> tuple[Any, ...]:
        """Remove and return the entry with the smallest key."""
        entries = self._entries
        if not entries:
            raise IndexError("pop from an empty heap")
        entries[0], entries[-1] = entries[-1], entries[0]
        top = entries.pop()
        self._sift_down(0)
        return top

    def _sift_down(self, position: int) -> None:
        entries = self._entries
        size = len(entries)
        while True:
            self.count += 1
            left = 2 * position + 1
            right = left + 1
            smallest = position
            if left < size and entries[smallest][0] > entries[left][0]:
                smallest = left
            if right < size and entries[smallest][0] > entries[right][0]:
                smallest = right
            if smallest == position:
                return
            entries[position], entries[smallest] = entries[smallest], entries[position]
            position = smallest


@dataclass(frozen=True)
class SpanningTree:
    """Tree edges as (parent, child) in the order added, total cost and operation counts."""

    edges: list[tuple[int, int]]
    cost: float
    heap_count: int
    graph_count: int

    @property
    def count(self) -> int:
        return max(self.heap_count, self.graph_count)


@dataclass(frozen=True)
class ShortestPaths:
    """Distance from the source to each vertex (infinity if unreachable) and counts."""

    source: int
    distances: list[float]
    heap_count: int
    graph_count: int

    @property
    def count(self) -> int:
        return max(self.heap_count, self.graph_count)


def _is_edge(weight: Any) -> bool:
    return weight is not None and weight != -1 and weight != math.inf


def _square(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def prim(matrix: Sequence[Sequence[Any]]) -> SpanningTree:
    """Grow a minimum spanning tree from vertex 0."""
    adj = _square(matrix)
    size = len(adj)
    if size == 0:
        raise ValueError("graph has no vertices")
    visited = [False] * size
    heap = CountingHeap()
    heap.push((0, 0, -1))
    edges: list[tuple[int, int]] = []
    cost: float = 0
    graph_count = 0
    while heap:
        weight, vertex, parent = heap.pop()
        if visited[vertex]:
            continue
        visited[vertex] = True
        if parent >= 0:
            edges.append((parent, vertex))
        cost += weight
        graph_count += 1
        for neighbour, edge in enumerate(adj[vertex]):
            if neighbour != vertex and _is_edge(edge):
                graph_count += 1
                heap.push((edge, neighbour, vertex))
    return SpanningTree(edges, cost, heap.count, graph_count)


def dijkstra(matrix: Sequence[Sequence[Any]], source: int) -> ShortestPaths:
    """Shortest distances from ``source`` over non-negative edge weights."""
    adj = _square(matrix)
    size = len(adj)
    if not 0 <= source < size:
        raise IndexError(f"source vertex {source} is not in the graph")
    distances: list[float] = [math.inf] * size
    distances[source] = 0
    visited = [False] * size
    heap = CountingHeap(count_sift_up=True)
    heap.push((0, source))
    graph_count = 0
    while heap:
        _, vertex = heap.pop()
        if visited[vertex]:
            continue
        visited[vertex] = True
        graph_count += 1
        for neighbour, edge in enumerate(adj[vertex]):
            if neighbour == vertex or not _is_edge(edge):
                continue
            graph_count += 1
            candidate = distances[vertex] + edge
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                heap.push((candidate, neighbour))
    return ShortestPaths(source, distances, heap.count, graph_count)