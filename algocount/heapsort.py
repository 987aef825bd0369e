"""Heap sort counting comparisons in the heap-building and sorting phases."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .elementary_sorts import SortResult


def _sift_down(data: list[int], root: int, size: int) -> int:
    count = 0
    while True:
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left < size:
            count += 1
            if data[left] > data[largest]:
                largest = left
        if right < size:
            count += 1
            if data[right] > data[largest]:
                largest = right
        if largest == root:
            return count
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(items: Iterable[int]) -> SortResult:
    """Sort ascending with a max heap.

    The count is the larger of the comparisons made while building the heap
    and those made while extracting from it.
    """
    data = list(items)
    size = len(data)
    build_count = sum(_sift_down(data, root, size) for root in range(size // 2 - 1, -1, -1))
    sort_count = 0
    for end in range(size - 1, -1, -1):
        data[0], data[end] = data[end], data[0]
        sort_count += _sift_down(data, 0, end)
    return SortResult(data, max(build_count, sort_count))


def plot_data(rng: random.Random) -> dict[str, list[tuple[int, int]]]:
    """Counts for descending (best), ascending (worst) and random input, sizes 100..1000."""
    best, worst, avg = [], [], []
    for n in range(100, 1001, 100):
        best.append((n, heap_sort(n - i + 1 for i in range(n)).count))
        worst.append((n, heap_sort(range(1, n + 1)).count))
        avg.append((n, heap_sort(rng.randrange(n) for _ in range(n)).count))
    return {"heapBest.txt": best, "heapWorst.txt": worst, "heapAvg.txt": avg}