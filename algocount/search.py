"""Linear and binary search with a count of probes."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """Index of the key (None when absent) and the number of probes made."""

    index: int | None
    count: int

    @property
    def found(self) -> bool:
        return self.index is not None


def linear_search(items: Sequence[int], key: int) -> SearchResult:
    """Scan from the front; counts each element examined."""
    count = 0
    for position, value in enumerate(items):
        count += 1
        if value == key:
            return SearchResult(position, count)
    return SearchResult(None, count)


def binary_search(items: Sequence[int], key: int) -> SearchResult:
    """Search a sorted sequence; counts each step, including the one that finds the range empty."""
    low, high = 0, len(items) - 1
    count = 0
    while True:
        count += 1
        if low > high:
            return SearchResult(None, count)
        mid = (low + high) // 2
        if items[mid] == key:
            return SearchResult(mid, count)
        if items[mid] > key:
            high = mid - 1
        else:
            low = mid + 1


_SIZES = [2**power for power in range(1, 11)]


def linear_plot_data(rng: random.Random) -> dict[str, list[tuple[int, int]]]:
    """Best, average and worst probe counts for sizes 2, 4, ..., 1024."""
    best, avg, worst = [], [], []
    for n in _SIZES:
        best.append((n, linear_search([1] * n, 1).count))
        values = [rng.randrange(n) for _ in range(n)]
        key = rng.randrange(n)
        avg.append((n, linear_search(values, key).count))
        worst.append((n, linear_search([0] * n, 1).count))
    return {"linearbest.txt": best, "linearavg.txt": avg, "linearworst.txt": worst}


def binary_plot_data(rng: random.Random) -> dict[str, list[tuple[int, int]]]:
    """Best, average and worst step counts for sizes 2, 4, ..., 1024."""
    best, avg, worst = [], [], []
    for n in _SIZES:
        values = [1] * n
        values[(n - 1) // 2] = 0
        best.append((n, binary_search(values, 0).count))
        ascending = list(range(1, n + 1))
        key = rng.randrange(n) + 1
        avg.append((n, binary_search(ascending, key).count))
        worst.append((n, binary_search([0] * n, 1).count))
    return {"binarybest.txt": best, "binaryavg.txt": avg, "binaryworst.txt": worst}