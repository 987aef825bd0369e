"""Bubble, insertion and selection sort, each counting comparisons."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SortResult:
    """The sorted values and the number of comparisons made."""

    items: list[int]
    count: int


def bubble_sort(items: Iterable[int]) -> SortResult:
    """Bubble sort that stops after a pass with no swaps."""
    data = list(items)
    size = len(data)
    count = 0
    for done in range(size - 1):
        swapped = False
        for j in range(size - done - 1):
            count += 1
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
        if not swapped:
            break
    return SortResult(data, count)


def insertion_sort(items: Iterable[int]) -> SortResult:
    """Insertion sort; counts each comparison against the value being placed."""
    data = list(items)
    count = 0
    for i in range(1, len(data)):
        value = data[i]
        j = i - 1
        while True:
            count += 1
            if data[j] <= value:
                break
            data[j + 1] = data[j]
            j -= 1
            if j < 0:
                break
        data[j + 1] = value
    return SortResult(data, count)


def selection_sort(items: Iterable[int]) -> SortResult:
    """Selection sort; counts comparisons while looking for each minimum."""
    data = list(items)
    size = len(data)
    count = 0
    for i in range(size - 1):
        smallest = i
        for j in range(i + 1, size):
            count += 1
            if data[smallest] > data[j]:
                smallest = j
        if smallest != i:
            data[i], data[smallest] = data[smallest], data[i]
    return SortResult(data, count)


_SOURCE_SIZES = (10, 100, 1000, 10000, 20000, 30000)


def _three_case_data(
    sort: Callable[[Iterable[int]], SortResult],
    prefix: str,
    rng: random.Random,
    sizes: Sequence[int],
) -> dict[str, list[tuple[int, int]]]:
    best, worst, avg = [], [], []
    for n in sizes:
        worst.append((n, sort(range(n, 0, -1)).count))
        best.append((n, sort(range(1, n + 1)).count))
        avg.append((n, sort([rng.randrange(n) for _ in range(n)]).count))
    return {
        f"{prefix}best.txt": best,
        f"{prefix}worst.txt": worst,
        f"{prefix}avg.txt": avg,
    }


def bubble_plot_data(
    rng: random.Random, sizes: Sequence[int] = _SOURCE_SIZES
) -> dict[str, list[tuple[int, int]]]:
    """Best (ascending), worst (descending) and average (random) bubble sort counts."""
    return _three_case_data(bubble_sort, "Bubble", rng, sizes)


def insertion_plot_data(
    rng: random.Random, sizes: Sequence[int] = _SOURCE_SIZES
) -> dict[str, list[tuple[int, int]]]:
    """Best (ascending), worst (descending) and average (random) insertion sort counts."""
    return _three_case_data(insertion_sort, "Insertion", rng, sizes)


def selection_plot_data(
    sizes: Sequence[int] = _SOURCE_SIZES,
) -> dict[str, list[tuple[int, int]]]:
    """Selection sort counts; the count does not depend on the input order."""
    return {"selectionsort.txt": [(n, selection_sort(range(n)).count) for n in sizes]}