"""Merge sort and quick sort with comparison counts."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .elementary_sorts import SortResult


def _merge_sorted(data: list[int]) -> tuple[list[int], int]:
    if len(data) < 2:
        return list(data), 0
    split = (len(data) - 1) // 2 + 1
    left, left_count = _merge_sorted(data[:split])
    right, right_count = _merge_sorted(data[split:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        count += 1
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def merge_sort(items: Iterable[int]) -> SortResult:
    """Top-down merge sort; counts comparisons made while merging."""
    data, count = _merge_sorted(list(items))
    return SortResult(data, count)


def merge_worst_order(items: Iterable[int]) -> list[int]:
    """Rearrange sorted values so that every merge interleaves fully."""
    data = list(items)
    if len(data) < 2:
        return data
    return merge_worst_order(data[::2]) + merge_worst_order(data[1::2])


def _partition(data: list[int], beg: int, end: int) -> tuple[int, int]:
    pivot = data[beg]
    i, j = beg, end + 1
    steps = 0
    while True:
        while True:
            steps += 1
            i += 1
            if i > end or data[i] >= pivot:
                break
        while True:
            steps += 1
            j -= 1
            if data[j] <= pivot:
                break
        if i >= j:
            break
        data[i], data[j] = data[j], data[i]
    data[beg], data[j] = data[j], data[beg]
    return j, steps


def quick_sort(items: Iterable[int]) -> SortResult:
    """Quick sort with first-element pivot; counts index moves during partitioning."""
    data = list(items)
    count = 0
    pending = [(0, len(data) - 1)]
    while pending:
        beg, end = pending.pop()
        if beg >= end:
            continue
        split, steps = _partition(data, beg, end)
        count += steps
        pending.append((split + 1, end))
        pending.append((beg, split - 1))
    return SortResult(data, count)


_SIZES = [2**power for power in range(1, 11)]


def merge_plot_data(rng: random.Random) -> dict[str, list[tuple]]:
    """Best, worst and average merge sort counts, plus the worst-case arrangements."""
    best, worst, avg, arrangements = [], [], [], []
    for n in _SIZES:
        ascending = list(range(1, n + 1))
        best.append((n, merge_sort(ascending).count))
        order = merge_worst_order(ascending)
        arrangements.append(("".join(map(str, order)),))
        worst.append((n, merge_sort(order).count))
        values = [rng.randrange(n) for _ in range(n)]
        avg.append((n, merge_sort(values).count))
    return {
        "Mergebest.txt": best,
        "Mergeworst.txt": worst,
        "Mergeavg.txt": avg,
        "Worstdata.txt": arrangements,
    }


def quick_plot_data(rng: random.Random) -> dict[str, list[tuple[int, int]]]:
    """Best (all equal), worst (ascending) and average (random) quick sort counts."""
    best, worst, avg = [], [], []
    for n in _SIZES[1:]:
        best.append((n, quick_sort([5] * n).count))
        worst.append((n, quick_sort(range(1, n + 1)).count))
        values = [rng.randrange(n) for _ in range(n)]
        avg.append((n, quick_sort(values).count))
    return {"Quickbest.txt": best, "Quickworst.txt": worst, "Quickavg.txt": avg}