"""0/1 knapsack by bottom-up dynamic programming and by memoised recursion."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item that may be packed: its weight and its value."""

    weight: int
    value: int


@dataclass(frozen=True)
class KnapsackResult:
    """Best total value, the items chosen, the table built and the cells computed.

    ``chosen`` holds 1-based item numbers from the last item to the first.
    Cells of a memoised table that were never needed hold None.
    """

    value: int
    chosen: list[int]
    table: list[list[int | None]]
    count: int


def _prepare(items: Iterable[Item | tuple[int, int]], capacity: int) -> list[Item]:
    prepared = [item if isinstance(item, Item) else Item(*item) for item in items]
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(item.weight < 0 for item in prepared):
        raise ValueError("item weights must not be negative")
    return prepared


def _trace(table: list[list[int | None]], items: list[Item], capacity: int) -> list[int]:
    chosen: list[int] = []
    remaining = capacity
    for number in range(len(items), 0, -1):
        if table[number][remaining] != table[number - 1][remaining]:
            chosen.append(number)
            remaining -= items[number - 1].weight
    return chosen


def knapsack_bottom_up(
    items: Iterable[Item | tuple[int, int]], capacity: int
) -> KnapsackResult:
    """Fill the whole table row by row; counts every non-border cell."""
    goods = _prepare(items, capacity)
    table: list[list[int | None]] = [[0] * (capacity + 1)]
    count = 0
    for item in goods:
        above = table[-1]
        row: list[int | None] = [0]
        for limit in range(1, capacity + 1):
            count += 1
            if limit < item.weight:
                row.append(above[limit])
            else:
                row.append(max(above[limit], item.value + above[limit - item.weight]))
        table.append(row)
    best = table[len(goods)][capacity]
    return KnapsackResult(best, _trace(table, goods, capacity), table, count)


def knapsack_memo(items: Iterable[Item | tuple[int, int]], capacity: int) -> KnapsackResult:
    """Compute only the cells the answer needs; counts each cell computed."""
    goods = _prepare(items, capacity)
    table: list[list[int | None]] = [[0] * (capacity + 1)]
    table.extend([0] + [None] * capacity for _ in goods)
    count = 0

    def solve(number: int, limit: int) -> int:
        nonlocal count
        cached = table[number][limit]
        if cached is not None:
            return cached
        count += 1
        item = goods[number - 1]
        if item.weight <= limit:
            result = max(
                solve(number - 1, limit),
                item.value + solve(number - 1, limit - item.weight),
            )
        else:
            result = solve(number - 1, limit)
        table[number][limit] = result
        return result

    best = solve(len(goods), capacity)
    return KnapsackResult(best, _trace(table, goods, capacity), table, count)


def bottom_up_plot_data(rng: random.Random) -> dict[str, list[tuple[int, int]]]:
    """Counts for 2, 4, ..., 20 random items with capacity 5, 10, ..., 50."""
    series = []
    for step in range(1, 11):
        size = step * 2
        capacity = step * 5
        goods = [
            Item(rng.randrange(capacity) + 1, rng.randrange(50) + 1) for _ in range(size)
        ]
        series.append((size, knapsack_bottom_up(goods, capacity).count))
    return {"Knap.txt": series}


def memo_plot_data(rng: random.Random) -> dict[str, list[tuple[int, int]]]:
    """Counts for 5..10 random items with capacity twice the item count."""
    series = []
    for size in range(5, 11):
        capacity = size * 2
        goods = [Item(rng.randrange(10) + 1, rng.randrange(50) + 1) for _ in range(size)]
        series.append((size, knapsack_memo(goods, capacity).count))
    return {"knapsackMemo.txt": series}