import itertools
import random

import pytest

from algocount.knapsack import (
    Item,
    KnapsackResult,
    bottom_up_plot_data,
    knapsack_bottom_up,
    knapsack_memo,
    memo_plot_data,
)

TEXTBOOK = [Item(2, 12), Item(1, 10), Item(3, 20), Item(2, 15)]

CASES = [
    (TEXTBOOK, 5),
    ([Item(5, 10), Item(4, 40), Item(6, 30), Item(3, 50)], 10),
    ([Item(1, 1), Item(3, 4), Item(4, 5), Item(5, 7)], 7),
    ([Item(7, 3), Item(8, 9)], 6),
    ([Item(2, 3), Item(2, 3), Item(2, 3)], 4),
]


def _best_by_subsets(items, capacity):
    best = 0
    for r in range(len(items) + 1):
        for combo in itertools.combinations(items, r):
            if sum(item.weight for item in combo) <= capacity:
                best = max(best, sum(item.value for item in combo))
    return best


@pytest.mark.parametrize("solver", [knapsack_bottom_up, knapsack_memo])
def test_textbook_example(solver):
    result = solver(TEXTBOOK, 5)
    assert result.value == 37
    assert result.chosen == [4, 2, 1]


@pytest.mark.parametrize("solver", [knapsack_bottom_up, knapsack_memo])
@pytest.mark.parametrize("items,capacity", CASES)
def test_value_matches_exhaustive_search(solver, items, capacity):
    assert solver(items, capacity).value == _best_by_subsets(items, capacity)


@pytest.mark.parametrize("solver", [knapsack_bottom_up, knapsack_memo])
@pytest.mark.parametrize("items,capacity", CASES)
def test_chosen_items_fit_and_add_up(solver, items, capacity):
    result = solver(items, capacity)
    picked = [items[number - 1] for number in result.chosen]
    assert sum(item.weight for item in picked) <= capacity
    assert sum(item.value for item in picked) == result.value
    assert result.chosen == sorted(set(result.chosen), reverse=True)


@pytest.mark.parametrize("items,capacity", CASES)
def test_bottom_up_counts_every_inner_cell(items, capacity):
    result = knapsack_bottom_up(items, capacity)
    assert result.count == len(items) * capacity
    assert len(result.table) == len(items) + 1
    assert all(len(row) == capacity + 1 for row in result.table)


@pytest.mark.parametrize("items,capacity", CASES)
def test_memo_computes_no_more_than_bottom_up(items, capacity):
    memo = knapsack_memo(items, capacity)
    full = knapsack_bottom_up(items, capacity)
    assert memo.count <= full.count
    assert memo.value == full.value


def test_memo_table_agrees_with_full_table_where_computed():
    items, capacity = CASES[1]
    memo = knapsack_memo(items, capacity).table
    full = knapsack_bottom_up(items, capacity).table
    computed = [
        (i, j) for i, row in enumerate(memo) for j, cell in enumerate(row) if cell is not None
    ]
    assert all(memo[i][j] == full[i][j] for i, j in computed)
    assert any(cell is None for row in memo for cell in row)
    assert memo[0] == [0] * (capacity + 1)


def test_tuples_are_accepted_as_items():
    as_tuples = [(item.weight, item.value) for item in TEXTBOOK]
    assert knapsack_bottom_up(as_tuples, 5) == knapsack_bottom_up(TEXTBOOK, 5)


@pytest.mark.parametrize("solver", [knapsack_bottom_up, knapsack_memo])
def test_no_items_gives_nothing(solver):
    result = solver([], 4)
    assert isinstance(result, KnapsackResult)
    assert result.value == 0
    assert result.chosen == []
    assert result.count == 0


@pytest.mark.parametrize("solver", [knapsack_bottom_up, knapsack_memo])
def test_negative_capacity_is_rejected(solver):
    with pytest.raises(ValueError):
        solver(TEXTBOOK, -1)


@pytest.mark.parametrize("solver", [knapsack_bottom_up, knapsack_memo])
def test_negative_weight_is_rejected(solver):
    with pytest.raises(ValueError):
        solver([Item(-1, 5)], 3)


def test_bottom_up_plot_data_series():
    data = bottom_up_plot_data(random.Random(3))
    assert list(data) == ["Knap.txt"]
    sizes = [size for size, _ in data["Knap.txt"]]
    assert sizes == [step * 2 for step in range(1, 11)]
    for size, count in data["Knap.txt"]:
        assert count == size * (size // 2 * 5)


def test_memo_plot_data_series():
    data = memo_plot_data(random.Random(3))
    assert list(data) == ["knapsackMemo.txt"]
    series = data["knapsackMemo.txt"]
    assert [size for size, _ in series] == list(range(5, 11))
    assert all(0 < count <= size * size * 2 for size, count in series)