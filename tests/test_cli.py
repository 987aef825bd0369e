import io
import random

import pytest

from algocount.cli import main
from algocount.elementary_sorts import (
    bubble_plot_data,
    insertion_plot_data,
    selection_plot_data,
)


def _read_rows(path):
    return [tuple(int(part) for part in line.split("\t")) for line in path.read_text().splitlines()]


@pytest.mark.parametrize("method", ["bubble", "insertion", "selection"])
def test_sort_prints_sorted_values(method, capsys):
    assert main(["sort", method, "5", "-3", "9", "0", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"Array after {method} sort:"
    assert [int(v) for v in lines[1].split()] == sorted([5, -3, 9, 0, 5])


def test_sort_reads_values_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 1\n3 2\n"))
    assert main(["sort", "insertion"]) == 0
    assert capsys.readouterr().out.splitlines()[1] == "1 2 3 4"


def test_sort_rejects_non_numbers_on_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 x"))
    with pytest.raises(SystemExit):
        main(["sort", "bubble"])


def test_unknown_method_is_rejected():
    with pytest.raises(SystemExit):
        main(["sort", "shell", "1", "2"])


@pytest.mark.parametrize(
    "method,plot",
    [("bubble", bubble_plot_data), ("insertion", insertion_plot_data)],
)
def test_plot_writes_three_case_files(method, plot, tmp_path):
    argv = ["plot", method, "--sizes", "5", "12", "--seed", "7", "-d", str(tmp_path)]
    assert main(argv) == 0
    expected = plot(random.Random(7), [5, 12])
    assert sorted(p.name for p in tmp_path.iterdir()) == sorted(expected)
    for name, rows in expected.items():
        assert _read_rows(tmp_path / name) == rows


def test_plot_selection_writes_single_file(tmp_path):
    assert main(["plot", "selection", "--sizes", "4", "10", "-d", str(tmp_path)]) == 0
    expected = selection_plot_data([4, 10])
    assert [p.name for p in tmp_path.iterdir()] == ["selectionsort.txt"]
    assert _read_rows(tmp_path / "selectionsort.txt") == expected["selectionsort.txt"]


def test_plot_rejects_non_positive_sizes(tmp_path):
    with pytest.raises(SystemExit):
        main(["plot", "bubble", "--sizes", "0", "-d", str(tmp_path)])


def test_missing_command_is_rejected():
    with pytest.raises(SystemExit):
        main([])