"""Command line: sort numbers with an elementary sort, or write its operation-count data."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from .elementary_sorts import (
    bubble_plot_data,
    bubble_sort,
    insertion_plot_data,
    insertion_sort,
    selection_plot_data,
    selection_sort,
)

_SORTS = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algocount",
        description="Sort numbers, or write best/worst/average comparison counts to files.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sort_cmd = commands.add_parser("sort", help="sort the given numbers")
    sort_cmd.add_argument("method", choices=sorted(_SORTS))
    sort_cmd.add_argument(
        "values", nargs="*", type=int, help="numbers to sort (read from stdin if absent)"
    )

    plot_cmd = commands.add_parser("plot", help="write comparison counts for a range of sizes")
    plot_cmd.add_argument("method", choices=sorted(_SORTS))
    plot_cmd.add_argument("--sizes", nargs="+", type=int, help="input sizes to measure")
    plot_cmd.add_argument("--seed", type=int, help="seed for the random inputs")
    plot_cmd.add_argument(
        "--directory", "-d", type=Path, default=Path("."), help="where to write the files"
    )
    return parser


def _plot_series(method: str, rng: random.Random, sizes: Sequence[int] | None):
    if method == "selection":
        return selection_plot_data() if sizes is None else selection_plot_data(sizes)
    plot = bubble_plot_data if method == "bubble" else insertion_plot_data
    return plot(rng) if sizes is None else plot(rng, sizes)


def _write_series(directory: Path, series: dict[str, list[tuple]]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name, rows in series.items():
        with open(directory / name, "w", encoding="utf-8") as handle:
            for row in rows:
                handle.write("\t".join(map(str, row)) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "sort":
        values = args.values
        if not values:
            try:
                values = [int(token) for token in sys.stdin.read().split()]
            except ValueError:
                parser.error("input must be whole numbers")
        result = _SORTS[args.method](values)
        print(f"Array after {args.method} sort:")
        print(" ".join(map(str, result.items)))
        return 0

    if args.sizes is not None and any(size < 1 for size in args.sizes):
        parser.error("sizes must be positive")
    rng = random.Random(args.seed)
    _write_series(args.directory, _plot_series(args.method, rng, args.sizes))
    return 0


if __name__ == "__main__":
    sys.exit(main())