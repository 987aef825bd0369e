"""Brute-force string matching with a count of character comparisons."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """Whether the pattern occurs and how many character comparisons were made."""

    found: bool
    count: int


def brute_force_match(text: str, pattern: str) -> MatchResult:
    """Try every alignment from the left; stop at the first full match."""
    count = 0
    for start in range(len(text) - len(pattern) + 1):
        matched = 0
        for expected in pattern:
            count += 1
            if expected != text[start + matched]:
                break
            matched += 1
        if matched == len(pattern):
            return MatchResult(True, count)
    return MatchResult(False, count)


def _pattern_lengths() -> list[int]:
    return list(range(10, 100, 10)) + list(range(100, 1001, 100))


def plot_data(rng: random.Random) -> dict[str, list[tuple[int, int]]]:
    """Counts against a text of 1000 'a's for pattern lengths 10..100 then 200..1000."""
    text = "a" * 1000
    best, worst, avg = [], [], []
    for m in _pattern_lengths():
        best.append((m, brute_force_match(text, "a" * m).count))
        worst.append((m, brute_force_match(text, "a" * (m - 1) + "b").count))
        pattern = "".join(rng.choice("abc") for _ in range(m))
        avg.append((m, brute_force_match(text, pattern).count))
    return {"strbest.txt": best, "strworst.txt": worst, "stravg.txt": avg}