"""Greatest common divisor by three methods, each counting its basic operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GcdResult:
    """The divisor found and the number of basic operations it took."""

    value: int
    count: int


def _reject_both_negative(m: int, n: int) -> None:
    if m < 0 and n < 0:
        raise ValueError("cannot find gcd: both numbers are negative")


def _truncated_rem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    rem = abs(a) % abs(b)
    return -rem if a < 0 else rem


def gcd_euclid(m: int, n: int) -> GcdResult:
    """Euclid's algorithm; counts the remainder steps."""
    _reject_both_negative(m, n)
    count = 0
    while n != 0:
        m, n = n, _truncated_rem(m, n)
        count += 1
    return GcdResult(m, count)


def gcd_consecutive(m: int, n: int) -> GcdResult:
    """Consecutive integer checking downward from min(m, n); counts divisibility tests."""
    _reject_both_negative(m, n)
    count = 0
    for candidate in range(min(m, n), 0, -1):
        count += 1
        if _truncated_rem(m, candidate) == 0:
            count += 1
            if _truncated_rem(n, candidate) == 0:
                return GcdResult(candidate, count)
    return GcdResult(max(m, n), count)


def gcd_subtraction(m: int, n: int) -> GcdResult:
    """Repeated subtraction; counts loop tests, including the final one."""
    _reject_both_negative(m, n)
    if m == 0 or n == 0:
        return GcdResult(max(m, n), 0)
    if m < 0 or n < 0:
        raise ValueError("repeated subtraction needs non-negative numbers")
    count = 0
    while True:
        count += 1
        if m == n:
            break
        if m > n:
            m -= n
        else:
            n -= m
    return GcdResult(n, count)


_PLOT_METHODS = (
    ("euclid", gcd_euclid),
    ("consec", gcd_consecutive),
    ("modified", gcd_subtraction),
)


def plot_data() -> dict[str, list[tuple[int, int]]]:
    """Best and worst operation counts over all pairs in 2..size, size = 10, 20, ..., 100."""
    series: dict[str, list[tuple[int, int]]] = {}
    for name, method in _PLOT_METHODS:
        best: list[tuple[int, int]] = []
        worst: list[tuple[int, int]] = []
        for size in range(10, 101, 10):
            span = range(2, size + 1)
            counts = [method(j, k).count for j in span for k in span]
            best.append((size, min(counts)))
            worst.append((size, max(counts)))
        series[f"{name}Best.txt"] = best
        series[f"{name}Worst.txt"] = worst
    return series