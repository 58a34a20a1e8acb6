"""Fixed-size combination enumeration (Knuth, TAOCP 7.2.1.3, Algorithm L)."""

from __future__ import annotations

import math
from typing import Iterator, Tuple

Combination = Tuple[int, ...]


def _check_arguments(n: int, t: int) -> None:
    if n < 0:
        raise ValueError("n must be non-negative")
    if t < 0 or t > n:
        raise ValueError(f"t must lie in 0..{n}, got {t}")


def combinations(n: int, t: int) -> Iterator[Combination]:
    """Yield every ``t``-subset of ``range(n)`` once, as increasing tuples.

    Subsets come out in colexicographic order: ``(0, 1), (0, 2), (1, 2),
    (0, 3), ...``. The workspace ``c`` is 1-indexed with two sentinels,
    ``c[t + 1] = n`` and ``c[t + 2] = 0``, so the scan in step L3 always
    stops inside the array.
    """

    _check_arguments(n, t)

    # L1
    c = [0] * (t + 3)
    for j in range(1, t + 1):
        c[j] = j - 1
    c[t + 1] = n
    c[t + 2] = 0

    while True:
        # L2
        yield tuple(c[1 : t + 1])

        # L3
        j = 1
        while c[j] + 1 == c[j + 1]:
            c[j] = j - 1
            j += 1

        # L4
        if j > t:
            return

        # L5
        c[j] += 1


def combination_count(n: int, t: int) -> int:
    """Number of subsets :func:`combinations` yields for ``(n, t)``."""

    _check_arguments(n, t)
    return math.comb(n, t)


__all__ = ["Combination", "combinations", "combination_count"]
