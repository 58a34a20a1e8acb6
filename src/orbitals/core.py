from __future__ import annotations

import logging
import math
from typing import Callable, Iterable, Iterator, Optional

import numpy as np

from .combinations import combinations
from .config import resolve_length

logger = logging.getLogger(__name__)

JumpCallback = Callable[[np.ndarray], None]

JUMP_DTYPE = np.int8


def _split_length(n: int) -> tuple[int, int, bool]:
    """Return ``(N, t, is_odd)`` for a sequence of length ``n``."""

    is_odd = n % 2 == 1
    size = n - 1 if is_odd else n
    return size, size // 2, is_odd


def expected_count(n: int) -> int:
    """Closed-form number of orbitals of length ``n``."""

    if n < 1:
        raise ValueError("n must be positive")
    size, t, is_odd = _split_length(n)
    count = math.comb(size, t)
    return count * n if is_odd else count


def build_jumps(combination: Iterable[int], size: int, out: np.ndarray | None = None) -> np.ndarray:
    """Turn a combination into a base sequence of ``size`` non-zero jumps.

    Every slot starts at +1; each chosen index ``c`` marks slot
    ``size - 1 - c`` with -1. ``out`` is overwritten in place when given.
    """

    if out is None:
        out = np.empty(size, dtype=JUMP_DTYPE)
    out.fill(1)
    for c in combination:
        out[size - 1 - c] = -1
    return out


def jump_sequences(n: int) -> Iterator[np.ndarray]:
    """Yield every orbital of length ``n`` in enumeration order.

    For even ``n`` the same buffer is rewritten and yielded for every
    combination; consumers that keep a sequence must copy it. For odd ``n``
    a single 0 is spliced into each base sequence at every position
    ``0..n-1`` and each spliced sequence is a fresh array.
    """

    size, t, is_odd = _split_length(n)
    base = np.empty(size, dtype=JUMP_DTYPE)
    for combination in combinations(size, t):
        build_jumps(combination, size, out=base)
        if not is_odd:
            yield base
            continue
        for position in range(n):
            yield np.insert(base, position, 0)


def dump_jumps(jumps: np.ndarray) -> None:
    """Default consumer: print one sequence per line."""

    print(" ".join(f"{int(value):+d}" if value else "0" for value in jumps))


class OrbitalGenerator:
    """Enumerates every orbital of a given length exactly once.

    ``callback`` receives each sequence as an ``int8`` array. The array may be
    a buffer that the generator rewrites for the next sequence, so a callback
    that keeps the value must copy it (``jumps.copy()`` or ``tuple(jumps)``).
    Without a callback, sequences are printed by :func:`dump_jumps`.
    """

    def __init__(
        self,
        length: int,
        callback: Optional[JumpCallback] = None,
        *,
        strict: bool = False,
    ) -> None:
        self.length = resolve_length(length, strict=strict)
        self.callback: JumpCallback = callback or dump_jumps
        self.count = 0

    def generate(self) -> int:
        """Run the full enumeration and return the number of sequences visited."""

        self.count = 0
        for jumps in jump_sequences(self.length):
            self.callback(jumps)
            self.count += 1
        logger.debug("generated %d orbitals of length %d", self.count, self.length)
        return self.count

    def iter_jumps(self) -> Iterator[np.ndarray]:
        """Yield a private copy of every sequence without calling the callback."""

        for jumps in jump_sequences(self.length):
            yield jumps.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self.length})"


__all__ = [
    "JumpCallback",
    "JUMP_DTYPE",
    "OrbitalGenerator",
    "build_jumps",
    "dump_jumps",
    "expected_count",
    "jump_sequences",
]
