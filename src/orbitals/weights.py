"""Prime-product weights ("balance") for orbitals."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence

import numpy as np

from .config import PRIMES
from .errors import InsufficientTableError


@dataclass(frozen=True, slots=True)
class PrimeOrbital:
    """An orbital together with its prime weight.

    ``numerator`` is the product of the primes at +1 positions and
    ``denominator`` the product at -1 positions. A 0 jump uses up its prime
    without contributing to either.
    """

    jumps: tuple[int, ...]
    numerator: int
    denominator: int

    @property
    def balance(self) -> float:
        return self.numerator / self.denominator

    @property
    def ratio(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def height_profile(self) -> np.ndarray:
        """Heights visited by the closed path, starting and ending at 0."""

        heights = np.zeros(len(self.jumps) + 1, dtype=np.int64)
        np.cumsum(self.jumps, out=heights[1:])
        return heights

    def __str__(self) -> str:
        return format_orbital(self)


def format_orbital(orbital: PrimeOrbital, precision: int = 2) -> str:
    jumps = ", ".join(str(value) for value in orbital.jumps)
    return f"({jumps})  {orbital.numerator}/{orbital.denominator}  {orbital.balance:.{precision}f}"


def weigh(jumps: Sequence[int] | np.ndarray, primes: Sequence[int] = PRIMES) -> PrimeOrbital:
    """Compute the :class:`PrimeOrbital` of ``jumps`` using ``primes[i]`` for position ``i``."""

    values = tuple(int(value) for value in jumps)
    if len(values) > len(primes):
        raise InsufficientTableError(len(values), len(primes))

    numerator = 1
    denominator = 1
    for prime, value in zip(primes, values):
        if value > 0:
            numerator *= prime
        elif value < 0:
            denominator *= prime
    return PrimeOrbital(jumps=values, numerator=numerator, denominator=denominator)


__all__ = ["PrimeOrbital", "format_orbital", "weigh"]
