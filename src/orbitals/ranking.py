"""Orbitals sorted by prime balance ("primorial order")."""

from __future__ import annotations

import bisect
import logging
import sys
from fractions import Fraction
from typing import List, TextIO

import numpy as np

from .core import OrbitalGenerator
from .weights import PrimeOrbital, format_orbital, weigh

logger = logging.getLogger(__name__)


class RankedOrbitalGenerator:
    """Collects every orbital of a length in ascending balance order.

    Each new orbital is inserted after all orbitals whose balance is less
    than or equal to its own, so equal balances keep arrival order. The
    comparison uses the exact fraction rather than the float balance.
    """

    def __init__(self, length: int, *, strict: bool = False) -> None:
        self._generator = OrbitalGenerator(length, self._insert, strict=strict)
        self._orbitals: List[PrimeOrbital] = []
        self._keys: List[Fraction] = []

    @property
    def length(self) -> int:
        return self._generator.length

    @property
    def orbitals(self) -> List[PrimeOrbital]:
        return list(self._orbitals)

    def _insert(self, jumps: np.ndarray) -> None:
        orbital = weigh(jumps)
        key = orbital.ratio
        index = bisect.bisect_right(self._keys, key)
        self._keys.insert(index, key)
        self._orbitals.insert(index, orbital)

    def generate(self) -> List[PrimeOrbital]:
        """Enumerate from scratch and return the orbitals in ascending balance order."""

        self._orbitals.clear()
        self._keys.clear()
        count = self._generator.generate()
        logger.debug("ranked %d orbitals of length %d", count, self.length)
        return self.orbitals

    def report(self, precision: int = 2) -> List[str]:
        """One line per orbital: jumps, exact ratio, decimal balance."""

        return [format_orbital(orbital, precision) for orbital in self._orbitals]

    def write(self, file: TextIO | None = None, precision: int = 2) -> None:
        stream = file if file is not None else sys.stdout
        for line in self.report(precision):
            stream.write(line + "\n")


__all__ = ["RankedOrbitalGenerator", "format_orbital"]
