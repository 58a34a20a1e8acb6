from __future__ import annotations

import io
import math
from fractions import Fraction

import numpy as np
import pytest

from orbitals import (
    PRIMES,
    InsufficientTableError,
    PrimeOrbital,
    RankedOrbitalGenerator,
    expected_count,
    weigh,
)
from orbitals.ranking import format_orbital


def test_weigh_known_sequence() -> None:
    orbital = weigh((-1, -1, 1, 1))
    assert orbital.denominator == 2 * 3
    assert orbital.numerator == 5 * 7
    assert orbital.ratio == Fraction(35, 6)
    assert math.isclose(orbital.balance, 35 / 6)
    assert round(orbital.balance, 2) == 5.83


def test_weigh_skips_zero_but_consumes_its_prime() -> None:
    orbital = weigh(np.array([0, 1, -1], dtype=np.int8))
    assert orbital.jumps == (0, 1, -1)
    assert (orbital.numerator, orbital.denominator) == (3, 5)
    assert orbital.balance == pytest.approx(0.6)


def test_weigh_keeps_fractional_precision() -> None:
    orbital = weigh((1, -1))
    assert orbital.balance == 2 / 3
    assert orbital.balance != 0


def test_weigh_rejects_short_prime_table() -> None:
    with pytest.raises(InsufficientTableError) as excinfo:
        weigh((1, -1, 1, -1), primes=(2, 3, 5))
    assert excinfo.value.length == 4
    assert excinfo.value.table_size == 3

    with pytest.raises(InsufficientTableError):
        weigh((1, -1) * ((len(PRIMES) + 2) // 2))


def test_prime_orbital_is_immutable() -> None:
    orbital = weigh((1, -1))
    with pytest.raises(AttributeError):
        orbital.numerator = 5  # type: ignore[misc]


def test_height_profile_closes() -> None:
    orbital = PrimeOrbital(jumps=(1, 1, -1, -1), numerator=6, denominator=35)
    assert orbital.height_profile().tolist() == [0, 1, 2, 1, 0]
    assert weigh((1, 0, -1)).height_profile().tolist() == [0, 1, 1, 0]


def test_length_four_primorial_order() -> None:
    ranked = RankedOrbitalGenerator(4)
    orbitals = ranked.generate()
    assert [(o.jumps, o.numerator, o.denominator) for o in orbitals] == [
        ((1, 1, -1, -1), 6, 35),
        ((1, -1, 1, -1), 10, 21),
        ((1, -1, -1, 1), 14, 15),
        ((-1, 1, 1, -1), 15, 14),
        ((-1, 1, -1, 1), 21, 10),
        ((-1, -1, 1, 1), 35, 6),
    ]
    assert round(orbitals[0].balance, 2) == 0.17
    assert round(orbitals[-1].balance, 2) == 5.83


def test_length_three_primorial_order() -> None:
    orbitals = RankedOrbitalGenerator(3).generate()
    assert [o.jumps for o in orbitals] == [
        (1, 0, -1),
        (0, 1, -1),
        (1, -1, 0),
        (-1, 1, 0),
        (0, -1, 1),
        (-1, 0, 1),
    ]


@pytest.mark.parametrize("length", [1, 2, 5, 7, 8])
def test_ranked_output_is_sorted_and_complete(length: int) -> None:
    orbitals = RankedOrbitalGenerator(length).generate()
    assert len(orbitals) == expected_count(length)
    balances = [o.balance for o in orbitals]
    assert balances == sorted(balances)
    ratios = [o.ratio for o in orbitals]
    assert all(a < b for a, b in zip(ratios, ratios[1:]))
    assert len({o.jumps for o in orbitals}) == len(orbitals)


def test_generate_resets_collection() -> None:
    ranked = RankedOrbitalGenerator(5)
    first = ranked.generate()
    second = ranked.generate()
    assert len(second) == 30
    assert first == second
    assert ranked.orbitals == second


def test_write_and_report() -> None:
    ranked = RankedOrbitalGenerator(4)
    ranked.generate()
    lines = ranked.report()
    assert lines[0] == "(1, 1, -1, -1)  6/35  0.17"
    assert lines[-1] == "(-1, -1, 1, 1)  35/6  5.83"

    buffer = io.StringIO()
    ranked.write(buffer, precision=4)
    written = buffer.getvalue().splitlines()
    assert len(written) == 6
    assert written[0] == "(1, 1, -1, -1)  6/35  0.1714"


def test_out_of_range_ranked_length_falls_back() -> None:
    ranked = RankedOrbitalGenerator(20)
    assert ranked.length == 1
    orbitals = ranked.generate()
    assert [o.jumps for o in orbitals] == [(0,)]
    assert orbitals[0].balance == 1.0


def test_str_matches_report_format() -> None:
    orbital = weigh((-1, -1, 1, 1))
    assert str(orbital) == format_orbital(orbital) == "(-1, -1, 1, 1)  35/6  5.83"
    ranked = RankedOrbitalGenerator(4)
    ranked.generate()
    assert [str(o) for o in ranked.orbitals] == ranked.report()
