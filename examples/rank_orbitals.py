"""List orbitals of a given length in enumeration or primorial order."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running the script from the repo without installing the package first.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from orbitals import MAX_LENGTH, ConfigurationError, OrbitalGenerator, RankedOrbitalGenerator  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("length", type=int, help=f"Number of jumps per orbital (1..{MAX_LENGTH})")
    parser.add_argument(
        "--ranked",
        action="store_true",
        help="Sort by prime balance instead of printing in enumeration order.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=2,
        help="Decimal places for balances in ranked output (default: 2).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject out-of-range lengths instead of falling back to length 1.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.ranked:
            ranked = RankedOrbitalGenerator(args.length, strict=args.strict)
        else:
            generator = OrbitalGenerator(args.length, strict=args.strict)
    except ConfigurationError as exc:
        parser.error(str(exc))

    if args.ranked:
        orbitals = ranked.generate()
        ranked.write(precision=args.precision)
        print(f"{len(orbitals)} orbitals of length {ranked.length}")
        return len(orbitals)

    count = generator.generate()
    print(f"{count} orbitals of length {generator.length}")
    return count


if __name__ == "__main__":
    main()
