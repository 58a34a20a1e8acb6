"""orbitals package."""

from .combinations import combination_count, combinations
from .config import MAX_LENGTH, PRIMES, resolve_length
from .core import OrbitalGenerator, dump_jumps, expected_count, jump_sequences
from .errors import ConfigurationError, InsufficientTableError, OrbitalError
from .ranking import RankedOrbitalGenerator
from .weights import PrimeOrbital, weigh

__all__ = [
	"OrbitalGenerator",
	"RankedOrbitalGenerator",
	"PrimeOrbital",
	"weigh",
	"combinations",
	"combination_count",
	"jump_sequences",
	"expected_count",
	"dump_jumps",
	"resolve_length",
	"MAX_LENGTH",
	"PRIMES",
	"OrbitalError",
	"ConfigurationError",
	"InsufficientTableError",
]
__version__ = "0.1.0"
