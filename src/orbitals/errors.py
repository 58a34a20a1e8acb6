"""Exception types raised by the orbital generators."""

from __future__ import annotations


class OrbitalError(Exception):
    """Base class for errors raised by :mod:`orbitals`."""


class ConfigurationError(OrbitalError, ValueError):
    """A generator was configured with an unsupported length."""


class InsufficientTableError(OrbitalError, ValueError):
    """The prime table is shorter than the sequence being weighed."""

    def __init__(self, length: int, table_size: int) -> None:
        super().__init__(
            f"cannot weigh a sequence of length {length} with a prime table of size {table_size}"
        )
        self.length = length
        self.table_size = table_size


__all__ = ["OrbitalError", "ConfigurationError", "InsufficientTableError"]
