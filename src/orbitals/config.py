"""Limits shared by the generators and the weight calculator.

``MAX_LENGTH`` and ``PRIMES`` are raised together: every position of the
longest supported sequence needs its own prime.
"""

from __future__ import annotations

import logging
import operator

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

MAX_LENGTH = 12
DEFAULT_LENGTH = 1

# The first MAX_LENGTH primes, p_0 = 2.
PRIMES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def resolve_length(length: int, *, strict: bool = False) -> int:
    """Return a usable sequence length.

    Lengths outside ``1..MAX_LENGTH`` are replaced by ``DEFAULT_LENGTH`` and a
    warning is logged. With ``strict=True`` a :class:`ConfigurationError` is
    raised instead.
    """

    if isinstance(length, bool):
        raise TypeError("length must be an int, got bool")
    length = operator.index(length)
    if 1 <= length <= MAX_LENGTH:
        return length
    if strict:
        raise ConfigurationError(f"length must be between 1 and {MAX_LENGTH}, got {length}")
    logger.warning(
        "length %d is outside 1..%d; falling back to %d",
        length,
        MAX_LENGTH,
        DEFAULT_LENGTH,
    )
    return DEFAULT_LENGTH


__all__ = ["MAX_LENGTH", "DEFAULT_LENGTH", "PRIMES", "resolve_length"]
