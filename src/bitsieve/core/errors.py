"""Exception types raised by bit vectors and sieves."""

from __future__ import annotations

import operator


class InvalidBound(ValueError):
    """Raised when a sieve is asked for primes below a bound that holds none."""


class IndexOutOfRange(IndexError):
    """Raised when a bit index or cursor position falls outside a vector."""


def validate_bound(bound: int) -> int:
    """Check that a prime-generation bound leaves room for at least one prime.

    Args:
        bound: Exclusive upper bound for prime generation.

    Returns:
        The bound as an int.

    Raises:
        InvalidBound: If bound is 2 or less.
        TypeError: If bound is not an integer.
    """
    bound = operator.index(bound)
    if bound <= 2:
        raise InvalidBound(f"2 is smallest prime number, got bound {bound}")
    return bound
