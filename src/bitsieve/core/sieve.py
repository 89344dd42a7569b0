"""Prime number generation with bit-vector sieves.

Three interchangeable algorithms, each backed by a BitVector:
- Eratosthenes: assume every candidate prime, strike out multiples.
- Atkin: toggle candidates reached by three quadratic forms, then remove
  multiples of prime squares.
- Sundaram: sieve odd numbers only, using half as many bits.

All of them return the primes strictly below the requested bound.
"""

from __future__ import annotations

import logging
import operator
import time
from dataclasses import dataclass
from enum import Enum
from math import isqrt
from typing import Callable

import numpy as np

from bitsieve.core.bitvector import BitVector, word_layout
from bitsieve.core.errors import validate_bound
from bitsieve.core.primeset import PrimeSet

logger = logging.getLogger(__name__)


class SieveAlgorithm(str, Enum):
    """Available sieve algorithms."""

    ERATOSTHENES = "eratosthenes"
    ATKIN = "atkin"
    SUNDARAM = "sundaram"

    @classmethod
    def parse(cls, value: SieveAlgorithm | str) -> SieveAlgorithm:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown algorithm: {value}. Available: {[a.value for a in cls]}"
            ) from None


@dataclass
class SieveConfig:
    """Configuration for a sieve run.

    Attributes:
        algorithm: Which sieve to run.
        word_bits: Storage word width of the bit vector (16, 32, 64 or 128).
            None selects the native width.
    """

    algorithm: SieveAlgorithm | str = SieveAlgorithm.ERATOSTHENES
    word_bits: int | None = None

    def __post_init__(self):
        self.algorithm = SieveAlgorithm.parse(self.algorithm)
        self.word_bits = word_layout(self.word_bits).bits


def _collect(bits: BitVector, bound: int) -> list[int]:
    return [i for i in range(2, bound) if bits.get(i)]


def sieve_eratosthenes(bound: int, word_bits: int | None = None) -> list[int]:
    """Sieve of Eratosthenes.

    Args:
        bound: Exclusive upper bound (must be > 2).
        word_bits: Storage word width for the bit vector.

    Returns:
        Primes below bound in increasing order.
    """
    bound = validate_bound(bound)

    bits = BitVector(bound, word_bits=word_bits)
    bits.set_all()

    for i in range(2, bound):
        if bits.get(i):
            for multiple in range(i * 2, bound, i):
                bits.unset(multiple)

    return _collect(bits, bound)


def sieve_atkin(bound: int, word_bits: int | None = None) -> list[int]:
    """Sieve of Atkin.

    A number n is flipped once for every solution of the quadratic form that
    matches its residue mod 12. Numbers with an odd count of solutions are
    either prime or divisible by a prime square; the second pass removes the
    latter.

    Args:
        bound: Exclusive upper bound (must be > 2).
        word_bits: Storage word width for the bit vector.

    Returns:
        Primes below bound in increasing order.
    """
    bound = validate_bound(bound)

    bits = BitVector(bound, word_bits=word_bits)
    limit = isqrt(bound - 1)

    for i in range(1, limit + 1):
        ii = i * i
        for j in range(1, limit + 1):
            jj = j * j

            n = 4 * ii + jj
            if n < bound and n % 12 in (1, 5):
                bits.flip(n)

            n = 3 * ii + jj
            if n < bound and n % 12 == 7:
                bits.flip(n)

            n = 3 * ii - jj
            if i > j and n < bound and n % 12 == 11:
                bits.flip(n)

    for i in range(5, limit + 1):
        if bits.get(i):
            square = i * i
            for multiple in range(square, bound, square):
                bits.unset(multiple)

    bits.set(2)
    if bound > 3:
        bits.set(3)

    return _collect(bits, bound)


def sieve_sundaram(bound: int, word_bits: int | None = None) -> list[int]:
    """Sieve of Sundaram.

    Bit i stands for the odd number 2i + 1. Every i of the form
    i + j(2i + 1) with j >= i is struck out; the survivors map to odd primes.

    Args:
        bound: Exclusive upper bound (must be > 2).
        word_bits: Storage word width for the bit vector.

    Returns:
        Primes below bound in increasing order.
    """
    bound = validate_bound(bound)
    half = bound >> 1

    bits = BitVector(half, word_bits=word_bits)
    bits.set_all()

    for i in range(1, half):
        denom = 2 * i + 1
        for k in range(i + i * denom, half, denom):
            bits.unset(k)

    primes = [2]
    primes.extend(2 * i + 1 for i in range(1, half) if bits.get(i))
    return primes


SIEVES: dict[SieveAlgorithm, Callable[[int, int | None], list[int]]] = {
    SieveAlgorithm.ERATOSTHENES: sieve_eratosthenes,
    SieveAlgorithm.ATKIN: sieve_atkin,
    SieveAlgorithm.SUNDARAM: sieve_sundaram,
}


def generate_primes(
    bound: int,
    algorithm: SieveAlgorithm | str = SieveAlgorithm.ERATOSTHENES,
    word_bits: int | None = None,
) -> PrimeSet:
    """Generate all primes strictly below bound.

    Args:
        bound: Exclusive upper bound (must be > 2).
        algorithm: Sieve to use, as a SieveAlgorithm or its name.
        word_bits: Storage word width for the bit vector.

    Returns:
        PrimeSet holding the primes in increasing order.

    Raises:
        InvalidBound: If bound is 2 or less.
        TypeError: If bound is not an integer.
        ValueError: If the algorithm or word width is unknown.
    """
    config = SieveConfig(algorithm=algorithm, word_bits=word_bits)

    start_time = time.time()
    primes = SIEVES[config.algorithm](bound, config.word_bits)
    elapsed = time.time() - start_time

    logger.debug(
        "%s sieve: %d primes below %d (%d-bit words, %.3fs)",
        config.algorithm.value, len(primes), bound, config.word_bits, elapsed,
    )

    return PrimeSet.from_values(primes, bound, config.algorithm)


def count_primes(
    bound: int,
    algorithm: SieveAlgorithm | str = SieveAlgorithm.ERATOSTHENES,
    word_bits: int | None = None,
) -> int:
    """Count primes strictly below bound."""
    return len(generate_primes(bound, algorithm=algorithm, word_bits=word_bits))


def prime_sieve_mask(
    bound: int,
    algorithm: SieveAlgorithm | str = SieveAlgorithm.ERATOSTHENES,
    word_bits: int | None = None,
) -> np.ndarray:
    """Generate a boolean mask where mask[i] is True if i is prime.

    Args:
        bound: Size of the mask (covers 0 to bound-1).
        algorithm: Sieve to use.
        word_bits: Storage word width for the bit vector.

    Returns:
        Boolean array of length bound.
    """
    bound = operator.index(bound)
    mask = np.zeros(max(bound, 0), dtype=bool)

    if bound <= 2:
        return mask

    primes = generate_primes(bound, algorithm=algorithm, word_bits=word_bits)
    mask[primes.to_array()] = True
    return mask
