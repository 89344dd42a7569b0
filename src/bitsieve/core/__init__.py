"""Bit vector storage and the sieves built on it."""

from bitsieve.core.bitvector import (
    NATIVE_WORD_BITS,
    WORD_LAYOUTS,
    BitVector,
    BitVectorIterator,
    WordLayout,
    word_layout,
)
from bitsieve.core.errors import IndexOutOfRange, InvalidBound, validate_bound
from bitsieve.core.primeset import PrimeSet
from bitsieve.core.sieve import (
    SieveAlgorithm,
    SieveConfig,
    count_primes,
    generate_primes,
    prime_sieve_mask,
    sieve_atkin,
    sieve_eratosthenes,
    sieve_sundaram,
)

__all__ = [
    "NATIVE_WORD_BITS",
    "WORD_LAYOUTS",
    "BitVector",
    "BitVectorIterator",
    "WordLayout",
    "word_layout",
    "IndexOutOfRange",
    "InvalidBound",
    "validate_bound",
    "PrimeSet",
    "SieveAlgorithm",
    "SieveConfig",
    "count_primes",
    "generate_primes",
    "prime_sieve_mask",
    "sieve_atkin",
    "sieve_eratosthenes",
    "sieve_sundaram",
]
