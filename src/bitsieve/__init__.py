"""bitsieve - packed bit vectors and the prime sieves built on them."""

__version__ = "0.1.0"

from bitsieve.core.bitvector import BitVector, BitVectorIterator
from bitsieve.core.errors import IndexOutOfRange, InvalidBound
from bitsieve.core.primeset import PrimeSet
from bitsieve.core.sieve import SieveAlgorithm, generate_primes, prime_sieve_mask

__all__ = [
    "BitVector",
    "BitVectorIterator",
    "IndexOutOfRange",
    "InvalidBound",
    "PrimeSet",
    "SieveAlgorithm",
    "generate_primes",
    "prime_sieve_mask",
]
