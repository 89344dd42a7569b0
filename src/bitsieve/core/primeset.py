"""Ordered, immutable collection of primes produced by a sieve."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

import numpy as np

if TYPE_CHECKING:
    from bitsieve.core.sieve import SieveAlgorithm


@dataclass(frozen=True)
class PrimeSet:
    """Primes below a bound, in increasing order.

    Attributes:
        values: Strictly increasing primes.
        bound: Exclusive upper bound the primes were generated for.
        algorithm: Sieve that produced the values, if known.
    """

    values: tuple[int, ...]
    bound: int
    algorithm: SieveAlgorithm | None = None

    def __post_init__(self):
        previous = 1
        for v in self.values:
            if v <= previous:
                raise ValueError(
                    f"Values must be strictly increasing and >= 2, got {v} after {previous}"
                )
            previous = v
        if previous >= self.bound and self.values:
            raise ValueError(f"Value {previous} is not below bound {self.bound}")

    @classmethod
    def from_values(
        cls,
        values: Iterable[int],
        bound: int,
        algorithm: SieveAlgorithm | None = None,
    ) -> PrimeSet:
        return cls(
            tuple(operator.index(v) for v in values),
            operator.index(bound),
            algorithm,
        )

    @classmethod
    def generate(
        cls,
        bound: int,
        algorithm: SieveAlgorithm | str = "eratosthenes",
        word_bits: int | None = None,
    ) -> PrimeSet:
        """Sieve the primes below bound. See ``generate_primes``."""
        from bitsieve.core.sieve import generate_primes

        return generate_primes(bound, algorithm=algorithm, word_bits=word_bits)

    def same_as(self, other: PrimeSet) -> bool:
        """True if both sets hold the same primes in the same order."""
        return self.values == other.values

    @property
    def largest(self) -> int | None:
        return self.values[-1] if self.values else None

    def to_array(self) -> np.ndarray:
        return np.array(self.values, dtype=np.int64)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __contains__(self, n: object) -> bool:
        return n in self.values

    def __str__(self) -> str:
        return ",".join(str(v) for v in self.values)
