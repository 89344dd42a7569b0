"""Quick start example for bitsieve.

Run this script to exercise the bit vector and the three sieves.
"""

import logging
import sys
import time


def main():
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )

    print("bitsieve - Quick Start Demo")
    print("=" * 50)

    print("\n1. Packing bits into words...")
    from bitsieve import BitVector

    bv = BitVector(100, word_bits=32)
    for i in (0, 31, 32, 99):
        bv.set(i)
    print(f"   {bv!r}")
    print(f"   capacity={bv.size()} words={bv.word_count}")
    print(f"   grown to {bv.resize(1000)} bits, bit 99 still {bv.get(99)}")

    print("\n2. Comparing sieves below 50...")
    from bitsieve import SieveAlgorithm, generate_primes

    results = {a: generate_primes(50, a) for a in SieveAlgorithm}
    for algorithm, primes in results.items():
        print(f"   {algorithm.value:>12}: {primes}")
    reference = results[SieveAlgorithm.ERATOSTHENES]
    agree = all(reference.same_as(p) for p in results.values())
    print(f"   All agree: {agree}")

    print("\n3. Timing sieves below 100k...")
    for algorithm in SieveAlgorithm:
        start = time.perf_counter()
        primes = generate_primes(100_000, algorithm)
        elapsed = time.perf_counter() - start
        print(f"   {algorithm.value:>12}: {len(primes):,} primes in {elapsed:.3f}s")

    print("\n" + "=" * 50)
    print("Demo complete.")


if __name__ == "__main__":
    main()
