"""Seeded pseudorandom source shared by every sampling step of a pass."""
from __future__ import annotations

import random


def _seed_bytes(seed: int) -> bytes:
    return seed.to_bytes(seed.bit_length() // 8 + 1, "big", signed=True)


class RandomnessEngine:
    """Deterministic bit source.

    The same seed and the same sequence of calls always reproduce the same
    stream.  This is a Mersenne Twister, so it is *not* suitable for real
    keys; it only stands in for the approved DRBG of FIPS 186-4.
    """

    def __init__(self, seed: int):
        self.seed = seed
        # random.Random(int) seeds on abs(seed); bytes keep the sign apart.
        self._rng = random.Random(_seed_bytes(seed))

    def uniform_bits(self, bits: int) -> int:
        """Return an integer uniformly distributed over ``[0, 2**bits - 1]``."""

        if bits < 0:
            raise ValueError("Bit count must be non-negative")
        if bits == 0:
            return 0
        return self._rng.getrandbits(bits)

    def randbelow(self, n: int) -> int:
        """Return an integer uniformly distributed over ``[0, n)``."""

        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return self._rng.randrange(n)

    def __repr__(self) -> str:
        return f"RandomnessEngine(seed={self.seed!r})"
