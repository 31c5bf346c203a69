"""Rejection sampling of probable primes (FIPS 186-4 B.3.3 steps 4 and 5)."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import gcd
from typing import Optional

from .config import DEFAULT_CONFIG, GenerationConfig
from .errors import PrimeGenerationError
from .number_theory import miller_rabin
from .randomness import RandomnessEngine

logger = logging.getLogger(__name__)


@dataclass
class GenerationStats:
    """Telemetry for a single prime search."""

    draws: int = 0
    too_close: int = 0
    undersized: int = 0
    not_coprime: int = 0
    composite: int = 0

    @property
    def attempts(self) -> int:
        """Rejections that count against the attempt budget (plus the hit)."""
        return self.undersized + self.not_coprime + self.composite + 1

    def as_dict(self) -> dict[str, int]:
        return {
            "draws": self.draws,
            "attempts": self.attempts,
            "too_close": self.too_close,
            "undersized": self.undersized,
            "not_coprime": self.not_coprime,
            "composite": self.composite,
        }


@dataclass(frozen=True)
class PrimeCandidate:
    value: int
    bits: int
    stats: GenerationStats = field(default_factory=GenerationStats, compare=False)

    def __int__(self) -> int:
        return self.value


def _draw_candidate(bits: int, engine: RandomnessEngine) -> int:
    top = 1 << (bits - 1)
    n = engine.uniform_bits(bits - 1) + top
    # An even n is at most 2**bits - 2, so this cannot overflow the width.
    if n % 2 == 0:
        n += 1
    return n


def generate_prime(
    bits: int,
    e: int,
    engine: RandomnessEngine,
    distance_reference: Optional[int] = None,
    *,
    config: GenerationConfig = DEFAULT_CONFIG,
) -> PrimeCandidate:
    """Return a probable prime ``n`` with exactly ``bits`` bits and ``gcd(n-1, e) == 1``.

    Candidates below ``sqrt(2) * 2**(bits-1)`` are rejected (``n**2 < 2**(2*bits-1)``).

    When *distance_reference* is given (the first prime of the pair), the
    result also satisfies ``|n - reference| > 2**max(bits - 100, 0)``.
    Candidates that are too close are redrawn without using up the
    ``attempt_factor * bits`` budget; they are capped separately by the same
    number so that a degenerate width cannot spin forever.

    Raises :class:`PrimeGenerationError` when either budget runs out.
    """

    if bits < 2:
        raise ValueError("Prime size must be at least 2 bits")

    budget = config.attempt_budget(bits)
    reference = int(distance_reference) if distance_reference is not None else None
    threshold = 1 << max(bits - config.distance_slack_bits, 0)
    lower_sq = 1 << (2 * bits - 1)
    stats = GenerationStats()
    attempts = 0

    while True:
        n = _draw_candidate(bits, engine)
        stats.draws += 1

        if reference is not None and abs(n - reference) <= threshold:
            stats.too_close += 1
            logger.debug("Candidate within 2^%d of the first prime; redrawing",
                         threshold.bit_length() - 1)
            if stats.too_close >= budget:
                raise PrimeGenerationError(
                    f"cannot construct prime of {bits} bits: "
                    f"{stats.too_close} candidates too close to the first prime"
                )
            continue

        if n * n < lower_sq:
            stats.undersized += 1
        elif gcd(n - 1, e) != 1:
            stats.not_coprime += 1
        elif miller_rabin(n, config.rounds, engine):
            logger.debug(
                "Found %d-bit probable prime after %d attempt(s), %d draw(s)",
                bits, stats.attempts, stats.draws,
            )
            return PrimeCandidate(value=n, bits=bits, stats=stats)
        else:
            stats.composite += 1

        attempts += 1
        if attempts >= budget:
            logger.debug("Prime search stats: %s", stats.as_dict())
            raise PrimeGenerationError(
                f"cannot construct prime of {bits} bits in {budget} attempts"
            )


__all__ = ["GenerationStats", "PrimeCandidate", "generate_prime"]
