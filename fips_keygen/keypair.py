"""One full generation pass: exponent, two primes and the private exponent."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from .config import DEFAULT_CONFIG, GenerationConfig
from .exponent import choose_fixed, choose_random
from .prime_gen import GenerationStats, generate_prime
from .private_exponent import compute_private_exponent
from .randomness import RandomnessEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair:
    nlen: int
    seed: int
    e: int
    p: int
    q: int
    d: int
    d_too_small: bool = False
    p_stats: GenerationStats = field(default_factory=GenerationStats, compare=False)
    q_stats: GenerationStats = field(default_factory=GenerationStats, compare=False)

    @property
    def n(self) -> int:
        return self.p * self.q

    @property
    def phi(self) -> int:
        return (self.p - 1) * (self.q - 1)

    def as_dict(self) -> dict[str, Any]:
        return {
            "nlen": self.nlen,
            "seed": self.seed,
            "e": str(self.e),
            "p": str(self.p),
            "q": str(self.q),
            "n": str(self.n),
            "d": str(self.d),
            "d_too_small": self.d_too_small,
            "stats": {"p": self.p_stats.as_dict(), "q": self.q_stats.as_dict()},
        }


def generate_key_pair(
    nlen: int,
    seed: int,
    exponent: Optional[int] = None,
    *,
    config: GenerationConfig = DEFAULT_CONFIG,
) -> KeyPair:
    """Generate ``(e, p, q, d)`` for an ``nlen``-bit modulus.

    ``exponent=None`` samples ``e`` at random, any other value is used
    unchanged.  Identical arguments give an identical key pair.  Failures
    propagate as :class:`~fips_keygen.errors.KeyGenerationError` subclasses.
    """

    half = nlen // 2
    engine = RandomnessEngine(seed)
    logger.info("Generating %d-bit key pair (seed=%d)", nlen, seed)

    if exponent is None:
        e = choose_random(engine, config.max_exponent_attempts)
    else:
        e = choose_fixed(exponent)

    p = generate_prime(half, e, engine, config=config)
    logger.info("First prime found (%d draws)", p.stats.draws)
    q = generate_prime(half, e, engine, p.value, config=config)
    logger.info("Second prime found (%d draws)", q.stats.draws)

    d = compute_private_exponent(p.value, q.value, e, half)

    return KeyPair(
        nlen=nlen,
        seed=seed,
        e=e,
        p=p.value,
        q=q.value,
        d=d.value,
        d_too_small=d.too_small,
        p_stats=p.stats,
        q_stats=q.stats,
    )


__all__ = ["KeyPair", "generate_key_pair"]
