"""Selection of the public exponent ``e``."""
from __future__ import annotations

import logging

from .config import (
    EXPONENT_MAX,
    EXPONENT_MIN,
    EXPONENT_SAMPLE_BITS,
    MAX_EXPONENT_ATTEMPTS,
)
from .errors import ExponentSelectionError
from .randomness import RandomnessEngine

logger = logging.getLogger(__name__)


def choose_fixed(value: int) -> int:
    """Accept a caller-supplied exponent as is.

    No parity or size check happens here: an unusable value (an even one,
    say) surfaces later as a failed prime search or a missing inverse.
    """

    logger.debug("Using fixed public exponent e=%d", value)
    return value


def choose_random(
    engine: RandomnessEngine,
    max_attempts: int = MAX_EXPONENT_ATTEMPTS,
) -> int:
    """Sample an odd exponent with ``2**16 <= e <= 2**256``."""

    for attempt in range(1, max_attempts + 1):
        candidate = engine.uniform_bits(EXPONENT_SAMPLE_BITS)
        if candidate % 2 == 0:
            continue
        if candidate < EXPONENT_MIN or candidate > EXPONENT_MAX:
            continue
        logger.debug("Sampled public exponent after %d draw(s)", attempt)
        return candidate

    raise ExponentSelectionError(
        f"could not sample a public exponent in {max_attempts} attempts"
    )


__all__ = ["choose_fixed", "choose_random"]
