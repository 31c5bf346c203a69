from __future__ import annotations

from dataclasses import dataclass

# ======== GENERATION PARAMETERS ========
MILLER_RABIN_ROUNDS = 50
ATTEMPT_FACTOR = 5            # prime search budget is ATTEMPT_FACTOR * bits
DISTANCE_SLACK_BITS = 100     # |p - q| must exceed 2^(bits - 100)
EXPONENT_SAMPLE_BITS = 256
EXPONENT_MIN = 1 << 16
EXPONENT_MAX = 1 << 256
MAX_EXPONENT_ATTEMPTS = 1000
RECOMMENDED_KEY_SIZES = (2048, 3072)
# =======================================


@dataclass(frozen=True)
class GenerationConfig:
    """Tunable knobs for a generation pass."""

    rounds: int = MILLER_RABIN_ROUNDS
    attempt_factor: int = ATTEMPT_FACTOR
    distance_slack_bits: int = DISTANCE_SLACK_BITS
    max_exponent_attempts: int = MAX_EXPONENT_ATTEMPTS

    def attempt_budget(self, bits: int) -> int:
        return self.attempt_factor * bits


DEFAULT_CONFIG = GenerationConfig()

__all__ = [
    "ATTEMPT_FACTOR",
    "DEFAULT_CONFIG",
    "DISTANCE_SLACK_BITS",
    "EXPONENT_MAX",
    "EXPONENT_MIN",
    "EXPONENT_SAMPLE_BITS",
    "GenerationConfig",
    "MAX_EXPONENT_ATTEMPTS",
    "MILLER_RABIN_ROUNDS",
    "RECOMMENDED_KEY_SIZES",
]
