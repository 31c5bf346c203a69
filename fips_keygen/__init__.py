"""Pseudo-prime RSA key pair generation (FIPS 186-4 B.3.1/B.3.3 flavoured)."""
from __future__ import annotations

from .errors import (
    ExponentNotInvertibleError,
    ExponentSelectionError,
    KeyGenerationError,
    PrimeGenerationError,
)
from .keypair import KeyPair, generate_key_pair
from .randomness import RandomnessEngine

__all__ = [
    "ExponentNotInvertibleError",
    "ExponentSelectionError",
    "KeyGenerationError",
    "KeyPair",
    "PrimeGenerationError",
    "RandomnessEngine",
    "generate_key_pair",
]
