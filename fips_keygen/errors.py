"""Failure modes of key pair generation."""


class KeyGenerationError(RuntimeError):
    """Base class for conditions that abort a generation pass."""


class PrimeGenerationError(KeyGenerationError):
    """Raised when no prime was found within the attempt budget."""


class ExponentNotInvertibleError(KeyGenerationError):
    """Raised when ``e`` has no inverse modulo ``(p-1)(q-1)``."""


class ExponentSelectionError(KeyGenerationError):
    """Raised when random sampling of ``e`` gave up."""
