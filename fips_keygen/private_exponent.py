from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ExponentNotInvertibleError
from .number_theory import inv_mod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrivateExponent:
    value: int
    too_small: bool = False

    def __int__(self) -> int:
        return self.value


def compute_private_exponent(p: int, q: int, e: int, half_bits: int) -> PrivateExponent:
    """Derive ``d = e^-1 mod (p-1)(q-1)`` and check it against ``2**half_bits``.

    FIPS 186-4 B.3.1 asks for ``d > 2**(nlen/2)``.  A smaller ``d`` is only
    flagged (and logged at INFO); a missing inverse raises
    :class:`ExponentNotInvertibleError`.
    """

    p, q = int(p), int(q)
    phi = p * q - p - q + 1

    try:
        d = inv_mod(e, phi)
    except ValueError as exc:
        raise ExponentNotInvertibleError(
            "exponent not relatively prime to modulus"
        ) from exc

    too_small = d < (1 << half_bits)
    if too_small:
        # Reported by the caller through PrivateExponent.too_small.
        logger.info("exponent too small: d has %d bits, wanted at least %d",
                    d.bit_length(), half_bits + 1)
    return PrivateExponent(value=d, too_small=too_small)


__all__ = ["PrivateExponent", "compute_private_exponent"]
