from __future__ import annotations

from math import gcd
from typing import Callable, Optional

from .randomness import RandomnessEngine

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)


def egcd(a: int, b: int):
    """Extended Euclidean algorithm without recursion.

    Returns ``(g, x, y)`` with ``a*x + b*y == g``.  The iterative form keeps
    the routine usable for multi-thousand-bit operands.
    """

    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    return old_r, old_s, old_t


def inv_mod(a: int, m: int) -> int:
    g, x, _ = egcd(a, m)
    if g != 1:
        raise ValueError("No modular inverse")
    return x % m


def miller_rabin(
    n: int,
    k: int = 50,
    engine: Optional[RandomnessEngine] = None,
    *,
    randbelow: Optional[Callable[[int], int]] = None,
) -> bool:
    """Return ``True`` when ``n`` is probably prime using Miller–Rabin.

    A composite survives ``k`` rounds with probability at most ``4**-k``.
    Witnesses are drawn from *engine* so that a seeded run is reproducible;
    *randbelow* may be passed instead to supply another source.
    """

    if n < 2:
        return False

    # Trial-divide by a few small primes first – this quickly rejects
    # obviously composite numbers and handles the small-prime cases.
    for p in _SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    if randbelow is None:
        if engine is None:
            raise ValueError("A randomness source is required for witnesses")
        randbelow = engine.randbelow

    # Write n-1 as (2**r) * d with d odd.
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for _ in range(k):
        a = randbelow(n - 3) + 2  # 2 <= a <= n-2
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


__all__ = ["egcd", "gcd", "inv_mod", "miller_rabin"]
