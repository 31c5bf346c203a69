"""Consistency check of a generated key pair using pycryptodome."""
from __future__ import annotations

from dataclasses import dataclass

from Crypto.PublicKey import RSA

from .keypair import KeyPair

_PROBE = b"pseudo-prime self-test"


@dataclass(frozen=True)
class SelfTestResult:
    ok: bool
    detail: str


def _sample_message(n: int) -> int:
    m = int.from_bytes(_PROBE, "big") % n
    return m if m > 1 else 2


def verify_key_pair(keypair: KeyPair) -> SelfTestResult:
    """Let pycryptodome validate the key, then do a textbook round trip."""

    n = keypair.n
    try:
        key = RSA.construct(
            (n, keypair.e, keypair.d, keypair.p, keypair.q),
            consistency_check=True,
        )
    except ValueError as exc:
        return SelfTestResult(False, f"pycryptodome rejected the key: {exc}")

    m = _sample_message(n)
    c = pow(m, int(key.e), int(key.n))
    recovered = pow(c, int(key.d), int(key.n))
    if recovered != m:
        return SelfTestResult(False, "encrypt/decrypt round trip mismatch")
    return SelfTestResult(True, f"RSA-{key.size_in_bits()} key is consistent")


__all__ = ["SelfTestResult", "verify_key_pair"]
