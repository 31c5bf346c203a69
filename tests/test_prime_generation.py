import pathlib
import sys
from math import gcd, isqrt

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _is_prime_exhaustive(n: int) -> bool:
    if n < 2:
        return False
    return all(n % k for k in range(2, isqrt(n) + 1))


def test_engine_is_deterministic():
    from fips_keygen.randomness import RandomnessEngine

    a = RandomnessEngine(12345)
    b = RandomnessEngine(12345)
    assert [a.uniform_bits(64) for _ in range(5)] == [b.uniform_bits(64) for _ in range(5)]
    assert a.randbelow(1000) == b.randbelow(1000)


def test_engine_keeps_seed_sign():
    from fips_keygen.randomness import RandomnessEngine

    for seed in (1, 5, 255, 2 ** 40):
        pos = RandomnessEngine(seed)
        neg = RandomnessEngine(-seed)
        assert [pos.uniform_bits(64) for _ in range(3)] != [neg.uniform_bits(64) for _ in range(3)]


def test_engine_bit_range():
    from fips_keygen.randomness import RandomnessEngine

    engine = RandomnessEngine(1)
    assert engine.uniform_bits(0) == 0
    for bits in (1, 7, 64, 300):
        assert 0 <= engine.uniform_bits(bits) < (1 << bits)
    with pytest.raises(ValueError):
        engine.uniform_bits(-1)
    with pytest.raises(ValueError):
        engine.randbelow(0)


def test_miller_rabin_agrees_with_trial_division():
    from fips_keygen.number_theory import miller_rabin
    from fips_keygen.randomness import RandomnessEngine

    engine = RandomnessEngine(99)
    for n in range(0, 3000):
        assert miller_rabin(n, 50, engine) == _is_prime_exhaustive(n), n


def test_miller_rabin_rejects_carmichael_numbers():
    from fips_keygen.number_theory import miller_rabin
    from fips_keygen.randomness import RandomnessEngine

    engine = RandomnessEngine(5)
    for n in (561, 1105, 1729, 2465, 2821, 6601, 8911, 41041, 825265):
        assert not miller_rabin(n, 50, engine)
    assert miller_rabin((1 << 127) - 1, 50, engine)


def test_inv_mod():
    from fips_keygen.number_theory import inv_mod

    assert inv_mod(7, 120) == 103
    assert (65537 * inv_mod(65537, 3120)) % 3120 == 1
    with pytest.raises(ValueError):
        inv_mod(3, 60)


@pytest.mark.parametrize("bits", [5, 7, 8, 11, 16, 24])
def test_small_primes_are_exact_width_and_prime(bits):
    from fips_keygen.prime_gen import generate_prime
    from fips_keygen.randomness import RandomnessEngine

    e = 65537
    for seed in range(3):
        cand = generate_prime(bits, e, RandomnessEngine(seed))
        n = cand.value
        assert cand.bits == bits
        assert n % 2 == 1
        assert (1 << (bits - 1)) <= n < (1 << bits)
        assert gcd(n - 1, e) == 1
        assert _is_prime_exhaustive(n)


@pytest.mark.parametrize("bits", [8, 16])
def test_second_prime_keeps_its_distance(bits):
    from fips_keygen.prime_gen import generate_prime
    from fips_keygen.randomness import RandomnessEngine

    for seed in range(3):
        engine = RandomnessEngine(seed)
        p = generate_prime(bits, 65537, engine)
        q = generate_prime(bits, 65537, engine, p.value)
        assert abs(p.value - q.value) > 1
        assert gcd(p.value - 1, 65537) == 1 and gcd(q.value - 1, 65537) == 1
        assert _is_prime_exhaustive(q.value)


def test_distance_threshold_for_wide_primes():
    from fips_keygen.prime_gen import generate_prime
    from fips_keygen.randomness import RandomnessEngine

    engine = RandomnessEngine(2024)
    p = generate_prime(160, 65537, engine)
    q = generate_prime(160, 65537, engine, p.value)
    assert abs(p.value - q.value) > (1 << 60)
    assert min(p.value, q.value) ** 2 >= 1 << 319


def test_even_exponent_exhausts_budget():
    from fips_keygen.errors import PrimeGenerationError
    from fips_keygen.prime_gen import generate_prime
    from fips_keygen.randomness import RandomnessEngine

    with pytest.raises(PrimeGenerationError, match="cannot construct prime"):
        generate_prime(16, 2, RandomnessEngine(1))


def test_distance_rejections_are_capped():
    from fips_keygen.errors import PrimeGenerationError
    from fips_keygen.prime_gen import generate_prime
    from fips_keygen.randomness import RandomnessEngine

    # Two-bit odd numbers: only 3 exists, so the second prime is always too close.
    with pytest.raises(PrimeGenerationError, match="too close"):
        generate_prime(2, 65537, RandomnessEngine(0), 3)


def test_distance_rejections_do_not_consume_attempts():
    from fips_keygen.config import GenerationConfig
    from fips_keygen.errors import PrimeGenerationError
    from fips_keygen.prime_gen import generate_prime

    class ScriptedEngine:
        """Replays fixed draws."""

        def __init__(self, draws):
            self._draws = iter(draws)

        def uniform_bits(self, bits):
            return next(self._draws)

        def randbelow(self, n):
            return 0

    # 4-bit candidates are 8 + draw, so 1 -> 9 (below sqrt(2) * 8), 3 -> 11, 5 -> 13.
    config = GenerationConfig(attempt_factor=1)  # 4 attempts for 4 bits
    engine = ScriptedEngine([1, 3, 3, 3, 5])
    cand = generate_prime(4, 65537, engine, 11, config=config)
    assert cand.value == 13
    assert cand.stats.undersized == 1
    assert cand.stats.too_close == 3
    assert cand.stats.draws == 5

    with pytest.raises(PrimeGenerationError):
        generate_prime(4, 65537, ScriptedEngine([1, 1, 1, 1]), config=config)


def test_rejects_too_narrow_width():
    from fips_keygen.prime_gen import generate_prime
    from fips_keygen.randomness import RandomnessEngine

    with pytest.raises(ValueError):
        generate_prime(1, 65537, RandomnessEngine(0))


def test_distance_threshold_is_inclusive():
    from fips_keygen.prime_gen import generate_prime

    class ScriptedEngine:
        def __init__(self, draws):
            self._draws = iter(draws)

        def uniform_bits(self, bits):
            return next(self._draws)

        def randbelow(self, n):
            return 0

    bits = 107
    top = 1 << (bits - 1)
    prime = (1 << 107) - 1        # Mersenne prime M107
    threshold = 1 << (bits - 100)  # 128
    reference = prime - threshold - 2

    # reference + 128 and reference - 128 sit exactly on the threshold.
    draws = [
        reference + threshold - top,
        reference - threshold - top,
        prime - top,
    ]
    cand = generate_prime(bits, 65537, ScriptedEngine(draws), reference)
    assert cand.value == prime
    assert cand.stats.too_close == 2
    assert cand.value - reference == threshold + 2
