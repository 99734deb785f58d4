# tests/test_primes.py
from __future__ import annotations

from numkit.primes import is_prime


def _trial_division(n: int) -> bool:
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def test_small_numbers_agree_with_trial_division():
    for n in range(-10, 500):
        assert is_prime(n) is _trial_division(n), n


def test_known_primes_and_composites():
    assert is_prime(1_000_000_007)
    assert is_prime(998_244_353)
    assert is_prime(2**61 - 1)
    assert not is_prime(561)           # Carmichael
    assert not is_prime(3215031751)    # strong pseudoprime to bases 2, 3, 5, 7
