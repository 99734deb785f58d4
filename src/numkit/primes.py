from __future__ import annotations

from functools import lru_cache

from sympy import isprime


@lru_cache(maxsize=128)
def _isprime_lru(n: int) -> bool:
    """Process-wide cache for primality of n."""
    return bool(isprime(int(n)))


def is_prime(n: int) -> bool:
    """Primality test; 0, 1 and negatives are not prime."""
    if n < 2:
        return False
    return _isprime_lru(n)
