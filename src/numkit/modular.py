# -----------------------------------------------------------------------------
#  modular.py
#  Modular exponentiation and inverses.
# -----------------------------------------------------------------------------

from __future__ import annotations


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    base**exponent % modulus by square-and-multiply, O(log exponent) steps.

    Negative bases are reduced into [0, modulus) first. A negative exponent
    or a modulus below 1 raises ValueError.
    """
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")

    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def power(base: int, exponent: int, modulus: int = 0) -> int:
    """Like mod_exp, but modulus == 0 means plain integer exponentiation."""
    if modulus == 0:
        if exponent < 0:
            raise ValueError(f"exponent must not be negative, got {exponent}")
        result = 1
        while exponent:
            if exponent & 1:
                result *= base
            exponent >>= 1
            if exponent:
                base *= base
        return result
    return mod_exp(base, exponent, modulus)


def mod_inverse(a: int, p: int) -> int:
    """Inverse of a modulo the prime p (Fermat: a^(p-2))."""
    if a % p == 0:
        raise ValueError(f"{a} has no inverse modulo {p}")
    return mod_exp(a, p - 2, p)
