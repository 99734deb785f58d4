# -----------------------------------------------------------------------------
#  bits.py
#  Binary strings and powers of two.
# -----------------------------------------------------------------------------

from __future__ import annotations


def to_binary(a: int) -> str:
    """Binary digits of a >= 0, most significant first; "0" for 0."""
    if a < 0:
        raise ValueError(f"expected a non-negative integer, got {a}")
    digits = []
    while a > 0:
        digits.append("1" if a & 1 else "0")
        a >>= 1
    return "".join(reversed(digits)) or "0"


def from_binary(s: str) -> int:
    """Value of a string of '0'/'1' characters; the empty string is 0."""
    num = 0
    for pos, c in enumerate(s):
        if c not in "01":
            raise ValueError(f"not a binary digit at position {pos}: {c!r}")
        num = (num << 1) | (c == "1")
    return num


def is_power_of_two(x: int) -> bool:
    return x > 0 and not x & (x - 1)


def nearest_power_of_two(x: int) -> int:
    """Smallest power of two that is >= x (1 for x <= 0)."""
    if x <= 1:
        return 1
    return 1 << (x - 1).bit_length()
