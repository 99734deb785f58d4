# tests/test_modular.py
from __future__ import annotations

import pytest

from numkit.modular import mod_exp, mod_inverse, power

P = 1_000_000_007


@pytest.mark.parametrize(
    "base,exp,mod,expected",
    [
        (2, 10, P, 1024),
        (3, 0, P, 1),
        (0, 0, P, 1),
        (0, 5, P, 0),
        (7, 3, 1, 0),
        (10, 0, 1, 0),
        (-2, 3, 7, (-8) % 7),
    ],
)
def test_mod_exp_examples(base, exp, mod, expected):
    assert mod_exp(base, exp, mod) == expected


def test_mod_exp_matches_builtin_pow():
    for base in (0, 1, 2, 12345, P - 1, 10**18 + 3):
        for exp in (0, 1, 2, 31, 10**9 + 5, 2**64 + 1):
            for mod in (2, 97, P, 998_244_353, 10**12):
                assert mod_exp(base, exp, mod) == pow(base, exp, mod)


@pytest.mark.parametrize("exp,mod", [(-1, P), (2, 0), (2, -5)])
def test_mod_exp_rejects_bad_arguments(exp, mod):
    with pytest.raises(ValueError):
        mod_exp(2, exp, mod)


def test_power_plain_and_modular():
    assert power(2, 100) == 2**100
    assert power(-3, 3) == -27
    assert power(5, 0) == 1
    assert power(2, 100, 97) == pow(2, 100, 97)
    with pytest.raises(ValueError):
        power(2, -1)


def test_mod_inverse():
    for a in (1, 2, 3, 12345, P - 1):
        assert a * mod_inverse(a, P) % P == 1
    with pytest.raises(ValueError):
        mod_inverse(P, P)
