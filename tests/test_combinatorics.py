# tests/test_combinatorics.py
"""
Factorial tables and binomial coefficients modulo a prime.

Run: pytest -v
"""

from __future__ import annotations

import pytest
from sympy import binomial, factorial

from numkit.combinatorics import (
    Err,
    ModularCombinatorics,
    ModulusError,
    Ok,
    TableRangeError,
    TableSizeError,
    precompute,
)
from numkit.runtime import APPLY

P = 1_000_000_007
N = 60

# ---------- helpers -----------------------------------------------------------


def _pascal_mod(n: int, p: int) -> list[list[int]]:
    rows = [[1]]
    for i in range(1, n + 1):
        prev = rows[-1]
        rows.append([1] + [(prev[j - 1] + prev[j]) % p for j in range(1, i)] + [1])
    return rows


@pytest.fixture(scope="module")
def comb():
    return ModularCombinatorics(N, P)


# ---------- tables ------------------------------------------------------------


def test_precompute_small_scenario():
    fact, inv_fact = precompute(5, P)
    assert list(fact) == [1, 1, 2, 6, 24, 120]
    assert len(inv_fact) == 6
    assert ModularCombinatorics(5, P).ncr(5, 2, P) == 10


def test_factorials_match_independent_computation(comb):
    for i in range(N + 1):
        assert comb.fact[i] == int(factorial(i)) % P, i


@pytest.mark.parametrize("p", [13, 97, 998_244_353, P], ids=lambda p: f"p={p}")
def test_fact_times_inverse_is_one(p):
    n = min(N, p - 1)
    fact, inv_fact = precompute(n, p)
    for i in range(n + 1):
        assert fact[i] * inv_fact[i] % p == 1, i


def test_tables_are_immutable_and_independent():
    a = ModularCombinatorics(10, 13)
    b = ModularCombinatorics(20, 97)
    assert isinstance(a.fact, tuple)
    assert isinstance(a.inv_fact, tuple)
    assert len(a.fact) == 11 and len(b.fact) == 21
    # building b did not disturb a
    assert a.ncr(10, 3) == 120 % 13
    with pytest.raises(AttributeError):
        a.extra = 1


# ---------- nCr ---------------------------------------------------------------


@pytest.mark.parametrize("p", [13, 31], ids=lambda p: f"p={p}")
def test_ncr_matches_pascal_triangle(p):
    n = p - 1
    c = ModularCombinatorics(n, p)
    rows = _pascal_mod(n, p)
    for nq in range(n + 1):
        for r in range(nq + 1):
            assert c.ncr(nq, r) == rows[nq][r], (nq, r)


def test_ncr_matches_sympy_binomial(comb):
    for nq in range(0, N + 1, 7):
        for r in range(nq + 1):
            assert comb.ncr(nq, r) == int(binomial(nq, r)) % P


@pytest.mark.parametrize("n,r", [(5, 7), (5, -1), (0, 1), (-3, 2), (-1, -1)])
def test_ncr_out_of_range_r_is_zero(comb, n, r):
    assert comb.ncr(n, r, P) == 0


def test_ncr_past_table_limit_raises(comb):
    with pytest.raises(TableRangeError):
        comb.ncr(N + 1, 1)
    # r > n is still the zero convention, no table access needed
    assert comb.ncr(N + 1, N + 2) == 0


def test_ncr_with_other_modulus_raises(comb):
    with pytest.raises(ModulusError):
        comb.ncr(5, 2, 998_244_353)


def test_call_is_ncr(comb):
    assert comb(10, 3) == 120


# ---------- explicit result type ---------------------------------------------


def test_checked_ncr(comb):
    good = comb.checked_ncr(6, 3)
    assert isinstance(good, Ok) and good.ok and good.unwrap() == 20

    bad = comb.checked_ncr(N + 5, 2)
    assert isinstance(bad, Err) and not bad.ok
    assert isinstance(bad.error, TableRangeError)
    with pytest.raises(TableRangeError):
        bad.unwrap()


@pytest.mark.parametrize(
    "limit,modulus,error",
    [
        (-1, P, TableSizeError),
        (10, 7, ModulusError),      # modulus not larger than n
        (10, 10, ModulusError),
        (4, 15, ModulusError),      # composite
        (0, 1, ModulusError),
    ],
    ids=["negative-size", "small-modulus", "modulus-equals-n", "composite", "modulus-one"],
)
def test_bad_parameters(limit, modulus, error):
    with pytest.raises(error):
        ModularCombinatorics(limit, modulus)
    out = ModularCombinatorics.build(limit, modulus)
    assert isinstance(out, Err)
    assert isinstance(out.error, error)


def test_build_ok():
    out = ModularCombinatorics.build(10, 13)
    assert out.ok
    assert out.unwrap().modulus == 13
    assert out.unwrap().limit == 10


def test_composite_modulus_allowed_when_check_disabled():
    c = ModularCombinatorics(4, 15, check_prime=False)
    assert c.fact == (1, 1, 2, 6, 9)


# ---------- derived queries ---------------------------------------------------


def test_npr(comb):
    assert comb.npr(5, 2) == 20
    assert comb.npr(5, 0) == 1
    assert comb.npr(5, 6) == 0
    assert comb.npr(5, -1) == 0


def test_inverse(comb):
    for i in range(1, N + 1):
        assert comb.inverse(i) * i % P == 1
    with pytest.raises(ZeroDivisionError):
        comb.inverse(0)


def test_factorial_accessors(comb):
    assert comb.factorial(5) == 120
    assert comb.factorial(5) * comb.inverse_factorial(5) % P == 1
    with pytest.raises(TableRangeError):
        comb.factorial(N + 1)
    with pytest.raises(TableRangeError):
        comb.inverse_factorial(-1)


def test_multinomial(comb):
    assert comb.multinomial(2, 1, 1) == 12
    assert comb.multinomial(3, 2) == comb.ncr(5, 2)
    assert comb.multinomial() == 1
    assert comb.multinomial(2, -1) == 0


def test_catalan(comb):
    assert [comb.catalan(n) for n in range(8)] == [1, 1, 2, 5, 14, 42, 132, 429]
    assert comb.catalan(-1) == 0
    with pytest.raises(TableRangeError):
        comb.catalan(N // 2 + 1)


def test_from_runtime_uses_profile_values():
    APPLY({"COMBINATORICS": {"MODULUS": 13, "MAX_N": 10}})
    c = ModularCombinatorics.from_runtime()
    assert (c.limit, c.modulus) == (10, 13)
    assert ModularCombinatorics.from_runtime(limit=5).limit == 5


def test_repr():
    assert repr(ModularCombinatorics(3, 7)) == "ModularCombinatorics(limit=3, modulus=7)"
