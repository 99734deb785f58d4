# -----------------------------------------------------------------------------
#  combinatorics.py
#  Factorial / inverse-factorial tables and binomial coefficients mod a prime.
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from numkit.modular import mod_exp
from numkit.primes import is_prime
from numkit.runtime import DEFAULT_MODULUS
from numkit.runtime import current as _rt_current

T = TypeVar("T")


class CombinatoricsError(ValueError):
    pass


class TableSizeError(CombinatoricsError):
    """Requested table size is negative."""


class TableRangeError(CombinatoricsError):
    """Query reaches past the precomputed tables."""


class ModulusError(CombinatoricsError):
    """Modulus is not a prime larger than the table size, or does not match the tables."""


# --- Explicit result type -----------------------------------------------------

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: CombinatoricsError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Outcome = Ok[T] | Err


# --- Table construction -------------------------------------------------------

def _check_parameters(n: int, modulus: int, check_prime: bool) -> None:
    if n < 0:
        raise TableSizeError(f"table size must not be negative, got {n}")
    if modulus < 2:
        raise ModulusError(f"modulus must be a prime, got {modulus}")
    if modulus <= n:
        # n! would be divisible by the modulus and have no inverse
        raise ModulusError(f"modulus {modulus} must be larger than the table size {n}")
    if check_prime and not is_prime(modulus):
        raise ModulusError(f"modulus {modulus} is not prime")


def precompute(n: int, modulus: int, *, check_prime: bool = True) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Build (fact, inv_fact) for 0..n under a prime modulus.

    fact[i] = i! mod p, inv_fact[i] = (i!)^-1 mod p. The last inverse comes
    from Fermat's little theorem, the rest are back-filled by multiplying
    with (i + 1), so only one exponentiation is needed.

    Raises TableSizeError for n < 0 and ModulusError when the modulus is
    not a prime greater than n (primality is skipped with check_prime=False).
    """
    _check_parameters(n, modulus, check_prime)

    fact = [1] * (n + 1)
    for i in range(1, n + 1):
        fact[i] = fact[i - 1] * i % modulus

    inv_fact = [1] * (n + 1)
    inv_fact[n] = mod_exp(fact[n], modulus - 2, modulus)
    for i in range(n - 1, -1, -1):
        inv_fact[i] = inv_fact[i + 1] * (i + 1) % modulus

    return tuple(fact), tuple(inv_fact)


class ModularCombinatorics:
    """
    Binomial coefficients modulo a prime.

    Construction precomputes the tables in O(limit) + O(log modulus);
    every query afterwards is O(1). The tables belong to the instance and
    never change, so separate instances can be used side by side.

        comb = ModularCombinatorics(10**5, 998244353)
        comb.ncr(10, 3)   # 120
        comb(10, 3)       # same
    """

    __slots__ = ("_fact", "_inv_fact", "_limit", "_modulus")

    def __init__(self, limit: int, modulus: int = DEFAULT_MODULUS, *, check_prime: bool = True):
        self._fact, self._inv_fact = precompute(limit, modulus, check_prime=check_prime)
        self._limit = limit
        self._modulus = modulus

    @classmethod
    def build(cls, limit: int, modulus: int = DEFAULT_MODULUS, *, check_prime: bool = True) -> Outcome[ModularCombinatorics]:
        """Like the constructor, but returns Err instead of raising."""
        try:
            return Ok(cls(limit, modulus, check_prime=check_prime))
        except CombinatoricsError as e:
            return Err(e)

    @classmethod
    def from_runtime(cls, limit: int | None = None, modulus: int | None = None) -> ModularCombinatorics:
        """Use COMBINATORICS.* from the active profile for anything not given."""
        rt = _rt_current()
        return cls(
            rt.max_n if limit is None else limit,
            rt.modulus if modulus is None else modulus,
            check_prime=rt.check_prime,
        )

    # --- properties ---

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def fact(self) -> tuple[int, ...]:
        return self._fact

    @property
    def inv_fact(self) -> tuple[int, ...]:
        return self._inv_fact

    # --- guards ---

    def _check_index(self, n: int) -> None:
        if not 0 <= n <= self._limit:
            raise TableRangeError(f"{n} is outside the precomputed range 0..{self._limit}")

    def _check_modulus(self, modulus: int | None) -> None:
        if modulus is not None and modulus != self._modulus:
            raise ModulusError(f"tables were built for modulus {self._modulus}, not {modulus}")

    # --- queries ---

    def ncr(self, n: int, r: int, modulus: int | None = None) -> int:
        """
        C(n, r) mod p. Returns 0 when r < 0 or r > n.

        Raises TableRangeError when n exceeds the table limit and
        ModulusError when a modulus other than the table's is passed.
        """
        self._check_modulus(modulus)
        if r < 0 or r > n:
            return 0
        self._check_index(n)
        p = self._modulus
        return self._fact[n] * self._inv_fact[r] % p * self._inv_fact[n - r] % p

    __call__ = ncr

    def checked_ncr(self, n: int, r: int, modulus: int | None = None) -> Outcome[int]:
        try:
            return Ok(self.ncr(n, r, modulus))
        except CombinatoricsError as e:
            return Err(e)

    def npr(self, n: int, r: int) -> int:
        """n! / (n - r)! mod p, 0 outside 0 <= r <= n."""
        if r < 0 or r > n:
            return 0
        self._check_index(n)
        return self._fact[n] * self._inv_fact[n - r] % self._modulus

    def factorial(self, i: int) -> int:
        self._check_index(i)
        return self._fact[i]

    def inverse_factorial(self, i: int) -> int:
        self._check_index(i)
        return self._inv_fact[i]

    def inverse(self, i: int) -> int:
        """Modular inverse of 1 <= i <= limit, read off the tables: (i-1)! / i!."""
        if i == 0:
            raise ZeroDivisionError("0 has no modular inverse")
        self._check_index(i)
        return self._inv_fact[i] * self._fact[i - 1] % self._modulus

    def multinomial(self, *ks: int) -> int:
        """(k1 + ... + km)! / (k1! ... km!) mod p, 0 if any k is negative."""
        if any(k < 0 for k in ks):
            return 0
        total = sum(ks)
        self._check_index(total)
        p = self._modulus
        acc = self._fact[total]
        for k in ks:
            acc = acc * self._inv_fact[k] % p
        return acc

    def catalan(self, n: int) -> int:
        """n-th Catalan number mod p; needs 2n (and n + 1) within the table limit."""
        if n < 0:
            return 0
        self._check_index(max(2 * n, n + 1))
        p = self._modulus
        return self._fact[2 * n] * self._inv_fact[n] % p * self._inv_fact[n + 1] % p

    def __repr__(self) -> str:
        return f"{type(self).__name__}(limit={self._limit}, modulus={self._modulus})"
