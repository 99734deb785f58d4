# -----------------------------------------------------------------------------
#  solver.py
#  Index-shifted scan over an array, with a multi-test-case stream driver.
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TextIO

from numkit.utility import UserInputError


def shifted_scan(values: Sequence[int]) -> int:
    """
    Shift every a[i] down by its index i.

    Returns the first index whose shifted value is <= 0. When every shifted
    value is positive, returns min(shifted) + (index of the first minimum).
    """
    if not values:
        raise ValueError("shifted_scan needs at least one value")

    shifted = [a - i for i, a in enumerate(values)]
    for i, a in enumerate(shifted):
        if a <= 0:
            return i

    lo = min(shifted)
    return lo + shifted.index(lo)


def _tokens(reader: TextIO) -> Iterator[str]:
    for line in reader:
        yield from line.split()


class _TokenReader:
    def __init__(self, reader: TextIO):
        self._it = _tokens(reader)
        self.count = 0

    def next_int(self, what: str) -> int:
        try:
            tok = next(self._it)
        except StopIteration:
            raise UserInputError(f"Invalid input: unexpected end of input while reading {what}.") from None
        self.count += 1
        try:
            return int(tok)
        except ValueError:
            raise UserInputError(
                f"Invalid input: token #{self.count} ({tok!r}) for {what} is not an integer."
            ) from None


def solve_stream(reader: TextIO, writer: TextIO) -> int:
    """
    Read t, then t cases of "n a_0 ... a_{n-1}", and write one answer per line.
    Tokens may be spread over lines in any way. Returns the number of cases solved.
    """
    tokens = _TokenReader(reader)
    t = tokens.next_int("the number of test cases")
    if t < 0:
        raise UserInputError(f"Invalid input: number of test cases must not be negative, got {t}.")

    for case in range(1, t + 1):
        n = tokens.next_int(f"n of case {case}")
        if n < 1:
            raise UserInputError(f"Invalid input: case {case} needs n >= 1, got {n}.")
        values = [tokens.next_int(f"a[{i}] of case {case}") for i in range(n)]
        writer.write(f"{shifted_scan(values)}\n")
    return t
