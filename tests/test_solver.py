# tests/test_solver.py
from __future__ import annotations

import io

import pytest

from numkit.solver import shifted_scan, solve_stream
from numkit.utility import UserInputError


@pytest.mark.parametrize(
    "values,expected",
    [
        ([5, 1, 7], 1),        # shifted 5, 0, 5 -> first non-positive at 1
        ([0], 0),
        ([-4, 9], 0),
        ([3, 4, 5], 3),        # shifted 3, 3, 3 -> min 3 at index 0
        ([10, 10, 10], 10),    # shifted 10, 9, 8 -> 8 + 2
        ([1], 1),
        ([4, 2, 9, 5], 2),     # shifted 4, 1, 7, 2 -> 1 + 1
    ],
)
def test_shifted_scan(values, expected):
    assert shifted_scan(values) == expected


def test_shifted_scan_does_not_modify_input():
    values = [5, 6, 7]
    shifted_scan(values)
    assert values == [5, 6, 7]


def test_shifted_scan_empty():
    with pytest.raises(ValueError):
        shifted_scan([])


def test_solve_stream_multiple_cases():
    out = io.StringIO()
    count = solve_stream(io.StringIO("2\n3\n5 1 7\n3\n3 4 5\n"), out)
    assert count == 2
    assert out.getvalue() == "1\n3\n"


def test_solve_stream_free_layout():
    out = io.StringIO()
    solve_stream(io.StringIO("1 4 4\n2 9\n\n 3"), out)
    assert out.getvalue() == "3\n"


def test_solve_stream_zero_cases():
    out = io.StringIO()
    assert solve_stream(io.StringIO("0\n"), out) == 0
    assert out.getvalue() == ""


@pytest.mark.parametrize(
    "text,fragment",
    [
        ("", "end of input"),
        ("1\n3\n1 2\n", "end of input"),
        ("1\n2\n1 x\n", "not an integer"),
        ("1\n0\n", "n >= 1"),
        ("-1\n", "must not be negative"),
    ],
)
def test_solve_stream_bad_input(text, fragment):
    with pytest.raises(UserInputError, match=fragment):
        solve_stream(io.StringIO(text), io.StringIO())
