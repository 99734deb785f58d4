# tests/test_bits.py
from __future__ import annotations

import pytest

from numkit.bits import from_binary, is_power_of_two, nearest_power_of_two, to_binary


@pytest.mark.parametrize("n,bits", [(0, "0"), (1, "1"), (2, "10"), (10, "1010"), (255, "11111111")])
def test_to_binary(n, bits):
    assert to_binary(n) == bits
    assert from_binary(bits) == n


def test_to_binary_agrees_with_format():
    for n in range(0, 2000, 37):
        assert to_binary(n) == format(n, "b")


def test_to_binary_rejects_negative():
    with pytest.raises(ValueError):
        to_binary(-1)


def test_from_binary_edges():
    assert from_binary("") == 0
    assert from_binary("000101") == 5
    with pytest.raises(ValueError):
        from_binary("102")


@pytest.mark.parametrize("x,expected", [(1, True), (2, True), (64, True), (2**61, True),
                                        (0, False), (-8, False), (3, False), (96, False)])
def test_is_power_of_two(x, expected):
    assert is_power_of_two(x) is expected


@pytest.mark.parametrize("x,expected", [(-5, 1), (0, 1), (1, 1), (2, 2), (3, 4), (17, 32), (1024, 1024), (1025, 2048)])
def test_nearest_power_of_two(x, expected):
    assert nearest_power_of_two(x) == expected
