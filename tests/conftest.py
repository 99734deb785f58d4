# tests/conftest.py
from __future__ import annotations

import sys

import pytest

from numkit.runtime import reset


@pytest.fixture(autouse=True)
def workspace(tmp_path, monkeypatch):
    """Every test gets its own empty workspace, a fresh runtime and the interpreter's digit guard back."""
    ws = tmp_path / "ws"
    monkeypatch.setenv("NUMKIT_HOME", str(ws))
    digits = sys.get_int_max_str_digits()
    reset()
    yield ws
    reset()
    sys.set_int_max_str_digits(digits)
