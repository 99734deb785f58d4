# tests/test_interactive.py
from __future__ import annotations

import io

import pytest

from numkit.interactive import Interactor
from numkit.utility import UserInputError


def test_query_writes_question_and_reads_answer():
    out = io.StringIO()
    judge = Interactor(io.StringIO("7\n3 4\n"), out)
    assert judge.query(1, 3) == 7
    assert judge.query(2, 2) == 3
    assert judge.query(4, 5) == 4
    assert out.getvalue() == "? 1 3\n? 2 2\n? 4 5\n"
    assert judge.queries == 3


def test_answer_line():
    out = io.StringIO()
    Interactor(io.StringIO(""), out).answer(1, 2, 3)
    assert out.getvalue() == "! 1 2 3\n"


def test_closed_stream():
    judge = Interactor(io.StringIO(""), io.StringIO())
    with pytest.raises(UserInputError, match="closed"):
        judge.query(1, 2)


def test_non_integer_reply():
    judge = Interactor(io.StringIO("oops\n"), io.StringIO())
    with pytest.raises(UserInputError, match="expected an integer"):
        judge.query(1, 2)
