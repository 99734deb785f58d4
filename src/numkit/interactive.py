from __future__ import annotations

import sys
from typing import TextIO

from numkit.utility import UserInputError


class Interactor:
    """
    Line-based dialogue with an interactive judge.

    Every question is flushed immediately; the judge's reply is read as the
    next whitespace-separated integer.
    """

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None):
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout
        self.queries = 0
        self._pending: list[str] = []

    def _send(self, line: str) -> None:
        self.writer.write(line + "\n")
        self.writer.flush()

    def _read_int(self) -> int:
        while not self._pending:
            line = self.reader.readline()
            if not line:
                raise UserInputError("Invalid input: judge closed the stream before answering.")
            self._pending = line.split()
        tok = self._pending.pop(0)
        try:
            return int(tok)
        except ValueError:
            raise UserInputError(f"Invalid input: judge answered {tok!r}, expected an integer.") from None

    def query(self, l: int, r: int) -> int:  # noqa: E741
        """Ask "? l r" and return the judge's integer reply."""
        self._send(f"? {l} {r}")
        self.queries += 1
        return self._read_int()

    def answer(self, *values: int) -> None:
        self._send("! " + " ".join(str(v) for v in values))
