"""Plain-text section rendering for operator-facing output."""
from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

RULE_CHAR = "—"
MIN_RULE_WIDTH = 12


class Presenter:
    """Write titled sections to an output stream and faults to an error stream."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def write(self, line: str) -> None:
        print(line, file=self.out)

    def render(self, title: str, lines: Iterable[str]) -> None:
        rule = RULE_CHAR * max(MIN_RULE_WIDTH, len(title))
        print(f"\n{title}\n{rule}", file=self.out)
        for line in lines:
            print(line, file=self.out)

    def error(self, message: str) -> None:
        print(message, file=self.err)
