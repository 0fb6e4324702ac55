"""Terminal capability on plain text streams."""

from __future__ import annotations

import sys
from typing import TextIO

from core.services.interfaces import ITerminal


class Console(ITerminal):
    """Prompts and info lines on stdout, warnings on stderr.

    Each warning is preceded by a blank line and prefixed with the program
    name, e.g. ``trashrm: cannot remove 'x': No such file or directory``.
    """

    def __init__(
        self,
        prog: str = "trashrm",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.prog = prog
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr

    def ask(self, question: str) -> str:
        self._stdout.write(question)
        self._stdout.flush()
        # readline() returns '' at end of input, which reads as "no"
        return self._stdin.readline()

    def info(self, message: str) -> None:
        self._stdout.write(f"{message}\n")
        self._stdout.flush()

    def warn(self, message: str) -> None:
        self._stdout.flush()
        self._stderr.write(f"\n{self.prog}: {message}\n")
        self._stderr.flush()
