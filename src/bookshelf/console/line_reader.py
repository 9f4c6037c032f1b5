"""Line-oriented prompting over text streams."""

from __future__ import annotations

import sys
from typing import TextIO

INVALID_INT_MESSAGE = "Invalid input. Please enter a valid integer."


class LineReader:
    """Reads trimmed answers to prompts. Build one per process and share it."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def read_int(self, prompt: str) -> int:
        """Prompt until the answer parses as an integer.

        Raises ``EOFError`` if the input ends before a valid integer arrives.
        """
        while True:
            line = self._prompt(prompt)
            if line is None:
                raise EOFError("input ended while waiting for an integer")
            try:
                return int(line.strip())
            except ValueError:
                print(INVALID_INT_MESSAGE, file=self._stdout)

    def read_optional_int(self, prompt: str, *, default: int) -> int:
        """Like ``read_int``, but a blank answer or end of input yields ``default``."""
        while True:
            line = self._prompt(prompt)
            if line is None or not line.strip():
                return default
            try:
                return int(line.strip())
            except ValueError:
                print(INVALID_INT_MESSAGE, file=self._stdout)

    def read_str(self, prompt: str) -> str:
        line = self._prompt(prompt)
        return "" if line is None else line.strip()

    def _prompt(self, prompt: str) -> str | None:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        return line if line else None
