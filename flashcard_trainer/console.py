"""Line-oriented I/O port used by every session action.

``LoggingConsole`` performs the real I/O and keeps a transcript of both
directions; input lines are recorded with a ``"> "`` prefix.
"""
from __future__ import annotations

import sys
from typing import Protocol, TextIO

INPUT_PREFIX = "> "


class Console(Protocol):
    transcript: list[str]

    def write_line(self, text: str) -> None: ...

    def read_line(self) -> str: ...


class LoggingConsole:
    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.transcript: list[str] = []

    def write_line(self, text: str) -> None:
        self.transcript.append(text)
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def read_line(self) -> str:
        """Read one line without its newline. Raises EOFError at end of input."""
        line = self.stdin.readline()
        if line == "":
            raise EOFError
        line = line.rstrip("\r\n")
        self.transcript.append(INPUT_PREFIX + line)
        return line
