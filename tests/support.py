from __future__ import annotations

import io

from flashcard_trainer.console import LoggingConsole
from flashcard_trainer.session import FlashcardSession


class PickTerm:
    """Stand-in RNG that always picks the card with the given term."""

    def __init__(self, term: str):
        self.term = term

    def choice(self, cards):
        return next(c for c in cards if c.term == self.term)


def _stream(lines: tuple[str, ...]) -> io.StringIO:
    return io.StringIO("".join(line + "\n" for line in lines))


def scripted_session(*lines: str, rng=None) -> FlashcardSession:
    console = LoggingConsole(stdin=_stream(lines), stdout=io.StringIO())
    return FlashcardSession(console, rng=rng)


def feed(session: FlashcardSession, *lines: str) -> None:
    """Replace pending input of a scripted session."""
    session.console.stdin = _stream(lines)


def output_lines(session: FlashcardSession) -> list[str]:
    return session.console.stdout.getvalue().splitlines()
