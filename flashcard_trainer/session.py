"""Interactive flashcard session.

Every action reads and writes through a ``Console`` and returns a ``Result``
so callers (and tests) can observe the outcome without parsing output.
"""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Callable

from .console import Console, LoggingConsole
from .storage import read_cards, write_cards
from .store import CardStore
from .types import Card, CardFileError, Result
from .utils import write_lines

logger = logging.getLogger(__name__)

ACTION_PROMPT = (
    "\nInput the action (add, remove, import, export, ask, exit, log, hardest card, reset stats):"
)


class FlashcardSession:
    def __init__(
        self,
        console: Console,
        store: CardStore | None = None,
        *,
        rng: random.Random | None = None,
        encoding: str = "utf-8",
    ):
        self.console = console
        self.store = store if store is not None else CardStore()
        self.rng = rng if rng is not None else random.Random()
        self.encoding = encoding
        self._actions: dict[str, Callable[[], Result]] = {
            "add": self.add_card,
            "remove": self.remove_card,
            "import": self.import_cards_menu,
            "export": self.export_cards_menu,
            "ask": self.ask,
            "log": self.save_log,
            "hardest card": self.hardest_cards,
            "reset stats": self.reset_stats,
        }

    def _say(self, text: str) -> None:
        self.console.write_line(text)

    def _ask(self, prompt: str) -> str:
        self.console.write_line(prompt)
        return self.console.read_line()

    # ------------------------------------------------------------------
    # command loop
    # ------------------------------------------------------------------

    def run(self, import_path: str | None = None, export_path: str | None = None) -> int:
        if import_path:
            self.import_cards(import_path)

        while True:
            try:
                choice = self._ask(ACTION_PROMPT)
            except EOFError:
                logger.debug("end of input, leaving")
                break
            if choice == "exit":
                break
            action = self._actions.get(choice)
            if action is None:
                continue
            logger.debug("action=%s", choice)
            try:
                action()
            except EOFError:
                logger.debug("end of input inside %r, leaving", choice)
                break

        self._say("Bye bye!")
        if export_path:
            self.export_cards(export_path)
        return 0

    # ------------------------------------------------------------------
    # actions
    # ------------------------------------------------------------------

    def add_card(self) -> Result:
        term = self._ask("The card:")
        if self.store.contains_term(term):
            self._say(f'The card "{term}" already exists.')
            return Result.TERM_ALREADY_EXIST

        definition = self._ask("The definition of the card:")
        if self.store.contains_definition(definition):
            self._say(f'The definition "{definition}" already exists.')
            return Result.DEFINITION_ALREADY_EXIST

        self.store.add(Card(term, definition))
        self._say(f'The pair ("{term}":"{definition}") has been added.')
        return Result.SUCCESS

    def remove_card(self) -> Result:
        term = self._ask("Which card?")
        card = self.store.get(term)
        if card is None:
            self._say(f'Can\'t remove "{term}": there is no such card.')
            return Result.TERM_NOT_EXIST
        self.store.remove(card.term)
        self._say("The card has been removed.")
        return Result.SUCCESS

    def import_cards_menu(self) -> Result:
        return self.import_cards(self._ask("File name:"))

    def export_cards_menu(self) -> Result:
        return self.export_cards(self._ask("File name:"))

    def import_cards(self, path: str | Path) -> Result:
        p = Path(path)
        if not p.exists():
            self._say("File not found.")
            return Result.FILE_NOT_FOUND
        try:
            cards = read_cards(p, encoding=self.encoding)
        except CardFileError as e:
            logger.warning("rejecting card file: %s", e)
            self._say(f"File is corrupted: {e}")
            return Result.FILE_INVALID
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("failed to read %s: %s", p, e)
            self._say(f"Cannot read file: {e}")
            return Result.FILE_ERROR

        for card in cards:
            self.store.put(card)
        self._say(f"{len(cards)} cards have been loaded.")
        return Result.SUCCESS

    def export_cards(self, path: str | Path) -> Result:
        try:
            n = write_cards(path, self.store.cards(), encoding=self.encoding)
        except OSError as e:
            logger.warning("failed to write %s: %s", path, e)
            self._say(f"Cannot write file: {e}")
            return Result.FILE_ERROR
        self._say(f"{n} cards have been saved.")
        return Result.SUCCESS

    def ask(self) -> Result:
        raw = self._ask("How many times to ask?")
        try:
            rounds = int(raw.strip())
        except ValueError:
            rounds = -1
        if rounds < 0:
            self._say(f'Invalid number: "{raw}".')
            return Result.INVALID_NUMBER
        if rounds and not len(self.store):
            self._say("There are no cards to ask.")
            return Result.NO_CARDS

        for _ in range(rounds):
            card = self.rng.choice(self.store.cards())
            answer = self._ask(f'Print the definition of "{card.term}":')
            if answer == card.definition:
                self._say("Correct!")
                continue

            other = self.store.find_by_definition(answer)
            if other is not None:
                self._say(
                    f'Wrong. The right answer is "{card.definition}", '
                    f'but your definition is correct for "{other.term}".'
                )
            else:
                self._say(f'Wrong. The right answer is "{card.definition}".')
            card.wrong_answers += 1
        return Result.SUCCESS

    def save_log(self) -> Result:
        path = self._ask("File name:")
        # snapshot now: the confirmation line below is not part of the file
        lines = list(self.console.transcript)
        try:
            write_lines(path, lines, encoding=self.encoding)
        except OSError as e:
            logger.warning("failed to write log %s: %s", path, e)
            self._say(f"Cannot write file: {e}")
            return Result.FILE_ERROR
        self._say("The log has been saved.")
        return Result.SUCCESS

    def hardest_cards(self) -> Result:
        hardest = self.store.hardest()
        if not hardest:
            self._say("There are no cards with errors.")
            return Result.WRONG_ANSWERS_NO

        top = hardest[0].wrong_answers
        terms = ", ".join(f'"{c.term}"' for c in hardest)
        if len(hardest) == 1:
            self._say(f"The hardest card is {terms}. You have {top} errors answering it.")
        else:
            self._say(f"The hardest cards are {terms}. You have {top} errors answering them.")
        return Result.WRONG_ANSWERS_YES

    def reset_stats(self) -> Result:
        self.store.reset_stats()
        self._say("Card statistics have been reset.")
        return Result.SUCCESS


def new_session(*, seed: int | None = None, encoding: str = "utf-8") -> FlashcardSession:
    return FlashcardSession(LoggingConsole(), rng=random.Random(seed), encoding=encoding)
