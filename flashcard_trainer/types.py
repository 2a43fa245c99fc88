from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class Result(Enum):
    """Outcome of a single session action."""

    TERM_ALREADY_EXIST = "term_already_exist"
    DEFINITION_ALREADY_EXIST = "definition_already_exist"
    TERM_NOT_EXIST = "term_not_exist"
    FILE_NOT_FOUND = "file_not_found"
    SUCCESS = "success"
    WRONG_ANSWERS_NO = "wrong_answers_no"
    WRONG_ANSWERS_YES = "wrong_answers_yes"
    # failures that surface as a message instead of a crash
    FILE_INVALID = "file_invalid"
    FILE_ERROR = "file_error"
    INVALID_NUMBER = "invalid_number"
    NO_CARDS = "no_cards"


@dataclass
class Card:
    term: str
    definition: str
    wrong_answers: int = 0  # mutated only by ask / reset stats

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Card":
        term = data.get("term")
        definition = data.get("definition")
        wrong = data.get("wrong_answers", 0)
        if not isinstance(term, str) or not isinstance(definition, str):
            raise ValueError("term and definition must be strings")
        if isinstance(wrong, bool) or not isinstance(wrong, int) or wrong < 0:
            raise ValueError(f"wrong_answers must be a non-negative int, got {wrong!r}")
        return Card(term=term, definition=definition, wrong_answers=wrong)


class CardStoreError(ValueError):
    pass


class DuplicateTermError(CardStoreError):
    def __init__(self, term: str):
        super().__init__(f"term already exists: {term}")
        self.term = term


class DuplicateDefinitionError(CardStoreError):
    def __init__(self, definition: str):
        super().__init__(f"definition already exists: {definition}")
        self.definition = definition


class CardFileError(ValueError):
    """Raised when a card file cannot be decoded."""

    def __init__(self, path: str, line_no: int, reason: str):
        super().__init__(f"{path}:{line_no}: {reason}")
        self.path = path
        self.line_no = line_no
        self.reason = reason
