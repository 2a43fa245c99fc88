"""Card file codec.

Card files are JSON Lines: one ``{"term", "definition", "wrong_answers"}``
object per line, no header and no record count. End of file ends the stream.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from .types import Card, CardFileError
from .utils import iter_jsonl, write_jsonl

logger = logging.getLogger(__name__)


def read_cards(path: str | Path, *, encoding: str = "utf-8") -> list[Card]:
    """Decode every card in path.

    Raises CardFileError on the first malformed record; nothing is returned
    partially. OSError (including FileNotFoundError) propagates.
    """
    cards: list[Card] = []
    for line_no, raw in iter_jsonl(path, encoding=encoding):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CardFileError(str(path), line_no, f"invalid json: {e.msg}") from e
        if not isinstance(data, dict):
            raise CardFileError(str(path), line_no, "record is not an object")
        try:
            cards.append(Card.from_dict(data))
        except ValueError as e:
            raise CardFileError(str(path), line_no, str(e)) from e
    logger.info("read %d cards from %s", len(cards), path)
    return cards


def write_cards(path: str | Path, cards: Iterable[Card], *, encoding: str = "utf-8") -> int:
    n = write_jsonl(path, (c.to_dict() for c in cards), encoding=encoding)
    logger.info("wrote %d cards to %s", n, path)
    return n
