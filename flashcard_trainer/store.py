"""Bidirectional card table.

Terms and definitions are both unique keys. The two lookup maps live only
inside ``CardStore`` and always reference the same ``Card`` instances.
"""
from __future__ import annotations

import logging
from typing import Iterator

from .types import Card, DuplicateDefinitionError, DuplicateTermError

logger = logging.getLogger(__name__)


class CardStore:
    def __init__(self, cards: list[Card] | None = None):
        self._by_term: dict[str, Card] = {}
        self._by_definition: dict[str, Card] = {}
        for card in cards or []:
            self.add(card)

    def __len__(self) -> int:
        return len(self._by_term)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._by_term.values()))

    def __contains__(self, term: object) -> bool:
        return term in self._by_term

    def get(self, term: str) -> Card | None:
        return self._by_term.get(term)

    def find_by_definition(self, definition: str) -> Card | None:
        return self._by_definition.get(definition)

    def contains_term(self, term: str) -> bool:
        return term in self._by_term

    def contains_definition(self, definition: str) -> bool:
        return definition in self._by_definition

    def cards(self) -> list[Card]:
        """Snapshot of all cards in insertion order."""
        return list(self._by_term.values())

    def add(self, card: Card) -> None:
        """Insert a new card; both keys must be unused."""
        if card.term in self._by_term:
            raise DuplicateTermError(card.term)
        if card.definition in self._by_definition:
            raise DuplicateDefinitionError(card.definition)
        self._by_term[card.term] = card
        self._by_definition[card.definition] = card

    def put(self, card: Card) -> None:
        """Insert or overwrite a card.

        An existing card with the same term is replaced, and its old
        definition slot is cleared. A different card that already owns the
        incoming definition is dropped.
        """
        old = self._by_term.get(card.term)
        if old is not None:
            self._discard(old)
        owner = self._by_definition.get(card.definition)
        if owner is not None:
            logger.debug("dropping %r: definition taken by imported %r", owner.term, card.term)
            self._discard(owner)
        self._by_term[card.term] = card
        self._by_definition[card.definition] = card

    def remove(self, term: str) -> Card:
        card = self._by_term[term]
        self._discard(card)
        return card

    def _discard(self, card: Card) -> None:
        self._by_term.pop(card.term, None)
        self._by_definition.pop(card.definition, None)

    def reset_stats(self) -> None:
        for card in self._by_term.values():
            card.wrong_answers = 0

    def max_wrong_answers(self) -> int:
        return max((c.wrong_answers for c in self._by_term.values()), default=0)

    def hardest(self) -> list[Card]:
        """Cards tied at the highest non-zero wrong-answer count."""
        top = self.max_wrong_answers()
        if top == 0:
            return []
        return [c for c in self._by_term.values() if c.wrong_answers == top]
