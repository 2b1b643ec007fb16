"""
Deck Controller - The draw pile of the current age.
"""

from __future__ import annotations
import logging
import random
import uuid
from dataclasses import replace
from typing import TypeVar

from ..catalogue import AGE_CARDS, GUILD_CARDS, GUILDS_PER_GAME, PURGE_COUNT
from .errors import EmptyDeck
from .state import Age, Card

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DeckController:
    """
    Holds the draw pile for one age.

    reset() builds it from the catalogue, purges cards face down and, in the
    last age, shuffles in random guilds. draw() takes a random card.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()
        self._cards: list[Card] = []

    @property
    def deck(self) -> list[Card]:
        return list(self._cards)

    @property
    def deck_size(self) -> int:
        return len(self._cards)

    def reset(self, age: Age) -> None:
        """Rebuild the pile for an age. Card uids are fresh every time."""
        cards = self.shuffle(list(AGE_CARDS[age]))
        self._cards = cards

        # Cards removed from play, unseen by either player
        for _ in range(PURGE_COUNT):
            self.draw()

        if age is Age.AGE_3:
            guilds = self.shuffle(list(GUILD_CARDS))[:GUILDS_PER_GAME]
            self._cards = self.shuffle(self._cards + guilds)

        self._cards = [replace(card, uid=str(uuid.uuid4())) for card in self._cards]
        logger.debug("Deck reset for age %d with %d cards", age.value, len(self._cards))

    def draw(self) -> Card:
        """Remove and return a uniformly random card."""
        if not self._cards:
            raise EmptyDeck("There are no more cards in the deck to draw.")

        index = self._rng.randrange(len(self._cards))
        return self._cards.pop(index)

    def shuffle(self, cards: list[T]) -> list[T]:
        """
        Return a uniformly shuffled copy.

        While cards remain, one is picked at random and put on top of the
        new pile.
        """
        remaining = list(cards)
        shuffled: list[T] = []
        while remaining:
            index = self._rng.randrange(len(remaining))
            shuffled.append(remaining.pop(index))
        return shuffled
