"""
Stage Controller - The staggered card pyramid of the current age.

The pyramid is a grid of FaceUp / FaceDown / Empty cells built from the
age's row template. Cards lower in the pyramid cover the cards above them:

- A face-up card can be taken when it is in the bottom row or when both
  cells covering it are empty.
- Taking a card empties its cell and tries to reveal the (up to) two
  cards it was covering.

Covering cells of (row, col):
- even row: (row + 1, col) and (row + 1, col + 1), the second one skipped
  in the last column
- odd row: (row + 1, col) and (row + 1, col - 1), the second one skipped
  in column 0
"""

from __future__ import annotations
import logging

from ..catalogue.layouts import FACE_DOWN, FACE_UP, PLACEHOLDER, STAGE_LAYOUTS
from .deck import DeckController
from .state import Age, Card, Empty, FaceDown, FaceUp, StageCell

logger = logging.getLogger(__name__)


class StageController:
    """Owns the pyramid; draws from the deck to fill it."""

    def __init__(self, deck: DeckController):
        self._deck = deck
        self._stage: list[list[StageCell]] = []
        self.discarded: list[Card] = []

    @property
    def rows(self) -> list[list[StageCell]]:
        """A copy of the grid."""
        return [list(row) for row in self._stage]

    @property
    def width(self) -> int:
        return len(self._stage[0]) if self._stage else 0

    @property
    def is_empty(self) -> bool:
        return all(isinstance(cell, Empty) for row in self._stage for cell in row)

    def set(self, age: Age) -> None:
        """Lay out the pyramid for an age."""
        self._stage = []
        self.discarded = []

        for template in STAGE_LAYOUTS[age]:
            row: list[StageCell] = []
            for kind in template:
                if kind == FACE_UP:
                    row.append(FaceUp(self._deck.draw()))
                elif kind == FACE_DOWN:
                    row.append(FaceDown(self._deck.draw()))
                elif kind == PLACEHOLDER:
                    row.append(Empty())
                else:
                    raise ValueError(f"Unknown cell kind in stage template: {kind!r}")
            self._stage.append(row)

        logger.debug("Stage set for age %d (%d rows)", age.value, len(self._stage))

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_card(self, uid: str) -> Card | None:
        """Find a face-up card by uid."""
        position = self._find(uid)
        if position is None:
            return None
        row, col = position
        cell = self._stage[row][col]
        return cell.card if isinstance(cell, FaceUp) else None

    def is_clickable(self, card: Card) -> bool:
        position = self._find(card.uid)
        if position is None:
            return False

        row, col = position
        if row == len(self._stage) - 1:
            return True
        return self._is_uncovered(row, col)

    def clickable_cards(self) -> list[Card]:
        """All face-up cards that can currently be taken, top row first."""
        cards = []
        for row in self._stage:
            for cell in row:
                if isinstance(cell, FaceUp) and self.is_clickable(cell.card):
                    cards.append(cell.card)
        return cards

    # =========================================================================
    # Mutation
    # =========================================================================

    def remove(self, card: Card) -> None:
        """Take a face-up card off the stage and reveal what it uncovered."""
        position = self._find(card.uid)
        if position is None:
            raise ValueError(f"Card {card.uid} is not face up on the stage")

        row, col = position
        self._stage[row][col] = Empty()

        self.reveal_if_able(row - 1, col)
        if row % 2 == 0:
            self.reveal_if_able(row - 1, col + 1)
        else:
            self.reveal_if_able(row - 1, col - 1)

    def discard(self, card: Card) -> None:
        """Remove a card without giving it to anyone."""
        self.remove(card)
        self.discarded.append(card)

    def reveal_if_able(self, row: int, col: int) -> None:
        """Flip a face-down card once nothing covers it."""
        if row < 0 or col < 0 or row >= len(self._stage) or col >= self.width:
            return

        cell = self._stage[row][col]
        if isinstance(cell, (Empty, FaceUp)):
            return
        if not isinstance(cell, FaceDown):
            raise TypeError(f"Unknown stage cell: {cell!r}")

        if row != len(self._stage) - 1 and not self._is_uncovered(row, col):
            return

        self._stage[row][col] = FaceUp(cell.card)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _find(self, uid: str) -> tuple[int, int] | None:
        """Position of the face-up card with this uid."""
        for row_index, row in enumerate(self._stage):
            for col_index, cell in enumerate(row):
                if isinstance(cell, FaceUp) and cell.card.uid == uid:
                    return row_index, col_index
        return None

    def _is_uncovered(self, row: int, col: int) -> bool:
        """Both covering cells in the next row are empty (row is not the last)."""
        below = self._stage[row + 1]
        if not isinstance(below[col], Empty):
            return False

        if row % 2 == 0:
            return col == self.width - 1 or isinstance(below[col + 1], Empty)
        return col == 0 or isinstance(below[col - 1], Empty)
