"""
Test helpers for building exact game situations.
"""

from dataclasses import replace

from ..catalogue import get_card_by_name
from ..engine_core.game import GameController
from ..engine_core.state import Card, FaceUp


def stamp(name: str, uid: str | None = None) -> Card:
    """A catalogue card with a uid, as the deck would deal it."""
    template = get_card_by_name(name)
    if template is None:
        raise KeyError(name)
    return replace(template, uid=uid or f"{name.lower().replace(' ', '-')}-uid")


def place_on_stage(game: GameController, card: Card, col: int = 0) -> Card:
    """Put a card face up in the bottom row, where it is always clickable."""
    game.card_stage._stage[-1][col] = FaceUp(card)
    return card


def clear_stage(game: GameController) -> int:
    """Take every card off the stage, in pyramid order. Returns the count."""
    removed = 0
    while not game.card_stage.is_empty:
        clickable = game.card_stage.clickable_cards()
        assert clickable, "stage has cards but none can be taken"
        for card in clickable:
            game.card_stage.remove(card)
            removed += 1
    return removed
