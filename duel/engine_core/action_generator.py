"""
Action Generator - Legal card actions for the player whose turn it is.

Used by bots to enumerate moves and by tests to check that a match can
always continue: every clickable card can be discarded, so while the
stage has cards there is at least one legal action.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .action import Action, ActionType

if TYPE_CHECKING:
    from .game import GameController


def legal_actions(game: GameController) -> list[Action]:
    """
    All legal actions for the active player.

    Buys come first (only cards the player can pay for), then one discard
    per clickable card. Empty once the match has a winner.
    """
    if game.winner() is not None:
        return []

    player_id = game.turn.as_player_id()
    clickable = game.card_stage.clickable_cards()

    buys = [
        Action.click_card(card.uid)
        for card in clickable
        if game.payment_for(card, player_id) is not None
    ]
    discards = [Action.discard_card(card.uid) for card in clickable]
    return buys + discards


def is_legal(game: GameController, action: Action) -> bool:
    """Check if a specific action is legal."""
    for candidate in legal_actions(game):
        if (
            candidate.action_type is action.action_type
            and candidate.payload.card_id == action.payload.card_id
        ):
            return True
    return False


def buy_actions(actions: list[Action]) -> list[Action]:
    return [action for action in actions if action.action_type is ActionType.STAGE_CARD_CLICKED]
