"""
Action System - Validated requests handed to the engine.

Actions arrive already parsed and schema-validated, tagged with the
acting player's id by the room. The engine only checks game rules.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions a player can send."""
    START_GAME = "START_GAME"
    STAGE_CARD_CLICKED = "STAGE_CARD_CLICKED"
    STAGE_CARD_DISCARDED = "STAGE_CARD_DISCARDED"


@dataclass
class ActionPayload:
    """
    Payload for an action.

    Different action types use different fields; validation of the shape
    happens at the message boundary.
    """
    card_id: str | None = None
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class Action:
    """A complete action."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def start_game(cls) -> Action:
        return cls(action_type=ActionType.START_GAME)

    @classmethod
    def click_card(cls, card_id: str) -> Action:
        """Factory for taking a card from the stage."""
        return cls(
            action_type=ActionType.STAGE_CARD_CLICKED,
            payload=ActionPayload(card_id=card_id),
        )

    @classmethod
    def discard_card(cls, card_id: str) -> Action:
        """Factory for discarding a stage card for coins."""
        return cls(
            action_type=ActionType.STAGE_CARD_DISCARDED,
            payload=ActionPayload(card_id=card_id),
        )
