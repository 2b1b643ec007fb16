"""
Engine Core - Rules and state of a two-player card duel.

The engine is the runtime that:
1. Builds each age's deck and lays out its pyramid
2. Tracks both players' cards, coins and penalties
3. Validates and applies card purchases and discards
4. Resolves purchase effects and the conflict track
5. Decides the winner and projects the state for clients

Controllers live in their own modules (duel.engine_core.game and friends);
the catalogue depends on the data types exported here.
"""

from .state import (
    Age,
    Card,
    CardCategory,
    ConflictTerminal,
    Empty,
    FaceDown,
    FaceUp,
    Outcome,
    PlayerState,
    Resource,
    Seat,
    Side,
)
from .errors import (
    ActionValidationError,
    DuelError,
    EffectFailure,
    EngineInvariantFailure,
    ErrorCode,
    RoomNotFound,
    RuleViolation,
    TurnViolation,
)
from .action import Action, ActionPayload, ActionType
from .projection import GameStateView, PlayerView

__all__ = [
    "Age",
    "Card",
    "CardCategory",
    "ConflictTerminal",
    "Empty",
    "FaceDown",
    "FaceUp",
    "Outcome",
    "PlayerState",
    "Resource",
    "Seat",
    "Side",
    "ActionValidationError",
    "DuelError",
    "EffectFailure",
    "EngineInvariantFailure",
    "ErrorCode",
    "RoomNotFound",
    "RuleViolation",
    "TurnViolation",
    "Action",
    "ActionPayload",
    "ActionType",
    "GameStateView",
    "PlayerView",
]
