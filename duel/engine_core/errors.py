"""
Errors - Exception taxonomy for the rules engine.

Every rejection carries an ErrorCode so the room's dispatch boundary can
turn it into an error message for the acting player:

- ActionValidationError: malformed or unrecognized action (no state change)
- TurnViolation: action from the player whose turn it is not (no state change)
- RuleViolation: action breaks a game rule (no state change)
- EngineInvariantFailure: setup bug (empty deck, age past the last one)
- EffectFailure: a purchase effect failed after the card changed hands
"""

from __future__ import annotations
from enum import Enum


class ErrorCode(str, Enum):
    """Structured error codes sent to clients."""
    MESSAGE_NOT_RECOGNIZED = "MESSAGE_NOT_RECOGNIZED"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    UNKNOWN_PLAYER = "UNKNOWN_PLAYER"
    CARD_NOT_FOUND = "CARD_NOT_FOUND"
    CARD_NOT_CLICKABLE = "CARD_NOT_CLICKABLE"
    CANNOT_AFFORD = "CANNOT_AFFORD"
    NOT_ENOUGH_PLAYERS = "NOT_ENOUGH_PLAYERS"
    TOO_MANY_PLAYERS = "TOO_MANY_PLAYERS"
    GAME_NOT_STARTED = "GAME_NOT_STARTED"
    GAME_ALREADY_STARTED = "GAME_ALREADY_STARTED"
    GAME_OVER = "GAME_OVER"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DuelError(Exception):
    """Base class for all engine errors."""

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class ActionValidationError(DuelError):
    """Raised when an incoming message is not a recognized action."""

    default_code = ErrorCode.MESSAGE_NOT_RECOGNIZED


class TurnViolation(DuelError):
    """Raised when a player acts outside of their turn."""

    default_code = ErrorCode.NOT_YOUR_TURN


class RuleViolation(DuelError):
    """
    Raised when an action is well-formed but not allowed by the rules.

    The rule broken decides the code, so one must always be given.
    """

    def __init__(self, message: str, code: ErrorCode):
        super().__init__(message, code)


class RoomNotFound(DuelError):
    """Raised when a room id is not registered."""

    default_code = ErrorCode.ROOM_NOT_FOUND


class EngineInvariantFailure(DuelError):
    """
    Raised when the engine reaches a state that correct setup makes impossible.

    Fatal for the match that raised it.
    """


class EmptyDeck(EngineInvariantFailure):
    """Raised when drawing from an exhausted deck."""


class NoMoreAges(EngineInvariantFailure):
    """Raised when advancing past the final age."""


class EffectFailure(DuelError):
    """
    Raised when a purchase effect fails.

    The card transfer that triggered the effect has already been committed
    and is not rolled back.
    """
