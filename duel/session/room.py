"""
Room - Two seats, one match, and the dispatch boundary.

A room seats two players (A first, then B) and hosts at most one match.
Every inbound action goes through Room.handle(), which is the only place
engine errors are turned into messages:

- Success: the projection is broadcast to both seats
- Rejection: {kind: "ERROR", code, message} goes to the actor only
- EffectFailure: INTERNAL_ERROR to the actor, state still broadcast
- EngineInvariantFailure or any other exception: INTERNAL_ERROR to the
  actor, match discarded

Turn gating is an explicit phase. The card-click phase is armed only by
the engine's turn hook and is replaced by ResolvingAction while an action
runs, so a second click cannot interleave with the first.

Rooms hold player ids, never connections.
"""

from __future__ import annotations
import logging
import random
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from ..engine_core.action import Action, ActionType
from ..engine_core.errors import (
    ActionValidationError,
    DuelError,
    EffectFailure,
    EngineInvariantFailure,
    ErrorCode,
    RuleViolation,
    TurnViolation,
)
from ..engine_core.game import GameController
from ..engine_core.projection import GameStateView, PlayerView
from ..engine_core.state import Outcome, Seat, Side

logger = logging.getLogger(__name__)


# =============================================================================
# Phases
# =============================================================================

@dataclass(frozen=True)
class AwaitingPlayers:
    """Fewer than two seats are taken."""


@dataclass(frozen=True)
class AwaitingStart:
    """Both seats taken, no match running."""


@dataclass(frozen=True)
class AwaitingCardClick:
    """Only this side may act."""
    side: Side


@dataclass(frozen=True)
class ResolvingAction:
    """An action by this side is being applied."""
    side: Side


@dataclass(frozen=True)
class GameOver:
    outcome: Outcome


Phase = Union[AwaitingPlayers, AwaitingStart, AwaitingCardClick, ResolvingAction, GameOver]


class RoomStatus(str, Enum):
    """Coarse room status for listings."""
    AWAITING_PLAYERS = "awaiting_players"
    AWAITING_START = "awaiting_start"
    IN_PROGRESS = "in_progress"
    GAME_OVER = "game_over"


@dataclass
class Delivery:
    """A message and the player ids it goes to."""
    recipients: list[str]
    message: dict[str, Any] = field(default_factory=dict)


def error_message(code: ErrorCode, message: str) -> dict[str, Any]:
    return {"kind": "ERROR", "code": code.value, "message": message}


# =============================================================================
# Room
# =============================================================================

class Room:
    """
    One room.

    Usage:
        room = Room(room_id)
        alice = room.join("alice")
        bob = room.join("bob")

        for delivery in room.handle(alice.player_id, Action.start_game()):
            send(delivery.recipients, delivery.message)
    """

    def __init__(self, room_id: str, rng: random.Random | None = None):
        self.room_id = room_id
        self.created_at = time.time()
        self._rng = rng or random.Random()

        self.seats: dict[Side, Seat] = {}
        self.game: GameController | None = None
        self.phase: Phase = AwaitingPlayers()

    # =========================================================================
    # Seats
    # =========================================================================

    @property
    def players(self) -> list[Seat]:
        return [self.seats[side] for side in (Side.A, Side.B) if side in self.seats]

    @property
    def player_ids(self) -> list[str]:
        return [seat.player_id for seat in self.players]

    @property
    def is_full(self) -> bool:
        return len(self.seats) == 2

    @property
    def status(self) -> RoomStatus:
        if isinstance(self.phase, AwaitingPlayers):
            return RoomStatus.AWAITING_PLAYERS
        if isinstance(self.phase, AwaitingStart):
            return RoomStatus.AWAITING_START
        if isinstance(self.phase, GameOver):
            return RoomStatus.GAME_OVER
        return RoomStatus.IN_PROGRESS

    def join(self, name: str) -> Seat:
        """Take the first free seat."""
        if self.is_full:
            raise RuleViolation("This room already has two players.", ErrorCode.TOO_MANY_PLAYERS)

        side = Side.A if Side.A not in self.seats else Side.B
        seat = Seat(player_id=str(uuid.uuid4()), name=name)
        self.seats[side] = seat

        if self.is_full:
            self.phase = AwaitingStart()

        logger.info("Room %s: %s joined as %s", self.room_id, name, side.value)
        return seat

    def leave(self, player_id: str) -> list[Delivery]:
        """
        Free a seat. Any match in progress is discarded; there is no resume.

        Returns the lobby snapshot for whoever is still seated.
        """
        side = self.side_of(player_id)
        seat = self.seats.pop(side)

        if self.game is not None:
            logger.info("Room %s: %s left, discarding match", self.room_id, seat.name)
            self.game = None
        else:
            logger.info("Room %s: %s left", self.room_id, seat.name)
        self.phase = AwaitingPlayers()

        if not self.seats:
            return []
        return [self._broadcast()]

    def side_of(self, player_id: str) -> Side:
        for side, seat in self.seats.items():
            if seat.player_id == player_id:
                return side
        raise RuleViolation(f"Unknown player {player_id}", ErrorCode.UNKNOWN_PLAYER)

    # =========================================================================
    # Projection
    # =========================================================================

    def snapshot(self) -> dict[str, Any]:
        """The match projection, or a lobby view when no match is running."""
        if self.game is not None:
            return self.game.state.to_message()

        lobby = {
            side: PlayerView(id=seat.player_id, name=seat.name, side=side)
            for side, seat in self.seats.items()
        }
        return GameStateView(
            room_id=self.room_id,
            in_progress=False,
            player_a=lobby.get(Side.A),
            player_b=lobby.get(Side.B),
        ).to_message()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def handle(self, player_id: str, action: Action) -> list[Delivery]:
        """Apply one action and return what to send to whom."""
        try:
            self.side_of(player_id)
            return self._dispatch(player_id, action)
        except EngineInvariantFailure:
            logger.exception("Room %s: engine invariant broken, discarding match", self.room_id)
            return self._abandon_match(player_id)
        except DuelError as e:
            if isinstance(self.phase, ResolvingAction):
                self.phase = AwaitingCardClick(self.phase.side)
            logger.debug("Room %s: rejected %s from %s: %s", self.room_id, action.action_type.value, player_id, e.message)
            return [self._unicast_error(player_id, e.code, e.message)]
        except Exception:
            # The match may be half-updated
            logger.exception("Room %s: unexpected error handling %s, discarding match", self.room_id, action.action_type.value)
            return self._abandon_match(player_id)

    def _abandon_match(self, player_id: str) -> list[Delivery]:
        self.game = None
        self.phase = AwaitingStart() if self.is_full else AwaitingPlayers()
        return [self._unicast_error(player_id, ErrorCode.INTERNAL_ERROR, "Internal error.")]

    def _dispatch(self, player_id: str, action: Action) -> list[Delivery]:
        if action.action_type is ActionType.START_GAME:
            return self._start_game()
        if action.action_type is ActionType.STAGE_CARD_CLICKED:
            return self._resolve_card_action(player_id, action, discard=False)
        if action.action_type is ActionType.STAGE_CARD_DISCARDED:
            return self._resolve_card_action(player_id, action, discard=True)
        raise ActionValidationError(f"Unrecognized action: {action.action_type}")

    def _start_game(self) -> list[Delivery]:
        if not self.is_full:
            raise RuleViolation("Two players are needed to start.", ErrorCode.NOT_ENOUGH_PLAYERS)
        if self.game is not None and not isinstance(self.phase, GameOver):
            raise RuleViolation("The game has already started.", ErrorCode.GAME_ALREADY_STARTED)

        # The turn hook arms the first card click during construction
        self.game = GameController(
            self.room_id,
            self.seats[Side.A],
            self.seats[Side.B],
            on_turn_changed=self._on_turn_changed,
            rng=self._rng,
        )
        logger.info("Room %s: match started", self.room_id)
        return [self._broadcast()]

    def _resolve_card_action(self, player_id: str, action: Action, discard: bool) -> list[Delivery]:
        if self.game is None:
            raise RuleViolation("The game has not started.", ErrorCode.GAME_NOT_STARTED)
        if isinstance(self.phase, GameOver):
            raise RuleViolation("The game is over.", ErrorCode.GAME_OVER)

        side = self.side_of(player_id)
        if not isinstance(self.phase, AwaitingCardClick) or self.phase.side is not side:
            raise TurnViolation("It is not your turn.")

        card_id = action.payload.card_id
        if not card_id:
            raise ActionValidationError("A card id is required.")

        self.phase = ResolvingAction(side)
        deliveries: list[Delivery] = []

        try:
            if discard:
                self.game.on_card_discarded(card_id, player_id)
            else:
                self.game.on_card_clicked(card_id, player_id)
        except EffectFailure as e:
            # The purchase is committed; report and carry on with the turn
            logger.error("Room %s: %s", self.room_id, e.message)
            deliveries.append(self._unicast_error(player_id, ErrorCode.INTERNAL_ERROR, "Internal error."))

        self.game.complete_turn()

        outcome = self.game.winner()
        if outcome is not None:
            self.phase = GameOver(outcome)
            logger.info("Room %s: game over, outcome %s", self.room_id, outcome.value)

        deliveries.append(self._broadcast())
        return deliveries

    def _on_turn_changed(self, side: Side) -> None:
        self.phase = AwaitingCardClick(side)

    def _broadcast(self) -> Delivery:
        return Delivery(recipients=self.player_ids, message=self.snapshot())

    def _unicast_error(self, player_id: str, code: ErrorCode, message: str) -> Delivery:
        return Delivery(recipients=[player_id], message=error_message(code, message))
