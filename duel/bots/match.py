"""
Bot matches - Two policies playing a full match through a room.
"""

from __future__ import annotations
import logging
import random
import uuid
from dataclasses import dataclass, field

from ..engine_core.action import Action
from ..engine_core.action_generator import legal_actions
from ..engine_core.state import Outcome, Side
from ..session.room import AwaitingCardClick, GameOver, Room
from .policy import BotPolicy

logger = logging.getLogger(__name__)

# Three ages of twenty cards
MAX_TURNS = 60


@dataclass
class MatchResult:
    """Summary of a finished bot match."""
    outcome: Outcome
    turns: int
    final_age: int
    points: dict[Side, int] = field(default_factory=dict)
    coins: dict[Side, int] = field(default_factory=dict)


def play_match(
    policy_a: BotPolicy,
    policy_b: BotPolicy,
    rng: random.Random | None = None,
) -> MatchResult:
    """
    Play one match to the end.

    Raises:
        RuntimeError: if a bot's action is rejected or the match does not
            end within MAX_TURNS
    """
    room = Room(str(uuid.uuid4()), rng=rng)
    seats = {
        Side.A: room.join(policy_a.get_name()),
        Side.B: room.join(policy_b.get_name()),
    }
    policies = {Side.A: policy_a, Side.B: policy_b}

    _apply(room, seats[Side.A].player_id, Action.start_game())

    turns = 0
    while not isinstance(room.phase, GameOver):
        if turns >= MAX_TURNS:
            raise RuntimeError(f"Match did not finish within {MAX_TURNS} turns")
        if not isinstance(room.phase, AwaitingCardClick):
            raise RuntimeError(f"Unexpected room phase {room.phase!r}")

        side = room.phase.side
        policy = policies[side]
        decision = policy.select_action(legal_actions(room.game))
        logger.debug(
            "Turn %d, %s (%s): %s %s (%s, %d considered)",
            turns + 1, side.value, policy.get_name(),
            decision.action.action_type.value, decision.action.payload.card_id,
            decision.explanation, decision.evaluated_actions,
        )
        _apply(room, seats[side].player_id, decision.action)
        turns += 1

    game = room.game
    result = MatchResult(
        outcome=room.phase.outcome,
        turns=turns,
        final_age=game.age.value,
        points={side: game.total_victory_points(side) for side in Side},
        coins={side: game.players[side].coins for side in Side},
    )
    logger.info("Bot match finished: %s after %d turns", result.outcome.value, turns)
    return result


def _apply(room: Room, player_id: str, action: Action) -> None:
    for delivery in room.handle(player_id, action):
        if delivery.message.get("kind") == "ERROR":
            raise RuntimeError(f"Bot action rejected: {delivery.message['code']}: {delivery.message['message']}")
