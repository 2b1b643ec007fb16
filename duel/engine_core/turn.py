"""
Turn Controller - Whose turn it is.
"""

from __future__ import annotations
from typing import Callable

from .state import Side


class TurnController:
    """
    Tracks the active side and fires a single hook whenever the turn is set.

    The hook is how the room re-arms the next player's card click.
    """

    def __init__(
        self,
        player_a_id: str,
        player_b_id: str,
        on_turn_set: Callable[[Side], None] | None = None,
    ):
        self._turn = Side.A
        self._player_ids = {Side.A: player_a_id, Side.B: player_b_id}
        self._on_turn_set = on_turn_set or (lambda side: None)

    def reset(self) -> None:
        self._turn = Side.A
        self._on_turn_set(self._turn)

    def set(self, player: str | Side) -> None:
        """Give the turn to a side, by side or by player id."""
        for side, player_id in self._player_ids.items():
            if player is side or player == player_id:
                self._turn = side
                self._on_turn_set(side)
                return
        raise ValueError(f"Unknown player: {player!r}")

    def toggle(self) -> None:
        self._turn = self._turn.other
        self._on_turn_set(self._turn)

    def as_side(self) -> Side:
        return self._turn

    def as_player_id(self) -> str:
        return self._player_ids[self._turn]

    def is_turn(self, player: str | Side) -> bool:
        return player is self._turn or player == self.as_player_id()

    def confirm_turn(self) -> Callable[[str], bool]:
        """A gate that only lets the currently active player through."""
        return lambda player_id: player_id == self.as_player_id()
