"""
Conflict Controller - The military track shared by both players.
"""

from __future__ import annotations

from .state import ConflictTerminal, Side

CONFLICT_LIMIT = 8


class ConflictController:
    """
    A signed counter in [-8, 8]: positive favors A, negative favors B.

    Pushing past either end snaps to a terminal marker; after that nothing
    moves the track again.
    """

    def __init__(self):
        self._status: int | ConflictTerminal = 0

    @property
    def status(self) -> int | ConflictTerminal:
        return self._status

    @property
    def is_terminal(self) -> bool:
        return isinstance(self._status, ConflictTerminal)

    def reset(self) -> None:
        self._status = 0

    def update_status(self, delta: int) -> None:
        if self.is_terminal:
            return

        value = self._status + delta
        if value > CONFLICT_LIMIT:
            self._status = ConflictTerminal.A_FAVORED_TERMINAL
        elif value < -CONFLICT_LIMIT:
            self._status = ConflictTerminal.B_FAVORED_TERMINAL
        else:
            self._status = value

    def get_victory_points_for_player(self, side: Side) -> int:
        """Tiered bonus for the side the track leans toward."""
        if self.is_terminal:
            return 0

        value = self._status
        if (side is Side.A and value <= 0) or (side is Side.B and value >= 0):
            return 0

        magnitude = abs(value)
        if magnitude >= 6:
            return 10
        if magnitude >= 3:
            return 5
        if magnitude >= 1:
            return 2
        return 0
