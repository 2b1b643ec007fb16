"""
Science Token Controller - Progress tokens revealed on the shared board.
"""

from __future__ import annotations
import random

from .errors import EngineInvariantFailure
from .state import ScienceProgressToken

BOARD_SIZE = 5


class ScienceTokenController:
    """
    Draws five distinct tokens onto the board.

    The other five stay in a hidden reserve.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()
        self._reserve: list[ScienceProgressToken] = []
        self._board: list[ScienceProgressToken | None] = []

    @property
    def board(self) -> list[ScienceProgressToken | None]:
        return list(self._board)

    @property
    def supply_count(self) -> int:
        return len(self._reserve)

    def reset(self) -> None:
        self._reserve = list(ScienceProgressToken)
        self._board = [self._next_token() for _ in range(BOARD_SIZE)]

    def get_token(self, index: int) -> ScienceProgressToken | None:
        if index < 0 or index >= len(self._board):
            raise IndexError(f"No science token slot at index {index}")
        return self._board[index]

    def _next_token(self) -> ScienceProgressToken:
        if not self._reserve:
            raise EngineInvariantFailure("No more tokens in the supply.")
        index = self._rng.randrange(len(self._reserve))
        return self._reserve.pop(index)
