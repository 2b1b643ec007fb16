"""
Tests for the science token board and the turn controller.
"""

import random

import pytest

from ..engine_core.science import BOARD_SIZE, ScienceTokenController
from ..engine_core.state import ScienceProgressToken, Side
from ..engine_core.turn import TurnController


class TestScienceTokens:
    """Tests for the token board."""

    def test_reset_reveals_five_distinct_tokens(self, rng):
        tokens = ScienceTokenController(rng)
        tokens.reset()

        board = tokens.board
        assert len(board) == BOARD_SIZE
        assert len(set(board)) == BOARD_SIZE
        assert tokens.supply_count == len(ScienceProgressToken) - BOARD_SIZE

    def test_board_and_supply_are_disjoint(self, rng):
        tokens = ScienceTokenController(rng)
        tokens.reset()

        assert set(tokens.board).isdisjoint(tokens._reserve)

    def test_get_token_in_range(self, rng):
        tokens = ScienceTokenController(rng)
        tokens.reset()

        assert tokens.get_token(0) == tokens.board[0]
        assert tokens.get_token(BOARD_SIZE - 1) == tokens.board[-1]

    @pytest.mark.parametrize("index", [-1, BOARD_SIZE, 10])
    def test_get_token_out_of_range(self, index, rng):
        """Every index outside the board is rejected."""
        tokens = ScienceTokenController(rng)
        tokens.reset()

        with pytest.raises(IndexError):
            tokens.get_token(index)

    def test_seeded_boards_match(self):
        first = ScienceTokenController(random.Random(3))
        second = ScienceTokenController(random.Random(3))
        first.reset()
        second.reset()

        assert first.board == second.board

    def test_reset_refills_supply(self, rng):
        tokens = ScienceTokenController(rng)
        tokens.reset()
        tokens.reset()

        assert tokens.supply_count == len(ScienceProgressToken) - BOARD_SIZE


class TestTurn:
    """Tests for the turn controller."""

    def test_reset_gives_turn_to_a(self):
        calls = []
        turn = TurnController("a", "b", calls.append)

        turn.reset()

        assert turn.as_side() is Side.A
        assert turn.as_player_id() == "a"
        assert calls == [Side.A]

    def test_toggle_fires_hook(self):
        calls = []
        turn = TurnController("a", "b", calls.append)

        turn.toggle()
        turn.toggle()

        assert calls == [Side.B, Side.A]

    def test_set_by_player_id_or_side(self):
        turn = TurnController("a", "b")

        turn.set("b")
        assert turn.as_side() is Side.B

        turn.set(Side.A)
        assert turn.as_side() is Side.A

    def test_set_unknown_player_fails(self):
        turn = TurnController("a", "b")

        with pytest.raises(ValueError):
            turn.set("c")

    def test_is_turn(self):
        turn = TurnController("a", "b")

        assert turn.is_turn("a")
        assert turn.is_turn(Side.A)
        assert not turn.is_turn("b")
        assert not turn.is_turn(Side.B)

    def test_confirm_turn_gate(self):
        """The gate follows the turn as it changes."""
        turn = TurnController("a", "b")
        gate = turn.confirm_turn()

        assert gate("a")
        turn.toggle()
        assert not gate("a")
        assert gate("b")
