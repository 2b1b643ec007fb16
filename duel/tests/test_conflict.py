"""
Tests for the conflict track.
"""

import pytest

from ..engine_core.conflict import ConflictController
from ..engine_core.state import ConflictTerminal, Side


class TestConflictTrack:
    """Tests for moving the track."""

    def test_starts_at_zero(self):
        assert ConflictController().status == 0

    def test_positive_favors_a(self):
        conflict = ConflictController()

        conflict.update_status(4)
        conflict.update_status(-1)

        assert conflict.status == 3

    def test_past_eight_is_a_terminal(self):
        """Pushing past +8 snaps to the A-favored terminal."""
        conflict = ConflictController()

        conflict.update_status(9)

        assert conflict.status is ConflictTerminal.A_FAVORED_TERMINAL
        assert conflict.is_terminal
        assert conflict.get_victory_points_for_player(Side.A) == 0

    def test_past_minus_eight_is_b_terminal(self):
        conflict = ConflictController()

        conflict.update_status(-5)
        conflict.update_status(-4)

        assert conflict.status is ConflictTerminal.B_FAVORED_TERMINAL

    def test_exactly_eight_is_not_terminal(self):
        conflict = ConflictController()

        conflict.update_status(8)

        assert conflict.status == 8
        assert not conflict.is_terminal

    def test_terminal_is_final(self):
        """Once terminal, nothing moves the track."""
        conflict = ConflictController()
        conflict.update_status(9)

        conflict.update_status(-20)
        conflict.update_status(3)

        assert conflict.status is ConflictTerminal.A_FAVORED_TERMINAL

    def test_reset(self):
        conflict = ConflictController()
        conflict.update_status(-9)

        conflict.reset()

        assert conflict.status == 0


class TestConflictPoints:
    """Tests for the tiered bonus."""

    @pytest.mark.parametrize("value,points", [(0, 0), (1, 2), (2, 2), (3, 5), (5, 5), (6, 10), (8, 10)])
    def test_tiers_for_a(self, value, points):
        conflict = ConflictController()
        conflict.update_status(value)

        assert conflict.get_victory_points_for_player(Side.A) == points
        assert conflict.get_victory_points_for_player(Side.B) == 0

    @pytest.mark.parametrize("value,points", [(-1, 2), (-4, 5), (-7, 10)])
    def test_tiers_for_b(self, value, points):
        conflict = ConflictController()
        conflict.update_status(value)

        assert conflict.get_victory_points_for_player(Side.B) == points
        assert conflict.get_victory_points_for_player(Side.A) == 0
