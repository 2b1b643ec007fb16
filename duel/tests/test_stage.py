"""
Tests for the stage controller.

Tests:
- Pyramid layout per age
- Clickability
- Reveal cascade
- Clearing a whole pyramid
"""

import random

import pytest

from ..catalogue.layouts import FACE_DOWN, FACE_UP, STAGE_LAYOUTS
from ..engine_core.deck import DeckController
from ..engine_core.stage import StageController
from ..engine_core.state import Age, Empty, FaceDown, FaceUp


@pytest.fixture
def stage(rng) -> StageController:
    """Age I pyramid."""
    return set_stage(rng, Age.AGE_1)


def set_stage(rng, age: Age) -> StageController:
    deck = DeckController(rng)
    deck.reset(age)
    stage = StageController(deck)
    stage.set(age)
    return stage


class TestLayout:
    """Tests for laying out the pyramid."""

    @pytest.mark.parametrize("age", list(Age))
    def test_cells_follow_template(self, age, rng):
        """Each cell matches its template letter."""
        stage = set_stage(rng, age)

        for template, row in zip(STAGE_LAYOUTS[age], stage.rows):
            for kind, cell in zip(template, row):
                if kind == FACE_UP:
                    assert isinstance(cell, FaceUp)
                elif kind == FACE_DOWN:
                    assert isinstance(cell, FaceDown)
                else:
                    assert isinstance(cell, Empty)

    @pytest.mark.parametrize("age", list(Age))
    def test_set_uses_whole_deck(self, age, rng):
        """Setting the stage deals every card of the age."""
        stage = set_stage(rng, age)

        assert stage._deck.deck_size == 0
        assert not stage.is_empty

    def test_rows_is_a_copy(self, stage):
        """Mutating the returned grid does not touch the stage."""
        rows = stage.rows
        rows[-1][0] = Empty()

        assert isinstance(stage.rows[-1][0], FaceUp)


class TestClickable:
    """Tests for which cards can be taken."""

    @pytest.mark.parametrize("age,expected", [(Age.AGE_1, 6), (Age.AGE_2, 2), (Age.AGE_3, 2)])
    def test_only_bottom_row_starts_clickable(self, age, expected, rng):
        """At setup only the bottom row's face-up cards are free."""
        stage = set_stage(rng, age)
        bottom = {cell.card.uid for cell in stage.rows[-1] if isinstance(cell, FaceUp)}

        clickable = stage.clickable_cards()

        assert len(clickable) == expected
        assert {card.uid for card in clickable} == bottom

    def test_covered_face_up_card_is_not_clickable(self, stage):
        """A face-up card with cards below it cannot be taken."""
        covered = stage.rows[2][1].card

        assert not stage.is_clickable(covered)

    def test_clickability_is_stable(self, stage):
        """Repeated checks on the same stage give the same answer."""
        cards = [cell.card for row in stage.rows for cell in row if isinstance(cell, FaceUp)]

        first = [stage.is_clickable(card) for card in cards]
        second = [stage.is_clickable(card) for card in reversed(cards)]

        assert first == list(reversed(second))

    def test_face_down_card_cannot_be_found(self, stage):
        """get_card only sees face-up cards."""
        hidden = stage.rows[3][1].card

        assert stage.get_card(hidden.uid) is None
        assert not stage.is_clickable(hidden)

    def test_get_card_by_uid(self, stage):
        card = stage.rows[-1][2].card

        assert stage.get_card(card.uid) == card


class TestRemove:
    """Tests for taking cards and revealing what they covered."""

    def test_remove_empties_cell(self, stage):
        """The taken card's cell becomes empty."""
        card = stage.rows[-1][0].card

        stage.remove(card)

        assert isinstance(stage.rows[-1][0], Empty)
        assert stage.get_card(card.uid) is None

    def test_reveal_needs_both_covers_gone(self, stage):
        """A face-down card flips only when both covering cards are gone."""
        stage.remove(stage.rows[4][0].card)
        assert isinstance(stage.rows[3][1], FaceDown)

        stage.remove(stage.rows[4][1].card)
        assert isinstance(stage.rows[3][1], FaceUp)
        assert stage.is_clickable(stage.rows[3][1].card)

    def test_revealed_card_is_same_card(self, stage):
        """Revealing keeps the hidden card's identity."""
        hidden = stage.rows[3][1].card

        stage.remove(stage.rows[4][0].card)
        stage.remove(stage.rows[4][1].card)

        assert stage.rows[3][1].card == hidden

    def test_last_column_reveal(self, stage):
        """Row 3's last cell flips once both bottom-row cards under it are gone."""
        stage.remove(stage.rows[4][5].card)
        assert isinstance(stage.rows[3][5], FaceDown)

        stage.remove(stage.rows[4][4].card)
        assert isinstance(stage.rows[3][5], FaceUp)

    def test_remove_unknown_card_fails(self, stage):
        """Only face-up cards on the stage can be removed."""
        hidden = stage.rows[3][1].card

        with pytest.raises(ValueError):
            stage.remove(hidden)

    def test_discard_keeps_card(self, stage):
        """Discarded cards are kept aside."""
        card = stage.rows[-1][3].card

        stage.discard(card)

        assert stage.discarded == [card]
        assert isinstance(stage.rows[-1][3], Empty)


class TestClearing:
    """Tests for emptying a whole pyramid."""

    @pytest.mark.parametrize("age", list(Age))
    def test_pyramid_can_always_be_cleared(self, age):
        """Taking clickable cards in any order empties the stage."""
        for seed in range(50):
            rng = random.Random(seed)
            stage = set_stage(rng, age)
            seen_face_up = set()
            removed = 0

            while not stage.is_empty:
                clickable = stage.clickable_cards()
                assert clickable, f"seed {seed}: stage stuck with cards left"
                for row in stage.rows:
                    for cell in row:
                        if isinstance(cell, FaceUp):
                            seen_face_up.add(cell.card.uid)
                stage.remove(rng.choice(clickable))
                removed += 1

            assert removed == 20
            assert len(seen_face_up) == 20
