"""
Tests for the card catalogue and stage layouts.
"""

import pytest

from ..catalogue import (
    AGE_CARDS,
    GUILD_CARDS,
    PURGE_COUNT,
    STAGE_LAYOUTS,
    CatalogueValidationError,
    get_card_by_name,
    stage_capacity,
    validate_catalogue,
)
from ..catalogue import validation
from ..catalogue.layouts import FACE_DOWN
from ..engine_core.state import Age, CardCategory


class TestCatalogue:
    """Tests for the shipped card data."""

    def test_catalogue_is_valid(self):
        result = validate_catalogue()

        assert result.valid, result.errors

    @pytest.mark.parametrize("age,size", [(Age.AGE_1, 23), (Age.AGE_2, 23), (Age.AGE_3, 20)])
    def test_age_sizes(self, age, size):
        assert len(AGE_CARDS[age]) == size

    def test_guild_count(self):
        assert len(GUILD_CARDS) == 7
        assert all(card.category is CardCategory.GUILD for card in GUILD_CARDS)

    def test_names_are_unique(self):
        names = [card.name for cards in AGE_CARDS.values() for card in cards]
        names += [card.name for card in GUILD_CARDS]

        assert len(names) == len(set(names))

    def test_templates_have_no_uid(self):
        """Uids are stamped by the deck, never by the catalogue."""
        assert all(card.uid == "" for cards in AGE_CARDS.values() for card in cards)

    def test_get_card_by_name(self):
        card = get_card_by_name("Tavern")

        assert card.age is Age.AGE_1
        assert card.category is CardCategory.COMMERCIAL
        assert get_card_by_name("Merchants Guild").category is CardCategory.GUILD
        assert get_card_by_name("Colossus") is None


class TestLayouts:
    """Tests for the pyramid templates."""

    @pytest.mark.parametrize("age", list(Age))
    def test_capacity_is_twenty(self, age):
        assert stage_capacity(age) == 20

    @pytest.mark.parametrize("age", list(Age))
    def test_bottom_row_is_never_face_down(self, age):
        assert FACE_DOWN not in STAGE_LAYOUTS[age][-1]

    @pytest.mark.parametrize("age", list(Age))
    def test_deck_fits_after_purge(self, age):
        guilds = 3 if age is Age.AGE_3 else 0

        assert len(AGE_CARDS[age]) - PURGE_COUNT + guilds == stage_capacity(age)


class TestValidation:
    """Tests for catching bad catalogue data."""

    def test_duplicate_names_are_reported(self, monkeypatch):
        duplicated = dict(AGE_CARDS)
        duplicated[Age.AGE_1] = AGE_CARDS[Age.AGE_1][:-1] + (AGE_CARDS[Age.AGE_1][0],)
        monkeypatch.setattr(validation, "AGE_CARDS", duplicated)

        result = validate_catalogue()

        assert not result.valid
        assert any("Duplicate card name: Lumber Yard" in error for error in result.errors)

    def test_missing_link_provider_is_reported(self, monkeypatch):
        broken = dict(AGE_CARDS)
        broken[Age.AGE_1] = tuple(card for card in AGE_CARDS[Age.AGE_1] if card.name != "Stable")
        monkeypatch.setattr(validation, "AGE_CARDS", broken)

        result = validate_catalogue()

        assert any("HORSESHOE" in error for error in result.errors)

    def test_raise_on_error(self, monkeypatch):
        short = dict(AGE_CARDS)
        short[Age.AGE_2] = AGE_CARDS[Age.AGE_2][:-1]
        monkeypatch.setattr(validation, "AGE_CARDS", short)

        with pytest.raises(CatalogueValidationError) as exc:
            validate_catalogue(raise_on_error=True)
        assert exc.value.errors
