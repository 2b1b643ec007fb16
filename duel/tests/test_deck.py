"""
Tests for the deck controller.

Tests:
- Deck sizes after purge and guilds
- Fresh, unique card uids
- Drawing and exhaustion
- Shuffling
"""

import random

import pytest

from ..catalogue import AGE_CARDS, GUILD_CARDS, PURGE_COUNT, stage_capacity
from ..engine_core.deck import DeckController
from ..engine_core.errors import EmptyDeck, EngineInvariantFailure
from ..engine_core.state import Age, CardCategory


class TestDeckReset:
    """Tests for building an age's pile."""

    @pytest.mark.parametrize("age", [Age.AGE_1, Age.AGE_2])
    def test_purge_leaves_catalogue_minus_three(self, age, rng):
        """Ages I and II lose three cards to the purge."""
        deck = DeckController(rng)
        deck.reset(age)

        assert deck.deck_size == len(AGE_CARDS[age]) - PURGE_COUNT

    def test_age_three_adds_three_guilds(self, rng):
        """Age III gets three guilds after the purge."""
        deck = DeckController(rng)
        deck.reset(Age.AGE_3)

        guilds = [card for card in deck.deck if card.category is CardCategory.GUILD]
        assert len(guilds) == 3
        assert deck.deck_size == len(AGE_CARDS[Age.AGE_3]) - PURGE_COUNT + 3

    @pytest.mark.parametrize("age", list(Age))
    def test_deck_fills_the_pyramid(self, age, rng):
        """Every age deals exactly as many cards as its pyramid holds."""
        deck = DeckController(rng)
        deck.reset(age)

        assert deck.deck_size == stage_capacity(age)

    @pytest.mark.parametrize("age", list(Age))
    def test_draining_yields_unique_uids(self, age, rng):
        """No card identifier repeats within an age."""
        deck = DeckController(rng)
        deck.reset(age)

        uids = [deck.draw().uid for _ in range(deck.deck_size)]
        assert all(uids)
        assert len(set(uids)) == len(uids)

    def test_cards_come_from_the_catalogue(self, rng):
        """Dealt cards are copies of catalogue templates."""
        deck = DeckController(rng)
        deck.reset(Age.AGE_3)

        names = {card.name for card in AGE_CARDS[Age.AGE_3]} | {card.name for card in GUILD_CARDS}
        assert all(card.name in names for card in deck.deck)

    def test_reset_stamps_fresh_uids(self, rng):
        """Resetting the same age never reuses uids."""
        deck = DeckController(rng)
        deck.reset(Age.AGE_1)
        first = {card.uid for card in deck.deck}

        deck.reset(Age.AGE_1)
        second = {card.uid for card in deck.deck}

        assert first.isdisjoint(second)

    def test_same_seed_same_cards(self):
        """Seeded decks deal the same cards in the same order."""
        deck_1 = DeckController(random.Random(42))
        deck_2 = DeckController(random.Random(42))
        deck_1.reset(Age.AGE_2)
        deck_2.reset(Age.AGE_2)

        assert [c.name for c in deck_1.deck] == [c.name for c in deck_2.deck]


class TestDraw:
    """Tests for drawing."""

    def test_draw_removes_card(self, rng):
        """Drawing shrinks the pile by one."""
        deck = DeckController(rng)
        deck.reset(Age.AGE_1)
        size = deck.deck_size

        card = deck.draw()

        assert deck.deck_size == size - 1
        assert card.uid not in {c.uid for c in deck.deck}

    def test_draw_from_empty_deck_fails(self, rng):
        """An exhausted pile is an engine invariant failure."""
        deck = DeckController(rng)
        deck.reset(Age.AGE_1)
        for _ in range(deck.deck_size):
            deck.draw()

        with pytest.raises(EmptyDeck):
            deck.draw()
        assert issubclass(EmptyDeck, EngineInvariantFailure)

    def test_deck_property_is_a_copy(self, rng):
        """Mutating the returned list does not touch the pile."""
        deck = DeckController(rng)
        deck.reset(Age.AGE_1)

        deck.deck.clear()

        assert deck.deck_size == 20


class TestShuffle:
    """Tests for shuffling."""

    def test_shuffle_is_a_permutation(self, rng):
        """Shuffling keeps every element exactly once."""
        deck = DeckController(rng)
        items = list(range(30))

        shuffled = deck.shuffle(items)

        assert sorted(shuffled) == items

    def test_shuffle_leaves_input_alone(self, rng):
        """The input list is not modified."""
        deck = DeckController(rng)
        items = [1, 2, 3, 4, 5]

        deck.shuffle(items)

        assert items == [1, 2, 3, 4, 5]

    def test_shuffle_is_uniform(self):
        """All six orderings of three items come up about equally often."""
        deck = DeckController(random.Random(2024))
        counts = {}

        for _ in range(6000):
            order = tuple(deck.shuffle(["a", "b", "c"]))
            counts[order] = counts.get(order, 0) + 1

        assert len(counts) == 6
        assert all(800 < count < 1200 for count in counts.values())
