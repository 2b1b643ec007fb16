"""
Game Controller - One match, the single source of truth.

Composes the deck, stage, both players, the conflict track, the science
token board and the turn, and exposes the actions that change them.

Buying a card (on_card_clicked):
1. Validate: match running, player's turn, card exposed, payable
2. Pay: free by link, else outright (coin cost), else trade
   (coin cost + trading cost), in that order of preference
3. Commit: take the card off the stage and give it to the player
4. Resolve the card's purchase effect, if any

Step 4 runs after the commit. If an effect fails the card stays bought
and EffectFailure is raised.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .conflict import ConflictController
from .deck import DeckController
from .errors import EffectFailure, ErrorCode, NoMoreAges, RuleViolation, TurnViolation
from .player import PlayerController
from .projection import GameStateView, player_view, stage_view
from .science import ScienceTokenController
from .stage import StageController
from .turn import TurnController
from .state import (
    Age,
    ArmyPoints,
    Card,
    CardCategory,
    CoinGrant,
    CoinsPerCategory,
    CoinsPerWonder,
    ConflictTerminal,
    Outcome,
    PurchaseEffect,
    Resource,
    ResourceDiscount,
    Seat,
    Side,
)

logger = logging.getLogger(__name__)

SCIENCE_SYMBOLS_TO_WIN = 6
DISCARD_BASE_COINS = 2


class PurchaseMethod(Enum):
    """How a card was paid for."""
    LINK = "link"
    OUTRIGHT = "outright"
    TRADE = "trade"


@dataclass
class Purchase:
    """Result of buying a stage card."""
    card: Card
    method: PurchaseMethod
    coins_paid: int


class GameController:
    """
    Aggregate controller for one match.

    Usage:
        game = GameController(room_id, seat_a, seat_b, on_turn_changed=hook)
        game.on_card_clicked(card_uid, seat_a.player_id)
        game.complete_turn()
        view = game.state
    """

    def __init__(
        self,
        room_id: str,
        player_a: Seat,
        player_b: Seat,
        on_turn_changed: Callable[[Side], None] | None = None,
        rng: random.Random | None = None,
    ):
        self.room_id = room_id
        self._seats = {Side.A: player_a, Side.B: player_b}
        self._rng = rng or random.Random()

        self.turn = TurnController(player_a.player_id, player_b.player_id, on_turn_changed)
        self.conflict = ConflictController()
        self.science_tokens = ScienceTokenController(self._rng)
        self.card_deck = DeckController(self._rng)
        self.card_stage = StageController(self.card_deck)
        self.players: dict[Side, PlayerController] = {}
        self.age = Age.AGE_1

        self.reset()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def reset(self) -> None:
        """Start the match over in age I."""
        self.age = Age.AGE_1
        self.players = {
            side: PlayerController(seat.player_id, seat.name, side)
            for side, seat in self._seats.items()
        }
        self.conflict.reset()
        self.science_tokens.reset()
        self.card_deck.reset(self.age)
        self.card_stage.set(self.age)
        self.turn.reset()
        logger.info("Room %s: match reset, age 1 laid out", self.room_id)

    def next_age(self) -> None:
        if self.age is Age.AGE_1:
            self.age = Age.AGE_2
        elif self.age is Age.AGE_2:
            self.age = Age.AGE_3
        else:
            raise NoMoreAges("No more ages.")

        self.card_deck.reset(self.age)
        self.card_stage.set(self.age)
        logger.info("Room %s: entering age %d", self.room_id, self.age.value)

    def complete_turn(self) -> None:
        """Advance the age when the stage is cleared, then pass the turn."""
        if self.winner() is not None:
            return
        if self.card_stage.is_empty:
            self.next_age()
        self.turn.toggle()

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def player_a(self) -> PlayerController:
        return self.players[Side.A]

    @property
    def player_b(self) -> PlayerController:
        return self.players[Side.B]

    def get_player(self, player_id: str) -> PlayerController:
        for player in self.players.values():
            if player.player_id == player_id:
                return player
        raise RuleViolation(f"Unknown player {player_id}", ErrorCode.UNKNOWN_PLAYER)

    def get_other_player(self, player_id: str) -> PlayerController:
        return self.players[self.get_player(player_id).side.other]

    def is_turn(self, player_id: str) -> bool:
        return self.turn.is_turn(player_id)

    def total_victory_points(self, side: Side) -> int:
        return self.players[side].victory_points + self.conflict.get_victory_points_for_player(side)

    def winner(self) -> Outcome | None:
        """
        Evaluate the win conditions in order:
        military supremacy, science supremacy, then points after age III.
        """
        status = self.conflict.status
        if status is ConflictTerminal.A_FAVORED_TERMINAL:
            return Outcome.A
        if status is ConflictTerminal.B_FAVORED_TERMINAL:
            return Outcome.B

        if len(self.player_a.unique_science_symbols) >= SCIENCE_SYMBOLS_TO_WIN:
            return Outcome.A
        if len(self.player_b.unique_science_symbols) >= SCIENCE_SYMBOLS_TO_WIN:
            return Outcome.B

        if self.age is Age.AGE_3 and self.card_stage.is_empty:
            points_a = self.total_victory_points(Side.A)
            points_b = self.total_victory_points(Side.B)
            if points_a == points_b:
                return Outcome.TIE
            return Outcome.A if points_a > points_b else Outcome.B

        return None

    @property
    def state(self) -> GameStateView:
        winner = self.winner()
        return GameStateView(
            room_id=self.room_id,
            in_progress=winner is None,
            player_a=player_view(self.player_a.player, self.total_victory_points(Side.A)),
            player_b=player_view(self.player_b.player, self.total_victory_points(Side.B)),
            turn=self.turn.as_side(),
            age=self.age.value,
            stage=stage_view(self.card_stage.rows),
            conflict=self.conflict.status,
            science_token_board=self.science_tokens.board,
            winner=winner,
        )

    # =========================================================================
    # Player actions
    # =========================================================================

    def on_card_clicked(self, card_id: str, player_id: str) -> Purchase:
        """Buy an exposed stage card for the active player."""
        self._require_active(player_id)
        card = self._exposed_card(card_id)

        player = self.get_player(player_id)
        payment = self.payment_for(card, player_id)
        if payment is None:
            raise RuleViolation(f"Cannot afford {card.name}.", ErrorCode.CANNOT_AFFORD)
        method, cost = payment

        player.charge_coins(cost)
        self.card_stage.remove(card)
        player.add_card(card)
        logger.info(
            "Room %s: %s bought %s (%s, %d coins)",
            self.room_id, player.player.name, card.name, method.value, cost,
        )

        if card.effect is not None:
            self._dispatch_effect(card, player_id)

        return Purchase(card=card, method=method, coins_paid=cost)

    def payment_for(self, card: Card, player_id: str) -> tuple[PurchaseMethod, int] | None:
        """
        The cheapest allowed way for a player to pay for a card, or None.

        Preference: link, then outright, then trade.
        """
        player = self.get_player(player_id)
        opponent = self.get_other_player(player_id)

        if card.buy_with_link and player.has_link_symbol(card.buy_with_link):
            return PurchaseMethod.LINK, 0
        if player.can_afford_card(card):
            return PurchaseMethod.OUTRIGHT, card.coin_cost
        if player.can_trade_for_card(card, opponent):
            return PurchaseMethod.TRADE, card.coin_cost + player.trading_cost_for_card(card, opponent)
        return None

    def on_card_discarded(self, card_id: str, player_id: str) -> int:
        """Discard an exposed stage card for coins. Returns the coins gained."""
        self._require_active(player_id)
        card = self._exposed_card(card_id)
        player = self.get_player(player_id)

        coins = DISCARD_BASE_COINS + player.card_type_count(CardCategory.COMMERCIAL)
        self.card_stage.discard(card)
        player.give_coins(coins)
        logger.info(
            "Room %s: %s discarded %s for %d coins",
            self.room_id, player.player.name, card.name, coins,
        )
        return coins

    def _require_active(self, player_id: str) -> None:
        if self.winner() is not None:
            raise RuleViolation("The game is over.", ErrorCode.GAME_OVER)
        self.get_player(player_id)
        if not self.is_turn(player_id):
            raise TurnViolation("It is not your turn.")

    def _exposed_card(self, card_id: str) -> Card:
        card = self.card_stage.get_card(card_id)
        if card is None:
            raise RuleViolation("Cannot find that card.", ErrorCode.CARD_NOT_FOUND)
        if not self.card_stage.is_clickable(card):
            raise RuleViolation("Cannot click that card.", ErrorCode.CARD_NOT_CLICKABLE)
        return card

    # =========================================================================
    # Purchase effects
    # =========================================================================

    def _dispatch_effect(self, card: Card, player_id: str) -> None:
        handler = self._get_effect_handler(card.effect)
        if handler is None:
            raise EffectFailure(f"No handler for effect of {card.name}: {card.effect!r}")

        try:
            handler(player_id, card.effect)
        except Exception as exc:
            raise EffectFailure(f"Effect of {card.name} failed: {exc}") from exc

    def _get_effect_handler(
        self, effect: PurchaseEffect | None
    ) -> Callable[[str, PurchaseEffect], None] | None:
        handlers = {
            ArmyPoints: lambda pid, e: self.process_army_points(pid, e.points),
            ResourceDiscount: lambda pid, e: self.apply_resource_discount(pid, list(e.resources), e.coins_per),
            CoinGrant: lambda pid, e: self.process_coin_card(pid, e.coins),
            CoinsPerCategory: self._apply_coins_per_category,
            CoinsPerWonder: lambda pid, e: self.process_coins_per_wonder_card(pid, e.coins_per_wonder),
        }
        return handlers.get(type(effect))

    def _apply_coins_per_category(self, player_id: str, effect: CoinsPerCategory) -> None:
        for category in effect.categories:
            self.process_coins_per_card_type_card(player_id, category, effect.coins_per_card)

    def process_army_points(self, player_id: str, points: int) -> None:
        """Move the track toward the buyer's opponent, then apply looting."""
        player = self.get_player(player_id)
        opponent = self.get_other_player(player_id)

        direction = 1 if player.side is Side.A else -1
        self.conflict.update_status(direction * points)

        if not self.conflict.is_terminal:
            player.update_war_progress(self.conflict.status)
            opponent.update_war_progress(self.conflict.status)
        else:
            logger.info("Room %s: conflict reached %s", self.room_id, self.conflict.status.value)

    def apply_resource_discount(self, player_id: str, resources: list[Resource], coins_per: int = 1) -> None:
        player = self.get_player(player_id)
        for resource in resources:
            player.apply_resource_discount(resource, coins_per)

    def process_coin_card(self, player_id: str, coins: int) -> None:
        self.get_player(player_id).give_coins(coins)

    def process_coins_per_card_type_card(self, player_id: str, category: CardCategory, coins_per_card: int) -> None:
        player = self.get_player(player_id)
        player.give_coins(player.card_type_count(category) * coins_per_card)

    def process_coins_per_wonder_card(self, player_id: str, coins_per_wonder: int) -> None:
        player = self.get_player(player_id)
        player.give_coins(len(player.wonders_claimed) * coins_per_wonder)
