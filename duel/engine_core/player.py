"""
Player Controller - One player's economy and score.

Everything derived from the owned cards (resources, wildcard groups, link
symbols, science symbols, points) is recomputed on every access.

Resource matching walks the card's cost in order. For each required
resource a wildcard group that contains it is used before a produced
resource, even when both are available. Wildcards are exhausted first on
purpose; do not turn this into an optimal assignment.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .state import (
    PRODUCTION_CATEGORIES,
    WILDCARD_GROUPS,
    Card,
    CardCategory,
    LinkSymbol,
    PlayerState,
    PointsPerCategory,
    PointsPerCoins,
    PointsPerWonder,
    Resource,
    ScienceProgressToken,
    ScienceType,
    Side,
    Wonder,
)

logger = logging.getLogger(__name__)

STARTING_COINS = 7
BASE_TRADING_RATE = 2
COINS_PER_TREASURY_POINT = 3


@dataclass
class ResourceAllocation:
    """
    How a resource cost is covered by a player's production.

    remaining_* hold what is left unused; uncovered lists the resources that
    must be bought from the bank.
    """
    remaining_resources: list[Resource] = field(default_factory=list)
    remaining_wildcards: list[tuple[Resource, ...]] = field(default_factory=list)
    uncovered: list[Resource] = field(default_factory=list)


class PlayerController:
    """Wraps a PlayerState with the rules of the card economy."""

    def __init__(self, player_id: str, name: str, side: Side, coins: int = STARTING_COINS):
        self.player = PlayerState(player_id=player_id, name=name, side=side, coins=coins)

    @property
    def player_id(self) -> str:
        return self.player.player_id

    @property
    def side(self) -> Side:
        return self.player.side

    @property
    def coins(self) -> int:
        return self.player.coins

    # =========================================================================
    # Derived views
    # =========================================================================

    @property
    def resources(self) -> list[Resource]:
        """Resources produced by owned production cards."""
        resources: list[Resource] = []
        for card in self.player.cards:
            if card.category in PRODUCTION_CATEGORIES:
                resources.extend(card.produces)
        return resources

    @property
    def wildcard_resources(self) -> list[tuple[Resource, ...]]:
        """One group per commercial card that yields any resource of a kind."""
        return [
            WILDCARD_GROUPS[card.commercial_type]
            for card in self.player.cards
            if card.category is CardCategory.COMMERCIAL and card.commercial_type is not None
        ]

    @property
    def link_symbols(self) -> list[LinkSymbol]:
        return [card.provides_link for card in self.player.cards if card.provides_link]

    @property
    def unique_science_symbols(self) -> list[ScienceType]:
        symbols: list[ScienceType] = []
        for card in self.player.cards:
            if card.category is CardCategory.SCIENCE and card.science_type not in symbols:
                symbols.append(card.science_type)

        if ScienceProgressToken.LAW in self.player.science_tokens:
            symbols.append(ScienceType.LAW)
        return symbols

    @property
    def wonders_claimed(self) -> list[Wonder]:
        return [wonder for wonder in self.player.wonders if wonder.claimed]

    @property
    def victory_points(self) -> int:
        """
        Points from buildings, guilds, science tokens and treasury.

        Wonder points are not counted: wonders cannot be built yet.
        Conflict points live on the ConflictController.
        """
        total = 0

        for card in self.player.cards:
            if card.category in (CardCategory.CIVIC, CardCategory.SCIENCE, CardCategory.COMMERCIAL):
                total += card.victory_points
            elif card.category is CardCategory.GUILD:
                total += self._guild_points(card)

        total += sum(self._token_points(token) for token in self.player.science_tokens)
        total += self.player.coins // COINS_PER_TREASURY_POINT
        return total

    def _guild_points(self, card: Card) -> int:
        formula = card.guild
        if isinstance(formula, PointsPerCoins):
            return formula.points * (self.player.coins // formula.coins)
        if isinstance(formula, PointsPerWonder):
            return formula.points * len(self.wonders_claimed)
        if isinstance(formula, PointsPerCategory):
            return sum(formula.points * self.card_type_count(category) for category in formula.categories)
        raise TypeError(f"Unknown guild formula on {card.name}: {formula!r}")

    def _token_points(self, token: ScienceProgressToken) -> int:
        # Only three tokens score for now
        if token is ScienceProgressToken.AGRICULTURE:
            return 4
        if token is ScienceProgressToken.PHILOSOPHY:
            return 7
        if token is ScienceProgressToken.MATHEMATICS:
            return 3 * len(self.player.science_tokens)
        return 0

    # =========================================================================
    # Buying
    # =========================================================================

    def has_link_symbol(self, link: LinkSymbol) -> bool:
        return link in self.link_symbols

    def allocate_resources(self, resource_cost: tuple[Resource, ...] | list[Resource]) -> ResourceAllocation:
        """Cover a cost with production and wildcard groups (wildcards first)."""
        allocation = ResourceAllocation(
            remaining_resources=self.resources,
            remaining_wildcards=self.wildcard_resources,
        )

        for resource in resource_cost:
            wildcard_index = next(
                (i for i, group in enumerate(allocation.remaining_wildcards) if resource in group),
                None,
            )
            if wildcard_index is not None:
                allocation.remaining_wildcards.pop(wildcard_index)
            elif resource in allocation.remaining_resources:
                allocation.remaining_resources.remove(resource)
            else:
                allocation.uncovered.append(resource)

        return allocation

    def can_afford_card(self, card: Card) -> bool:
        if card.coin_cost > self.player.coins:
            return False
        return not self.allocate_resources(card.resource_cost).uncovered

    def resource_count(self, resource: Resource) -> int:
        return self.resources.count(resource)

    def trading_cost_for_card(self, card: Card, opponent: PlayerController) -> int:
        """
        Coins needed to buy the missing resources from the bank.

        Each missing resource costs the discounted rate if the player has
        one, else 2 plus what the opponent produces of it.
        """
        cost = 0
        for resource in self.allocate_resources(card.resource_cost).uncovered:
            discount = self.discount_for(resource)
            if discount is not None:
                cost += discount
            else:
                cost += BASE_TRADING_RATE + opponent.resource_count(resource)
        return cost

    def can_trade_for_card(self, card: Card, opponent: PlayerController) -> bool:
        return card.coin_cost + self.trading_cost_for_card(card, opponent) <= self.player.coins

    def discount_for(self, resource: Resource) -> int | None:
        """The first discount acquired for a resource wins."""
        for discounted, coins_per in self.player.resource_discounts:
            if discounted is resource:
                return coins_per
        return None

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_card(self, card: Card) -> None:
        self.player.cards.append(card)

    def charge_coins(self, coins: int) -> None:
        # Never below zero
        self.player.coins = max(0, self.player.coins - coins)

    def give_coins(self, coins: int) -> None:
        self.player.coins += coins

    def apply_resource_discount(self, resource: Resource, coins_per: int) -> None:
        self.player.resource_discounts.append((resource, coins_per))

    def card_type_count(self, category: CardCategory) -> int:
        return sum(1 for card in self.player.cards if card.category is category)

    def update_war_progress(self, conflict_value: int) -> None:
        """
        Apply looting when the conflict track swings against this player.

        Positive values favor A, negative favor B. The tier moves one step
        per call: 0 -> 2 at magnitude 3, 2 -> 5 at magnitude 6.
        """
        if conflict_value > 0 and self.side is Side.A:
            return
        if conflict_value < 0 and self.side is Side.B:
            return

        magnitude = abs(conflict_value)
        if self.player.war_penalty_tier == 2 and magnitude >= 6:
            self.player.war_penalty_tier = 5
            self.charge_coins(5)
            logger.info("%s loses 5 coins to looting", self.player.name)
        elif self.player.war_penalty_tier == 0 and magnitude >= 3:
            self.player.war_penalty_tier = 2
            self.charge_coins(2)
            logger.info("%s loses 2 coins to looting", self.player.name)
