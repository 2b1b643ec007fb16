"""
Catalogue Validation - Sanity checks for card data and layouts.

Validates that:
1. Each age deck fills its pyramid exactly after purge and guilds
2. Card names are unique
3. Effects and guild formulas are well-formed
4. Every link a card needs is provided by an earlier card
5. Layout rows are rectangular and use known cell kinds
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.state import (
    Age,
    ArmyPoints,
    Card,
    CardCategory,
    CoinGrant,
    CoinsPerCategory,
    CoinsPerWonder,
    PointsPerCategory,
    PointsPerCoins,
    PointsPerWonder,
    ResourceDiscount,
)
from .cards import AGE_CARDS, GUILD_CARDS
from .layouts import FACE_DOWN, FACE_UP, PLACEHOLDER, STAGE_LAYOUTS, stage_capacity

PURGE_COUNT = 3
GUILDS_PER_GAME = 3


class CatalogueValidationError(Exception):
    """Raised when catalogue validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Catalogue validation failed with {len(errors)} error(s)")


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


def validate_catalogue(raise_on_error: bool = False) -> ValidationResult:
    """
    Validate the card catalogue and stage layouts.

    Returns ValidationResult with errors and warnings.
    Raises CatalogueValidationError if raise_on_error=True and errors exist.
    """
    errors: list[str] = []
    warnings: list[str] = []

    # Deck sizes against pyramid capacity
    for age, cards in AGE_CARDS.items():
        dealt = len(cards) - PURGE_COUNT
        if age is Age.AGE_3:
            dealt += GUILDS_PER_GAME
        if dealt != stage_capacity(age):
            errors.append(
                f"Age {age.value}: deck yields {dealt} cards but the stage needs "
                f"{stage_capacity(age)}"
            )

    if len(GUILD_CARDS) < GUILDS_PER_GAME:
        errors.append(f"Need at least {GUILDS_PER_GAME} guild cards, found {len(GUILD_CARDS)}")

    all_cards = [card for cards in AGE_CARDS.values() for card in cards] + list(GUILD_CARDS)

    names = [card.name for card in all_cards]
    duplicates = {name for name in names if names.count(name) > 1}
    for name in sorted(duplicates):
        errors.append(f"Duplicate card name: {name}")

    for card in all_cards:
        errors.extend(_validate_card(card))

    # Links must be provided by a card of an earlier age
    for card in all_cards:
        if card.buy_with_link is None:
            continue
        providers = [
            other for other in all_cards
            if other.provides_link == card.buy_with_link and other.age < card.age
        ]
        if not providers:
            errors.append(f"{card.name}: no earlier card provides link {card.buy_with_link.value}")

    provided = {card.provides_link for card in all_cards if card.provides_link}
    consumed = {card.buy_with_link for card in all_cards if card.buy_with_link}
    for link in sorted(provided - consumed, key=lambda l: l.value):
        warnings.append(f"Link {link.value} is provided but never used")

    # Layouts
    for age, rows in STAGE_LAYOUTS.items():
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            errors.append(f"Age {age.value}: stage rows have different widths {sorted(widths)}")
        for row in rows:
            unknown = set(row) - {FACE_UP, FACE_DOWN, PLACEHOLDER}
            if unknown:
                errors.append(f"Age {age.value}: unknown cell kinds {sorted(unknown)}")
        if FACE_DOWN in rows[-1]:
            errors.append(f"Age {age.value}: bottom row cannot hold face-down cards")

    result = ValidationResult(valid=not errors, errors=errors, warnings=warnings)
    if raise_on_error and errors:
        raise CatalogueValidationError(errors)
    return result


def _validate_card(card: Card) -> list[str]:
    errors: list[str] = []

    if card.coin_cost < 0:
        errors.append(f"{card.name}: negative coin cost")
    if card.victory_points < 0:
        errors.append(f"{card.name}: negative victory points")

    effect = card.effect
    if effect is None:
        pass
    elif isinstance(effect, ArmyPoints):
        if effect.points <= 0:
            errors.append(f"{card.name}: army points must be positive")
    elif isinstance(effect, ResourceDiscount):
        if not effect.resources or effect.coins_per < 0:
            errors.append(f"{card.name}: malformed resource discount")
    elif isinstance(effect, CoinGrant):
        if effect.coins <= 0:
            errors.append(f"{card.name}: coin grant must be positive")
    elif isinstance(effect, CoinsPerCategory):
        if not effect.categories or effect.coins_per_card <= 0:
            errors.append(f"{card.name}: malformed coins-per-category effect")
    elif isinstance(effect, CoinsPerWonder):
        if effect.coins_per_wonder <= 0:
            errors.append(f"{card.name}: coins per wonder must be positive")
    else:
        errors.append(f"{card.name}: unknown effect {effect!r}")

    if card.category is CardCategory.GUILD:
        formula = card.guild
        if isinstance(formula, PointsPerCoins):
            if formula.coins <= 0:
                errors.append(f"{card.name}: coins divisor must be positive")
        elif isinstance(formula, PointsPerCategory):
            if not formula.categories:
                errors.append(f"{card.name}: guild lists no categories")
        elif not isinstance(formula, PointsPerWonder):
            errors.append(f"{card.name}: guild card without a scoring formula")
    elif card.guild is not None:
        errors.append(f"{card.name}: only guild cards carry a scoring formula")

    if card.category is CardCategory.SCIENCE and card.science_type is None:
        errors.append(f"{card.name}: science card without a science symbol")
    if card.category in (CardCategory.RAW_MATERIAL, CardCategory.MANUFACTURED_GOOD) and not card.produces:
        errors.append(f"{card.name}: production card produces nothing")

    return errors
