"""
Game State - Cards, stage cells and player containers.

Design principles:
- Catalogue data is immutable: cards, effects and guild formulas are frozen
- Cards carry a per-instance uid assigned when an age's deck is built
- Purchase effects and guild formulas are tagged data, never callables
- Stage cells are a closed union: FaceUp | FaceDown | Empty
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


# =============================================================================
# Enums
# =============================================================================

class Side(str, Enum):
    """The two seats of a duel."""
    A = "A"
    B = "B"

    @property
    def other(self) -> Side:
        return Side.B if self is Side.A else Side.A


class Age(int, Enum):
    """The three sequential game phases."""
    AGE_1 = 1
    AGE_2 = 2
    AGE_3 = 3


class CardBack(str, Enum):
    """What a face-down card shows: its age (or guild) back."""
    AGE_1 = "AGE_1"
    AGE_2 = "AGE_2"
    AGE_3 = "AGE_3"
    GUILD = "GUILD"


class CardCategory(str, Enum):
    """Card colors. Raw materials and manufactured goods are both production."""
    RAW_MATERIAL = "RAW_MATERIAL"
    MANUFACTURED_GOOD = "MANUFACTURED_GOOD"
    COMMERCIAL = "COMMERCIAL"
    SCIENCE = "SCIENCE"
    CIVIC = "CIVIC"
    MILITARY = "MILITARY"
    GUILD = "GUILD"


PRODUCTION_CATEGORIES = frozenset({CardCategory.RAW_MATERIAL, CardCategory.MANUFACTURED_GOOD})


class Resource(str, Enum):
    WOOD = "WOOD"
    CLAY = "CLAY"
    STONE = "STONE"
    GLASS = "GLASS"
    PAPYRUS = "PAPYRUS"


RAW_MATERIALS = (Resource.WOOD, Resource.STONE, Resource.CLAY)
MANUFACTURED_GOODS = (Resource.GLASS, Resource.PAPYRUS)


class CommercialType(str, Enum):
    """Wildcard resource groups granted by commercial cards."""
    ANY_RAW_MATERIAL = "ANY_RAW_MATERIAL"
    ANY_MANUFACTURED_GOOD = "ANY_MANUFACTURED_GOOD"


WILDCARD_GROUPS: dict[CommercialType, tuple[Resource, ...]] = {
    CommercialType.ANY_RAW_MATERIAL: RAW_MATERIALS,
    CommercialType.ANY_MANUFACTURED_GOOD: MANUFACTURED_GOODS,
}


class ScienceType(str, Enum):
    WHEEL = "WHEEL"
    MORTAR = "MORTAR"
    QUILL = "QUILL"
    GYROSCOPE = "GYROSCOPE"
    SUN_DIAL = "SUN_DIAL"
    PENDULUM = "PENDULUM"
    LAW = "LAW"


class ScienceProgressToken(str, Enum):
    AGRICULTURE = "AGRICULTURE"
    ARCHITECTURE = "ARCHITECTURE"
    ECONOMY = "ECONOMY"
    LAW = "LAW"
    MASONRY = "MASONRY"
    MATHEMATICS = "MATHEMATICS"
    PHILOSOPHY = "PHILOSOPHY"
    STRATEGY = "STRATEGY"
    THEOLOGY = "THEOLOGY"
    URBANISM = "URBANISM"


class LinkSymbol(str, Enum):
    """Chaining symbols: owning one makes a matching card free."""
    HORSESHOE = "HORSESHOE"
    SWORD = "SWORD"
    TOWER = "TOWER"
    TARGET = "TARGET"
    HELMET = "HELMET"
    BOOK = "BOOK"
    GEAR = "GEAR"
    HARP = "HARP"
    LAMP = "LAMP"
    MASK = "MASK"
    MOON = "MOON"
    DROP = "DROP"
    COLUMN = "COLUMN"
    SUN = "SUN"
    BUILDING = "BUILDING"
    JUG = "JUG"
    BARREL = "BARREL"


class ConflictTerminal(str, Enum):
    """Terminal markers of the conflict track."""
    A_FAVORED_TERMINAL = "A_FAVORED_TERMINAL"
    B_FAVORED_TERMINAL = "B_FAVORED_TERMINAL"


class Outcome(str, Enum):
    """Result of a finished match."""
    A = "A"
    B = "B"
    TIE = "TIE"


# =============================================================================
# Purchase effects
# =============================================================================

@dataclass(frozen=True)
class ArmyPoints:
    """Move the conflict track toward the opponent."""
    points: int


@dataclass(frozen=True)
class ResourceDiscount:
    """Trade for each listed resource at a fixed rate from now on."""
    resources: tuple[Resource, ...]
    coins_per: int = 1


@dataclass(frozen=True)
class CoinGrant:
    coins: int


@dataclass(frozen=True)
class CoinsPerCategory:
    """Coins for every owned card of the listed categories (bought card included)."""
    coins_per_card: int
    categories: tuple[CardCategory, ...]


@dataclass(frozen=True)
class CoinsPerWonder:
    coins_per_wonder: int


PurchaseEffect = Union[ArmyPoints, ResourceDiscount, CoinGrant, CoinsPerCategory, CoinsPerWonder]


# =============================================================================
# Guild scoring formulas
# =============================================================================

@dataclass(frozen=True)
class PointsPerCoins:
    """points x floor(own coins / coins)."""
    points: int
    coins: int


@dataclass(frozen=True)
class PointsPerWonder:
    points: int


@dataclass(frozen=True)
class PointsPerCategory:
    """points for every owned card of each listed category."""
    points: int
    categories: tuple[CardCategory, ...]


GuildFormula = Union[PointsPerCoins, PointsPerWonder, PointsPerCategory]


# =============================================================================
# Cards
# =============================================================================

@dataclass(frozen=True)
class Card:
    """
    A card: catalogue entry plus a per-instance uid.

    Catalogue templates have an empty uid; the deck stamps a fresh one on
    each copy when an age is set up.
    """
    name: str
    category: CardCategory
    age: Age
    coin_cost: int = 0
    resource_cost: tuple[Resource, ...] = ()
    produces: tuple[Resource, ...] = ()
    provides_link: LinkSymbol | None = None
    buy_with_link: LinkSymbol | None = None
    effect: PurchaseEffect | None = None
    science_type: ScienceType | None = None
    commercial_type: CommercialType | None = None
    guild: GuildFormula | None = None
    victory_points: int = 0
    uid: str = ""

    @property
    def back(self) -> CardBack:
        """The back printed on this card, shown while it lies face down."""
        if self.category is CardCategory.GUILD:
            return CardBack.GUILD
        return CardBack(f"AGE_{self.age.value}")


@dataclass(frozen=True)
class Wonder:
    """
    A wonder a player may build by tucking a card under it.

    Only the data shape exists for now: nothing claims wonders yet.
    """
    name: str
    claimed_with: str | None = None  # uid of the card used to build it

    @property
    def claimed(self) -> bool:
        return self.claimed_with is not None


# =============================================================================
# Stage cells
# =============================================================================

@dataclass(frozen=True)
class FaceUp:
    card: Card


@dataclass(frozen=True)
class FaceDown:
    card: Card  # hidden; never leaves the engine


@dataclass(frozen=True)
class Empty:
    pass


StageCell = Union[FaceUp, FaceDown, Empty]


# =============================================================================
# Players
# =============================================================================

@dataclass
class Seat:
    """A player's identity inside a room. No transport handle lives here."""
    player_id: str
    name: str


@dataclass
class PlayerState:
    """
    Mutable holdings of one player.

    Everything derived (resources, links, points...) is computed by the
    PlayerController from these fields on each access.
    """
    player_id: str
    name: str
    side: Side
    cards: list[Card] = field(default_factory=list)
    coins: int = 7
    science_tokens: list[ScienceProgressToken] = field(default_factory=list)
    wonders: list[Wonder] = field(default_factory=list)
    war_penalty_tier: int = 0  # 0, 2 or 5
    resource_discounts: list[tuple[Resource, int]] = field(default_factory=list)  # (resource, coins per unit)
