"""
Card Catalogue - Every card of the three ages plus the guilds.

Each age deck holds more cards than its pyramid: three are purged face down
at setup, and Age III gets three random guilds shuffled in afterwards, so
every pyramid is filled with exactly 20 cards.

Card structure:
- Category (color), age and costs (coins and resources)
- What it gives: resources, link symbol, points, science symbol
- Optional purchase effect and, for guilds, a scoring formula
"""

from __future__ import annotations

from ..engine_core.state import (
    Age,
    ArmyPoints,
    Card,
    CardCategory,
    CoinGrant,
    CoinsPerCategory,
    CoinsPerWonder,
    CommercialType,
    LinkSymbol,
    PointsPerCategory,
    PointsPerCoins,
    PointsPerWonder,
    Resource,
    ResourceDiscount,
    ScienceType,
)

WOOD = Resource.WOOD
CLAY = Resource.CLAY
STONE = Resource.STONE
GLASS = Resource.GLASS
PAPYRUS = Resource.PAPYRUS

RAW = CardCategory.RAW_MATERIAL
GOOD = CardCategory.MANUFACTURED_GOOD
COMMERCIAL = CardCategory.COMMERCIAL
SCIENCE = CardCategory.SCIENCE
CIVIC = CardCategory.CIVIC
MILITARY = CardCategory.MILITARY
GUILD = CardCategory.GUILD


# ============================================================================
# Age I
# ============================================================================

AGE_1_CARDS: tuple[Card, ...] = (
    # Raw materials
    Card("Lumber Yard", RAW, Age.AGE_1, produces=(WOOD,)),
    Card("Logging Camp", RAW, Age.AGE_1, coin_cost=1, produces=(WOOD,)),
    Card("Clay Pool", RAW, Age.AGE_1, produces=(CLAY,)),
    Card("Clay Pit", RAW, Age.AGE_1, coin_cost=1, produces=(CLAY,)),
    Card("Quarry", RAW, Age.AGE_1, produces=(STONE,)),
    Card("Stone Pit", RAW, Age.AGE_1, coin_cost=1, produces=(STONE,)),
    # Manufactured goods
    Card("Glassworks", GOOD, Age.AGE_1, coin_cost=1, produces=(GLASS,)),
    Card("Press", GOOD, Age.AGE_1, coin_cost=1, produces=(PAPYRUS,)),
    # Military
    Card("Guard Tower", MILITARY, Age.AGE_1, effect=ArmyPoints(1)),
    Card("Stable", MILITARY, Age.AGE_1, resource_cost=(WOOD,),
         provides_link=LinkSymbol.HORSESHOE, effect=ArmyPoints(1)),
    Card("Garrison", MILITARY, Age.AGE_1, resource_cost=(CLAY,),
         provides_link=LinkSymbol.SWORD, effect=ArmyPoints(1)),
    Card("Palisade", MILITARY, Age.AGE_1, coin_cost=2,
         provides_link=LinkSymbol.TOWER, effect=ArmyPoints(1)),
    # Science
    Card("Workshop", SCIENCE, Age.AGE_1, resource_cost=(PAPYRUS,),
         science_type=ScienceType.PENDULUM, victory_points=1),
    Card("Apothecary", SCIENCE, Age.AGE_1, resource_cost=(GLASS,),
         science_type=ScienceType.WHEEL, victory_points=1),
    Card("Scriptorium", SCIENCE, Age.AGE_1, coin_cost=2,
         provides_link=LinkSymbol.BOOK, science_type=ScienceType.QUILL),
    Card("Pharmacist", SCIENCE, Age.AGE_1, coin_cost=2,
         provides_link=LinkSymbol.GEAR, science_type=ScienceType.MORTAR),
    # Civic
    Card("Theater", CIVIC, Age.AGE_1, provides_link=LinkSymbol.MASK, victory_points=3),
    Card("Altar", CIVIC, Age.AGE_1, provides_link=LinkSymbol.MOON, victory_points=3),
    Card("Baths", CIVIC, Age.AGE_1, resource_cost=(STONE,),
         provides_link=LinkSymbol.DROP, victory_points=3),
    # Commercial
    Card("Stone Reserve", COMMERCIAL, Age.AGE_1, coin_cost=3,
         effect=ResourceDiscount((STONE,))),
    Card("Clay Reserve", COMMERCIAL, Age.AGE_1, coin_cost=3,
         effect=ResourceDiscount((CLAY,))),
    Card("Wood Reserve", COMMERCIAL, Age.AGE_1, coin_cost=3,
         effect=ResourceDiscount((WOOD,))),
    Card("Tavern", COMMERCIAL, Age.AGE_1, provides_link=LinkSymbol.JUG, effect=CoinGrant(4)),
)


# ============================================================================
# Age II
# ============================================================================

AGE_2_CARDS: tuple[Card, ...] = (
    # Raw materials
    Card("Sawmill", RAW, Age.AGE_2, coin_cost=2, produces=(WOOD, WOOD)),
    Card("Brickyard", RAW, Age.AGE_2, coin_cost=2, produces=(CLAY, CLAY)),
    Card("Shelf Quarry", RAW, Age.AGE_2, coin_cost=2, produces=(STONE, STONE)),
    # Manufactured goods
    Card("Glass-Blower", GOOD, Age.AGE_2, produces=(GLASS,)),
    Card("Drying Room", GOOD, Age.AGE_2, produces=(PAPYRUS,)),
    # Military
    Card("Walls", MILITARY, Age.AGE_2, resource_cost=(STONE, STONE), effect=ArmyPoints(2)),
    Card("Horse Breeders", MILITARY, Age.AGE_2, resource_cost=(CLAY, WOOD),
         buy_with_link=LinkSymbol.HORSESHOE, effect=ArmyPoints(1)),
    Card("Barracks", MILITARY, Age.AGE_2, coin_cost=3,
         buy_with_link=LinkSymbol.SWORD, effect=ArmyPoints(1)),
    Card("Archery Range", MILITARY, Age.AGE_2, resource_cost=(STONE, WOOD, PAPYRUS),
         provides_link=LinkSymbol.TARGET, effect=ArmyPoints(2)),
    Card("Parade Ground", MILITARY, Age.AGE_2, resource_cost=(CLAY, CLAY, GLASS),
         provides_link=LinkSymbol.HELMET, effect=ArmyPoints(2)),
    # Science
    Card("Library", SCIENCE, Age.AGE_2, resource_cost=(STONE, WOOD, GLASS),
         buy_with_link=LinkSymbol.BOOK, science_type=ScienceType.QUILL, victory_points=2),
    Card("Dispensary", SCIENCE, Age.AGE_2, resource_cost=(CLAY, CLAY, STONE),
         buy_with_link=LinkSymbol.GEAR, science_type=ScienceType.MORTAR, victory_points=2),
    Card("School", SCIENCE, Age.AGE_2, resource_cost=(WOOD, PAPYRUS, PAPYRUS),
         provides_link=LinkSymbol.HARP, science_type=ScienceType.WHEEL, victory_points=1),
    Card("Laboratory", SCIENCE, Age.AGE_2, resource_cost=(WOOD, GLASS, GLASS),
         provides_link=LinkSymbol.LAMP, science_type=ScienceType.PENDULUM, victory_points=1),
    # Civic
    Card("Courthouse", CIVIC, Age.AGE_2, resource_cost=(WOOD, WOOD, GLASS), victory_points=5),
    Card("Statue", CIVIC, Age.AGE_2, resource_cost=(CLAY, CLAY),
         buy_with_link=LinkSymbol.MASK, provides_link=LinkSymbol.COLUMN, victory_points=4),
    Card("Temple", CIVIC, Age.AGE_2, resource_cost=(WOOD, PAPYRUS),
         buy_with_link=LinkSymbol.MOON, provides_link=LinkSymbol.SUN, victory_points=4),
    Card("Aqueduct", CIVIC, Age.AGE_2, resource_cost=(STONE, STONE, STONE),
         buy_with_link=LinkSymbol.DROP, victory_points=5),
    Card("Rostrum", CIVIC, Age.AGE_2, resource_cost=(STONE, WOOD),
         provides_link=LinkSymbol.BUILDING, victory_points=4),
    # Commercial
    Card("Forum", COMMERCIAL, Age.AGE_2, coin_cost=3, resource_cost=(CLAY,),
         commercial_type=CommercialType.ANY_MANUFACTURED_GOOD),
    Card("Caravansery", COMMERCIAL, Age.AGE_2, coin_cost=2, resource_cost=(GLASS, PAPYRUS),
         commercial_type=CommercialType.ANY_RAW_MATERIAL),
    Card("Customs House", COMMERCIAL, Age.AGE_2, coin_cost=4,
         effect=ResourceDiscount((PAPYRUS, GLASS))),
    Card("Brewery", COMMERCIAL, Age.AGE_2, provides_link=LinkSymbol.BARREL, effect=CoinGrant(6)),
)


# ============================================================================
# Age III
# ============================================================================

AGE_3_CARDS: tuple[Card, ...] = (
    # Military
    Card("Arsenal", MILITARY, Age.AGE_3, resource_cost=(CLAY, CLAY, WOOD, WOOD),
         effect=ArmyPoints(3)),
    Card("Pretorium", MILITARY, Age.AGE_3, coin_cost=8, effect=ArmyPoints(3)),
    Card("Fortifications", MILITARY, Age.AGE_3, resource_cost=(STONE, STONE, CLAY, PAPYRUS),
         buy_with_link=LinkSymbol.TOWER, effect=ArmyPoints(2)),
    Card("Siege Workshop", MILITARY, Age.AGE_3, resource_cost=(WOOD, WOOD, WOOD, GLASS),
         buy_with_link=LinkSymbol.TARGET, effect=ArmyPoints(2)),
    Card("Circus", MILITARY, Age.AGE_3, resource_cost=(CLAY, CLAY, STONE, STONE),
         buy_with_link=LinkSymbol.HELMET, effect=ArmyPoints(2)),
    # Science
    Card("Academy", SCIENCE, Age.AGE_3, resource_cost=(STONE, WOOD, GLASS, GLASS),
         science_type=ScienceType.SUN_DIAL, victory_points=3),
    Card("Study", SCIENCE, Age.AGE_3, resource_cost=(WOOD, WOOD, GLASS, PAPYRUS),
         science_type=ScienceType.SUN_DIAL, victory_points=3),
    Card("University", SCIENCE, Age.AGE_3, resource_cost=(CLAY, GLASS, PAPYRUS),
         buy_with_link=LinkSymbol.HARP, science_type=ScienceType.GYROSCOPE, victory_points=2),
    Card("Observatory", SCIENCE, Age.AGE_3, resource_cost=(STONE, PAPYRUS, PAPYRUS),
         buy_with_link=LinkSymbol.LAMP, science_type=ScienceType.GYROSCOPE, victory_points=2),
    # Civic
    Card("Palace", CIVIC, Age.AGE_3, resource_cost=(CLAY, STONE, WOOD, GLASS, GLASS),
         victory_points=7),
    Card("Town Hall", CIVIC, Age.AGE_3, resource_cost=(STONE, STONE, STONE, WOOD, WOOD),
         victory_points=7),
    Card("Obelisk", CIVIC, Age.AGE_3, resource_cost=(STONE, STONE, GLASS), victory_points=5),
    Card("Gardens", CIVIC, Age.AGE_3, resource_cost=(CLAY, CLAY, WOOD, WOOD),
         buy_with_link=LinkSymbol.COLUMN, victory_points=6),
    Card("Pantheon", CIVIC, Age.AGE_3, resource_cost=(CLAY, WOOD, PAPYRUS, PAPYRUS),
         buy_with_link=LinkSymbol.SUN, victory_points=6),
    Card("Senate", CIVIC, Age.AGE_3, resource_cost=(CLAY, CLAY, STONE, PAPYRUS),
         buy_with_link=LinkSymbol.BUILDING, victory_points=5),
    # Commercial
    Card("Chamber of Commerce", COMMERCIAL, Age.AGE_3, resource_cost=(PAPYRUS, PAPYRUS),
         effect=CoinsPerCategory(3, (GOOD,)), victory_points=3),
    Card("Port", COMMERCIAL, Age.AGE_3, resource_cost=(WOOD, GLASS, PAPYRUS),
         effect=CoinsPerCategory(2, (RAW,)), victory_points=3),
    Card("Armory", COMMERCIAL, Age.AGE_3, resource_cost=(STONE, STONE, GLASS),
         effect=CoinsPerCategory(1, (MILITARY,)), victory_points=3),
    Card("Lighthouse", COMMERCIAL, Age.AGE_3, resource_cost=(CLAY, CLAY, GLASS),
         buy_with_link=LinkSymbol.JUG, effect=CoinsPerCategory(1, (COMMERCIAL,)), victory_points=3),
    Card("Arena", COMMERCIAL, Age.AGE_3, resource_cost=(CLAY, STONE, WOOD),
         buy_with_link=LinkSymbol.BARREL, effect=CoinsPerWonder(2), victory_points=3),
)


# ============================================================================
# Guilds (three are shuffled into Age III)
# ============================================================================

GUILD_CARDS: tuple[Card, ...] = (
    Card("Merchants Guild", GUILD, Age.AGE_3, resource_cost=(CLAY, WOOD, GLASS, PAPYRUS),
         guild=PointsPerCategory(1, (COMMERCIAL,)), effect=CoinsPerCategory(1, (COMMERCIAL,))),
    Card("Shipowners Guild", GUILD, Age.AGE_3, resource_cost=(CLAY, STONE, GLASS, PAPYRUS),
         guild=PointsPerCategory(1, (RAW, GOOD)), effect=CoinsPerCategory(1, (RAW, GOOD))),
    Card("Builders Guild", GUILD, Age.AGE_3, resource_cost=(STONE, STONE, CLAY, WOOD, GLASS),
         guild=PointsPerWonder(2)),
    Card("Magistrates Guild", GUILD, Age.AGE_3, resource_cost=(WOOD, WOOD, CLAY, PAPYRUS),
         guild=PointsPerCategory(1, (CIVIC,)), effect=CoinsPerCategory(1, (CIVIC,))),
    Card("Scientists Guild", GUILD, Age.AGE_3, resource_cost=(CLAY, CLAY, WOOD, WOOD),
         guild=PointsPerCategory(1, (SCIENCE,)), effect=CoinsPerCategory(1, (SCIENCE,))),
    Card("Moneylenders Guild", GUILD, Age.AGE_3, resource_cost=(STONE, STONE, WOOD, WOOD),
         guild=PointsPerCoins(1, 3)),
    Card("Tacticians Guild", GUILD, Age.AGE_3, resource_cost=(STONE, STONE, CLAY, PAPYRUS),
         guild=PointsPerCategory(1, (MILITARY,)), effect=CoinsPerCategory(1, (MILITARY,))),
)


AGE_CARDS: dict[Age, tuple[Card, ...]] = {
    Age.AGE_1: AGE_1_CARDS,
    Age.AGE_2: AGE_2_CARDS,
    Age.AGE_3: AGE_3_CARDS,
}


def get_card_by_name(name: str) -> Card | None:
    """Look up a catalogue template by name."""
    for cards in (*AGE_CARDS.values(), GUILD_CARDS):
        for card in cards:
            if card.name == name:
                return card
    return None
