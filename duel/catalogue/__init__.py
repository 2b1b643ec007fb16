"""
Catalogue - The fixed card data and pyramid layouts of the duel.
"""

from .cards import AGE_1_CARDS, AGE_2_CARDS, AGE_3_CARDS, AGE_CARDS, GUILD_CARDS, get_card_by_name
from .layouts import STAGE_LAYOUTS, stage_capacity
from .validation import (
    GUILDS_PER_GAME,
    PURGE_COUNT,
    CatalogueValidationError,
    ValidationResult,
    validate_catalogue,
)

__all__ = [
    "AGE_1_CARDS",
    "AGE_2_CARDS",
    "AGE_3_CARDS",
    "AGE_CARDS",
    "GUILD_CARDS",
    "get_card_by_name",
    "STAGE_LAYOUTS",
    "stage_capacity",
    "GUILDS_PER_GAME",
    "PURGE_COUNT",
    "CatalogueValidationError",
    "ValidationResult",
    "validate_catalogue",
]
