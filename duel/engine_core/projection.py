"""
Projection - The outbound view of a match.

The projection is rebuilt from the controllers on every read and is the
only thing that leaves the engine. It never carries a transport handle,
and a face-down card only shows its back.

Fields serialize in camelCase (roomId, inProgress, ageCategory...).
"""

from __future__ import annotations
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .state import (
    Card,
    CardBack,
    CardCategory,
    ConflictTerminal,
    Empty,
    FaceDown,
    FaceUp,
    LinkSymbol,
    Outcome,
    PlayerState,
    Resource,
    ScienceProgressToken,
    ScienceType,
    Side,
    StageCell,
)


class ViewModel(BaseModel):
    """Base for projection models: camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CardView(ViewModel):
    """A visible card."""
    uid: str
    name: str
    category: CardCategory
    age: int
    coin_cost: int = 0
    resource_cost: list[Resource] = Field(default_factory=list)
    produces: list[Resource] = Field(default_factory=list)
    provides_link: Optional[LinkSymbol] = None
    buy_with_link: Optional[LinkSymbol] = None
    science_type: Optional[ScienceType] = None
    victory_points: int = 0


class FaceUpCellView(ViewModel):
    type: Literal["FACE_UP"] = "FACE_UP"
    card: CardView


class FaceDownCellView(ViewModel):
    type: Literal["FACE_DOWN"] = "FACE_DOWN"
    age_category: CardBack


class EmptyCellView(ViewModel):
    type: Literal["EMPTY"] = "EMPTY"


StageCellView = Annotated[
    Union[FaceUpCellView, FaceDownCellView, EmptyCellView],
    Field(discriminator="type"),
]


class WonderView(ViewModel):
    name: str
    claimed: bool = False


class PlayerView(ViewModel):
    """A player as everyone sees them."""
    id: str
    name: str
    side: Side
    cards: list[CardView] = Field(default_factory=list)
    coins: int = 0
    science_tokens: list[ScienceProgressToken] = Field(default_factory=list)
    wonders: list[WonderView] = Field(default_factory=list)
    war_penalty_tier: int = 0
    victory_points: int = 0


class GameStateView(ViewModel):
    """The complete match projection sent to both players."""
    room_id: str
    in_progress: bool
    player_a: Optional[PlayerView] = None
    player_b: Optional[PlayerView] = None
    turn: Side = Side.A
    age: Optional[int] = None
    stage: list[list[StageCellView]] = Field(default_factory=list)
    conflict: Union[int, ConflictTerminal] = 0
    science_token_board: list[Optional[ScienceProgressToken]] = Field(default_factory=list)
    winner: Optional[Outcome] = None

    def to_message(self) -> dict:
        """JSON-ready dict with wire field names."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Builders
# =============================================================================

def card_view(card: Card) -> CardView:
    return CardView(
        uid=card.uid,
        name=card.name,
        category=card.category,
        age=card.age.value,
        coin_cost=card.coin_cost,
        resource_cost=list(card.resource_cost),
        produces=list(card.produces),
        provides_link=card.provides_link,
        buy_with_link=card.buy_with_link,
        science_type=card.science_type,
        victory_points=card.victory_points,
    )


def cell_view(cell: StageCell) -> FaceUpCellView | FaceDownCellView | EmptyCellView:
    if isinstance(cell, FaceUp):
        return FaceUpCellView(card=card_view(cell.card))
    if isinstance(cell, FaceDown):
        return FaceDownCellView(age_category=cell.card.back)
    if isinstance(cell, Empty):
        return EmptyCellView()
    raise TypeError(f"Unknown stage cell: {cell!r}")


def stage_view(rows: list[list[StageCell]]) -> list[list[FaceUpCellView | FaceDownCellView | EmptyCellView]]:
    return [[cell_view(cell) for cell in row] for row in rows]


def player_view(player: PlayerState, victory_points: int = 0) -> PlayerView:
    return PlayerView(
        id=player.player_id,
        name=player.name,
        side=player.side,
        cards=[card_view(card) for card in player.cards],
        coins=player.coins,
        science_tokens=list(player.science_tokens),
        wonders=[WonderView(name=w.name, claimed=w.claimed) for w in player.wonders],
        war_penalty_tier=player.war_penalty_tier,
        victory_points=victory_points,
    )
