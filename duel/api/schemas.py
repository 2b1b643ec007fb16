"""
Pydantic Schemas for API - Wire contract for clients.

Inbound WebSocket messages are a closed set discriminated on "type":
- START_GAME
- STAGE_CARD_CLICKED {cardId}
- STAGE_CARD_DISCARDED {cardId}

Unknown types, missing fields and extra keys are all rejected with
MESSAGE_NOT_RECOGNIZED before anything reaches a room.

Outbound WebSocket messages are the game projection (see
duel.engine_core.projection), JOINED on connect, and ERROR:
    {"kind": "ERROR", "code": "...", "message": "..."}
"""

from __future__ import annotations
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from ..engine_core.action import Action
from ..engine_core.errors import ActionValidationError, ErrorCode
from ..engine_core.state import Side
from ..session.room import RoomStatus


# =============================================================================
# Inbound messages
# =============================================================================

class InboundMessage(BaseModel):
    """Base for client messages: camelCase keys, nothing extra."""
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    def to_action(self) -> Action:
        raise NotImplementedError


class StartGameMessage(InboundMessage):
    type: Literal["START_GAME"]

    def to_action(self) -> Action:
        return Action.start_game()


class StageCardClickedMessage(InboundMessage):
    type: Literal["STAGE_CARD_CLICKED"]
    card_id: str = Field(..., min_length=1, description="uid of a face-up stage card")

    def to_action(self) -> Action:
        return Action.click_card(self.card_id)


class StageCardDiscardedMessage(InboundMessage):
    type: Literal["STAGE_CARD_DISCARDED"]
    card_id: str = Field(..., min_length=1, description="uid of a face-up stage card")

    def to_action(self) -> Action:
        return Action.discard_card(self.card_id)


ClientMessage = Annotated[
    Union[StartGameMessage, StageCardClickedMessage, StageCardDiscardedMessage],
    Field(discriminator="type"),
]

_client_message = TypeAdapter(ClientMessage)


def parse_message(raw: Union[str, bytes, dict[str, Any]]) -> Action:
    """
    Validate a raw client message and turn it into an engine Action.

    Raises:
        ActionValidationError: if the message is not valid JSON or not one
            of the recognized shapes
    """
    try:
        if isinstance(raw, (str, bytes)):
            message = _client_message.validate_json(raw)
        else:
            message = _client_message.validate_python(raw)
    except ValidationError as e:
        raise ActionValidationError(f"Message not recognized ({e.error_count()} error(s))") from e

    return message.to_action()


# =============================================================================
# Outbound messages
# =============================================================================

class ErrorMessage(BaseModel):
    """Error sent to the offending player only."""
    kind: Literal["ERROR"] = "ERROR"
    code: ErrorCode
    message: str


class JoinedMessage(BaseModel):
    """First message on a socket: who the client is."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    kind: Literal["JOINED"] = "JOINED"
    room_id: str
    player_id: str
    side: Side

    def to_message(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class SeatInfo(BaseModel):
    """A seated player."""
    player_id: str
    name: str
    side: Side


class RoomResponse(BaseModel):
    """Response containing room information."""
    room_id: str
    status: RoomStatus
    players: list[SeatInfo] = Field(default_factory=list)
    in_progress: bool = False
    created_at: float = 0.0
    api_version: str = "v1"


class RoomListResponse(BaseModel):
    """Response listing rooms."""
    rooms: list[RoomResponse]
    count: int


class EndRoomResponse(BaseModel):
    """Response after ending a room."""
    success: bool
    room_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
