"""
API Service - Business logic layer between the API and the rooms.

The service:
1. Creates, lists, describes and ends rooms
2. Seats and unseats players
3. Parses raw client messages and hands them to rooms
4. Formats room responses

This layer is framework-agnostic and never touches a connection; it returns
Deliveries and lets the transport send them.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Union

from ..engine_core.errors import ActionValidationError, ErrorCode, RoomNotFound
from ..engine_core.state import Seat
from ..session import Delivery, Room, RoomRegistry
from .schemas import (
    EndRoomResponse,
    ErrorMessage,
    ErrorResponse,
    JoinedMessage,
    RoomListResponse,
    RoomResponse,
    SeatInfo,
    parse_message,
)

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        room = service.create_room()
        joined, deliveries = service.join_room(room.room_id, "alice")
        deliveries = service.handle_message(room.room_id, joined.player_id, raw)
    """
    registry: RoomRegistry = field(default_factory=RoomRegistry)

    # =========================================================================
    # Rooms
    # =========================================================================

    def create_room(self) -> RoomResponse:
        return self._room_to_response(self.registry.create_room())

    def list_rooms(self) -> RoomListResponse:
        rooms = [self._room_to_response(room) for room in self.registry.list_rooms()]
        return RoomListResponse(rooms=rooms, count=len(rooms))

    def get_room(self, room_id: str) -> Union[RoomResponse, ErrorResponse]:
        try:
            room = self.registry.get_room(room_id)
        except RoomNotFound as e:
            return ErrorResponse(error=e.message, error_code=e.code)
        return self._room_to_response(room)

    def end_room(self, room_id: str) -> EndRoomResponse:
        return EndRoomResponse(success=self.registry.end_room(room_id), room_id=room_id)

    def get_snapshot(self, room_id: str) -> dict[str, Any]:
        return self.registry.get_room(room_id).snapshot()

    # =========================================================================
    # Players
    # =========================================================================

    def join_room(self, room_id: str, name: str) -> tuple[JoinedMessage, list[Delivery]]:
        """
        Seat a player.

        Returns the JOINED message for the new player and the lobby snapshot
        for everyone seated.

        Raises:
            RoomNotFound: unknown room
            RuleViolation: room is full
        """
        room = self.registry.get_room(room_id)
        seat = room.join(name)
        joined = JoinedMessage(room_id=room_id, player_id=seat.player_id, side=room.side_of(seat.player_id))
        return joined, [Delivery(recipients=room.player_ids, message=room.snapshot())]

    def leave_room(self, room_id: str, player_id: str) -> list[Delivery]:
        """Unseat a player. Leaving a room that is already gone is a no-op."""
        if not self.registry.has_room(room_id):
            return []

        room = self.registry.get_room(room_id)
        if player_id not in room.player_ids:
            return []
        return room.leave(player_id)

    def handle_message(self, room_id: str, player_id: str, raw: Union[str, bytes, dict[str, Any]]) -> list[Delivery]:
        """Parse a raw client message and apply it in its room."""
        try:
            room = self.registry.get_room(room_id)
            action = parse_message(raw)
        except (RoomNotFound, ActionValidationError) as e:
            logger.debug("Rejected message from %s in room %s: %s", player_id, room_id, e.message)
            return [self._error_delivery(player_id, e.code, e.message)]

        return room.handle(player_id, action)

    # =========================================================================
    # Conversion Helpers
    # =========================================================================

    def _room_to_response(self, room: Room) -> RoomResponse:
        return RoomResponse(
            room_id=room.room_id,
            status=room.status,
            players=[self._seat_info(room, seat) for seat in room.players],
            in_progress=room.game is not None and room.game.winner() is None,
            created_at=room.created_at,
        )

    @staticmethod
    def _seat_info(room: Room, seat: Seat) -> SeatInfo:
        return SeatInfo(player_id=seat.player_id, name=seat.name, side=room.side_of(seat.player_id))

    @staticmethod
    def _error_delivery(player_id: str, code: ErrorCode, message: str) -> Delivery:
        error = ErrorMessage(code=code, message=message)
        return Delivery(recipients=[player_id], message=error.model_dump(mode="json"))
