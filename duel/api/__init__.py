"""
API Module - Network interface for two-player rooms.

Exposes the engine over HTTP and WebSocket. A client:
1. Creates a room (or picks one from the listing)
2. Connects to the room's socket and takes a seat
3. Starts the match and plays card actions
4. Receives the game projection after every accepted action

Rooms live in memory. No accounts, nothing persisted.
"""

from .schemas import (
    # Inbound
    ClientMessage,
    StartGameMessage,
    StageCardClickedMessage,
    StageCardDiscardedMessage,
    parse_message,
    # Outbound
    ErrorMessage,
    JoinedMessage,
    # Responses
    ErrorResponse,
    RoomResponse,
    RoomListResponse,
    EndRoomResponse,
    HealthResponse,
    # Shared
    SeatInfo,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Inbound
    "ClientMessage",
    "StartGameMessage",
    "StageCardClickedMessage",
    "StageCardDiscardedMessage",
    "parse_message",
    # Outbound
    "ErrorMessage",
    "JoinedMessage",
    # Responses
    "ErrorResponse",
    "RoomResponse",
    "RoomListResponse",
    "EndRoomResponse",
    "HealthResponse",
    # Shared
    "SeatInfo",
    # Service
    "APIService",
    "create_app",
]
