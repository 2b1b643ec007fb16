"""
FastAPI Application - Rooms over HTTP, play over WebSocket.

Endpoints:
    POST   /api/v1/rooms                Create a room
    GET    /api/v1/rooms                List rooms
    GET    /api/v1/rooms/{id}           Get room status
    DELETE /api/v1/rooms/{id}           End a room
    WS     /api/v1/rooms/{id}/ws?name=  Join a room and play
    GET    /health                      Health check

WebSocket flow:
    1. Connecting takes a seat; the server sends JOINED, then the lobby
       snapshot to everyone seated
    2. Clients send START_GAME / STAGE_CARD_CLICKED / STAGE_CARD_DISCARDED
    3. The server broadcasts the game projection after each accepted action
       and sends ERROR to the sender only when an action is rejected
    4. Disconnecting frees the seat and discards any match in progress

Connection handles are kept here; rooms only know player ids.
"""

from __future__ import annotations
import logging
import os
from typing import Annotated, Optional, Union

from fastapi import FastAPI, Query, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..engine_core.errors import DuelError, ErrorCode
from ..session import Delivery, RoomRegistry
from .schemas import (
    EndRoomResponse,
    ErrorMessage,
    ErrorResponse,
    HealthResponse,
    RoomListResponse,
    RoomResponse,
)
from .service import APIService

logger = logging.getLogger(__name__)

# Environment configuration
DUEL_ENV = os.getenv("DUEL_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
DUEL_SEED = os.getenv("DUEL_SEED")


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Duel API",
        description="""
Two-player card duel: three ages of a shared card pyramid.

## Error Codes

| Code | Description |
|------|-------------|
| `MESSAGE_NOT_RECOGNIZED` | Message is not a known action |
| `NOT_YOUR_TURN` | It is the other player's turn |
| `CARD_NOT_FOUND` | No face-up card with that id |
| `CARD_NOT_CLICKABLE` | The card is still covered |
| `CANNOT_AFFORD` | Not enough coins or resources |
| `ROOM_NOT_FOUND` | Room does not exist |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if service is None:
        seed = int(DUEL_SEED) if DUEL_SEED else None
        service = APIService(registry=RoomRegistry(seed=seed))
    api_service = service

    # Open sockets per room, keyed by player id
    connections: dict[str, dict[str, WebSocket]] = {}

    # =========================================================================
    # Helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(error=message, error_code=error_code).model_dump(mode="json"),
        )

    async def deliver(room_id: str, deliveries: list[Delivery]) -> None:
        """Send each delivery to the sockets of its recipients."""
        sockets = connections.get(room_id, {})
        for delivery in deliveries:
            for player_id in delivery.recipients:
                websocket = sockets.get(player_id)
                if websocket is None:
                    continue
                try:
                    await websocket.send_json(delivery.message)
                except (WebSocketDisconnect, RuntimeError):
                    logger.warning("Room %s: dropping dead connection for %s", room_id, player_id)
                    sockets.pop(player_id, None)

    # =========================================================================
    # Room Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/rooms",
        response_model=RoomResponse,
        tags=["Rooms"],
        summary="Create a room",
    )
    async def create_room() -> RoomResponse:
        return api_service.create_room()

    @app.get(
        "/api/v1/rooms",
        response_model=RoomListResponse,
        tags=["Rooms"],
        summary="List rooms",
    )
    async def list_rooms() -> RoomListResponse:
        return api_service.list_rooms()

    @app.get(
        "/api/v1/rooms/{room_id}",
        response_model=RoomResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Rooms"],
        summary="Get room status",
    )
    async def get_room(room_id: str) -> Union[RoomResponse, JSONResponse]:
        response = api_service.get_room(room_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response.error_code, response.error, status_code=404)
        return response

    @app.delete(
        "/api/v1/rooms/{room_id}",
        response_model=EndRoomResponse,
        tags=["Rooms"],
        summary="End a room",
    )
    async def end_room(room_id: str) -> EndRoomResponse:
        """End a room and drop its match. Connected players get ROOM_NOT_FOUND afterwards."""
        return api_service.end_room(room_id)

    # =========================================================================
    # WebSocket Endpoint
    # =========================================================================

    @app.websocket("/api/v1/rooms/{room_id}/ws")
    async def room_socket(
        websocket: WebSocket,
        room_id: str,
        name: Annotated[str, Query(min_length=1, max_length=64)] = "Player",
    ):
        """
        Play in a room.

        Messages from server:
        - JOINED: your player id and side
        - game projection: after every accepted action
        - ERROR: your last message was rejected

        Messages from client:
        - START_GAME, STAGE_CARD_CLICKED, STAGE_CARD_DISCARDED
        """
        await websocket.accept()

        try:
            joined, deliveries = api_service.join_room(room_id, name)
        except DuelError as e:
            await websocket.send_json(ErrorMessage(code=e.code, message=e.message).model_dump(mode="json"))
            await websocket.close()
            return

        player_id = joined.player_id
        connections.setdefault(room_id, {})[player_id] = websocket
        await websocket.send_json(joined.to_message())
        await deliver(room_id, deliveries)

        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    logger.info("Room %s: %s disconnected", room_id, player_id)
                    break
                # Text and binary frames are parsed alike
                data = message.get("text") or message.get("bytes") or ""
                await deliver(room_id, api_service.handle_message(room_id, player_id, data))
        finally:
            sockets = connections.get(room_id, {})
            sockets.pop(player_id, None)
            if not sockets:
                connections.pop(room_id, None)
            await deliver(room_id, api_service.leave_room(room_id, player_id))

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="duel-engine",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Duel API",
            "version": __version__,
            "env": DUEL_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


# For running directly: uvicorn duel.api.app:app
app = create_app()
