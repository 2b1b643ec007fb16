"""
Pytest fixtures for Duel tests.
"""

import random

import pytest
from fastapi.testclient import TestClient

from ..api.app import create_app
from ..api.service import APIService
from ..engine_core.game import GameController
from ..engine_core.player import PlayerController
from ..engine_core.state import Seat, Side
from ..session import Room, RoomRegistry


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator so decks and boards are reproducible."""
    return random.Random(1234)


@pytest.fixture
def seat_a() -> Seat:
    return Seat(player_id="player-a", name="Alice")


@pytest.fixture
def seat_b() -> Seat:
    return Seat(player_id="player-b", name="Bob")


@pytest.fixture
def turn_log() -> list[Side]:
    """Records every side handed the turn."""
    return []


@pytest.fixture
def game(seat_a: Seat, seat_b: Seat, rng: random.Random, turn_log: list[Side]) -> GameController:
    """A fresh match in age I, side A to play."""
    return GameController("room-1", seat_a, seat_b, on_turn_changed=turn_log.append, rng=rng)


@pytest.fixture
def player_a() -> PlayerController:
    return PlayerController("player-a", "Alice", Side.A)


@pytest.fixture
def player_b() -> PlayerController:
    return PlayerController("player-b", "Bob", Side.B)


@pytest.fixture
def room() -> Room:
    """An empty room with a seeded generator."""
    return Room("room-1", rng=random.Random(99))


@pytest.fixture
def full_room(room: Room) -> Room:
    """A room with Alice in seat A and Bob in seat B."""
    room.join("Alice")
    room.join("Bob")
    return room


@pytest.fixture
def registry() -> RoomRegistry:
    return RoomRegistry(seed=7)


@pytest.fixture
def api_service(registry: RoomRegistry) -> APIService:
    return APIService(registry=registry)


@pytest.fixture
def client(api_service: APIService):
    """
    Test client sharing one event loop across all sockets.

    Used as a context manager so WebSocket sessions broadcast to each other
    on the same loop.
    """
    with TestClient(create_app(api_service)) as client:
        yield client
