"""
Room Registry - Creates, finds and tears down rooms.

Rooms are in-memory only. A registry instance is created by whoever hosts
the rooms (the API service, a test) and passed around explicitly; rooms
in one registry share no mutable state.
"""

from __future__ import annotations
import logging
import random
import time
import uuid

from ..engine_core.errors import RoomNotFound
from .room import Room

logger = logging.getLogger(__name__)


class RoomRegistry:
    """
    Maps room ids to rooms.

    With a seed, every room gets its own generator derived from it, so a
    sequence of rooms replays identically.
    """

    def __init__(self, seed: int | None = None):
        self._rooms: dict[str, Room] = {}
        self._rng = random.Random(seed) if seed is not None else None

    def create_room(self) -> Room:
        room_id = str(uuid.uuid4())
        rng = random.Random(self._rng.getrandbits(64)) if self._rng else random.Random()

        room = Room(room_id, rng=rng)
        self._rooms[room_id] = room
        logger.info("Room %s created", room_id)
        return room

    def get_room(self, room_id: str) -> Room:
        room = self._rooms.get(room_id)
        if room is None:
            raise RoomNotFound(f"Room {room_id} not found")
        return room

    def has_room(self, room_id: str) -> bool:
        return room_id in self._rooms

    def end_room(self, room_id: str) -> bool:
        """Remove a room and drop its match. Returns False if it did not exist."""
        room = self._rooms.pop(room_id, None)
        if room is None:
            return False

        room.game = None
        room.seats.clear()
        logger.info("Room %s ended", room_id)
        return True

    def list_rooms(self) -> list[Room]:
        return list(self._rooms.values())

    def cleanup_stale_rooms(self, max_age_seconds: int = 3600) -> list[str]:
        """
        End empty rooms older than max_age.

        Called periodically to free memory. Returns the ended room ids.
        """
        current_time = time.time()
        stale = [
            room_id for room_id, room in self._rooms.items()
            if not room.seats and current_time - room.created_at > max_age_seconds
        ]
        for room_id in stale:
            self.end_room(room_id)
        return stale
