"""
Session Module - Rooms hosting one match each.

A room lives in memory only:
- Created on request
- Seats two players
- Hosts a match, restartable once it is over
- Loses its match as soon as a player leaves

Nothing is persisted and nothing can be resumed.
"""

from .manager import RoomRegistry
from .room import (
    AwaitingCardClick,
    AwaitingPlayers,
    AwaitingStart,
    Delivery,
    GameOver,
    Phase,
    ResolvingAction,
    Room,
    RoomStatus,
    error_message,
)

__all__ = [
    "RoomRegistry",
    "Room",
    "RoomStatus",
    "Phase",
    "AwaitingPlayers",
    "AwaitingStart",
    "AwaitingCardClick",
    "ResolvingAction",
    "GameOver",
    "Delivery",
    "error_message",
]
