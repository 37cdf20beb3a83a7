"""Game management layer — rules state machine, settings, rooms.

Quick start::

    from arbiter.game import GameEngine
    from arbiter.core import parse_square

    engine = GameEngine()
    engine.request_move(parse_square("e2"), parse_square("e4"))
"""

from arbiter.game.engine import GameEngine, GameInfo
from arbiter.game.schemas import (
    BoardItemSchema,
    GameStateSchema,
    MoveRequestSchema,
    PieceSchema,
    RoomSchema,
    game_state_schema,
)
from arbiter.game.session import Lobby, Room, RoomEvents
from arbiter.game.settings import EngineSettings

__all__ = [
    # Engine
    "EngineSettings",
    "GameEngine",
    "GameInfo",
    # Session
    "Lobby",
    "Room",
    "RoomEvents",
    # Schemas
    "BoardItemSchema",
    "GameStateSchema",
    "MoveRequestSchema",
    "PieceSchema",
    "RoomSchema",
    "game_state_schema",
]
