"""In-memory rooms that seat two participants around one :class:`GameEngine`.

Transport is someone else's job: a room only decides who may move which
color and relays the resulting state. Legality stays with the engine.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from arbiter.core.enums import Color, GameResult
from arbiter.core.errors import SessionError
from arbiter.core.types import parse_square
from arbiter.game.engine import GameEngine
from arbiter.game.schemas import (
    GameStateSchema,
    MoveRequestSchema,
    RoomSchema,
    game_state_schema,
)
from arbiter.game.settings import EngineSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

RoomUpdateCallback = Callable[[RoomSchema], None]
MoveCallback = Callable[[str, GameStateSchema], None]  # participant, state
GameOverCallback = Callable[[GameResult], None]


@dataclass
class RoomEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_room_update: list[RoomUpdateCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Room ─────────────────────────────────────────────────────────────────────


class Room:
    """Two seats (player1 = White, player2 = Black) plus spectators."""

    __slots__ = ("room_id", "player1", "player2", "spectators", "engine", "events")

    def __init__(self, room_id: str, engine: GameEngine | None = None) -> None:
        self.room_id = room_id
        self.player1: str | None = None
        self.player2: str | None = None
        self.spectators: list[str] = []
        self.engine = engine or GameEngine()
        self.events = RoomEvents()

    # ── Membership ───────────────────────────────────────────────────────

    @property
    def members(self) -> list[str]:
        seated = [p for p in (self.player1, self.player2) if p is not None]
        return seated + self.spectators

    def join(self, participant: str) -> RoomSchema:
        """Seat *participant* in the first free slot, else as a spectator."""
        if participant in self.members:
            raise SessionError(f"Already joined room {self.room_id}")
        if self.player1 is None:
            self.player1 = participant
        elif self.player2 is None:
            self.player2 = participant
        else:
            self.spectators.append(participant)
        _LOGGER.info("%s joined room %s", participant, self.room_id)
        return self._emit_room_update()

    def leave(self, participant: str) -> RoomSchema:
        if self.player1 == participant:
            self.player1 = None
        if self.player2 == participant:
            self.player2 = None
        if participant in self.spectators:
            self.spectators.remove(participant)
        _LOGGER.info("%s left room %s", participant, self.room_id)
        return self._emit_room_update()

    def color_of(self, participant: str) -> Color | None:
        if participant == self.player1:
            return Color.WHITE
        if participant == self.player2:
            return Color.BLACK
        return None

    def is_empty(self) -> bool:
        return not self.members

    # ── Play ─────────────────────────────────────────────────────────────

    def state(self) -> GameStateSchema:
        return game_state_schema(self.engine.info())

    def submit(self, participant: str, request: MoveRequestSchema) -> GameStateSchema:
        """Relay *request* to the engine on behalf of *participant*."""
        color = self.color_of(participant)
        if color is None:
            raise SessionError(f"{participant} has no seat in room {self.room_id}")
        if color != self.engine.side_to_move:
            raise SessionError(f"{participant} plays {color}, not the side to move")

        result = self.engine.request_move(
            parse_square(request.from_),
            parse_square(request.to),
            request.promotion,
        )
        state = self.state()
        for cb in self.events.on_move:
            cb(participant, state)
        if result.is_terminal:
            for cb in self.events.on_game_over:
                cb(result)
        return state

    def schema(self) -> RoomSchema:
        return RoomSchema(
            room_id=self.room_id,
            player1=self.player1,
            player2=self.player2,
            spectators=list(self.spectators),
        )

    def _emit_room_update(self) -> RoomSchema:
        snapshot = self.schema()
        for cb in self.events.on_room_update:
            cb(snapshot)
        return snapshot


# ── Lobby ────────────────────────────────────────────────────────────────────


class Lobby:
    """Room registry; rooms are created on first join."""

    __slots__ = ("_rooms", "_settings")

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self._rooms: dict[str, Room] = {}
        self._settings = settings

    @property
    def rooms(self) -> dict[str, Room]:
        return dict(self._rooms)

    def room(self, room_id: str) -> Room:
        try:
            return self._rooms[room_id]
        except KeyError:
            raise SessionError(f"Room {room_id} does not exist") from None

    def join_room(self, room_id: str, participant: str) -> RoomSchema:
        room = self._rooms.get(room_id)
        if room is None:
            room = Room(room_id, GameEngine(settings=self._settings))
            self._rooms[room_id] = room
            _LOGGER.info("Created room %s", room_id)
        return room.join(participant)

    def leave_room(self, room_id: str, participant: str) -> RoomSchema:
        return self.room(room_id).leave(participant)
