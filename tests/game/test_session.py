"""Tests for Room and Lobby membership and move relaying."""

import pytest

from arbiter.core.enums import Color, GameResult
from arbiter.core.errors import IllegalMoveError, SessionError
from arbiter.game.schemas import GameStateSchema, MoveRequestSchema, RoomSchema
from arbiter.game.session import Lobby, Room
from arbiter.game.settings import EngineSettings


def _request(move: str) -> MoveRequestSchema:
    return MoveRequestSchema.model_validate({"from": move[:2], "to": move[2:4]})


@pytest.fixture
def room() -> Room:
    room = Room("r1")
    room.join("alice")
    room.join("bob")
    return room


class TestRoomMembership:
    def test_seats_in_order(self, room: Room) -> None:
        assert room.player1 == "alice"
        assert room.player2 == "bob"
        assert room.color_of("alice") == Color.WHITE
        assert room.color_of("bob") == Color.BLACK

    def test_third_participant_spectates(self, room: Room) -> None:
        room.join("carol")
        assert room.spectators == ["carol"]
        assert room.color_of("carol") is None
        assert room.members == ["alice", "bob", "carol"]

    def test_duplicate_join(self, room: Room) -> None:
        with pytest.raises(SessionError, match="Already joined room r1"):
            room.join("alice")

    def test_leave_frees_seat(self, room: Room) -> None:
        room.leave("alice")
        assert room.player1 is None
        room.join("dave")
        assert room.player1 == "dave"

    def test_empty_after_everyone_leaves(self, room: Room) -> None:
        room.leave("alice")
        room.leave("bob")
        assert room.is_empty()

    def test_room_update_event(self) -> None:
        room = Room("r2")
        updates: list[RoomSchema] = []
        room.events.on_room_update.append(updates.append)
        room.join("alice")
        room.leave("alice")
        assert [u.player1 for u in updates] == ["alice", None]


class TestRoomPlay:
    def test_relays_state(self, room: Room) -> None:
        moves: list[tuple[str, GameStateSchema]] = []
        room.events.on_move.append(lambda who, state: moves.append((who, state)))
        state = room.submit("alice", _request("e2e4"))
        assert state.current_turn == "black"
        assert moves == [("alice", state)]

    def test_wrong_turn(self, room: Room) -> None:
        with pytest.raises(SessionError):
            room.submit("bob", _request("e7e5"))

    def test_spectator_cannot_move(self, room: Room) -> None:
        room.join("carol")
        with pytest.raises(SessionError):
            room.submit("carol", _request("e2e4"))

    def test_engine_errors_propagate(self, room: Room) -> None:
        with pytest.raises(IllegalMoveError):
            room.submit("alice", _request("e2e5"))

    def test_fools_mate(self, room: Room) -> None:
        results: list[GameResult] = []
        room.events.on_game_over.append(results.append)
        for who, move in [("alice", "f2f3"), ("bob", "e7e5"), ("alice", "g2g4")]:
            room.submit(who, _request(move))
        state = room.submit("bob", _request("d8h4"))
        assert state.game_status == "black_wins"
        assert results == [GameResult.BLACK_WINS]

    def test_promotion_letter_is_relayed(self) -> None:
        from arbiter.game.engine import GameEngine

        room = Room("r3", GameEngine.from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1"))
        room.join("alice")
        room.join("bob")
        request = MoveRequestSchema.model_validate(
            {"from": "a7", "to": "a8", "promotion": "r"}
        )
        state = room.submit("alice", request)
        assert state.fen.startswith("R3k3/")


class TestLobby:
    def test_join_creates_room(self) -> None:
        lobby = Lobby()
        snapshot = lobby.join_room("r1", "alice")
        assert snapshot.player1 == "alice"
        assert "r1" in lobby.rooms

    def test_join_existing_room(self) -> None:
        lobby = Lobby()
        lobby.join_room("r1", "alice")
        snapshot = lobby.join_room("r1", "bob")
        assert snapshot.player2 == "bob"
        assert len(lobby.rooms) == 1

    def test_unknown_room(self) -> None:
        with pytest.raises(SessionError, match="Room nope does not exist"):
            Lobby().room("nope")

    def test_leave_room(self) -> None:
        lobby = Lobby()
        lobby.join_room("r1", "alice")
        snapshot = lobby.leave_room("r1", "alice")
        assert snapshot.player1 is None

    def test_settings_reach_engine(self) -> None:
        settings = EngineSettings(halfmove_limit=10)
        lobby = Lobby(settings)
        lobby.join_room("r1", "alice")
        assert lobby.room("r1").engine.settings is settings
