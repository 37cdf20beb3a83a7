"""Pydantic schemas exchanged with the session/transport layer."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from arbiter.core.enums import Color, GameResult
from arbiter.core.notation import castling_to_fen
from arbiter.core.types import square_name
from arbiter.game.engine import GameInfo

ColorName = Literal["white", "black"]
PieceName = Literal["pawn", "knight", "bishop", "rook", "queen", "king"]
GameStatus = Literal["in_progress", "white_wins", "black_wins", "draw"]


class PieceSchema(BaseModel):
    """A chess piece."""

    type: PieceName = Field(..., description="Piece type.")
    color: ColorName = Field(..., description="Piece color.")


class BoardItemSchema(BaseModel):
    """An occupied board square."""

    position: str = Field(..., description="Algebraic coordinate, e.g. 'e2'.")
    piece: PieceSchema = Field(..., description="Piece at that square.")


class GameStateSchema(BaseModel):
    """Relayed game state after every accepted move."""

    fen: str = Field(..., description="Full position in FEN.")
    board: List[BoardItemSchema] = Field(
        ..., description="List of occupied squares (sparse board representation)."
    )
    current_turn: ColorName = Field(..., description="Whose turn it is to move.")
    castling: str = Field(..., description="Castling availability, FEN style.")
    en_passant: Optional[str] = Field(None, description="En passant target square.")
    halfmove_clock: int = Field(..., ge=0)
    fullmove_number: int = Field(..., ge=0)
    moves: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Legal destinations keyed by origin square, all algebraic.",
    )
    game_status: GameStatus = Field(..., description="Game outcome so far.")


class MoveRequestSchema(BaseModel):
    """A move request relayed from a participant."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from", description="From square, e.g. 'e2'.")
    to: str = Field(..., description="To square, e.g. 'e4'.")
    promotion: Optional[str] = Field(
        None,
        description="Optional promotion piece code: one of q,r,b,n (queen otherwise).",
        examples=["q"],
    )


class RoomSchema(BaseModel):
    """Seats and spectators of a room."""

    room_id: str
    player1: Optional[str] = Field(None, description="Participant playing White.")
    player2: Optional[str] = Field(None, description="Participant playing Black.")
    spectators: List[str] = Field(default_factory=list)


_STATUS: dict[GameResult, GameStatus] = {
    GameResult.IN_PROGRESS: "in_progress",
    GameResult.WHITE_WINS: "white_wins",
    GameResult.BLACK_WINS: "black_wins",
    GameResult.DRAW: "draw",
}


def game_state_schema(info: GameInfo) -> GameStateSchema:
    """Build the relayed state from an engine snapshot."""
    pos = info.position
    board = [
        BoardItemSchema(
            position=square_name(sq),
            piece=PieceSchema(
                type=piece.piece_type.name.lower(),
                color=str(piece.color),
            ),
        )
        for sq, piece in enumerate(pos.board)
        if piece is not None
    ]
    moves = {
        square_name(origin): sorted(square_name(sq) for sq in destinations)
        for origin, destinations in sorted(info.moves.items())
    }
    return GameStateSchema(
        fen=info.fen,
        board=board,
        current_turn="white" if pos.side_to_move == Color.WHITE else "black",
        castling=castling_to_fen(pos.castling),
        en_passant=square_name(pos.en_passant) if pos.en_passant is not None else None,
        halfmove_clock=pos.halfmove_clock,
        fullmove_number=pos.fullmove_number,
        moves=moves,
        game_status=_STATUS[info.result],
    )
