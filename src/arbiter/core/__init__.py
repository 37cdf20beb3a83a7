"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from arbiter.core import Rules, position_from_fen, square_name, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for origin, destinations in Rules.legal_moves(pos).items():
        print(square_name(origin), sorted(map(square_name, destinations)))
"""

from arbiter.core.attacks import danger_area, is_in_check, would_expose_check
from arbiter.core.board import Board
from arbiter.core.enums import CastlingRights, Color, GameResult, PieceType
from arbiter.core.errors import (
    ArbiterError,
    GameOverError,
    IllegalMoveError,
    InexistentPieceError,
    InvalidNotationError,
    MoveError,
    NotationError,
    OutOfBoundsError,
    SessionError,
)
from arbiter.core.move_generator import (
    bishop_moves,
    king_moves,
    knight_moves,
    pawn_moves,
    pseudo_legal_destinations,
    queen_moves,
    rook_moves,
)
from arbiter.core.notation import (
    STARTING_FEN,
    placement_to_fen,
    position_from_fen,
    position_to_fen,
)
from arbiter.core.piece import Piece
from arbiter.core.position import Position
from arbiter.core.rules import MoveTable, Rules
from arbiter.core.types import (
    Square,
    file_of,
    file_rank_to_square,
    make_square,
    parse_square,
    row_of,
    square_name,
    square_to_file_rank,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    # Errors
    "ArbiterError",
    "GameOverError",
    "IllegalMoveError",
    "InexistentPieceError",
    "InvalidNotationError",
    "MoveError",
    "NotationError",
    "OutOfBoundsError",
    "SessionError",
    # Types / helpers
    "Square",
    "file_of",
    "file_rank_to_square",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    "square_to_file_rank",
    # Domain objects
    "Board",
    "MoveTable",
    "Piece",
    "Position",
    "Rules",
    # Move generation / attacks
    "bishop_moves",
    "danger_area",
    "is_in_check",
    "king_moves",
    "knight_moves",
    "pawn_moves",
    "pseudo_legal_destinations",
    "queen_moves",
    "rook_moves",
    "would_expose_check",
    # Notation
    "STARTING_FEN",
    "placement_to_fen",
    "position_from_fen",
    "position_to_fen",
]
