"""Attacked-square ("danger area") computation and check simulation."""

from __future__ import annotations

from arbiter.core.board import Board
from arbiter.core.enums import Color, PieceType
from arbiter.core.move_generator import (
    bishop_moves,
    king_attacks,
    knight_moves,
    pawn_attacks,
    queen_moves,
    rook_moves,
)
from arbiter.core.types import Square

_NO_SQUARES: frozenset[Square] = frozenset()


def danger_area(color: Color, board: Board) -> frozenset[Square]:
    """Squares the opponent of *color* attacks or defends.

    Every occupied square counts as capturable for the attacker, so pieces
    guarded by their own side are part of the area too.
    """
    occupied = board.occupied()
    attacker = color.opposite
    area: set[Square] = set()

    for sq, piece in enumerate(board):
        if piece is None or piece.color != attacker:
            continue
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            area.update(pawn_attacks(sq, attacker))
        elif ptype == PieceType.KNIGHT:
            area |= knight_moves(sq, _NO_SQUARES)
        elif ptype == PieceType.BISHOP:
            area |= bishop_moves(sq, _NO_SQUARES, occupied)
        elif ptype == PieceType.ROOK:
            area |= rook_moves(sq, _NO_SQUARES, occupied)
        elif ptype == PieceType.QUEEN:
            area |= queen_moves(sq, _NO_SQUARES, occupied)
        elif ptype == PieceType.KING:
            area.update(king_attacks(sq))
        else:
            raise ValueError(f"Unknown piece type: {ptype!r}")

    return frozenset(area)


def is_in_check(color: Color, board: Board) -> bool:
    """Is *color*'s king attacked? A missing king is never in check."""
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return king_sq in danger_area(color, board)


def would_expose_check(
    color: Color,
    board: Board,
    from_sq: Square,
    to_sq: Square,
    also_clear: Square | None = None,
) -> bool:
    """Would moving the piece on *from_sq* to *to_sq* leave *color* in check?

    The move is played on a scratch copy; *board* is never touched. Only the
    moving piece is relocated, plus *also_clear* (the victim of an en passant
    capture) when given.
    """
    scratch = board.copy()
    scratch.move_piece(from_sq, to_sq)
    if also_clear is not None:
        scratch[also_clear] = None
    return is_in_check(color, scratch)
