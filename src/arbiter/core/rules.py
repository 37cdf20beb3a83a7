"""High-level chess rules: legal moves, checkmate, stalemate, draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from arbiter.core.attacks import danger_area, is_in_check, would_expose_check
from arbiter.core.board import Board
from arbiter.core.enums import Color, GameResult, PieceType
from arbiter.core.move_generator import pseudo_legal_destinations
from arbiter.core.types import Square, file_of, make_square, row_of

if TYPE_CHECKING:
    from arbiter.core.position import Position

MoveTable: TypeAlias = dict[Square, frozenset[Square]]

# Lone king, a single minor piece, or two knights cannot force mate.
_INSUFFICIENT_SETS: tuple[tuple[PieceType, ...], ...] = (
    (),
    (PieceType.BISHOP,),
    (PieceType.KNIGHT,),
    (PieceType.KNIGHT, PieceType.KNIGHT),
)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def legal_moves(position: Position) -> MoveTable:
        """Origin → legal destinations for the side to move.

        Origins without a single legal destination are left out.
        """
        color = position.side_to_move
        board = position.board
        danger = danger_area(color, board)
        table: MoveTable = {}

        for sq in sorted(board.all_pieces(color)):
            destinations = pseudo_legal_destinations(
                board, sq, position.castling, position.en_passant, danger
            )
            legal = frozenset(
                to_sq
                for to_sq in destinations
                if not would_expose_check(
                    color,
                    board,
                    sq,
                    to_sq,
                    Rules.en_passant_victim(board, sq, to_sq, position.en_passant),
                )
            )
            if legal:
                table[sq] = legal
        return table

    @staticmethod
    def en_passant_victim(
        board: Board, from_sq: Square, to_sq: Square, en_passant: Square | None
    ) -> Square | None:
        """Square of the pawn an en passant capture removes, if it is one."""
        piece = board[from_sq]
        if (
            en_passant is None
            or to_sq != en_passant
            or piece is None
            or piece.piece_type != PieceType.PAWN
            or file_of(from_sq) == file_of(to_sq)
        ):
            return None
        return make_square(file_of(to_sq), row_of(from_sq))

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position.side_to_move, position.board)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.is_in_check(position) and not Rules.legal_moves(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return not Rules.is_in_check(position) and not Rules.legal_moves(position)

    @staticmethod
    def has_insufficient_material(board: Board, color: Color) -> bool:
        """Whether *color* alone could never deliver mate."""
        return tuple(sorted(board.material(color))) in _INSUFFICIENT_SETS

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """Both sides must independently lack mating material."""
        return Rules.has_insufficient_material(
            board, Color.WHITE
        ) and Rules.has_insufficient_material(board, Color.BLACK)

    @staticmethod
    def is_fifty_move_rule(position: Position, limit: int = 50) -> bool:
        return position.halfmove_clock >= limit

    @staticmethod
    def no_moves_result(position: Position) -> GameResult:
        """Result when the side to move has no legal move: mate or stalemate."""
        if Rules.is_in_check(position):
            return GameResult.win_for(position.side_to_move.opposite)
        return GameResult.DRAW
