"""Position — complete game state (board + metadata) and move application."""

from __future__ import annotations

from arbiter.core.board import Board
from arbiter.core.enums import CastlingRights, Color, PieceType
from arbiter.core.piece import Piece
from arbiter.core.types import A1, A8, H1, H8, Square, file_of, make_square, row_of


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    ``en_passant`` is the square a pawn passed over on its double step during
    the previous ply, or ``None``.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Move application ─────────────────────────────────────────────────

    def make_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType = PieceType.QUEEN,
    ) -> Piece | None:
        """Apply an already validated move and return the captured piece.

        Handles the castling rook, en passant capture, promotion, rights,
        clocks and the side flip. Legality is the caller's business.
        """
        board = self.board
        piece = board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        color = piece.color
        captured = board[to_sq]

        # The target only lives for one ply
        ep_target = self.en_passant
        self.en_passant = None

        if captured is not None or piece.piece_type == PieceType.PAWN:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        board.move_piece(from_sq, to_sq)

        if piece.piece_type == PieceType.KING:
            if abs(file_of(to_sq) - file_of(from_sq)) == 2:
                self._slide_castling_rook(from_sq, to_sq)
            self.castling &= ~CastlingRights.both(color)
        elif piece.piece_type == PieceType.ROOK:
            corner_right = _ROOK_CORNERS.get(from_sq)
            if corner_right is not None and self.castling & corner_right:
                self.castling &= ~corner_right
        elif piece.piece_type == PieceType.PAWN:
            if row_of(to_sq) == color.opposite.home_row:
                board[to_sq] = Piece(color, promotion)
            elif ep_target is not None and to_sq == ep_target:
                victim_sq = make_square(file_of(to_sq), row_of(from_sq))
                captured = board[victim_sq]
                board[victim_sq] = None
            elif abs(row_of(to_sq) - row_of(from_sq)) == 2:
                self.en_passant = make_square(
                    file_of(from_sq), (row_of(from_sq) + row_of(to_sq)) // 2
                )

        # A rook taken on its corner can no longer castle
        if captured is not None and captured.piece_type == PieceType.ROOK:
            corner_right = _ROOK_CORNERS.get(to_sq)
            if corner_right is not None:
                self.castling &= ~corner_right

        if color == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = color.opposite
        return captured

    def _slide_castling_rook(self, king_from: Square, king_to: Square) -> None:
        row = row_of(king_from)
        if file_of(king_to) > file_of(king_from):
            rook_from, rook_to = make_square(7, row), make_square(5, row)
        else:
            rook_from, rook_to = make_square(0, row), make_square(3, row)
        self.board.move_piece(rook_from, rook_to)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy (the board is duplicated, pieces are immutable)."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from arbiter.core.notation.fen import position_to_fen

        return f"Position({position_to_fen(self)!r})"


_ROOK_CORNERS: dict[Square, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}
