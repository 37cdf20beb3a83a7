"""Tests for Board."""

from arbiter.core.board import Board
from arbiter.core.enums import Color, PieceType
from arbiter.core.piece import Piece
from arbiter.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        assert board.pieces(Color.BLACK, PieceType.PAWN) == list(range(8, 16))
        assert board.pieces(Color.WHITE, PieceType.PAWN) == list(range(48, 56))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None

    def test_occupancy_by_color(self) -> None:
        board = Board.initial()
        assert board.all_pieces(Color.BLACK) == frozenset(range(16))
        assert board.all_pieces(Color.WHITE) == frozenset(range(48, 64))

    def test_fresh_instance_per_call(self) -> None:
        first = Board.initial()
        first[E2] = None
        assert Board.initial()[E2] == Piece(Color.WHITE, PieceType.PAWN)


class TestBoardQueries:
    def test_king_square_missing(self) -> None:
        assert Board().king_square(Color.WHITE) is None

    def test_material_excludes_king(self) -> None:
        board = Board.initial()
        material = board.material(Color.WHITE)
        assert len(material) == 15
        assert PieceType.KING not in material


class TestBoardMutation:
    def test_move_piece_returns_captured(self) -> None:
        board = Board()
        board[E2] = Piece(Color.WHITE, PieceType.ROOK)
        board[E4] = Piece(Color.BLACK, PieceType.KNIGHT)
        captured = board.move_piece(E2, E4)
        assert captured == Piece(Color.BLACK, PieceType.KNIGHT)
        assert board[E2] is None
        assert board[E4] == Piece(Color.WHITE, PieceType.ROOK)

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone.move_piece(E2, E4)
        assert board[E2] is not None
        assert board != clone

    def test_equality(self) -> None:
        assert Board.initial() == Board.initial()
        assert Board() != Board.initial()
