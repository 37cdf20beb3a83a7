"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from arbiter.core.enums import Color, PieceType
from arbiter.core.piece import Piece
from arbiter.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board indexed by :data:`Square`."""

    __slots__ = ("_squares",)

    def __init__(self, squares: list[Piece | None] | None = None) -> None:
        if squares is None:
            squares = [None] * 64
        if len(squares) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(squares)}")
        self._squares: list[Piece | None] = list(squares)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    def __len__(self) -> int:
        return 64

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> frozenset[Square]:
        """Every occupied square."""
        return frozenset(sq for sq, p in enumerate(self._squares) if p is not None)

    def all_pieces(self, color: Color) -> frozenset[Square]:
        """All squares occupied by *color*."""
        return frozenset(
            sq
            for sq, p in enumerate(self._squares)
            if p is not None and p.color == color
        )

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, p in enumerate(self._squares) if p == target]

    def material(self, color: Color) -> list[PieceType]:
        """Piece types of *color* other than the king."""
        return [
            p.piece_type
            for p in self._squares
            if p is not None and p.color == color and p.piece_type != PieceType.KING
        ]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is missing."""
        king = Piece(color, PieceType.KING)
        for sq, p in enumerate(self._squares):
            if p == king:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate whatever stands on *from_sq*; return the piece it replaced."""
        captured = self._squares[to_sq]
        self._squares[to_sq] = self._squares[from_sq]
        self._squares[from_sq] = None
        return captured

    def copy(self) -> Board:
        return Board(self._squares)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, built fresh on every call."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.BLACK, pt)
            b[make_square(f, 1)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for file in range(8):
                p = self[make_square(file, row)]
                cells.append(str(p) if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
