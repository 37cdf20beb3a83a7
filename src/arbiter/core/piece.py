"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from arbiter.core.enums import Color, PieceType
from arbiter.core.errors import InvalidNotationError

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

_TYPE_LETTERS: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}


def piece_type_letter(piece_type: PieceType) -> str:
    """Lowercase letter for *piece_type*, e.g. KNIGHT → 'n'."""
    return _FEN_CHARS[(Color.BLACK, piece_type)]


def piece_type_from_letter(letter: str) -> PieceType:
    """Parse a single piece letter of either case, e.g. 'Q' → QUEEN."""
    if len(letter) != 1:
        raise InvalidNotationError(f"Not a single piece letter: {letter!r}")
    try:
        return _TYPE_LETTERS[letter.lower()]
    except KeyError:
        raise InvalidNotationError(f"Invalid piece letter: {letter!r}") from None


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise InvalidNotationError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)
