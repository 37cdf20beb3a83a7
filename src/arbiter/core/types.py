"""Square type alias and coordinate helpers.

Board layout (rows stored from Black's back rank down to White's):
    a8=0,  b8=1,  ..., h8=7
    a7=8,  b7=9,  ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63

``file`` is 0–7 (a–h) and ``row`` is 0–7 where row 0 is the eighth rank.
"""

from __future__ import annotations

from typing import TypeAlias

from arbiter.core.errors import InvalidNotationError, OutOfBoundsError

Square: TypeAlias = int  # 0–63

_FILES = "abcdefgh"


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < 64


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def row_of(sq: Square) -> int:
    """Row index 0–7 (eighth rank to first rank)."""
    return sq >> 3


def make_square(file: int, row: int) -> Square:
    """Create square from file (0–7) and row (0–7) without range checks."""
    return row * 8 + file


def square_to_file_rank(sq: Square) -> tuple[int, int]:
    """Split *sq* into ``(file, row)``."""
    if not is_valid_square(sq):
        raise OutOfBoundsError(f"Square index out of range: {sq!r}")
    return file_of(sq), row_of(sq)


def file_rank_to_square(file: int, row: int) -> Square:
    """Inverse of :func:`square_to_file_rank`."""
    if not (0 <= file < 8 and 0 <= row < 8):
        raise OutOfBoundsError(f"Coordinate out of range: {(file, row)!r}")
    return make_square(file, row)


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. 0 → 'a8', 63 → 'h1'."""
    file, row = square_to_file_rank(sq)
    return _FILES[file] + str(8 - row)


def parse_square(name: str) -> Square:
    """Parse an algebraic square name, e.g. 'e4' → 36."""
    if len(name) != 2:
        raise InvalidNotationError(f"Invalid square name: {name!r}")
    file = _FILES.find(name[0])
    if file == -1:
        raise InvalidNotationError(f"Invalid file letter: {name!r}")
    if name[1] not in "12345678":
        raise OutOfBoundsError(f"Rank out of range: {name!r}")
    return make_square(file, 8 - int(name[1]))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = range(0, 8)
A7, B7, C7, D7, E7, F7, G7, H7 = range(8, 16)
A6, B6, C6, D6, E6, F6, G6, H6 = range(16, 24)
A5, B5, C5, D5, E5, F5, G5, H5 = range(24, 32)
A4, B4, C4, D4, E4, F4, G4, H4 = range(32, 40)
A3, B3, C3, D3, E3, F3, G3, H3 = range(40, 48)
A2, B2, C2, D2, E2, F2, G2, H2 = range(48, 56)
A1, B1, C1, D1, E1, F1, G1, H1 = range(56, 64)
