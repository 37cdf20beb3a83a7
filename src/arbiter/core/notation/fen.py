"""FEN parsing and serialization."""

from __future__ import annotations

from arbiter.core.board import Board
from arbiter.core.enums import CastlingRights, Color
from arbiter.core.errors import InvalidNotationError
from arbiter.core.piece import Piece
from arbiter.core.position import Position
from arbiter.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)

# Row of a double-stepped pawn -> row it skipped over
_LANDING_ROWS: dict[int, int] = {4: 5, 3: 2}


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field into a :class:`Board`."""
    board = Board()
    head = 0
    for ch in placement:
        if ch == "/":
            continue
        if ch in "0123456789":
            step = int(ch)
            if not (1 <= step <= 8):
                raise InvalidNotationError(f"Invalid FEN digit {ch!r}: {placement!r}")
            head += step
        else:
            board[head] = Piece.from_char(ch)
            head += 1
        # Anything after the 64th square is ignored
        if head >= 64:
            break
    if head < 64:
        raise InvalidNotationError(f"FEN placement covers {head} of 64 squares: {placement!r}")
    return board


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise InvalidNotationError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    board = board_from_placement(placement)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise InvalidNotationError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        if any(ch not in "KQkq" for ch in castling_part):
            raise InvalidNotationError(f"Invalid FEN castling field: {castling_part!r}")
        for ch, right in _CASTLING_CHARS:
            if ch in castling_part:
                castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        row = row_of(ep)
        # A landing square (rank 4 or 5) names the pawn; store the square behind it
        if row in _LANDING_ROWS:
            ep = make_square(file_of(ep), _LANDING_ROWS[row])
        elif row not in (2, 5):
            raise InvalidNotationError(f"Invalid FEN en-passant square: {ep_part!r}")

    # 5–6. Clocks (optional)
    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 1
    except ValueError:
        raise InvalidNotationError(f"Invalid FEN clock fields: {fen!r}") from None
    if halfmove < 0 or fullmove < 0:
        raise InvalidNotationError(f"Negative FEN clock field: {fen!r}")

    return Position(board, side, castling, ep, halfmove, fullmove)


def placement_to_fen(board: Board) -> str:
    """Serialise only the piece placement, e.g. ``8/8/8/8/8/8/8/8``."""
    out: list[str] = []
    empty = 0
    for sq, piece in enumerate(board):
        if piece is None:
            empty += 1
        else:
            if empty:
                out.append(str(empty))
                empty = 0
            out.append(str(piece))
        if sq % 8 == 7:
            if empty:
                out.append(str(empty))
                empty = 0
            if sq != 63:
                out.append("/")
    return "".join(out)


def castling_to_fen(castling: CastlingRights) -> str:
    text = "".join(ch for ch, right in _CASTLING_CHARS if castling & right)
    return text or "-"


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    board_str = placement_to_fen(pos.board)
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    castling_str = castling_to_fen(pos.castling)
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
