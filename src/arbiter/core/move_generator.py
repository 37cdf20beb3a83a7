"""Pseudo-legal destination generation per piece type.

Every function works on plain occupancy sets: *allies* are squares held by
the moving side, *enemies* squares held by the opponent. None of them look at
king safety; that is layered on top by :mod:`arbiter.core.attacks` and
:mod:`arbiter.core.rules`.
"""

from __future__ import annotations

from collections.abc import Collection

from arbiter.core.board import Board
from arbiter.core.enums import CastlingRights, Color, PieceType
from arbiter.core.types import Square, file_of, make_square, row_of

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        row_idx = row_of(sq)
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = row_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        row_idx = row_of(sq)
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = row_idx + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_attacks(color: Color) -> tuple[tuple[Square, ...], ...]:
    return _build_targets(((-1, color.forward), (1, color.forward)))


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_PAWN_ATTACKS = (_build_pawn_attacks(Color.WHITE), _build_pawn_attacks(Color.BLACK))

_PAWN_START_ROW = (6, 1)  # indexed by Color


# -- Piece patterns ---------------------------------------------------------


def knight_moves(sq: Square, allies: Collection[Square]) -> set[Square]:
    """The eight L-shaped jumps that stay on the board and avoid allies."""
    return {to_sq for to_sq in _KNIGHT_TARGETS[sq] if to_sq not in allies}


def _sliding_moves(
    rays: tuple[tuple[Square, ...], ...],
    allies: Collection[Square],
    enemies: Collection[Square],
) -> set[Square]:
    moves: set[Square] = set()
    for ray in rays:
        for to_sq in ray:
            if to_sq in enemies:
                moves.add(to_sq)
                break
            if to_sq in allies:
                break
            moves.add(to_sq)
    return moves


def bishop_moves(
    sq: Square, allies: Collection[Square], enemies: Collection[Square]
) -> set[Square]:
    return _sliding_moves(_BISHOP_RAYS[sq], allies, enemies)


def rook_moves(
    sq: Square, allies: Collection[Square], enemies: Collection[Square]
) -> set[Square]:
    return _sliding_moves(_ROOK_RAYS[sq], allies, enemies)


def queen_moves(
    sq: Square, allies: Collection[Square], enemies: Collection[Square]
) -> set[Square]:
    return bishop_moves(sq, allies, enemies) | rook_moves(sq, allies, enemies)


def pawn_attacks(sq: Square, color: Color) -> tuple[Square, ...]:
    """Diagonal squares a *color* pawn on *sq* threatens."""
    return _PAWN_ATTACKS[int(color)][sq]


def king_attacks(sq: Square) -> tuple[Square, ...]:
    """The adjacent squares of *sq*."""
    return _KING_TARGETS[sq]


def pawn_moves(
    sq: Square,
    color: Color,
    allies: Collection[Square],
    enemies: Collection[Square],
    en_passant: Square | None = None,
) -> set[Square]:
    """Pushes, double push from the start row, captures and en passant.

    *en_passant* is the square the enemy pawn skipped on its double step.
    """
    moves: set[Square] = set()
    file_idx = file_of(sq)
    row_idx = row_of(sq)
    next_row = row_idx + color.forward
    if not 0 <= next_row < 8:
        return moves

    one_step = make_square(file_idx, next_row)
    if one_step not in allies and one_step not in enemies:
        moves.add(one_step)
        if row_idx == _PAWN_START_ROW[int(color)]:
            two_step = make_square(file_idx, next_row + color.forward)
            if two_step not in allies and two_step not in enemies:
                moves.add(two_step)

    for cap_sq in pawn_attacks(sq, color):
        if cap_sq in enemies:
            moves.add(cap_sq)
        elif (
            cap_sq == en_passant
            and make_square(file_of(cap_sq), row_idx) in enemies
        ):
            moves.add(cap_sq)
    return moves


def king_moves(
    sq: Square,
    color: Color,
    allies: Collection[Square],
    enemies: Collection[Square],
    castling: CastlingRights,
    danger: Collection[Square],
) -> set[Square]:
    """Adjacent steps outside *danger*, plus castling destinations.

    *danger* is the set of squares the opponent attacks.
    """
    moves = {
        to_sq
        for to_sq in _KING_TARGETS[sq]
        if to_sq not in allies and to_sq not in danger
    }

    row = color.home_row
    if sq != make_square(4, row) or sq in danger:
        return moves

    def _clear(files: tuple[int, ...]) -> bool:
        return all(
            make_square(f, row) not in allies and make_square(f, row) not in enemies
            for f in files
        )

    def _safe(files: tuple[int, ...]) -> bool:
        return all(make_square(f, row) not in danger for f in files)

    if (
        castling & CastlingRights.kingside(color)
        and make_square(7, row) in allies
        and _clear((5, 6))
        and _safe((5, 6))
    ):
        moves.add(make_square(6, row))

    if (
        castling & CastlingRights.queenside(color)
        and make_square(0, row) in allies
        and _clear((1, 2, 3))
        and _safe((2, 3))
    ):
        moves.add(make_square(2, row))

    return moves


# -- Dispatch ---------------------------------------------------------------


def pseudo_legal_destinations(
    board: Board,
    sq: Square,
    castling: CastlingRights = CastlingRights.NONE,
    en_passant: Square | None = None,
    danger: Collection[Square] = frozenset(),
) -> set[Square]:
    """Destinations of the piece on *sq* ignoring its own king's safety."""
    piece = board[sq]
    if piece is None:
        return set()

    allies = board.all_pieces(piece.color)
    enemies = board.all_pieces(piece.color.opposite)
    ptype = piece.piece_type

    if ptype == PieceType.PAWN:
        return pawn_moves(sq, piece.color, allies, enemies, en_passant)
    if ptype == PieceType.KNIGHT:
        return knight_moves(sq, allies)
    if ptype == PieceType.BISHOP:
        return bishop_moves(sq, allies, enemies)
    if ptype == PieceType.ROOK:
        return rook_moves(sq, allies, enemies)
    if ptype == PieceType.QUEEN:
        return queen_moves(sq, allies, enemies)
    if ptype == PieceType.KING:
        return king_moves(sq, piece.color, allies, enemies, castling, danger)
    raise ValueError(f"Unknown piece type: {ptype!r}")
