"""Notation package: FEN parsing and serialization."""

from arbiter.core.notation.fen import (
    STARTING_FEN,
    board_from_placement,
    castling_to_fen,
    placement_to_fen,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "board_from_placement",
    "castling_to_fen",
    "placement_to_fen",
    "position_from_fen",
    "position_to_fen",
]
