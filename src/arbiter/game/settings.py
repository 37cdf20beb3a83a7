"""Engine configuration value object."""

from __future__ import annotations

from dataclasses import dataclass

from arbiter.core.enums import PROMOTION_TYPES, PieceType


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Tunable draw thresholds and promotion default for a :class:`GameEngine`.

    Args:
        repetition_limit: Earlier occurrences of a placement that make its
            next recurrence a draw.
        halfmove_limit: Halfmove-clock value that ends the game in a draw.
        default_promotion: Piece used when a promotion choice is missing or
            not one of queen, rook, bishop, knight.
    """

    repetition_limit: int = 3
    halfmove_limit: int = 50
    default_promotion: PieceType = PieceType.QUEEN

    def __post_init__(self) -> None:
        if self.repetition_limit < 1:
            raise ValueError(f"repetition_limit must be >= 1: {self.repetition_limit!r}")
        if self.halfmove_limit < 1:
            raise ValueError(f"halfmove_limit must be >= 1: {self.halfmove_limit!r}")
        if self.default_promotion not in PROMOTION_TYPES:
            raise ValueError(
                f"default_promotion must be a promotable piece: {self.default_promotion!r}"
            )
