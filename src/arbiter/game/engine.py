"""GameEngine — the authoritative rules state machine for one game.

Owns a :class:`Position`, the current :data:`MoveTable` and the placement
history used for repetition counting. The only transition is
:meth:`GameEngine.request_move`; once the result is terminal every further
request is rejected.

Not thread-safe: callers serialise access per instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from arbiter.core.enums import PROMOTION_TYPES, Color, GameResult, PieceType
from arbiter.core.errors import (
    GameOverError,
    IllegalMoveError,
    InexistentPieceError,
    InvalidNotationError,
)
from arbiter.core.notation import placement_to_fen, position_from_fen, position_to_fen
from arbiter.core.piece import piece_type_from_letter
from arbiter.core.position import Position
from arbiter.core.rules import MoveTable, Rules
from arbiter.core.types import Square, is_valid_square, square_name
from arbiter.game.settings import EngineSettings

_LOGGER = logging.getLogger(__name__)

PromotionChoice = PieceType | str | None


@dataclass(frozen=True, slots=True)
class GameInfo:
    """Detached snapshot of a game: position, legal moves and result."""

    position: Position
    moves: MoveTable
    result: GameResult

    @property
    def fen(self) -> str:
        return position_to_fen(self.position)


class GameEngine:
    """Validates and applies moves, then re-derives moves and game result."""

    __slots__ = ("_position", "_moves", "_result", "_history", "_settings")

    def __init__(
        self,
        position: Position | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        self._position = position.copy() if position is not None else Position()
        self._settings = settings or EngineSettings()
        self._result = GameResult.IN_PROGRESS
        self._history: list[str] = [placement_to_fen(self._position.board)]
        self._moves: MoveTable = Rules.legal_moves(self._position)

    @classmethod
    def from_fen(cls, fen: str, settings: EngineSettings | None = None) -> GameEngine:
        """Start a game from an interchange string."""
        return cls(position_from_fen(fen), settings)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        """A copy of the current position."""
        return self._position.copy()

    @property
    def legal_moves(self) -> MoveTable:
        return dict(self._moves)

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_game_over(self) -> bool:
        return self._result.is_terminal

    @property
    def side_to_move(self) -> Color:
        return self._position.side_to_move

    @property
    def history(self) -> tuple[str, ...]:
        """Placement strings, starting position first."""
        return tuple(self._history)

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def fen(self) -> str:
        return position_to_fen(self._position)

    def info(self) -> GameInfo:
        return GameInfo(self.position, self.legal_moves, self._result)

    # ── Transition ───────────────────────────────────────────────────────

    def request_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PromotionChoice = None,
    ) -> GameResult:
        """Play *from_sq* → *to_sq* for the side to move and return the result.

        Raises:
            InexistentPieceError: nothing on *from_sq* can move.
            IllegalMoveError: *to_sq* is not a legal destination.
            GameOverError: the game has already ended.
        """
        destinations = self._moves.get(from_sq)
        if destinations is None:
            _LOGGER.warning("Rejected move from %s: no movable piece", _describe(from_sq))
            raise InexistentPieceError(f"No movable piece on square: {from_sq!r}")
        if to_sq not in destinations:
            _LOGGER.warning(
                "Rejected move %s-%s: illegal destination",
                _describe(from_sq),
                _describe(to_sq),
            )
            raise IllegalMoveError(f"Illegal destination {to_sq!r} for square {from_sq!r}")
        if self._result.is_terminal:
            _LOGGER.warning("Rejected move after game over (%s)", self._result.name)
            raise GameOverError(f"Game is over: {self._result.name}")

        position = self._position
        mover = position.side_to_move
        position.make_move(from_sq, to_sq, self._normalize_promotion(promotion))
        _LOGGER.debug("%s played %s-%s", mover, square_name(from_sq), square_name(to_sq))

        placement = placement_to_fen(position.board)
        result = GameResult.IN_PROGRESS

        if Rules.is_insufficient_material(position.board):
            result = GameResult.DRAW
        if self._history.count(placement) >= self._settings.repetition_limit:
            result = GameResult.DRAW

        self._moves = Rules.legal_moves(position)
        _LOGGER.debug("%d movable pieces for %s", len(self._moves), position.side_to_move)

        if not self._moves:
            result = Rules.no_moves_result(position)
        elif Rules.is_fifty_move_rule(position, self._settings.halfmove_limit):
            result = GameResult.DRAW

        self._result = result
        self._history.append(placement)
        if result.is_terminal:
            _LOGGER.info("Game over: %s after %s", result.name, position_to_fen(position))
        return result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _normalize_promotion(self, promotion: PromotionChoice) -> PieceType:
        choice: PieceType | None = None
        if isinstance(promotion, PieceType):
            choice = promotion
        elif isinstance(promotion, str):
            try:
                choice = piece_type_from_letter(promotion)
            except InvalidNotationError:
                choice = None
        if choice not in PROMOTION_TYPES:
            return self._settings.default_promotion
        return choice


def _describe(sq: object) -> str:
    if isinstance(sq, int) and is_valid_square(sq):
        return square_name(sq)
    return repr(sq)
