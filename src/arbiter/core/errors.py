"""Exception hierarchy for notation and move-request failures."""

from __future__ import annotations


class ArbiterError(Exception):
    """Base class for every error raised by this package."""


# ── Notation / coordinates ──────────────────────────────────────────────────


class NotationError(ArbiterError, ValueError):
    """Malformed square text, square index or interchange string."""


class InvalidNotationError(NotationError):
    """Text that does not follow square or position notation."""


class OutOfBoundsError(NotationError):
    """A square index, file, row or rank outside the board."""


# ── Move requests ───────────────────────────────────────────────────────────


class MoveError(ArbiterError):
    """A move request was rejected; the game state is unchanged."""


class InexistentPieceError(MoveError):
    """The origin square holds no piece that can move for the side to play."""


class IllegalMoveError(MoveError):
    """The destination is not a legal target for the origin square."""


class GameOverError(MoveError):
    """The game already reached a terminal outcome."""


# ── Session layer ───────────────────────────────────────────────────────────


class SessionError(ArbiterError):
    """Room membership or seat-authorisation failure."""
