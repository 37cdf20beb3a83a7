"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from arbiter.core.types import parse_square
from arbiter.game.engine import GameEngine

Play = Callable[[GameEngine, str], None]


def play_moves(engine: GameEngine, moves: str) -> None:
    """Play space-separated coordinate moves such as ``"e2e4 e7e5"``."""
    for move in moves.split():
        engine.request_move(
            parse_square(move[:2]),
            parse_square(move[2:4]),
            move[4:] or None,
        )


@pytest.fixture
def play() -> Play:
    return play_moves


@pytest.fixture
def engine() -> GameEngine:
    """A fresh game from the standard starting position."""
    return GameEngine()
