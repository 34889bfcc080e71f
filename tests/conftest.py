"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chesswalk.core.notation import STARTING_FEN, parse_san, position_from_fen
from chesswalk.core.position import Position


@pytest.fixture
def start_position() -> Position:
    """The standard initial position."""
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def play() -> Callable[..., Position]:
    """Apply SAN moves in order: ``play(pos, "e4", "e5")``."""

    def _play(position: Position, *sans: str) -> Position:
        for san in sans:
            position = position.apply(parse_san(position, san))
        return position

    return _play
