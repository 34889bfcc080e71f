"""Exceptions raised by the rules engine."""

from __future__ import annotations


class MalformedFENError(ValueError):
    """A FEN string could not be decoded into a position."""

    def __init__(self, message: str, fen: str | None = None) -> None:
        super().__init__(message)
        self.fen = fen


class IllegalMoveError(ValueError):
    """A move does not describe an action available in the position."""
