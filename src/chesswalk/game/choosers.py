"""Move choosers: policies picking one move out of the legal list."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from typing import Protocol

from chesswalk.core.errors import IllegalMoveError
from chesswalk.core.move import Move


class MoveChooser(Protocol):
    """Anything callable that selects one move from a non-empty sequence."""

    def __call__(self, moves: Sequence[Move]) -> Move: ...


class RandomChooser:
    """Uniform choice over the legal moves.

    Args:
        seed: Seed for a private :class:`random.Random`; ``None`` draws
            from system entropy.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def __call__(self, moves: Sequence[Move]) -> Move:
        if not moves:
            raise ValueError("Cannot choose from an empty move list")
        return self._rng.choice(moves)


class ScriptedChooser:
    """Plays a fixed list of UCI moves in order (e.g. ``["f2f3", "e7e5"]``)."""

    __slots__ = ("_script", "_index")

    def __init__(self, ucis: Iterable[str]) -> None:
        self._script = list(ucis)
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._script) - self._index

    def __call__(self, moves: Sequence[Move]) -> Move:
        if self._index >= len(self._script):
            raise IllegalMoveError("Move script exhausted")
        wanted = self._script[self._index]
        for move in moves:
            if move.uci == wanted:
                self._index += 1
                return move
        raise IllegalMoveError(f"Scripted move {wanted!r} is not legal here")
