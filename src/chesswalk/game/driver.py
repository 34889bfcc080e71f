"""Random game driver: plays chooser-selected legal moves until a limit.

Each half-move: generate legal moves, stop on checkmate/stalemate, otherwise
let the chooser pick one, render it to SAN against the pre-move position and
apply it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum, auto

from chesswalk.core.enums import Color, GameResult
from chesswalk.core.errors import IllegalMoveError
from chesswalk.core.move import Move
from chesswalk.core.move_generator import MoveGenerator
from chesswalk.core.notation import (
    format_move_list,
    move_to_san,
    position_from_fen,
    position_to_fen,
)
from chesswalk.core.position import Position
from chesswalk.core.rules import Rules, Termination
from chesswalk.game.choosers import MoveChooser, RandomChooser
from chesswalk.game.config import GameConfig

_LOGGER = logging.getLogger(__name__)


class GamePhase(IntEnum):
    """Finite-state-machine states of a generated game."""

    IN_PROGRESS = auto()
    TERMINATED = auto()


@dataclass(slots=True, frozen=True)
class MoveRecord:
    """One played half-move."""

    move: Move
    san: str
    fen_after: str


@dataclass(slots=True)
class RandomGame:
    """Outcome of :func:`generate_random_game`."""

    moves: list[str]
    final_fen: str
    terminated: Termination | None
    start_fen: str
    records: list[MoveRecord] = field(default_factory=list)
    final_side_to_move: Color = Color.WHITE
    start_fullmove: int = 1
    start_side_to_move: Color = Color.WHITE

    @property
    def result(self) -> GameResult:
        return Rules.result_of(self.terminated, self.final_side_to_move)

    @property
    def move_text(self) -> str:
        """Numbered move list, e.g. ``"1.e4 e5, 2.Nf3"``."""
        return format_move_list(
            self.moves, self.start_fullmove, self.start_side_to_move
        )


class RandomGameDriver:
    """Steps a game one half-move at a time.

    Args:
        chooser: Policy selecting among the legal moves.
        move_pairs: Positive limit on full moves (white + black) to play.
        position: Starting position (defaults to the standard one).
    """

    __slots__ = (
        "_chooser",
        "_max_plies",
        "_start",
        "_position",
        "_records",
        "_termination",
    )

    def __init__(
        self,
        chooser: MoveChooser,
        move_pairs: int,
        position: Position | None = None,
    ) -> None:
        if move_pairs < 1:
            raise ValueError(f"move_pairs must be a positive integer: {move_pairs}")
        self._chooser = chooser
        self._max_plies = 2 * move_pairs
        self._start = position if position is not None else Position()
        self._position = self._start
        self._records: list[MoveRecord] = []
        self._termination: Termination | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def phase(self) -> GamePhase:
        if self._termination is None:
            return GamePhase.IN_PROGRESS
        return GamePhase.TERMINATED

    @property
    def termination(self) -> Termination | None:
        return self._termination

    @property
    def records(self) -> list[MoveRecord]:
        return list(self._records)

    @property
    def plies_played(self) -> int:
        return len(self._records)

    @property
    def max_plies(self) -> int:
        return self._max_plies

    # ── Stepping ─────────────────────────────────────────────────────────

    def step(self) -> MoveRecord | None:
        """Play one half-move; ``None`` once the game is over or at the limit.

        The current position is always inspected first, so a mate delivered
        on the final allowed half-move is still reported.
        """
        if self._termination is not None:
            return None

        pos = self._position
        legal = MoveGenerator(pos).generate_legal_moves()
        self._termination = Rules.termination_for(pos, legal)
        if self._termination is not None:
            _LOGGER.info(
                "Game terminated by %s after %d plies",
                self._termination,
                self.plies_played,
            )
            return None

        if self.plies_played >= self._max_plies:
            return None

        move = self._chooser(legal)
        if move not in legal:
            raise IllegalMoveError(f"Chooser returned a move that is not legal: {move}")

        san = move_to_san(pos, move)
        self._position = pos.apply(move)
        record = MoveRecord(move, san, position_to_fen(self._position))
        self._records.append(record)
        _LOGGER.debug("ply %d: %s (%s)", self.plies_played, san, record.fen_after)
        return record

    def run(self) -> RandomGame:
        """Step until termination or the half-move limit."""
        while self.step() is not None:
            pass
        return RandomGame(
            moves=[r.san for r in self._records],
            final_fen=position_to_fen(self._position),
            terminated=self._termination,
            start_fen=position_to_fen(self._start),
            records=list(self._records),
            final_side_to_move=self._position.side_to_move,
            start_fullmove=self._start.fullmove_number,
            start_side_to_move=self._start.side_to_move,
        )


def generate_random_game(
    move_pairs: int | None = None,
    chooser: MoveChooser | None = None,
    *,
    config: GameConfig | None = None,
    fen: str | None = None,
) -> RandomGame:
    """Play a random legal game and return its SAN moves and final FEN.

    ``move_pairs`` is clamped into the config's bounds (1–10 by default).

    Raises:
        MalformedFENError: if the starting FEN cannot be parsed.
    """
    cfg = config if config is not None else GameConfig()
    pairs = cfg.clamped_move_pairs(move_pairs)
    start = position_from_fen(fen if fen is not None else cfg.start_fen)
    if chooser is None:
        chooser = RandomChooser(cfg.seed)

    _LOGGER.debug("Generating %d move pairs from %s", pairs, position_to_fen(start))
    return RandomGameDriver(chooser, pairs, start).run()
