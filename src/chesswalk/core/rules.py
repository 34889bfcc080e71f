"""High-level chess rules: check, checkmate, stalemate, game result."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

from chesswalk.core import attacks
from chesswalk.core.enums import Color, GameResult
from chesswalk.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chesswalk.core.move import Move
    from chesswalk.core.position import Position


class Termination(str, Enum):
    """Why a game stopped before its move limit."""

    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"

    def __str__(self) -> str:
        return self.value


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Draw claims (repetition, fifty moves, material) are deliberately absent;
    only the halfmove clock is tracked, in the position itself.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return attacks.is_in_check(position, position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.termination(position) is Termination.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return Rules.termination(position) is Termination.STALEMATE

    @staticmethod
    def termination(position: Position) -> Termination | None:
        """Termination reason when the side to move has no legal move."""
        legal = MoveGenerator(position).generate_legal_moves()
        return Rules.termination_for(position, legal)

    @staticmethod
    def termination_for(
        position: Position, legal: Sequence[Move]
    ) -> Termination | None:
        """Like :meth:`termination`, reusing already generated *legal* moves."""
        if legal:
            return None
        if Rules.is_in_check(position):
            return Termination.CHECKMATE
        return Termination.STALEMATE

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        return Rules.result_of(Rules.termination(position), position.side_to_move)

    @staticmethod
    def result_of(
        termination: Termination | None, side_to_move: Color
    ) -> GameResult:
        """Result implied by *termination*; the side to move is the one mated."""
        if termination is None:
            return GameResult.IN_PROGRESS
        if termination is Termination.STALEMATE:
            return GameResult.DRAW
        return (
            GameResult.BLACK_WINS
            if side_to_move == Color.WHITE
            else GameResult.WHITE_WINS
        )
