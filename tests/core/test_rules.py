"""Tests for check, checkmate, stalemate and results."""

from chesswalk.core.enums import Color, GameResult
from chesswalk.core.move_generator import legal_moves
from chesswalk.core.notation import position_from_fen
from chesswalk.core.rules import Rules, Termination


class TestCheck:
    def test_start_not_in_check(self, start_position) -> None:
        assert not Rules.is_in_check(start_position)

    def test_scholars_check(self, start_position, play) -> None:
        pos = play(start_position, "e4", "f6", "Qh5")
        assert Rules.is_in_check(pos)
        assert not Rules.is_checkmate(pos)


class TestCheckmate:
    def test_fools_mate(self, start_position, play) -> None:
        pos = play(start_position, "f3", "e5", "g4", "Qh4")
        assert Rules.is_checkmate(pos)
        assert Rules.termination(pos) is Termination.CHECKMATE
        assert Rules.game_result(pos) == GameResult.BLACK_WINS

    def test_back_rank_mate(self) -> None:
        pos = position_from_fen("R5k1/5ppp/8/8/8/8/8/6K1 b - - 0 1")
        assert Rules.is_checkmate(pos)
        assert Rules.game_result(pos) == GameResult.WHITE_WINS


class TestStalemate:
    def test_queen_stalemate(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert Rules.is_stalemate(pos)
        assert not Rules.is_checkmate(pos)
        assert Rules.game_result(pos) == GameResult.DRAW

    def test_in_progress(self, start_position) -> None:
        assert Rules.termination(start_position) is None
        assert Rules.game_result(start_position) == GameResult.IN_PROGRESS


class TestTermination:
    def test_str_is_lowercase_name(self) -> None:
        assert str(Termination.CHECKMATE) == "checkmate"
        assert str(Termination.STALEMATE) == "stalemate"


class TestSharedDecisions:
    def test_termination_for_reuses_moves(self, start_position) -> None:
        mated = position_from_fen("R5k1/5ppp/8/8/8/8/8/6K1 b - - 0 1")
        assert Rules.termination_for(mated, []) is Termination.CHECKMATE
        assert Rules.termination_for(start_position, legal_moves(start_position)) is None

    def test_result_of(self) -> None:
        assert Rules.result_of(None, Color.WHITE) == GameResult.IN_PROGRESS
        assert Rules.result_of(Termination.STALEMATE, Color.BLACK) == GameResult.DRAW
        assert (
            Rules.result_of(Termination.CHECKMATE, Color.WHITE)
            == GameResult.BLACK_WINS
        )
        assert (
            Rules.result_of(Termination.CHECKMATE, Color.BLACK)
            == GameResult.WHITE_WINS
        )
