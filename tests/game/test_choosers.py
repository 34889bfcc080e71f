"""Tests for move choosers."""

import pytest

from chesswalk.core.errors import IllegalMoveError
from chesswalk.core.move_generator import legal_moves
from chesswalk.game import MoveChooser, RandomChooser, ScriptedChooser


class TestRandomChooser:
    def test_picks_a_given_move(self, start_position) -> None:
        moves = legal_moves(start_position)
        assert RandomChooser(7)(moves) in moves

    def test_same_seed_same_sequence(self, start_position) -> None:
        moves = legal_moves(start_position)
        a, b = RandomChooser(42), RandomChooser(42)
        assert [a(moves) for _ in range(10)] == [b(moves) for _ in range(10)]

    def test_empty_list_rejected(self) -> None:
        with pytest.raises(ValueError):
            RandomChooser(0)([])

    def test_satisfies_protocol(self) -> None:
        chooser: MoveChooser = RandomChooser()
        assert callable(chooser)


class TestScriptedChooser:
    def test_plays_in_order(self, start_position) -> None:
        chooser = ScriptedChooser(["e2e4", "e7e5"])
        assert chooser.remaining == 2
        move = chooser(legal_moves(start_position))
        assert move.uci == "e2e4"
        assert chooser.remaining == 1

    def test_exhausted(self, start_position) -> None:
        chooser = ScriptedChooser([])
        with pytest.raises(IllegalMoveError, match="exhausted"):
            chooser(legal_moves(start_position))

    def test_illegal_scripted_move(self, start_position) -> None:
        chooser = ScriptedChooser(["e2e5"])
        with pytest.raises(IllegalMoveError, match="not legal"):
            chooser(legal_moves(start_position))
        assert chooser.remaining == 1
