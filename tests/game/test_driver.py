"""Tests for the random game driver."""

import pytest

from chesswalk.core.enums import Color, GameResult, PieceType
from chesswalk.core.errors import IllegalMoveError, MalformedFENError
from chesswalk.core.move import Move
from chesswalk.core.notation import (
    STARTING_FEN,
    parse_san,
    position_from_fen,
    position_to_fen,
)
from chesswalk.core.rules import Termination
from chesswalk.core.types import E2, E5
from chesswalk.game import (
    GameConfig,
    GamePhase,
    RandomChooser,
    RandomGameDriver,
    ScriptedChooser,
    generate_random_game,
)

FOOLS_MATE = ["f2f3", "e7e5", "g2g4", "d8h4"]
STALEMATE_FEN = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"


class TestScriptedGames:
    def test_fools_mate_is_reported_on_last_ply(self) -> None:
        game = generate_random_game(2, ScriptedChooser(FOOLS_MATE))
        assert game.moves == ["f3", "e5", "g4", "Qh4#"]
        assert game.terminated is Termination.CHECKMATE
        assert game.result == GameResult.BLACK_WINS
        assert game.move_text == "1.f3 e5, 2.g4 Qh4#"

    def test_limit_stops_before_mate(self) -> None:
        game = generate_random_game(1, ScriptedChooser(FOOLS_MATE))
        assert game.moves == ["f3", "e5"]
        assert game.terminated is None
        assert game.result == GameResult.IN_PROGRESS

    def test_mate_ends_game_before_limit(self) -> None:
        game = generate_random_game(10, ScriptedChooser(FOOLS_MATE))
        assert len(game.moves) == 4
        assert game.terminated is Termination.CHECKMATE
        assert game.final_side_to_move == Color.WHITE

    def test_final_fen(self) -> None:
        game = generate_random_game(2, ScriptedChooser(FOOLS_MATE))
        assert game.final_fen == (
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )

    def test_records_carry_fen_after(self) -> None:
        game = generate_random_game(2, ScriptedChooser(FOOLS_MATE))
        assert [r.move.uci for r in game.records] == FOOLS_MATE
        assert game.records[-1].fen_after == game.final_fen
        assert game.start_fen == STARTING_FEN


class TestTerminalStarts:
    def test_stalemate_start(self) -> None:
        game = generate_random_game(3, RandomChooser(0), fen=STALEMATE_FEN)
        assert game.moves == []
        assert game.terminated is Termination.STALEMATE
        assert game.result == GameResult.DRAW
        assert game.final_fen == STALEMATE_FEN
        assert game.move_text == ""

    def test_checkmate_start(self) -> None:
        fen = "R5k1/5ppp/8/8/8/8/8/6K1 b - - 0 1"
        game = generate_random_game(3, RandomChooser(0), fen=fen)
        assert game.moves == []
        assert game.terminated is Termination.CHECKMATE
        assert game.result == GameResult.WHITE_WINS

    def test_malformed_fen(self) -> None:
        with pytest.raises(MalformedFENError):
            generate_random_game(3, RandomChooser(0), fen="8/8/8 w - -")


class TestRandomGames:
    @pytest.mark.parametrize("seed", range(12))
    def test_moves_replay_to_final_fen(self, seed: int) -> None:
        game = generate_random_game(6, RandomChooser(seed))
        assert len(game.moves) <= 12
        if game.terminated is None:
            assert len(game.moves) == 12

        pos = position_from_fen(STARTING_FEN)
        for san in game.moves:
            pos = pos.apply(parse_san(pos, san))
        assert position_to_fen(pos) == game.final_fen

    def test_seed_is_reproducible(self) -> None:
        first = generate_random_game(8, RandomChooser(1234))
        second = generate_random_game(8, RandomChooser(1234))
        assert first.moves == second.moves
        assert first.final_fen == second.final_fen

    def test_config_seed(self) -> None:
        config = GameConfig(seed=99)
        first = generate_random_game(5, config=config)
        second = generate_random_game(5, config=config)
        assert first.moves == second.moves

    def test_final_fen_parses(self) -> None:
        game = generate_random_game(10, RandomChooser(5))
        position_from_fen(game.final_fen)

    @pytest.mark.parametrize(("requested", "limit"), [(0, 2), (-3, 2), (50, 20)])
    def test_move_pairs_are_clamped(self, requested: int, limit: int) -> None:
        script = ["g1f3", "g8f6", "f3g1", "f6g8"] * 6
        game = generate_random_game(requested, ScriptedChooser(script))
        assert len(game.moves) == limit


class TestDriverStepping:
    def test_step_by_step(self) -> None:
        driver = RandomGameDriver(ScriptedChooser(FOOLS_MATE), 2)
        assert driver.phase == GamePhase.IN_PROGRESS
        assert driver.max_plies == 4

        record = driver.step()
        assert record is not None
        assert record.san == "f3"
        assert driver.plies_played == 1
        assert driver.position.side_to_move == Color.BLACK

        for _ in range(3):
            assert driver.step() is not None
        assert driver.phase == GamePhase.IN_PROGRESS

        assert driver.step() is None
        assert driver.phase == GamePhase.TERMINATED
        assert driver.termination is Termination.CHECKMATE
        assert driver.step() is None

    def test_limit_keeps_phase_in_progress(self) -> None:
        driver = RandomGameDriver(RandomChooser(0), 1)
        driver.run()
        assert driver.plies_played == 2
        assert driver.step() is None
        assert driver.phase == GamePhase.IN_PROGRESS

    def test_records_are_a_copy(self) -> None:
        driver = RandomGameDriver(RandomChooser(0), 1)
        driver.step()
        driver.records.clear()
        assert driver.plies_played == 1

    def test_non_positive_limit_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            RandomGameDriver(RandomChooser(0), 0)

    def test_chooser_must_return_a_legal_move(self) -> None:
        driver = RandomGameDriver(lambda moves: Move(E2, E5, PieceType.PAWN), 1)
        with pytest.raises(IllegalMoveError, match="not legal"):
            driver.step()

    def test_custom_start_position(self) -> None:
        start = position_from_fen("4k3/8/8/8/8/8/4P3/4K3 w - - 0 1")
        driver = RandomGameDriver(ScriptedChooser(["e2e4", "e8d8"]), 1, start)
        game = driver.run()
        assert game.moves == ["e4", "Kd8"]
        assert game.start_fen == "4k3/8/8/8/8/8/4P3/4K3 w - - 0 1"


class TestMoveNumbering:
    def test_black_to_move_start(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        game = generate_random_game(1, ScriptedChooser(["e7e5", "g1f3"]), fen=fen)
        assert game.start_side_to_move == Color.BLACK
        assert game.move_text == "1...e5, 2.Nf3"

    def test_numbering_follows_fullmove(self) -> None:
        fen = "4k3/8/8/8/8/8/4P3/4K3 w - - 0 40"
        game = generate_random_game(1, ScriptedChooser(["e2e4", "e8d7"]), fen=fen)
        assert game.start_fullmove == 40
        assert game.move_text == "40.e4 Kd7"
