"""Tests for attack detection and king lookup."""

import pytest

from chesswalk.core.attacks import find_king, is_in_check, is_square_attacked
from chesswalk.core.enums import Color
from chesswalk.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chesswalk.core.types import E1, E8, parse_square


def attacked(fen: str, square: str, by: Color) -> bool:
    return is_square_attacked(position_from_fen(fen), parse_square(square), by)


class TestSquareAttacked:
    def test_white_pawn_attacks_diagonally(self) -> None:
        fen = "4k3/8/8/8/8/8/4P3/4K3 w - - 0 1"
        assert attacked(fen, "d3", Color.WHITE)
        assert attacked(fen, "f3", Color.WHITE)
        assert not attacked(fen, "e3", Color.WHITE)

    def test_black_pawn_attacks_downwards(self) -> None:
        fen = "k7/4p3/8/8/8/8/8/4K3 b - - 0 1"
        assert attacked(fen, "d6", Color.BLACK)
        assert attacked(fen, "f6", Color.BLACK)
        assert not attacked(fen, "d8", Color.BLACK)
        assert not attacked(fen, "f8", Color.BLACK)

    def test_edge_pawn_does_not_wrap(self) -> None:
        fen = "4k3/8/8/8/8/8/P7/4K3 w - - 0 1"
        assert attacked(fen, "b3", Color.WHITE)
        assert not attacked(fen, "h3", Color.WHITE)

    def test_knight(self) -> None:
        fen = "4k3/8/8/8/3N4/8/8/4K3 w - - 0 1"
        for name in ("c6", "e6", "b5", "f5", "b3", "f3", "c2", "e2"):
            assert attacked(fen, name, Color.WHITE), name
        assert not attacked(fen, "d5", Color.WHITE)

    def test_rook_ray_stops_at_blocker(self) -> None:
        fen = "4k3/8/8/8/R2p4/8/8/4K3 w - - 0 1"
        assert attacked(fen, "c4", Color.WHITE)
        assert attacked(fen, "d4", Color.WHITE)
        assert not attacked(fen, "e4", Color.WHITE)

    def test_bishop_diagonal(self) -> None:
        fen = "4k3/8/8/8/8/8/1B6/4K3 w - - 0 1"
        assert attacked(fen, "h8", Color.WHITE)
        assert attacked(fen, "a1", Color.WHITE)
        assert not attacked(fen, "b3", Color.WHITE)

    def test_queen_both_ways(self) -> None:
        fen = "4k3/8/8/8/3q4/8/8/K7 b - - 0 1"
        assert attacked(fen, "d1", Color.BLACK)
        assert attacked(fen, "a7", Color.BLACK)
        assert attacked(fen, "h4", Color.BLACK)
        assert not attacked(fen, "e2", Color.BLACK)

    def test_king_adjacent(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4K3 w - - 0 1"
        assert attacked(fen, "d2", Color.WHITE)
        assert not attacked(fen, "e3", Color.WHITE)

    def test_colour_matters(self) -> None:
        fen = "4k3/8/8/8/3N4/8/8/4K3 w - - 0 1"
        assert not attacked(fen, "c6", Color.BLACK)

    def test_does_not_mutate(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        for name in ("e4", "f3", "d6"):
            is_square_attacked(pos, parse_square(name), Color.WHITE)
        assert position_to_fen(pos) == STARTING_FEN


class TestKings:
    def test_find_king(self, start_position) -> None:
        assert find_king(start_position, Color.WHITE) == E1
        assert find_king(start_position, Color.BLACK) == E8

    def test_missing_king(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/8 w - - 0 1")
        assert find_king(pos, Color.WHITE) is None
        assert not is_in_check(pos, Color.WHITE)

    @pytest.mark.parametrize(
        ("fen", "color", "expected"),
        [
            ("4k3/8/8/8/8/8/8/4K2r w - - 0 1", Color.WHITE, True),
            ("4k3/8/8/8/8/8/8/4K2r w - - 0 1", Color.BLACK, False),
            ("4k3/8/8/8/8/8/4P3/4K2r w - - 0 1", Color.WHITE, True),
            ("4k3/8/8/8/8/8/8/4KB1r w - - 0 1", Color.WHITE, False),
            ("4k3/3P4/8/8/8/8/8/4K3 b - - 0 1", Color.BLACK, True),
        ],
    )
    def test_is_in_check(self, fen: str, color: Color, expected: bool) -> None:
        assert is_in_check(position_from_fen(fen), color) is expected
