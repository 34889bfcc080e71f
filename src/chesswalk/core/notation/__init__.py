"""Notation package: FEN / SAN / move-list text."""

from chesswalk.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chesswalk.core.notation.movetext import (
    build_pgn,
    format_move_list,
    pgn_movetext,
    pgn_result_token,
)
from chesswalk.core.notation.san import move_to_san, parse_san

__all__ = [
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "move_to_san",
    "parse_san",
    "format_move_list",
    "pgn_result_token",
    "pgn_movetext",
    "build_pgn",
]
