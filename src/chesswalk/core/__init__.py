"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesswalk.core import MoveGenerator, move_to_san, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for move in MoveGenerator(pos).generate_legal_moves():
        print(move_to_san(pos, move))
"""

from chesswalk.core.attacks import find_king, is_in_check, is_square_attacked
from chesswalk.core.board import Board
from chesswalk.core.enums import CastlingRights, Color, GameResult, PieceType
from chesswalk.core.errors import IllegalMoveError, MalformedFENError
from chesswalk.core.move import Move
from chesswalk.core.move_generator import MoveGenerator, legal_moves
from chesswalk.core.notation import (
    STARTING_FEN,
    format_move_list,
    move_to_san,
    parse_san,
    position_from_fen,
    position_to_fen,
)
from chesswalk.core.piece import Piece
from chesswalk.core.position import Position
from chesswalk.core.rules import Rules, Termination
from chesswalk.core.types import Square, in_bounds, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    "Termination",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    "square_name",
    # Errors
    "IllegalMoveError",
    "MalformedFENError",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Queries
    "find_king",
    "is_in_check",
    "is_square_attacked",
    "legal_moves",
    # Notation
    "STARTING_FEN",
    "format_move_list",
    "move_to_san",
    "parse_san",
    "position_from_fen",
    "position_to_fen",
]
