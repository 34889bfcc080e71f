"""SAN (Standard Algebraic Notation) rendering and parsing."""

from __future__ import annotations

from chesswalk.core.attacks import is_in_check
from chesswalk.core.enums import PieceType
from chesswalk.core.errors import IllegalMoveError
from chesswalk.core.move import Move
from chesswalk.core.move_generator import MoveGenerator
from chesswalk.core.piece import PIECE_LETTERS
from chesswalk.core.position import Position
from chesswalk.core.types import parse_square, square_name

_SAN_PIECE_REV: dict[str, PieceType] = {
    letter: ptype for ptype, letter in PIECE_LETTERS.items() if ptype != PieceType.PAWN
}


def move_to_san(position: Position, move: Move) -> str:
    """Convert a legal *move* to SAN given the *position* before the move."""
    if move.is_castle:
        san = "O-O" if move.is_kingside_castle else "O-O-O"
    else:
        dest = square_name(move.to_sq)
        capture = "x" if move.is_capture else ""

        if move.piece_type == PieceType.PAWN:
            san = f"{move.from_sq.file_char}x{dest}" if move.is_capture else dest
        else:
            san = (
                PIECE_LETTERS[move.piece_type]
                + _disambiguation(position, move)
                + capture
                + dest
            )

        if move.promotion is not None:
            san += "=" + PIECE_LETTERS[move.promotion]

    return san + _check_suffix(position, move)


def _disambiguation(position: Position, move: Move) -> str:
    rivals = [
        m
        for m in MoveGenerator(position).generate_legal_moves()
        if m.to_sq == move.to_sq
        and m.piece_type == move.piece_type
        and m.from_sq != move.from_sq
    ]
    if not rivals:
        return ""
    if not any(m.from_sq.col == move.from_sq.col for m in rivals):
        return move.from_sq.file_char
    if not any(m.from_sq.row == move.from_sq.row for m in rivals):
        return str(move.from_sq.rank)
    return square_name(move.from_sq)


def _check_suffix(position: Position, move: Move) -> str:
    after = position.apply(move)
    if not is_in_check(after, after.side_to_move):
        return ""
    if MoveGenerator(after).generate_legal_moves():
        return "+"
    return "#"


def parse_san(position: Position, san: str) -> Move:
    """Parse a SAN string into a :class:`Move` given the current *position*."""
    legal = MoveGenerator(position).generate_legal_moves()

    clean = san.rstrip("+#!?")

    # Castling
    if clean in ("O-O", "0-0", "O-O-O", "0-0-0"):
        want_col = 6 if len(clean) == 3 else 2
        for m in legal:
            if m.is_castle and m.to_sq.col == want_col:
                return m
        raise IllegalMoveError(f"Illegal move: {san}")

    # Promotion
    promotion: PieceType | None = None
    if "=" in clean:
        clean, _, promo_char = clean.partition("=")
        promotion = _SAN_PIECE_REV.get(promo_char)
        if promotion is None:
            raise IllegalMoveError(f"Illegal move: {san}")

    # Destination (last two chars)
    try:
        to_sq = parse_square(clean[-2:])
    except ValueError:
        raise IllegalMoveError(f"Illegal move: {san}") from None
    clean = clean[:-2]

    if clean.endswith("x"):
        clean = clean[:-1]

    if clean and clean[0] in _SAN_PIECE_REV:
        piece_type = _SAN_PIECE_REV[clean[0]]
        clean = clean[1:]
    else:
        piece_type = PieceType.PAWN

    # Disambiguation: file letter, rank digit, or both
    from_col: int | None = None
    from_rank: int | None = None
    for ch in clean:
        if ch in "abcdefgh":
            from_col = ord(ch) - ord("a")
        elif ch in "12345678":
            from_rank = int(ch)
        else:
            raise IllegalMoveError(f"Illegal move: {san}")

    candidates = [
        m
        for m in legal
        if m.piece_type == piece_type
        and m.to_sq == to_sq
        and m.promotion == promotion
        and (from_col is None or m.from_sq.col == from_col)
        and (from_rank is None or m.from_sq.rank == from_rank)
    ]

    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise IllegalMoveError(f"Illegal move: {san}")
    raise IllegalMoveError(f"Ambiguous move: {san} → {[str(m) for m in candidates]}")
