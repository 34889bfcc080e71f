"""FEN parsing and serialization."""

from __future__ import annotations

from chesswalk.core.board import Board
from chesswalk.core.enums import CastlingRights, Color
from chesswalk.core.errors import MalformedFENError
from chesswalk.core.piece import Piece
from chesswalk.core.position import Position
from chesswalk.core.types import Square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Serialisation order is fixed: K, Q, k, q.
_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Raises:
        MalformedFENError: if any field is structurally invalid.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise MalformedFENError(f"Invalid FEN (need 4-6 fields): {fen!r}", fen)

    placement, side_part, castling_part, ep_part = parts[:4]

    board = _parse_placement(placement, fen)

    # Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise MalformedFENError(f"Invalid FEN side-to-move field: {side_part!r}", fen)

    # Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or castling & right:
                raise MalformedFENError(
                    f"Invalid FEN castling field: {castling_part!r}", fen
                )
            castling |= right

    # En passant
    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except ValueError:
            raise MalformedFENError(
                f"Invalid FEN en-passant square: {ep_part!r}", fen
            ) from None
        expected_rank = 6 if side == Color.WHITE else 3
        if ep.rank != expected_rank:
            raise MalformedFENError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}", fen
            )

    # Clocks (optional)
    halfmove = _parse_counter(parts, 4, default=0, minimum=0, fen=fen)
    fullmove = _parse_counter(parts, 5, default=1, minimum=1, fen=fen)

    return Position(board, side, castling, ep, halfmove, fullmove)


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise MalformedFENError(f"Invalid FEN board (must contain 8 ranks): {fen!r}", fen)

    rows: list[tuple[Piece | None, ...]] = []
    for rank_text in ranks:
        row: list[Piece | None] = []
        for ch in rank_text:
            if ch in "12345678":
                row.extend([None] * int(ch))
            elif ch.isdigit():
                raise MalformedFENError(f"Invalid FEN digit {ch!r}: {fen!r}", fen)
            else:
                try:
                    row.append(Piece.from_char(ch))
                except ValueError:
                    raise MalformedFENError(
                        f"Invalid FEN piece {ch!r}: {fen!r}", fen
                    ) from None
            if len(row) > 8:
                raise MalformedFENError(f"Invalid FEN rank width: {fen!r}", fen)
        if len(row) != 8:
            raise MalformedFENError(f"Invalid FEN rank width: {fen!r}", fen)
        rows.append(tuple(row))
    return Board(tuple(rows))


def _parse_counter(
    parts: list[str], index: int, *, default: int, minimum: int, fen: str
) -> int:
    if len(parts) <= index:
        return default
    try:
        value = int(parts[index])
    except ValueError:
        raise MalformedFENError(f"Invalid FEN counter: {parts[index]!r}", fen) from None
    if value < minimum:
        raise MalformedFENError(f"Invalid FEN counter: {parts[index]!r}", fen)
    return value


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for board_row in pos.board.rows:
        empty = 0
        row = ""
        for piece in board_row:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 3. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_str} {pos.side_to_move.fen_char} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
