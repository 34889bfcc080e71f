"""Position — complete game state (board + metadata) and move application."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesswalk.core.board import Board
from chesswalk.core.enums import CastlingRights, Color, PieceType
from chesswalk.core.errors import IllegalMoveError
from chesswalk.core.move import Move
from chesswalk.core.piece import Piece
from chesswalk.core.types import A1, A8, H1, H8, Square

# Rook home corners and the right each one carries.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Positions are values. :meth:`apply` never touches ``self``; it builds the
    successor position from a fresh board.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    # ── Core move operation ──────────────────────────────────────────────

    def apply(self, move: Move) -> Position:
        """Return the position reached by playing *move*.

        Only a cheap sanity check is performed: the origin square must hold
        a piece of the side to move. Full legality is the generator's job.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            raise IllegalMoveError(f"No piece on {move.from_sq}")
        if piece.color != self.side_to_move:
            raise IllegalMoveError(
                f"Piece on {move.from_sq} belongs to {piece.color}, "
                f"but {self.side_to_move} is to move"
            )

        changes: dict[Square, Piece | None] = {move.from_sq: None}

        # En passant: the captured pawn is not on the destination square
        if move.is_en_passant and move.captured_sq is not None:
            changes[move.captured_sq] = None

        placed = piece
        if move.promotion is not None:
            placed = Piece(piece.color, move.promotion)
        changes[move.to_sq] = placed

        # Slide the rook for castling
        if move.is_castle:
            row = move.to_sq.row
            if move.to_sq.col == 6:
                rook_from, rook_to = Square(row, 7), Square(row, 5)
            else:
                rook_from, rook_to = Square(row, 0), Square(row, 3)
            changes[rook_to] = self.board[rook_from]
            changes[rook_from] = None

        next_en_passant: Square | None = None
        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.to_sq.row - move.from_sq.row) == 2
        ):
            next_en_passant = Square(
                (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.col
            )

        if piece.piece_type == PieceType.PAWN or move.captured_sq is not None:
            halfmove = 0
        else:
            halfmove = self.halfmove_clock + 1

        next_side = self.side_to_move.opposite
        fullmove = self.fullmove_number
        if next_side == Color.WHITE:
            fullmove += 1

        return Position(
            board=self.board.replace(changes),
            side_to_move=next_side,
            castling=self._next_castling(move, piece),
            en_passant=next_en_passant,
            halfmove_clock=halfmove,
            fullmove_number=fullmove,
        )

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _next_castling(self, move: Move, piece: Piece) -> CastlingRights:
        castling = self.castling
        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.both(piece.color)

        if move.from_sq in _ROOK_CORNERS:
            castling &= ~_ROOK_CORNERS[move.from_sq]

        # A rook captured at home loses its right without ever moving.
        if move.captured_sq is not None and move.captured_sq in _ROOK_CORNERS:
            castling &= ~_ROOK_CORNERS[move.captured_sq]

        return castling
