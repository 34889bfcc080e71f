"""Legal and pseudo-legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesswalk.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    find_king,
    is_square_attacked,
)
from chesswalk.core.enums import CastlingRights, Color, PieceType
from chesswalk.core.move import Move
from chesswalk.core.piece import Piece
from chesswalk.core.types import Square

if TYPE_CHECKING:
    from chesswalk.core.position import Position


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_SLIDER_RAYS = {
    PieceType.BISHOP: BISHOP_RAYS,
    PieceType.ROOK: ROOK_RAYS,
    PieceType.QUEEN: QUEEN_RAYS,
}

_KING_HOME_COL = 4


class MoveGenerator:
    """Generates legal moves for a given :class:`Position`.

    Candidate moves are checked by applying them to a trial position, so the
    source position is never modified.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move, in board scan order."""
        moving_color = self._pos.side_to_move
        legal: list[Move] = []
        for move in self.generate_pseudo_legal_moves():
            trial = self._pos.apply(move)
            king_sq = find_king(trial, moving_color)
            if king_sq is None:
                continue
            if not is_square_attacked(trial, king_sq, moving_color.opposite):
                legal.append(move)
        return legal

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        color = self._pos.side_to_move

        for sq, piece in self._board.occupied():
            if piece.color != color:
                continue
            ptype = piece.piece_type
            if ptype == PieceType.PAWN:
                self._gen_pawn(sq, color, moves)
            elif ptype == PieceType.KNIGHT:
                self._gen_steps(sq, color, ptype, KNIGHT_TARGETS[sq], moves)
            elif ptype == PieceType.KING:
                self._gen_steps(sq, color, ptype, KING_TARGETS[sq], moves)
                self._gen_castling(sq, color, moves)
            else:
                self._gen_sliding(sq, color, ptype, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        step = color.pawn_direction
        start_row = 6 if color == Color.WHITE else 1
        last_row = 0 if color == Color.WHITE else 7

        one_step = sq.offset(step, 0)
        if one_step is not None and board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, None, last_row, moves)
            if sq.row == start_row:
                two_step = Square(sq.row + 2 * step, sq.col)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step, PieceType.PAWN))

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                self._add_pawn_move(sq, cap_sq, cap_sq, last_row, moves)
            elif target is None and cap_sq == self._pos.en_passant:
                moves.append(
                    Move(
                        sq,
                        cap_sq,
                        PieceType.PAWN,
                        captured_sq=Square(sq.row, cap_sq.col),
                        is_en_passant=True,
                    )
                )

    @staticmethod
    def _add_pawn_move(
        from_sq: Square,
        to_sq: Square,
        captured_sq: Square | None,
        last_row: int,
        moves: list[Move],
    ) -> None:
        if to_sq.row == last_row:
            for pt in PROMOTION_TYPES:
                moves.append(
                    Move(from_sq, to_sq, PieceType.PAWN, pt, captured_sq=captured_sq)
                )
        else:
            moves.append(Move(from_sq, to_sq, PieceType.PAWN, captured_sq=captured_sq))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        ptype: PieceType,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq, ptype))
            elif target.color != color:
                moves.append(Move(sq, to_sq, ptype, captured_sq=to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        ptype: PieceType,
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in _SLIDER_RAYS[ptype][sq]:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq, ptype))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq, ptype, captured_sq=to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        row = color.home_row
        if king_sq != Square(row, _KING_HOME_COL):
            return

        rook = Piece(color, PieceType.ROOK)
        castling = self._pos.castling

        # (right, rook column, squares that must be empty, squares the king
        # occupies or crosses and which must not be attacked)
        sides = (
            (CastlingRights.kingside(color), 7, (5, 6), (4, 5, 6)),
            (CastlingRights.queenside(color), 0, (1, 2, 3), (4, 3, 2)),
        )
        for right, rook_col, empty_cols, safe_cols in sides:
            if not castling & right:
                continue
            if self._board[Square(row, rook_col)] != rook:
                continue
            if not all(self._board.is_empty(Square(row, c)) for c in empty_cols):
                continue
            if any(self._attacked(Square(row, c), color.opposite) for c in safe_cols):
                continue
            moves.append(
                Move(king_sq, Square(row, safe_cols[-1]), PieceType.KING, is_castle=True)
            )

    def _attacked(self, sq: Square, by_color: Color) -> bool:
        return is_square_attacked(self._pos, sq, by_color)


def legal_moves(position: Position) -> list[Move]:
    """Shortcut for ``MoveGenerator(position).generate_legal_moves()``."""
    return MoveGenerator(position).generate_legal_moves()
