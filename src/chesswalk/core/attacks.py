"""Board query primitives: attack detection and king lookup.

None of these functions mutate the position they are given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesswalk.core.enums import Color, PieceType
from chesswalk.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from chesswalk.core.position import Position

Offsets = tuple[tuple[int, int], ...]

KNIGHT_OFFSETS: Offsets = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: Offsets = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: Offsets = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: Offsets = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: Offsets = ROOK_DIRS + BISHOP_DIRS

_ORTHOGONAL_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)
_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(offsets: Offsets) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        hops = (sq.offset(d_row, d_col) for d_row, d_col in offsets)
        targets[sq] = tuple(to_sq for to_sq in hops if to_sq is not None)
    return targets


def _build_rays(directions: Offsets) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for d_row, d_col in directions:
            ray: list[Square] = []
            nxt = sq.offset(d_row, d_col)
            while nxt is not None:
                ray.append(nxt)
                nxt = nxt.offset(d_row, d_col)
            square_rays.append(tuple(ray))
        rays[sq] = tuple(square_rays)
    return rays


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

ROOK_RAYS = _build_rays(ROOK_DIRS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Public queries ---------------------------------------------------------


def is_square_attacked(position: Position, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Pins are ignored: this answers pseudo-legal attack, which is what check
    detection and castling safety need.
    """
    board = position.board

    # A pawn attacks diagonally forward, so it stands one step "behind" sq
    # from its own point of view.
    for d_col in (-1, 1):
        origin = sq.offset(-by_color.pawn_direction, d_col)
        if origin is None:
            continue
        piece = board[origin]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.PAWN
        ):
            return True

    for origin in KNIGHT_TARGETS[sq]:
        piece = board[origin]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    for ray in ROOK_RAYS[sq]:
        for origin in ray:
            piece = board[origin]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in _ORTHOGONAL_ATTACKERS:
                return True
            break

    for ray in BISHOP_RAYS[sq]:
        for origin in ray:
            piece = board[origin]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in _DIAGONAL_ATTACKERS:
                return True
            break

    for origin in KING_TARGETS[sq]:
        piece = board[origin]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KING
        ):
            return True

    return False


def find_king(position: Position, color: Color) -> Square | None:
    """Square of *color*'s king, or ``None`` when it is missing."""
    for sq, piece in position.board.occupied():
        if piece.color == color and piece.piece_type == PieceType.KING:
            return sq
    return None


def is_in_check(position: Position, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent? ``False`` without a king."""
    king_sq = find_king(position, color)
    if king_sq is None:
        return False
    return is_square_attacked(position, king_sq, color.opposite)
