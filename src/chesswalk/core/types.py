"""Square type and coordinate helpers.

Board layout follows FEN order (rank-major, rank 8 first)::

    row 0: a8 b8 ... h8
    row 1: a7 b7 ... h7
    ...
    row 7: a1 b1 ... h1
"""

from __future__ import annotations

from typing import NamedTuple

_FILES = "abcdefgh"


class Square(NamedTuple):
    """A board coordinate: ``row`` 0–7 (rank 8 → 1), ``col`` 0–7 (file a → h)."""

    row: int
    col: int

    @property
    def file_char(self) -> str:
        return _FILES[self.col]

    @property
    def rank(self) -> int:
        """Rank number 1–8 as written in algebraic notation."""
        return 8 - self.row

    def offset(self, d_row: int, d_col: int) -> Square | None:
        """Neighbouring square, or ``None`` when it falls off the board."""
        row = self.row + d_row
        col = self.col + d_col
        if in_bounds(row, col):
            return Square(row, col)
        return None

    def __str__(self) -> str:
        return square_name(self)


def in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the board."""
    return 0 <= row < 8 and 0 <= col < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(7, 0)`` → ``'a1'``."""
    return f"{_FILES[sq.col]}{8 - sq.row}"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), _FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(8) for col in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[56:64]
