"""Core enumerations and flags for the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def fen_char(self) -> str:
        """Side-to-move token used in FEN ('w' / 'b')."""
        return "w" if self == Color.WHITE else "b"

    @property
    def pawn_direction(self) -> int:
        """Row delta of a single pawn step (row 0 is rank 8)."""
        return -1 if self == Color.WHITE else 1

    @property
    def home_row(self) -> int:
        """Row holding this side's king and rooks at the start."""
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    """Set of the four independent castling availabilities."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def kingside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_KINGSIDE if color == Color.WHITE else cls.BLACK_KINGSIDE

    @classmethod
    def queenside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_QUEENSIDE if color == Color.WHITE else cls.BLACK_QUEENSIDE

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
