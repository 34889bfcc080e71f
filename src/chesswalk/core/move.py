"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesswalk.core.enums import PieceType
from chesswalk.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable description of one transition between positions.

    ``captured_sq`` equals ``to_sq`` for ordinary captures and points one rank
    behind it for en passant. Squares are held by value, so a move stays
    meaningful after the position it came from is discarded.
    """

    from_sq: Square
    to_sq: Square
    piece_type: PieceType
    promotion: PieceType | None = None
    captured_sq: Square | None = None
    is_en_passant: bool = False
    is_castle: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured_sq is not None

    @property
    def is_kingside_castle(self) -> bool:
        return self.is_castle and self.to_sq.col == 6

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
