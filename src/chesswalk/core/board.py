"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chesswalk.core.enums import Color, PieceType
from chesswalk.core.piece import Piece
from chesswalk.core.types import ALL_SQUARES, Square

Grid = tuple[tuple[Piece | None, ...], ...]

_EMPTY_ROW: tuple[Piece | None, ...] = (None,) * 8

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 8x8 grid of optional pieces.

    Row 0 is rank 8 and column 0 is the a-file. Changes are expressed with
    :meth:`replace`, which returns a new board and leaves this one intact.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Grid | None = None) -> None:
        if grid is None:
            grid = (_EMPTY_ROW,) * 8
        if len(grid) != 8 or any(len(row) != 8 for row in grid):
            raise ValueError("Board grid must be 8x8")
        self._grid: Grid = tuple(tuple(row) for row in grid)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.col] is None

    @property
    def rows(self) -> Grid:
        """The raw grid, rank 8 first."""
        return self._grid

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in scan order (row 0 → 7, file a → h)."""
        grid = self._grid
        for sq in ALL_SQUARES:
            piece = grid[sq.row][sq.col]
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def has_piece(self, color: Color, piece_type: PieceType) -> bool:
        """Whether *color* has at least one piece of *piece_type*."""
        return bool(self.pieces(color, piece_type))

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """Return a new board with *changes* applied, square by square."""
        rows = [list(row) for row in self._grid]
        for sq, piece in changes.items():
            rows[sq.row][sq.col] = piece
        return Board(tuple(tuple(row) for row in rows))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting placement."""
        grid: Grid = (
            tuple(Piece(Color.BLACK, pt) for pt in _BACK_RANK),
            (Piece(Color.BLACK, PieceType.PAWN),) * 8,
            _EMPTY_ROW,
            _EMPTY_ROW,
            _EMPTY_ROW,
            _EMPTY_ROW,
            (Piece(Color.WHITE, PieceType.PAWN),) * 8,
            tuple(Piece(Color.WHITE, pt) for pt in _BACK_RANK),
        )
        return cls(grid)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __hash__(self) -> int:
        return hash(self._grid)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{8 - row_idx} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
