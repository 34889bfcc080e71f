"""Configuration for random game generation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chesswalk.core.notation import STARTING_FEN


@dataclass(slots=True, frozen=True)
class GameConfig:
    """Caller-side policy for a generated game.

    The move-pair bounds are a default policy only; the rules engine itself
    accepts any positive limit.
    """

    move_pairs: int = 4
    min_move_pairs: int = 1
    max_move_pairs: int = 10
    start_fen: str = STARTING_FEN
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.min_move_pairs < 1:
            raise ValueError(f"min_move_pairs must be positive: {self.min_move_pairs}")
        if self.max_move_pairs < self.min_move_pairs:
            raise ValueError(
                f"max_move_pairs ({self.max_move_pairs}) is below "
                f"min_move_pairs ({self.min_move_pairs})"
            )

    def clamped_move_pairs(self, move_pairs: int | None = None) -> int:
        """Clamp *move_pairs* (default: the configured value) into bounds."""
        value = self.move_pairs if move_pairs is None else move_pairs
        return max(self.min_move_pairs, min(self.max_move_pairs, int(value)))

    def with_overrides(self, **changes: object) -> GameConfig:
        """Copy with selected fields replaced (``None`` values are ignored)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
