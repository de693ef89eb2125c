"""A single tile slide, as produced by the solver."""

from __future__ import annotations

from dataclasses import dataclass

from eightpuzzle.models.board import Direction, index_to_square


@dataclass(frozen=True)
class Action:
    """Tile *tile* slid from *from_index* into the blank at *to_index*."""

    tile: int
    from_index: int
    to_index: int

    @property
    def from_square(self) -> int:
        return index_to_square(self.from_index)

    @property
    def to_square(self) -> int:
        return index_to_square(self.to_index)

    def direction(self, size: int = 3) -> Direction:
        """Direction the tile travelled on a *size*×*size* grid."""
        delta = self.to_index - self.from_index
        if delta == -size:
            return Direction.UP
        if delta == size:
            return Direction.DOWN
        if delta == -1:
            return Direction.LEFT
        if delta == 1:
            return Direction.RIGHT
        raise ValueError(
            f"Slots {self.from_index} and {self.to_index} are not adjacent "
            f"on a {size}×{size} grid."
        )
