"""Manhattan-distance heuristic."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from eightpuzzle.models.board import (
    BLANK,
    GOAL_STATE,
    NUM_SQUARES,
    Tile,
    grid_side,
)

logger = logging.getLogger(__name__)


def heuristic_distance(
    board: Sequence[Tile],
    goal: Sequence[Tile] = GOAL_STATE,
    num_squares: int = NUM_SQUARES,
) -> int:
    """Sum of the row and column distances of every tile from its goal slot.

    The blank (and any missing slot) contributes nothing.  One slide moves
    one tile by one step, so the estimate never overshoots the true number
    of moves left and changes by at most one per move.

    Raises :class:`~eightpuzzle.errors.InvalidGridSizeError` if
    *num_squares* is not a perfect square.
    """
    dimension = grid_side(num_squares)
    goal_index = {tile: i for i, tile in enumerate(goal)}

    total = 0
    for i, tile in enumerate(board):
        if tile == BLANK or tile is None:
            continue
        target = goal_index.get(tile)
        if target is None:
            logger.warning("Tile %r not found in goal state %s", tile, list(goal))
            continue
        row, col = divmod(i, dimension)
        target_row, target_col = divmod(target, dimension)
        total += abs(row - target_row) + abs(col - target_col)
    return total
