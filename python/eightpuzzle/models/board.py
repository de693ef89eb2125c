"""Board model for the sliding puzzle.

A board is a flat, row-major sequence of ``size * size`` slots.  Each slot
holds a tile number or ``0`` for the blank.  Slots are addressed two ways:

* **index** – 0-based position in the sequence (``0`` is the top-left slot);
* **square** – 1-based number used as the key of an adjacency table
  (``square == index + 1``).

Every function here is pure: inputs are never mutated and a fresh tuple is
returned whenever a board changes.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from eightpuzzle.errors import InvalidBoardError, InvalidGridSizeError

logger = logging.getLogger(__name__)

BLANK = 0

Tile = int | None
BoardState = tuple[Tile, ...]
AdjacencyMap = dict[int, list[int]]

#: Squares on the classic 3×3 board.
NUM_SQUARES = 9


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# -- grid geometry ------------------------------------------------------------


def grid_side(num_squares: int) -> int:
    """Return the side of a square grid holding *num_squares* slots.

    Raises :class:`InvalidGridSizeError` when *num_squares* is not a perfect
    square.
    """
    if num_squares < 0:
        raise InvalidGridSizeError(num_squares)
    side = math.isqrt(num_squares)
    if side * side != num_squares:
        raise InvalidGridSizeError(num_squares)
    return side


def index_to_square(index: int) -> int:
    """0-based board index → 1-based square number."""
    return index + 1


def square_to_index(square: int) -> int:
    """1-based square number → 0-based board index."""
    return square - 1


def goal_state(size: int = 3) -> BoardState:
    """Return the solved board for a *size*×*size* grid (blank last)."""
    return tuple(range(1, size * size)) + (BLANK,)


def build_adjacency(size: int = 3) -> AdjacencyMap:
    """Build the square → neighbouring squares table for a *size*×*size* grid.

    Neighbours are listed up, left, right, down.
    """
    adjacency: AdjacencyMap = {}
    for index in range(size * size):
        r, c = divmod(index, size)
        neighbours: list[int] = []
        if r > 0:
            neighbours.append(index_to_square(index - size))
        if c > 0:
            neighbours.append(index_to_square(index - 1))
        if c < size - 1:
            neighbours.append(index_to_square(index + 1))
        if r < size - 1:
            neighbours.append(index_to_square(index + size))
        adjacency[index_to_square(index)] = neighbours
    return adjacency


#: Solved configuration of the classic board.
GOAL_STATE: BoardState = goal_state(3)

#: Adjacency of the classic board, keyed by square number.
POS_ADJACENCY: AdjacencyMap = {
    1: [2, 4], 2: [1, 3, 5], 3: [2, 6],
    4: [1, 7, 5], 5: [2, 4, 6, 8], 6: [3, 5, 9],
    7: [4, 8], 8: [7, 5, 9], 9: [8, 6],
}


# -- board algebra ------------------------------------------------------------


def is_goal(board: Sequence[Tile], goal: Sequence[Tile] = GOAL_STATE) -> bool:
    """Return True if *board* matches *goal* slot by slot."""
    if len(board) != len(goal):
        return False
    return all(a == b for a, b in zip(board, goal))


def apply_move(
    board: Sequence[Tile], from_index: int, to_index: int
) -> BoardState:
    """Slide the tile at *from_index* into the blank at *to_index*.

    Returns a new board.  When the move is not legal (target is not the
    blank, source is the blank or a missing value, or an index is out of
    range) the original board is returned unchanged and a warning is logged.
    """
    new_board = list(board)

    if not (0 <= from_index < len(new_board) and 0 <= to_index < len(new_board)):
        logger.warning(
            "Invalid move: index out of range (%d -> %d) on %s",
            from_index, to_index, list(board),
        )
        return tuple(board)

    tile = new_board[from_index]
    if tile is None or tile == BLANK:
        logger.warning(
            "Invalid move: no tile at index %d on %s", from_index, list(board)
        )
        return tuple(board)
    if new_board[to_index] != BLANK:
        logger.warning(
            "Invalid move: target index %d holds %r, not the blank, on %s",
            to_index, new_board[to_index], list(board),
        )
        return tuple(board)

    new_board[to_index] = tile
    new_board[from_index] = BLANK
    return tuple(new_board)


def is_solvable(board: Sequence[Tile]) -> bool:
    """Return True if *board* can reach the goal by legal slides.

    Inversion-parity test: on odd-width grids the inversion count must be
    even; on even widths the blank's row counted from the bottom is added in.
    Raises :class:`InvalidBoardError` when a slot is missing.
    """
    n = grid_side(len(board))
    if None in board:
        raise InvalidBoardError(f"Board {list(board)} has a missing slot.")
    flat = [v for v in board if v != BLANK]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    if n % 2 == 1:
        return inversions % 2 == 0
    blank_row_from_bottom = n - 1 - list(board).index(BLANK) // n
    return (inversions + blank_row_from_bottom) % 2 == 0


# -- validation / parsing -----------------------------------------------------


def validate_board(board: Sequence[Tile], size: int | None = None) -> BoardState:
    """Check that *board* is a complete puzzle and return it as a tuple.

    A complete board holds every value ``0..N²-1`` exactly once.  Raises
    :class:`InvalidBoardError` otherwise.
    """
    if size is not None and len(board) != size * size:
        raise InvalidBoardError(
            f"Expected {size * size} tiles for a {size}×{size} board, "
            f"got {len(board)}."
        )
    try:
        grid_side(len(board))
    except InvalidGridSizeError as exc:
        raise InvalidBoardError(
            f"A board needs a square number of tiles, got {len(board)}."
        ) from exc

    for value in board:
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidBoardError(f"Tile {value!r} is not an integer.")

    if sorted(board) != list(range(len(board))):
        missing = sorted(set(range(len(board))) - set(board))
        raise InvalidBoardError(
            f"Board must hold each of 0..{len(board) - 1} exactly once "
            f"(missing: {missing or 'none'})."
        )
    return tuple(board)


_SEPARATORS = re.compile(r"[\s,]+")


def parse_board(text: str, size: int | None = None) -> BoardState:
    """Parse ``"1,2,3,4,5,6,7,0,8"`` (commas and/or spaces) into a board."""
    parts = [p for p in _SEPARATORS.split(text.strip()) if p]
    if not parts:
        raise InvalidBoardError("Board is empty.")
    try:
        values = [int(p) for p in parts]
    except ValueError as exc:
        raise InvalidBoardError(f"Board {text!r} contains a non-number.") from exc
    return validate_board(values, size)


# -- grid view ----------------------------------------------------------------


@dataclass
class Board:
    """Grid view of a flat board, used for display.

    Tiles are stored as a 2D list of ints.  0 represents the blank space.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: tuple[int, int]

    @classmethod
    def from_flat(cls, flat: Sequence[int], size: int | None = None) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size is None:
            size = grid_side(len(flat))
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        tiles: list[list[int]] = []
        blank_pos: tuple[int, int] = (0, 0)
        for r in range(size):
            row = list(flat[r * size : (r + 1) * size])
            for c, v in enumerate(row):
                if v == BLANK:
                    blank_pos = (r, c)
            tiles.append(row)
        return cls(size=size, tiles=tiles, blank_pos=blank_pos)

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        """Rows of the grid, top to bottom."""
        return tuple(tuple(row) for row in self.tiles)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == BLANK:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col
