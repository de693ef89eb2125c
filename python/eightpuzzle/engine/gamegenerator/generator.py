"""Mixes boards by walking the blank over the adjacency table."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from eightpuzzle.models.board import (
    BLANK,
    POS_ADJACENCY,
    BoardState,
    Tile,
    build_adjacency,
    goal_state,
    index_to_square,
    is_goal,
    square_to_index,
)

logger = logging.getLogger(__name__)

#: Slides performed by a mix when the caller does not ask for a count.
DEFAULT_MIX_MOVES = 1000

#: Mixes tried by `GameGenerator.generate` before giving up on a table.
MAX_GENERATE_ATTEMPTS = 100


@dataclass(frozen=True)
class MixResult:
    board: BoardState
    moves: int


class GameGenerator:
    """Creates solvable puzzles by shuffling from a given board."""

    @staticmethod
    def solved(size: int = 3) -> BoardState:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return goal_state(size)

    @staticmethod
    def mix(
        board: Sequence[Tile],
        moves: int = DEFAULT_MIX_MOVES,
        adjacency: Mapping[int, Sequence[int]] = POS_ADJACENCY,
        rng: random.Random | None = None,
    ) -> MixResult:
        """Slide a random neighbour into the blank *moves* times.

        The blank never steps straight back to the square it just left
        unless that square is its only neighbour.  Squares without adjacency
        entries are skipped, so the returned ``moves`` counts only the slides
        that happened.
        """
        rng = rng or random.Random()
        tiles = list(board)
        blank = tiles.index(BLANK)
        prev_square: int | None = None
        done = 0

        for _ in range(moves):
            square = index_to_square(blank)
            movers = list(adjacency.get(square, ()))
            if not movers:
                continue
            if prev_square in movers and len(movers) > 1:
                movers.remove(prev_square)
            mover = square_to_index(rng.choice(movers))
            tiles[blank], tiles[mover] = tiles[mover], BLANK
            prev_square = square
            blank = mover
            done += 1

        logger.debug("Mixed board with %d of %d slides", done, moves)
        return MixResult(board=tuple(tiles), moves=done)

    @staticmethod
    def generate(
        size: int = 3,
        moves: int = DEFAULT_MIX_MOVES,
        adjacency: Mapping[int, Sequence[int]] | None = None,
        rng: random.Random | None = None,
    ) -> BoardState:
        """Return a random *solvable* board that is not already solved.

        Raises :class:`ValueError` when *adjacency* allows no slides, or when
        `MAX_GENERATE_ATTEMPTS` mixes in a row all land back on the goal.
        """
        if moves < 1:
            raise ValueError("A generated board needs at least one slide.")
        adjacency = adjacency or build_adjacency(size)
        rng = rng or random.Random()
        for _ in range(MAX_GENERATE_ATTEMPTS):
            result = GameGenerator.mix(
                GameGenerator.solved(size), moves, adjacency, rng
            )
            if result.moves == 0:
                raise ValueError("Adjacency table allows no slides from the goal.")
            if not is_goal(result.board, goal_state(size)):
                return result.board
        raise ValueError(
            f"Adjacency table cannot leave the goal in {moves} slides."
        )
