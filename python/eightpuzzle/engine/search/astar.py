"""A* search over sliding-puzzle boards."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from eightpuzzle.engine.heuristic import heuristic_distance
from eightpuzzle.engine.search.frontier import Frontier
from eightpuzzle.engine.search.result import (
    AlreadySolved,
    SearchResult,
    SearchStats,
    Solved,
    Unsolvable,
)
from eightpuzzle.errors import CorruptBoardError
from eightpuzzle.models.action import Action
from eightpuzzle.models.board import (
    BLANK,
    POS_ADJACENCY,
    BoardState,
    Tile,
    goal_state,
    grid_side,
    index_to_square,
    is_goal,
    square_to_index,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchNode:
    """One board in the search tree.

    ``parent`` is the arena handle of the node this one was reached from,
    ``None`` for the root.
    """

    state: BoardState
    parent: int | None
    action: Action | None
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h


def reconstruct_path(nodes: Sequence[SearchNode], handle: int) -> tuple[Action, ...]:
    """Collect the actions from the root down to node *handle*."""
    path: list[Action] = []
    node = nodes[handle]
    while node.parent is not None:
        if node.action is not None:
            path.append(node.action)
        node = nodes[node.parent]
    path.reverse()
    return tuple(path)


def search(
    start: Sequence[Tile],
    adjacency: Mapping[int, Sequence[int]] = POS_ADJACENCY,
) -> SearchResult:
    """Find the shortest sequence of slides from *start* to the goal board.

    The goal is the ordered board of the same size as *start*.  *adjacency*
    maps each 1-based square to the squares next to it.

    Returns :class:`AlreadySolved` when *start* is the goal, :class:`Solved`
    with an optimal action sequence, or :class:`Unsolvable` once every
    reachable board has been tried.  Raises
    :class:`~eightpuzzle.errors.CorruptBoardError` if a board without a blank
    turns up.
    """
    start = tuple(start)
    num_squares = len(start)
    goal = goal_state(grid_side(num_squares))

    if is_goal(start, goal):
        logger.debug("Board %s is already solved", list(start))
        return AlreadySolved()

    root = SearchNode(
        state=start,
        parent=None,
        action=None,
        g=0,
        h=heuristic_distance(start, goal, num_squares),
    )
    nodes: list[SearchNode] = [root]
    frontier = Frontier()
    frontier.push(start, root.f, 0)
    # Boards ever pushed onto the frontier; those no longer on it are expanded.
    closed: set[BoardState] = {start}

    expanded = 0
    generated = 0
    logger.debug("Searching from %s (h=%d)", list(start), root.h)

    while frontier:
        handle = frontier.pop()
        current = nodes[handle]

        if current.state == goal:
            stats = SearchStats(nodes_expanded=expanded, nodes_generated=generated)
            logger.debug(
                "Solved in %d moves after expanding %d nodes",
                current.g, expanded,
            )
            return Solved(actions=reconstruct_path(nodes, handle), stats=stats)

        expanded += 1

        try:
            blank = current.state.index(BLANK)
        except ValueError:
            logger.error("No empty square (0) found in state %s", list(current.state))
            raise CorruptBoardError(current.state) from None

        movable = adjacency.get(index_to_square(blank))
        if movable is None:
            logger.error(
                "No adjacency information for square %d; skipping node",
                index_to_square(blank),
            )
            continue

        for square in movable:
            piece_index = square_to_index(square)
            if not 0 <= piece_index < num_squares or piece_index == blank:
                logger.warning("Adjacency lists unusable square %d", square)
                continue
            tile = current.state[piece_index]
            if tile is None:
                logger.warning("Cannot move a missing tile from index %d", piece_index)
                continue

            neighbour = list(current.state)
            neighbour[blank] = tile
            neighbour[piece_index] = BLANK
            neighbour = tuple(neighbour)
            generated += 1

            if neighbour in closed and neighbour not in frontier:
                continue

            g = current.g + 1
            h = heuristic_distance(neighbour, goal, num_squares)
            queued_f = frontier.f_of(neighbour)
            if queued_f is not None and queued_f <= g + h:
                continue

            nodes.append(
                SearchNode(
                    state=neighbour,
                    parent=handle,
                    action=Action(tile=tile, from_index=piece_index, to_index=blank),
                    g=g,
                    h=h,
                )
            )
            frontier.push(neighbour, g + h, len(nodes) - 1)
            closed.add(neighbour)

    logger.debug("No solution for %s after expanding %d nodes", list(start), expanded)
    return Unsolvable(stats=SearchStats(nodes_expanded=expanded, nodes_generated=generated))


def hint(
    board: Sequence[Tile],
    adjacency: Mapping[int, Sequence[int]] = POS_ADJACENCY,
) -> Action | None:
    """Return the first move of an optimal solution.

    ``None`` when the board is solved or unsolvable.
    """
    result = search(board, adjacency)
    if isinstance(result, Solved):
        return result.actions[0]
    return None
