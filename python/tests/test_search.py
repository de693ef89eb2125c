"""A* search: concrete scenarios, optimality and failure handling.

Optimality is checked against exact distances from a breadth-first sweep of
the whole 3×3 state space (181,440 boards), computed once per module.  The
returned move list is also replayed through the real game session to verify
that it reaches the goal.
"""

from __future__ import annotations

import logging
import random
from collections import deque

import pytest

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gameplay import GamePlay
from eightpuzzle.engine.search import (
    AlreadySolved,
    SearchNode,
    Solved,
    Unsolvable,
    hint,
    reconstruct_path,
    search,
)
from eightpuzzle.engine.search.frontier import Frontier
from eightpuzzle.errors import CorruptBoardError
from eightpuzzle.models.action import Action
from eightpuzzle.models.board import (
    GOAL_STATE,
    POS_ADJACENCY,
    BoardState,
    apply_move,
    build_adjacency,
    goal_state,
    is_goal,
    is_solvable,
)


# -- helpers ------------------------------------------------------------------


@pytest.fixture(scope="module")
def distances() -> dict[BoardState, int]:
    """Exact number of slides from every solvable 3×3 board to the goal."""
    dist: dict[BoardState, int] = {GOAL_STATE: 0}
    queue = deque([GOAL_STATE])
    while queue:
        board = queue.popleft()
        blank = board.index(0)
        for square in POS_ADJACENCY[blank + 1]:
            piece = square - 1
            nxt = list(board)
            nxt[blank], nxt[piece] = nxt[piece], 0
            nxt = tuple(nxt)
            if nxt not in dist:
                dist[nxt] = dist[board] + 1
                queue.append(nxt)
    return dist


def _replay(start: BoardState, actions: tuple[Action, ...]) -> BoardState:
    board = start
    for action in actions:
        board = apply_move(board, action.from_index, action.to_index)
    return board


def _mixed_boards(count: int, moves: int, seed: int) -> list[BoardState]:
    rng = random.Random(seed)
    return [
        GameGenerator.mix(GOAL_STATE, moves, POS_ADJACENCY, rng).board
        for _ in range(count)
    ]


# -- concrete scenarios -------------------------------------------------------


def test_goal_is_already_solved() -> None:
    result = search(GOAL_STATE, POS_ADJACENCY)
    assert isinstance(result, AlreadySolved)
    assert result.actions == ()
    assert result.stats.nodes_expanded == 0


def test_one_move_away() -> None:
    result = search([1, 2, 3, 4, 5, 6, 7, 0, 8], POS_ADJACENCY)
    assert isinstance(result, Solved)
    assert result.actions == (Action(tile=8, from_index=8, to_index=7),)


def test_two_moves_away() -> None:
    result = search([1, 2, 3, 4, 0, 5, 7, 8, 6], POS_ADJACENCY)
    assert isinstance(result, Solved)
    assert result.actions == (
        Action(tile=5, from_index=5, to_index=4),
        Action(tile=6, from_index=8, to_index=5),
    )


def test_three_moves_away() -> None:
    result = search([1, 2, 3, 0, 4, 5, 7, 8, 6], POS_ADJACENCY)
    assert isinstance(result, Solved)
    assert result.actions == (
        Action(tile=4, from_index=4, to_index=3),
        Action(tile=5, from_index=5, to_index=4),
        Action(tile=6, from_index=8, to_index=5),
    )


def test_known_unsolvable_board() -> None:
    result = search([8, 1, 2, 0, 4, 3, 7, 6, 5], POS_ADJACENCY)
    assert isinstance(result, Unsolvable)
    # Half of the 9! arrangements are reachable; all must have been tried.
    assert result.stats.nodes_expanded == 181440


def test_default_adjacency_is_the_classic_table() -> None:
    result = search((1, 2, 3, 4, 5, 6, 7, 0, 8))
    assert isinstance(result, Solved)
    assert result.num_moves == 1


def test_input_board_is_not_mutated() -> None:
    board = [4, 1, 2, 0, 5, 3, 7, 8, 6]
    original = list(board)
    search(board, POS_ADJACENCY)
    assert board == original


# -- optimality ---------------------------------------------------------------


@pytest.mark.parametrize(
    "start", _mixed_boards(20, 1000, seed=42), ids=lambda b: "".join(map(str, b))
)
def test_solution_is_optimal_and_reaches_goal(
    start: BoardState, distances: dict[BoardState, int]
) -> None:
    result = search(start, POS_ADJACENCY)

    if is_goal(start):
        assert isinstance(result, AlreadySolved)
        return

    assert isinstance(result, Solved)
    assert result.num_moves == distances[start]
    assert is_goal(_replay(start, result.actions))

    game = GamePlay(start, POS_ADJACENCY)
    assert game.replay(result.actions) == result.num_moves
    assert game.is_won


@pytest.mark.parametrize("depth", range(1, 13))
def test_short_scrambles_never_exceed_scramble_length(
    depth: int, distances: dict[BoardState, int]
) -> None:
    for start in _mixed_boards(3, depth, seed=depth):
        result = search(start, POS_ADJACENCY)
        if is_goal(start):
            assert isinstance(result, AlreadySolved)
            continue
        assert isinstance(result, Solved)
        assert result.num_moves <= depth
        assert result.num_moves == distances[start]


def test_hardest_board(distances: dict[BoardState, int]) -> None:
    hardest = max(distances, key=distances.__getitem__)
    result = search(hardest, POS_ADJACENCY)
    assert isinstance(result, Solved)
    assert result.num_moves == distances[hardest] == 31
    assert is_goal(_replay(hardest, result.actions))


# -- other grid sizes ---------------------------------------------------------


def test_two_by_two_boards() -> None:
    adjacency = build_adjacency(2)
    solved = search([1, 2, 0, 3], adjacency)
    assert isinstance(solved, Solved)
    assert solved.actions == (Action(tile=3, from_index=3, to_index=2),)

    unsolvable = search([2, 1, 3, 0], adjacency)
    assert isinstance(unsolvable, Unsolvable)
    assert not is_solvable((2, 1, 3, 0))


def test_four_by_four_short_scramble() -> None:
    adjacency = build_adjacency(4)
    start = GameGenerator.mix(goal_state(4), 12, adjacency, random.Random(3)).board
    result = search(start, adjacency)
    assert isinstance(result, (Solved, AlreadySolved))
    assert len(result.actions) <= 12
    assert is_goal(_replay(start, result.actions), goal_state(4))


# -- failure handling ---------------------------------------------------------


def test_board_without_blank_aborts(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="eightpuzzle.engine.search.astar"):
        with pytest.raises(CorruptBoardError):
            search([1, 2, 3, 4, 5, 6, 7, 8, 9], POS_ADJACENCY)
    assert "No empty square" in caplog.text


def test_missing_adjacency_entry_skips_node(caplog: pytest.LogCaptureFixture) -> None:
    adjacency = {k: v for k, v in POS_ADJACENCY.items() if k != 8}
    with caplog.at_level(logging.ERROR, logger="eightpuzzle.engine.search.astar"):
        result = search([1, 2, 3, 4, 5, 6, 7, 0, 8], adjacency)
    assert isinstance(result, Unsolvable)
    assert "No adjacency information for square 8" in caplog.text


def test_missing_adjacency_entry_does_not_stop_other_branches() -> None:
    # Square 1 is never the blank on the optimal two-move path.
    adjacency = {k: v for k, v in POS_ADJACENCY.items() if k != 1}
    result = search([1, 2, 3, 4, 0, 5, 7, 8, 6], adjacency)
    assert isinstance(result, Solved)
    assert result.num_moves == 2


# -- building blocks ----------------------------------------------------------


def test_frontier_pops_lowest_f_first_and_fifo_on_ties() -> None:
    frontier = Frontier()
    frontier.push("a", 5, 0)
    frontier.push("b", 3, 1)
    frontier.push("c", 3, 2)
    frontier.push("d", 4, 3)
    assert len(frontier) == 4
    assert [frontier.pop() for _ in range(4)] == [1, 2, 3, 0]
    assert not frontier
    with pytest.raises(KeyError):
        frontier.pop()


def test_frontier_keeps_one_entry_per_key() -> None:
    frontier = Frontier()
    frontier.push("a", 7, 0)
    frontier.push("b", 5, 1)
    frontier.push("a", 4, 2)
    assert len(frontier) == 2
    assert "a" in frontier
    assert frontier.f_of("a") == 4
    assert frontier.f_of("zzz") is None
    assert frontier.pop() == 2
    assert frontier.pop() == 1
    assert not frontier


def test_reconstruct_path_runs_root_to_leaf() -> None:
    first = Action(tile=5, from_index=5, to_index=4)
    second = Action(tile=6, from_index=8, to_index=5)
    nodes = [
        SearchNode(state=(1, 2, 3, 4, 0, 5, 7, 8, 6), parent=None, action=None, g=0, h=2),
        SearchNode(state=(1, 2, 3, 4, 5, 0, 7, 8, 6), parent=0, action=first, g=1, h=1),
        SearchNode(state=GOAL_STATE, parent=1, action=second, g=2, h=0),
    ]
    assert reconstruct_path(nodes, 2) == (first, second)
    assert reconstruct_path(nodes, 0) == ()
    assert nodes[1].f == 2


def test_hint_is_first_optimal_move() -> None:
    assert hint([1, 2, 3, 4, 0, 5, 7, 8, 6]) == Action(tile=5, from_index=5, to_index=4)
    assert hint(GOAL_STATE) is None
    assert hint([2, 1, 3, 0], build_adjacency(2)) is None
