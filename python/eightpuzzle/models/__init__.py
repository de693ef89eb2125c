from eightpuzzle.models.action import Action
from eightpuzzle.models.board import (
    BLANK,
    GOAL_STATE,
    NUM_SQUARES,
    POS_ADJACENCY,
    AdjacencyMap,
    Board,
    BoardState,
    Direction,
    apply_move,
    build_adjacency,
    goal_state,
    grid_side,
    index_to_square,
    is_goal,
    is_solvable,
    parse_board,
    square_to_index,
    validate_board,
)

__all__ = [
    "Action",
    "AdjacencyMap",
    "BLANK",
    "Board",
    "BoardState",
    "Direction",
    "GOAL_STATE",
    "NUM_SQUARES",
    "POS_ADJACENCY",
    "apply_move",
    "build_adjacency",
    "goal_state",
    "grid_side",
    "index_to_square",
    "is_goal",
    "is_solvable",
    "parse_board",
    "square_to_index",
    "validate_board",
]
