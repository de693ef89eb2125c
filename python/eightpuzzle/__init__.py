"""Optimal solver for the 8-puzzle and other square sliding puzzles."""

from eightpuzzle.engine import (
    AlreadySolved,
    GameGenerator,
    GamePlay,
    SearchResult,
    SolveWorker,
    Solved,
    Unsolvable,
    heuristic_distance,
    search,
)
from eightpuzzle.errors import (
    CorruptBoardError,
    InvalidBoardError,
    InvalidGridSizeError,
    PuzzleError,
)
from eightpuzzle.models import GOAL_STATE, POS_ADJACENCY, Action

__version__ = "0.1.0"

__all__ = [
    "Action",
    "AlreadySolved",
    "CorruptBoardError",
    "GOAL_STATE",
    "GameGenerator",
    "GamePlay",
    "InvalidBoardError",
    "InvalidGridSizeError",
    "POS_ADJACENCY",
    "PuzzleError",
    "SearchResult",
    "SolveWorker",
    "Solved",
    "Unsolvable",
    "heuristic_distance",
    "search",
]
