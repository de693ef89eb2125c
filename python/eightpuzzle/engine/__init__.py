from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gameplay import GamePlay
from eightpuzzle.engine.heuristic import heuristic_distance
from eightpuzzle.engine.search import (
    AlreadySolved,
    SearchResult,
    Solved,
    Unsolvable,
    search,
)
from eightpuzzle.engine.worker import SolveWorker

__all__ = [
    "AlreadySolved",
    "GameGenerator",
    "GamePlay",
    "SearchResult",
    "SolveWorker",
    "Solved",
    "Unsolvable",
    "heuristic_distance",
    "search",
]
