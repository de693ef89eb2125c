from eightpuzzle.engine.search.astar import SearchNode, hint, reconstruct_path, search
from eightpuzzle.engine.search.result import (
    AlreadySolved,
    SearchResult,
    SearchStats,
    Solved,
    Unsolvable,
)

__all__ = [
    "AlreadySolved",
    "SearchNode",
    "SearchResult",
    "SearchStats",
    "Solved",
    "Unsolvable",
    "hint",
    "reconstruct_path",
    "search",
]
