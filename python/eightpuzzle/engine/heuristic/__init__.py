from eightpuzzle.engine.heuristic.manhattan import heuristic_distance

__all__ = ["heuristic_distance"]
