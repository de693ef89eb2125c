from eightpuzzle.engine.worker.worker import SolveWorker

__all__ = ["SolveWorker"]
