"""Runs a search on a daemon thread so an interactive caller stays responsive.

The search itself has no timeout or cancellation hook: a caller that gives
up simply stops waiting and drops the worker.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Mapping, Sequence

from eightpuzzle.engine.search import SearchResult, search
from eightpuzzle.models.board import POS_ADJACENCY, BoardState, Tile

logger = logging.getLogger(__name__)


class SolveWorker:
    """Solves one board in a background thread.

    Example::

        worker = SolveWorker(board)
        worker.start()

        # Poll from the interactive loop:
        if worker.is_done():
            result = worker.get_result()

        # or block:
        worker.wait()
    """

    def __init__(
        self,
        board: Sequence[Tile],
        adjacency: Mapping[int, Sequence[int]] = POS_ADJACENCY,
        on_done: Callable[[SolveWorker], None] | None = None,
        label: str = "solver",
    ):
        self.board: BoardState = tuple(board)
        self.adjacency = adjacency
        self.on_done = on_done
        self.label = label

        self.done_event = threading.Event()
        self.elapsed: float = 0.0
        self._result: SearchResult | None = None
        self._error: BaseException | None = None
        self._thread: threading.Thread | None = None

    # -- public API ---------------------------------------------------------

    def start(self) -> SolveWorker:
        """Launch the search in a background daemon thread."""
        if self._thread is not None:
            raise RuntimeError(f"{self.label} was already started")
        self._thread = threading.Thread(
            target=self._run, name=self.label, daemon=True
        )
        self._thread.start()
        return self

    def is_done(self) -> bool:
        """Check if the search has finished (with a result or an error)."""
        return self.done_event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the search finishes or *timeout* seconds pass."""
        return self.done_event.wait(timeout)

    def get_result(self) -> SearchResult | None:
        """Return the search result. None if not done or if it failed."""
        if not self.done_event.is_set():
            return None
        return self._result

    def get_error(self) -> BaseException | None:
        return self._error

    # -- helpers ------------------------------------------------------------

    def _run(self) -> None:
        """Thread target: run the search and record its outcome."""
        start_time = time.perf_counter()
        try:
            self._result = search(self.board, self.adjacency)
        except Exception as e:
            logger.exception("%s failed on %s", self.label, list(self.board))
            self._error = e
        finally:
            self.elapsed = time.perf_counter() - start_time
            self.done_event.set()
            if self.on_done is not None:
                self.on_done(self)
