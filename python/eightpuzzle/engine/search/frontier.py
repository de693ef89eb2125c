"""Priority queue of search nodes waiting to be expanded."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable

# Marks a heap entry whose board was superseded by a cheaper one.
_REMOVED = None


class Frontier:
    """Binary heap ordered by f, with at most one live entry per board.

    Entries with equal f come out in insertion order.  Replacing a board's
    entry marks the old heap item dead instead of re-heapifying.
    """

    def __init__(self) -> None:
        self._heap: list[list] = []
        self._entries: dict[Hashable, list] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def f_of(self, key: Hashable) -> int | None:
        """Return the f-score queued for *key*, or ``None`` if absent."""
        entry = self._entries.get(key)
        return None if entry is None else entry[0]

    def push(self, key: Hashable, f: int, handle: int) -> None:
        """Queue node *handle* for board *key*, replacing any older entry."""
        if key in self._entries:
            self.remove(key)
        entry = [f, next(self._counter), handle, key]
        self._entries[key] = entry
        heapq.heappush(self._heap, entry)

    def remove(self, key: Hashable) -> None:
        entry = self._entries.pop(key)
        entry[2] = _REMOVED

    def pop(self) -> int:
        """Remove and return the handle with the lowest f."""
        while self._heap:
            _, _, handle, key = heapq.heappop(self._heap)
            if handle is not _REMOVED:
                del self._entries[key]
                return handle
        raise KeyError("pop from an empty frontier")
