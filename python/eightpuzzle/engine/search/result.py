"""Outcomes of a search.

Exactly one of :class:`AlreadySolved`, :class:`Solved` or
:class:`Unsolvable` comes back from every call to ``search``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from eightpuzzle.models.action import Action


@dataclass(frozen=True)
class SearchStats:
    nodes_expanded: int = 0
    nodes_generated: int = 0


@dataclass(frozen=True)
class AlreadySolved:
    """The start board was the goal; no moves are needed."""

    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def actions(self) -> tuple[Action, ...]:
        return ()


@dataclass(frozen=True)
class Solved:
    """Shortest move sequence from the start board to the goal."""

    actions: tuple[Action, ...]
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def num_moves(self) -> int:
        return len(self.actions)


@dataclass(frozen=True)
class Unsolvable:
    """Every reachable board was explored without meeting the goal."""

    stats: SearchStats = field(default_factory=SearchStats)


SearchResult = AlreadySolved | Solved | Unsolvable
