"""Play session: applies player moves and replays solver actions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from eightpuzzle.models.action import Action
from eightpuzzle.models.board import (
    BLANK,
    POS_ADJACENCY,
    BoardState,
    Tile,
    apply_move,
    goal_state,
    grid_side,
    index_to_square,
    is_goal,
)

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session on a flat board."""

    def __init__(
        self,
        board: Sequence[Tile],
        adjacency: Mapping[int, Sequence[int]] = POS_ADJACENCY,
    ) -> None:
        self.board: BoardState = tuple(board)
        self.adjacency = adjacency
        self.size = grid_side(len(self.board))
        self.moves: int = 0

    @property
    def blank_index(self) -> int:
        return self.board.index(BLANK)

    # -- movement -------------------------------------------------------------

    def move_tile(self, index: int) -> bool:
        """Slide the tile at *index* into the blank if the two are adjacent.

        Returns True if the move was applied.
        """
        blank = self.blank_index
        neighbours = self.adjacency.get(index_to_square(blank), ())
        if index_to_square(index) not in neighbours:
            return False
        return self._apply(index, blank)

    def apply_action(self, action: Action) -> bool:
        """Replay one solver action.

        Refused when the action's target is not the current blank.
        """
        if action.to_index != self.blank_index:
            logger.error(
                "Action %s does not match the blank at index %d",
                action, self.blank_index,
            )
            return False
        in_range = 0 <= action.from_index < len(self.board)
        if not in_range or self.board[action.from_index] != action.tile:
            logger.error(
                "Action %s expects tile %d at index %d", action, action.tile,
                action.from_index,
            )
            return False
        return self._apply(action.from_index, action.to_index)

    def replay(self, actions: Iterable[Action]) -> int:
        """Apply *actions* in order, stopping at the first refused one.

        Returns how many actions were applied.
        """
        applied = 0
        for action in actions:
            if not self.apply_action(action):
                break
            applied += 1
        return applied

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return is_goal(self.board, goal_state(self.size))

    # -- helpers --------------------------------------------------------------

    def _apply(self, from_index: int, to_index: int) -> bool:
        new_board = apply_move(self.board, from_index, to_index)
        if new_board == self.board:
            return False
        self.board = new_board
        self.moves += 1
        return True
