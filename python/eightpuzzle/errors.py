"""Exceptions raised by the puzzle model and the search engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by this package."""


class InvalidGridSizeError(PuzzleError, ValueError):
    """Raised when a square count is not a perfect square."""

    def __init__(self, num_squares: int) -> None:
        super().__init__(
            f"Number of squares must be a perfect square, got {num_squares}."
        )
        self.num_squares = num_squares


class InvalidBoardError(PuzzleError, ValueError):
    """Raised when caller-supplied board data is malformed."""


class CorruptBoardError(PuzzleError, RuntimeError):
    """Raised when the search meets a board with no blank square."""

    def __init__(self, board: tuple) -> None:
        super().__init__(f"No empty square (0) found in board {list(board)}.")
        self.board = board
