"""8-Puzzle solver.

Usage::

    eightpuzzle solve 1,2,3,4,5,6,7,0,8     # shortest solution
    eightpuzzle solve "8 1 2 0 4 3 7 6 5"   # reports no solution
    eightpuzzle hint 1,2,3,4,0,5,7,8,6      # best next slide
    eightpuzzle mix --moves 200 --seed 7    # shuffled board to paste into solve
    eightpuzzle -v solve ...                # debug logging
"""

import logging
import random
from typing import Optional

import typer

from eightpuzzle.engine.gamegenerator import DEFAULT_MIX_MOVES, GameGenerator
from eightpuzzle.engine.search import Unsolvable, hint as next_move
from eightpuzzle.errors import InvalidBoardError
from eightpuzzle.frontend.cli.app import show_hint, show_mix, solve_board
from eightpuzzle.models.board import (
    POS_ADJACENCY,
    BoardState,
    build_adjacency,
    grid_side,
    parse_board,
)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _adjacency_for(size: int) -> dict[int, list[int]]:
    return POS_ADJACENCY if size == 3 else build_adjacency(size)


def _parse(board: str) -> BoardState:
    try:
        return parse_board(board)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint="BOARD") from exc


# -- CLI entry point ----------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress at DEBUG level.",
    ),
) -> None:
    """8-Puzzle solver."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@app.command()
def solve(
    board: str = typer.Argument(
        ...,
        help="Tiles in row-major order, 0 for the blank, e.g. 1,2,3,4,5,6,7,0,8.",
    ),
) -> None:
    """Find the shortest sequence of slides that solves BOARD."""
    tiles = _parse(board)
    size = grid_side(len(tiles))
    result = solve_board(tiles, _adjacency_for(size), size)
    if isinstance(result, Unsolvable):
        raise typer.Exit(code=1)


@app.command()
def hint(
    board: str = typer.Argument(..., help="Tiles in row-major order, 0 for the blank."),
) -> None:
    """Show the best next slide for BOARD."""
    tiles = _parse(board)
    size = grid_side(len(tiles))
    show_hint(tiles, next_move(tiles, _adjacency_for(size)), size)


@app.command()
def mix(
    moves: int = typer.Option(
        DEFAULT_MIX_MOVES, "-m", "--moves",
        min=1,
        help="Number of random slides.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible shuffle.",
    ),
) -> None:
    """Shuffle the solved board with random legal slides."""
    rng = random.Random(seed)
    result = GameGenerator.mix(
        GameGenerator.solved(size), moves, _adjacency_for(size), rng
    )
    show_mix(result)


if __name__ == "__main__":
    app()
