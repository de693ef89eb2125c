"""Rich terminal output for the solver and the mixer.

Renders boards and solution tables with the ``rich`` library and turns a
search result into one of the three messages a player sees.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.engine.gamegenerator import MixResult
from eightpuzzle.engine.search import AlreadySolved, SearchResult, Solved
from eightpuzzle.engine.worker import SolveWorker
from eightpuzzle.models.action import Action
from eightpuzzle.models.board import Board, BoardState, goal_state, is_goal

console = Console()

# Seconds between checks on a running solve.
_POLL_INTERVAL = 0.05


# -- board rendering ----------------------------------------------------------


def render_board(flat: Sequence[int]) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    board = Board.from_flat(flat)
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_solution(actions: Sequence[Action], size: int = 3) -> Table:
    """Tabulate solver actions in play order."""
    table = Table(box=rich.box.SIMPLE_HEAD, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Tile", justify="right", style="bold")
    table.add_column("From", justify="right")
    table.add_column("To", justify="right")
    table.add_column("Slides")

    for i, action in enumerate(actions, 1):
        table.add_row(
            str(i),
            str(action.tile),
            f"sq {action.from_square}",
            f"sq {action.to_square}",
            action.direction(size).value,
        )
    return table


def result_message(result: SearchResult) -> str:
    if isinstance(result, AlreadySolved):
        return "[green]Board is already solved![/green]"
    if isinstance(result, Solved):
        noun = "move" if result.num_moves == 1 else "moves"
        return f"[bold green]Solved in {result.num_moves} {noun}![/bold green]"
    return "[red]No solution exists for this board.[/red]"


# -- commands -----------------------------------------------------------------


def solve_board(
    board: BoardState,
    adjacency: Mapping[int, Sequence[int]],
    size: int,
    out: Console = console,
) -> SearchResult:
    """Solve *board* off the main thread and print the outcome.

    Exceptions raised by the search are re-raised here.
    """
    out.print(
        Panel(
            Align.center(render_board(board)),
            title=f"[bold cyan]Start  {size}×{size}[/bold cyan]",
            border_style="cyan",
            expand=False,
        )
    )

    worker = SolveWorker(board, adjacency).start()
    with out.status("Solving, please wait…"):
        while not worker.wait(_POLL_INTERVAL):
            pass

    error = worker.get_error()
    if error is not None:
        raise error
    result = worker.get_result()

    if isinstance(result, Solved):
        out.print(render_solution(result.actions, size))
    out.print(result_message(result))

    stats = Text(
        f"{result.stats.nodes_expanded} nodes expanded, "
        f"{result.stats.nodes_generated} generated in {worker.elapsed:.2f}s",
        style="dim",
    )
    out.print(stats)
    return result


def show_mix(mix: MixResult, out: Console = console) -> None:
    """Print a mixed board as a grid and as a line ``solve`` accepts."""
    line = Text(",".join(str(v) for v in mix.board), style="bold")
    out.print(
        Panel(
            Group(Align.center(render_board(mix.board)), Align.center(line)),
            title=f"[bold cyan]Mixed with {mix.moves} slides[/bold cyan]",
            border_style="cyan",
            expand=False,
        )
    )


def show_hint(
    board: BoardState, action: Action | None, size: int, out: Console = console
) -> None:
    if action is None:
        if is_goal(board, goal_state(size)):
            out.print("[green]Already solved![/green]")
        else:
            out.print("[yellow]No hint available (board is unsolvable).[/yellow]")
        return
    out.print(
        f"[cyan]Hint:[/cyan] slide [bold]{action.tile}[/bold] "
        f"{action.direction(size).value} "
        f"(square {action.from_square} → {action.to_square})"
    )
