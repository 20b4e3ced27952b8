#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py solve 1,2,3,4,0,6,7,5,8 -r 3 -c 3           # A*, Manhattan
    python main.py solve 0,1,2 -r 1 -c 3 --strategy bfs
    python main.py shuffle -r 4 -c 4 --times 30 --seed 7 --solve
"""

import random
import sys
from pathlib import Path
from typing import Optional

import rich.box
import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidingpuzzle.engine.gamegenerator import GameGenerator  # noqa: E402
from slidingpuzzle.engine.gamesolver import (  # noqa: E402
    Heuristic,
    SearchBudgetExceeded,
    Solver,
    SolverSettings,
    Strategy,
)
from slidingpuzzle.models.board import EMPTY, Board, InvalidBoardError, Move  # noqa: E402

console = Console()


# -- helpers ------------------------------------------------------------------


def _parse_tiles(raw: str, rows: int, cols: int) -> Board:
    try:
        flat = [int(part) for part in raw.replace(" ", "").split(",") if part]
        return Board.from_flat(rows, cols, flat)
    except (ValueError, InvalidBoardError) as exc:
        raise typer.BadParameter(str(exc), param_hint="TILES") from exc


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    rows, cols = board.size
    width = len(str(rows * cols - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(cols):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == EMPTY:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)
    return table


def _format_move(move: Move) -> str:
    r, c = move.tile
    return f"({r},{c}) {move.direction.value}"


def _print_solution(board: Board, settings: SolverSettings) -> None:
    try:
        moves = Solver.solve(board, settings=settings)
    except SearchBudgetExceeded as exc:
        console.print(f"[yellow]No solution within budget ({exc.expanded} expansions).[/yellow]")
        raise typer.Exit(code=1) from exc

    if moves is None:
        console.print("[red]No solution: the board cannot reach the goal.[/red]")
        raise typer.Exit(code=1)

    if not moves:
        console.print("[green]Already solved![/green]")
        return

    console.print(f"[bold green]Solved in {len(moves)} moves:[/bold green]")
    for i, move in enumerate(moves, 1):
        console.print(f"  {i:>3}. {_format_move(move)}")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Sliding Puzzle Solver."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.command()
def solve(
    tiles: str = typer.Argument(
        ...,
        help="Comma-separated row-major tiles, 0 for the empty cell.",
    ),
    rows: int = typer.Option(3, "-r", "--rows", min=1, help="Number of rows."),
    cols: int = typer.Option(3, "-c", "--cols", min=1, help="Number of columns."),
    strategy: Strategy = typer.Option(
        Strategy.astar, "--strategy",
        help="Search strategy.",
    ),
    heuristic: Heuristic = typer.Option(
        Heuristic.manhattan, "--heuristic",
        help="A* cost estimate.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        help="Give up after this many expanded states.",
    ),
) -> None:
    """Solve a board given on the command line."""
    board = _parse_tiles(tiles, rows, cols)
    console.print(_render_board(board))
    _print_solution(
        board,
        SolverSettings(strategy=strategy, heuristic=heuristic, max_expansions=max_expansions),
    )


@app.command()
def shuffle(
    rows: int = typer.Option(3, "-r", "--rows", min=1, help="Number of rows."),
    cols: int = typer.Option(3, "-c", "--cols", min=1, help="Number of columns."),
    times: int = typer.Option(25, "-t", "--times", min=0, help="Random moves to apply."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    then_solve: bool = typer.Option(False, "--solve", help="Also print a solution."),
    strategy: Strategy = typer.Option(Strategy.astar, "--strategy"),
    heuristic: Heuristic = typer.Option(Heuristic.manhattan, "--heuristic"),
) -> None:
    """Print a randomly shuffled board."""
    board = GameGenerator.generate(rows, cols, times=times, rng=random.Random(seed))
    console.print(_render_board(board))
    flat = ",".join(str(v) for row in board.tiles for v in row)
    console.print(f"[dim]{flat}[/dim]")
    if then_solve:
        _print_solution(board, SolverSettings(strategy=strategy, heuristic=heuristic))


if __name__ == "__main__":
    app()
