#!/usr/bin/env python3
"""Puzzle search explorer.

Usage::

    python main.py                             # 8-puzzle menu, vanilla terminal
    python main.py -f rich                     # 8-puzzle menu, Rich terminal
    python main.py -g queens                   # N-Queens menu
    python main.py --board "1 0 2 3 4 5 6 7 8" # solve once with h1 and h2
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import QueensConfig, SearchConfig  # noqa: E402
from backend.engine.puzzlegenerator import is_solvable  # noqa: E402
from backend.models.board import InvalidBoardError  # noqa: E402
from frontend.cli.input_handler import parse_puzzle  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class Game(StrEnum):
    puzzle = "puzzle"
    queens = "queens"


class TieBreak(StrEnum):
    fifo = "fifo"
    lifo = "lifo"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Terminal frontend to launch.",
    ),
    game: Game = typer.Option(
        Game.puzzle, "-g", "--game",
        help="8-puzzle (A* search) or N-Queens (local search).",
    ),
    board: Optional[str] = typer.Option(
        None, "--board",
        help='Solve one 8-puzzle and exit, e.g. "1 0 2 3 4 5 6 7 8".',
    ),
    tie_break: TieBreak = typer.Option(
        TieBreak.fifo, "--tie-break",
        help="Frontier order among nodes with equal f.",
    ),
    prune_duplicates: bool = typer.Option(
        False, "--prune-duplicates",
        help="Also skip children already waiting on the frontier.",
    ),
    trials: int = typer.Option(
        200, "--trials", min=1,
        help="Problems per hill-climbing benchmark.",
    ),
    max_generations: Optional[int] = typer.Option(
        None, "--max-generations", min=1,
        help="Stop the genetic algorithm after this many generations.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Informed and local search over small puzzles."""
    _configure_logging(verbose)

    search_config = SearchConfig(
        tie_break=tie_break.value, prune_frontier_duplicates=prune_duplicates
    )
    queens_config = QueensConfig(trials=trials, max_generations=max_generations)
    mod = importlib.import_module(_RUNNERS[frontend])

    if board is not None:
        try:
            puzzle = parse_puzzle([board])
        except InvalidBoardError as exc:
            typer.echo(f"Invalid board: {exc}", err=True)
            raise typer.Exit(code=2)
        if not is_solvable(puzzle):
            typer.echo("The entered puzzle is not solvable.", err=True)
            raise typer.Exit(code=1)
        mod.solve_board(puzzle, search_config)
        return

    mod.run(game=game.value, search_config=search_config, queens_config=queens_config)


if __name__ == "__main__":
    app()
