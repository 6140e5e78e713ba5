"""Rich terminal frontend: tables, colours and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table
from rich.text import Text

from backend.config import QueensConfig, SearchConfig
from backend.engine.puzzlegenerator import PuzzleGenerator, is_solvable
from backend.engine.puzzlesolver import AStarSearch, HeuristicMode, SearchResult
from backend.engine.queensolver import Genetic, HillClimbing, QueensResult, benchmark
from backend.models.board import Board, InvalidBoardError
from backend.models.queens import QueensBoard
from frontend.cli.input_handler import parse_puzzle

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, title: str | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        title=title,
        title_style="dim",
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(len(board.tiles)):
        table.add_column(width=1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _render_queens(board: QueensBoard) -> Table:
    table = Table(show_header=False, box=rich.box.SQUARE, border_style="dim", padding=(0, 1))
    for _ in range(board.size):
        table.add_column(width=1, justify="center")
    for r in range(board.size):
        table.add_row(
            *(
                "[bold yellow]Q[/bold yellow]" if board.rows[c] == r else "[dim]-[/dim]"
                for c in range(board.size)
            )
        )
    return table


# -- 8-puzzle -----------------------------------------------------------------


def _run_search(board: Board, mode: HeuristicMode, config: SearchConfig) -> SearchResult:
    search = AStarSearch(board, mode, config)
    start = time.perf_counter()
    result = search.run()
    elapsed = time.perf_counter() - start

    if result.solved:
        steps = [_render_board(board, title="start")]
        for direction, step in zip(result.directions(), result.path[1:]):
            steps.append(_render_board(step, title=direction.value))
        body: Columns | Text = Columns(steps, padding=(0, 2))
    else:
        body = Text("No solution found.", style="bold red")

    stats = Text()
    stats.append("Moves: ", style="dim")
    stats.append(str(result.moves if result.solved else "-"), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{elapsed * 1000:.3f} ms", style="bold yellow")
    stats.append("    Nodes generated: ", style="dim")
    stats.append(str(search.generated_count()), style="bold yellow")
    stats.append("    Nodes expanded: ", style="dim")
    stats.append(str(search.expanded_count), style="bold yellow")

    console.print(
        Panel(
            Group(body, Text(""), stats),
            title=f"[bold cyan]{mode.label} Solution[/bold cyan] [dim]({mode.value})[/dim]",
            border_style="cyan",
            padding=(1, 2),
        )
    )
    return result


def solve_board(board: Board, config: SearchConfig | None = None) -> list[SearchResult]:
    """Solve *board* with both heuristics and print each solution."""
    config = config or SearchConfig()
    return [_run_search(board, mode, config) for mode in HeuristicMode]


def _enter_puzzle(config: SearchConfig) -> None:
    console.print("\n[dim]Enter three rows of three numbers, 0 for the blank.[/dim]")
    try:
        lines = [Prompt.ask(f"  row {r + 1}", console=console) for r in range(3)]
        board = parse_puzzle(lines)
    except EOFError:
        return
    except InvalidBoardError as exc:
        console.print(f"[red]Invalid input.[/red] {exc}")
        return

    if not is_solvable(board):
        console.print("[red]The entered puzzle is not solvable.[/red]")
        return
    solve_board(board, config)


def _generate_puzzle(config: SearchConfig) -> None:
    board = PuzzleGenerator.generate()
    console.print(Align.center(_render_board(board, title="Generated Puzzle")))
    solve_board(board, config)


def _draw_menu(title: str, options: list[str]) -> None:
    opts = Text()
    for i, label in enumerate(options, 1):
        opts.append(f"  {i}", style="bold cyan")
        opts.append(f"  {label}\n")
    console.print(
        Panel(
            opts,
            title=f"[bold]{title}[/bold]",
            border_style="bright_blue",
            padding=(1, 4),
        )
    )


def _puzzle_menu(config: SearchConfig) -> None:
    while True:
        _draw_menu("8 - P U Z Z L E", ["Enter your own puzzle", "Generate a puzzle", "Quit"])
        try:
            choice = Prompt.ask(">", choices=["1", "2", "3"], console=console)
        except EOFError:
            choice = "3"
        if choice == "1":
            _enter_puzzle(config)
        elif choice == "2":
            _generate_puzzle(config)
        else:
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- N-Queens -----------------------------------------------------------------


def _ask_at_least(prompt: str, minimum: int) -> int:
    while True:
        value = IntPrompt.ask(f"{prompt} (at least {minimum})", console=console)
        if value >= minimum:
            return value
        console.print(f"[yellow]Please enter a number of at least {minimum}.[/yellow]")


def _show_queens_result(result: QueensResult, elapsed: float, cost_label: str) -> None:
    if not result.solved:
        console.print("[red]Solution could not be found.[/red]")
        return
    stats = Text()
    stats.append("Time: ", style="dim")
    stats.append(f"{elapsed * 1000:.1f} ms", style="bold yellow")
    stats.append(f"    Cost ({cost_label}): ", style="dim")
    stats.append(str(result.cost), style="bold yellow")
    console.print(
        Panel(
            Group(Align.center(_render_queens(result.board)), Text(""), Align.center(stats)),
            title="[bold green]Solution[/bold green]",
            border_style="green",
            padding=(1, 2),
        )
    )


def _solve_hill_climbing(config: QueensConfig) -> None:
    try:
        n = _ask_at_least("Number of queens", config.min_queens)
    except EOFError:
        return
    board = QueensBoard.random(n)
    console.print(Panel(Align.center(_render_queens(board)), title="Original Board"))

    start = time.perf_counter()
    result = HillClimbing(board).solve()
    elapsed = time.perf_counter() - start
    _show_queens_result(result, elapsed, "boards generated")


def _benchmark_hill_climbing(config: QueensConfig) -> None:
    try:
        n = _ask_at_least("Number of queens", config.min_queens)
    except EOFError:
        return

    with console.status(f"Running {config.trials} hill-climbing problems…"):
        start = time.perf_counter()
        summary = benchmark(n, config.trials)
        elapsed = time.perf_counter() - start

    table = Table(title="Results", box=rich.box.ROUNDED, border_style="dim")
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right", style="yellow")
    table.add_row("Percent solved", f"{summary.percent_solved:.1f}%")
    table.add_row("Average time", f"{elapsed * 1000 / summary.trials:.3f} ms")
    table.add_row("Average cost", f"{summary.average_cost:.1f} boards")
    console.print(Align.center(table))


def _solve_genetic(config: QueensConfig) -> None:
    try:
        n = _ask_at_least("Number of queens", config.min_queens)
        k = _ask_at_least("Population size", config.min_population)
    except EOFError:
        return
    population = [QueensBoard.random(n) for _ in range(k)]

    with console.status("Breeding…"):
        start = time.perf_counter()
        result = Genetic(population, max_generations=config.max_generations).solve()
        elapsed = time.perf_counter() - start
    _show_queens_result(result, elapsed, "generation count")


def _queens_menu(config: QueensConfig) -> None:
    while True:
        _draw_menu(
            "N - Q U E E N S",
            [
                "Steepest-ascent hill climbing (1 problem)",
                f"Steepest-ascent hill climbing ({config.trials} problems)",
                "Genetic",
                "Quit",
            ],
        )
        try:
            choice = Prompt.ask(">", choices=["1", "2", "3", "4"], console=console)
        except EOFError:
            choice = "4"
        if choice == "1":
            _solve_hill_climbing(config)
        elif choice == "2":
            _benchmark_hill_climbing(config)
        elif choice == "3":
            _solve_genetic(config)
        else:
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(
    game: str = "puzzle",
    search_config: SearchConfig | None = None,
    queens_config: QueensConfig | None = None,
) -> None:
    """Launch the Rich CLI menu for *game* (``"puzzle"`` or ``"queens"``)."""
    if game == "queens":
        _queens_menu(queens_config or QueensConfig())
    else:
        _puzzle_menu(search_config or SearchConfig())
