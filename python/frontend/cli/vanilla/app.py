"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, input, ANSI codes) for rendering and input.
Provides the 8-puzzle menu (enter or generate a puzzle, solve it with both
heuristics) and the N-Queens menu (hill climbing or genetic algorithm).
"""

from __future__ import annotations

import time

from backend.config import QueensConfig, SearchConfig
from backend.engine.puzzlegenerator import PuzzleGenerator, is_solvable
from backend.engine.puzzlesolver import AStarSearch, HeuristicMode, SearchResult
from backend.engine.queensolver import Genetic, HillClimbing, QueensResult, benchmark
from backend.models.board import Board, InvalidBoardError
from backend.models.queens import QueensBoard
from frontend.cli.input_handler import read_choice, read_int, read_puzzle


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _heading(title: str) -> None:
    rule = "-" * (len(title) + 2)
    print(f"\n{rule}\n {_C}{title}{_R}\n{rule}")


# -- rendering ----------------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    lines: list[str] = []
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM}·{_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G}{val}{_R}")
            else:
                cells.append(str(val))
        lines.append(" ".join(cells))
    return "\n".join(lines)


def _render_queens(board: QueensBoard) -> str:
    return str(board).replace("Q", f"{_Y}Q{_R}")


# -- 8-puzzle -----------------------------------------------------------------


def _run_search(board: Board, mode: HeuristicMode, config: SearchConfig) -> SearchResult:
    search = AStarSearch(board, mode, config)
    start = time.perf_counter()
    result = search.run()
    elapsed = time.perf_counter() - start

    _heading(f"{mode.label} Solution")
    if not result.solved:
        print("No solution found.")
    else:
        for step in result.path:
            print()
            print(_render_board(step))
        print(f"\nMoves: {_Y}{result.moves}{_R}")
    print(f"Time Elapsed: {elapsed * 1000:.3f} ms")
    print(f"Nodes Generated: {search.generated_count()}")
    print(f"Nodes Expanded: {search.expanded_count}")
    return result


def solve_board(board: Board, config: SearchConfig | None = None) -> list[SearchResult]:
    """Solve *board* with both heuristics and print each solution."""
    config = config or SearchConfig()
    return [_run_search(board, mode, config) for mode in HeuristicMode]


def _enter_puzzle(config: SearchConfig) -> None:
    print("\nPlease use the following format...")
    print("# # #\n# # #\n# # #")
    print("Now enter your puzzle:")
    try:
        board = read_puzzle()
    except EOFError:
        return
    except InvalidBoardError as exc:
        print(f"Invalid input. {exc}")
        return

    if not is_solvable(board):
        print("\nThe entered puzzle is not solvable.\n")
        return
    solve_board(board, config)


def _generate_puzzle(config: SearchConfig) -> None:
    board = PuzzleGenerator.generate()
    print("\nGenerated Puzzle:")
    print(_render_board(board))
    solve_board(board, config)


def _puzzle_menu(config: SearchConfig) -> None:
    print("Welcome to 8-Puzzle Solver!")
    while True:
        print("------------------------------")
        print(" What would you like to do?")
        print("    [1] Enter your own puzzle")
        print("    [2] Generate a puzzle")
        print("    [3] Quit")
        print("------------------------------")

        choice = read_choice()
        if choice == "1":
            _enter_puzzle(config)
        elif choice == "2":
            _generate_puzzle(config)
        elif choice in ("3", "quit"):
            return
        elif choice:
            print("Invalid input.")


# -- N-Queens -----------------------------------------------------------------


def _print_queens_result(result: QueensResult, elapsed: float, cost_label: str) -> None:
    if not result.solved:
        print("Solution could not be found.")
        return
    _heading("Solution")
    print(_render_queens(result.board))
    print(f"\nTime: {elapsed * 1000:.1f} ms")
    print(f"Cost ({cost_label}): {result.cost}")


def _ask_queens(config: QueensConfig) -> int:
    return read_int(f"Enter the number of queens (at least {config.min_queens}): ", config.min_queens)


def _solve_hill_climbing(config: QueensConfig) -> None:
    try:
        n = _ask_queens(config)
    except EOFError:
        return
    board = QueensBoard.random(n)

    _heading("Original Board")
    print(_render_queens(board))

    start = time.perf_counter()
    result = HillClimbing(board).solve()
    elapsed = time.perf_counter() - start
    _print_queens_result(result, elapsed, "boards generated")


def _benchmark_hill_climbing(config: QueensConfig) -> None:
    try:
        n = _ask_queens(config)
    except EOFError:
        return

    start = time.perf_counter()
    summary = benchmark(n, config.trials)
    elapsed = time.perf_counter() - start

    _heading("Results")
    print(f"Percent solved: {summary.percent_solved:.1f}%")
    print(f"Average time to solve a board: {elapsed * 1000 / summary.trials:.3f} ms")
    print(f"Average cost to solve a board: {summary.average_cost:.1f} boards generated")


def _hill_climbing_menu(config: QueensConfig) -> None:
    while True:
        print("\n----------------------------")
        print(" What would you like to do?")
        print("    [1] Generate 1 problem")
        print(f"    [2] Test {config.trials} problems")
        print("    [3] Go back")
        print("----------------------------")

        choice = read_choice()
        if choice == "1":
            _solve_hill_climbing(config)
            return
        elif choice == "2":
            _benchmark_hill_climbing(config)
            return
        elif choice in ("3", "quit"):
            return
        elif choice:
            print("Invalid input.")


def _solve_genetic(config: QueensConfig) -> None:
    try:
        n = _ask_queens(config)
        k = read_int(
            f"Enter the population size (at least {config.min_population}): ",
            config.min_population,
        )
    except EOFError:
        return
    population = [QueensBoard.random(n) for _ in range(k)]

    start = time.perf_counter()
    result = Genetic(population, max_generations=config.max_generations).solve()
    elapsed = time.perf_counter() - start
    _print_queens_result(result, elapsed, "generation count")


def _queens_menu(config: QueensConfig) -> None:
    print("Welcome to N-Queen Problem Generator!")
    while True:
        print("\n---------------------------------------")
        print(" What algorithm would you like to use?")
        print("    [1] Steepest-Ascent Hill Climbing")
        print("    [2] Genetic")
        print("    [3] Quit")
        print("---------------------------------------")

        choice = read_choice()
        if choice == "1":
            _hill_climbing_menu(config)
        elif choice == "2":
            _solve_genetic(config)
        elif choice in ("3", "quit"):
            return
        elif choice:
            print("Invalid input.")


# -- public entry point -------------------------------------------------------


def run(
    game: str = "puzzle",
    search_config: SearchConfig | None = None,
    queens_config: QueensConfig | None = None,
) -> None:
    """Launch the vanilla CLI menu for *game* (``"puzzle"`` or ``"queens"``)."""
    if game == "queens":
        _queens_menu(queens_config or QueensConfig())
    else:
        _puzzle_menu(search_config or SearchConfig())
