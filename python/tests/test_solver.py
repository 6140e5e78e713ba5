"""A* engine test suite.

Optimal move counts come from the breadth-first oracle in ``conftest.py``.
Every returned path is replayed slide by slide to check that consecutive
boards differ by exactly one legal blank move.
"""

from __future__ import annotations

import random

import pytest

from backend.config import SearchConfig
from backend.engine.puzzlesolver import AStarSearch, HeuristicMode, SearchStatus, solve
from backend.engine.puzzlestate import SearchNode
from backend.models.board import GOAL, GOAL_KEY, Board, Direction

REACHABLE_STATES = 181_440  # 9! / 2

MODES = list(HeuristicMode)


# -- helpers ------------------------------------------------------------------


class RecordingSearch(AStarSearch):
    """Remembers the key of every node it expands."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.expanded_keys: list[str] = []

    def _expand(self, node: SearchNode) -> None:
        self.expanded_keys.append(node.key)
        super()._expand(node)


def _assert_valid_path(path: list[Board], start: Board) -> None:
    assert path[0] == start
    assert path[-1] == GOAL
    for prev, nxt in zip(path, path[1:]):
        assert nxt in [child for _, child in prev.successors()]


def _sample_keys(goal_distances: dict[str, int], max_depth: int, count: int, seed: int) -> list[str]:
    rng = random.Random(seed)
    candidates = sorted(k for k, d in goal_distances.items() if 0 < d <= max_depth)
    return rng.sample(candidates, count)


# -- end-to-end scenarios -----------------------------------------------------


@pytest.mark.parametrize("mode", MODES, ids=str)
def test_already_solved(mode: HeuristicMode) -> None:
    search = AStarSearch(Board.from_rows([[0, 1, 2], [3, 4, 5], [6, 7, 8]]), mode)
    result = search.run()

    assert result.status is SearchStatus.solved
    assert result.moves == 0
    assert result.path == [GOAL]
    assert search.generated_count() == 1
    assert result.expanded == search.expanded_count == 0


@pytest.mark.parametrize("mode", MODES, ids=str)
def test_one_move(mode: HeuristicMode) -> None:
    start = Board.from_rows([[1, 0, 2], [3, 4, 5], [6, 7, 8]])
    search = AStarSearch(start, mode)
    result = search.run()

    assert result.solved
    assert result.moves == 1
    assert result.path == [start, GOAL]
    assert result.directions() == [Direction.LEFT]
    # root + down, right, left children of the root
    assert search.generated_count() == 4
    assert result.expanded == search.expanded_count == 1


def test_hard_instance_manhattan_generates_fewer_nodes(goal_distances: dict[str, int]) -> None:
    key = min(k for k, d in goal_distances.items() if d == 20)
    start = Board.from_key(key)

    h1 = AStarSearch(start, HeuristicMode.misplaced)
    h2 = AStarSearch(start, HeuristicMode.manhattan)
    r1, r2 = h1.run(), h2.run()

    assert r1.moves == r2.moves == 20
    _assert_valid_path(r1.path, start)
    _assert_valid_path(r2.path, start)
    assert h2.generated_count() <= h1.generated_count()


@pytest.mark.timeout(300)
def test_unsolvable_exhausts_frontier() -> None:
    # tiles 1 and 2 swapped, blank fixed
    start = Board.from_rows([[0, 2, 1], [3, 4, 5], [6, 7, 8]])
    search = AStarSearch(start, HeuristicMode.manhattan)
    result = search.run()

    assert result.status is SearchStatus.no_solution
    assert not result.solved
    assert result.path == []
    assert result.moves is None
    # every board of the unreachable half is expanded exactly once
    assert result.expanded == REACHABLE_STATES
    assert search.generated_count() >= REACHABLE_STATES


# -- optimality and determinism ----------------------------------------------


@pytest.mark.parametrize("mode", MODES, ids=str)
def test_optimal_against_bfs(mode: HeuristicMode, goal_distances: dict[str, int]) -> None:
    for key in _sample_keys(goal_distances, max_depth=14, count=25, seed=7):
        start = Board.from_key(key)
        result = solve(start, mode)

        assert result.solved, key
        assert result.moves == goal_distances[key], key
        _assert_valid_path(result.path, start)


@pytest.mark.parametrize("mode", MODES, ids=str)
def test_repeated_runs_are_identical(mode: HeuristicMode) -> None:
    start = Board.from_key("125340678")

    first = AStarSearch(start, mode).run()
    second = AStarSearch(start, mode).run()

    assert first.path == second.path
    assert first.generated == second.generated
    assert first.expanded == second.expanded


def test_rerun_on_same_engine_resets_state() -> None:
    search = AStarSearch(Board.from_key("125340678"), HeuristicMode.misplaced)
    first = search.run()
    count = search.generated_count()
    second = search.run()

    assert second.path == first.path
    assert search.generated_count() == count


def test_construction_does_no_search() -> None:
    search = AStarSearch(Board.from_key("125340678"), HeuristicMode.manhattan)

    assert search.generated_count() == 0
    assert search.root.g == 0
    assert search.root.h == 3
    assert search.root.f == 3


# -- explored-set behaviour ---------------------------------------------------


@pytest.mark.parametrize("mode", MODES, ids=str)
def test_no_board_expanded_twice(mode: HeuristicMode, goal_distances: dict[str, int]) -> None:
    for key in _sample_keys(goal_distances, max_depth=16, count=5, seed=11):
        search = RecordingSearch(Board.from_key(key), mode)
        result = search.run()

        assert result.solved
        assert len(search.expanded_keys) == len(set(search.expanded_keys))
        assert result.expanded == len(search.expanded_keys)


def test_goal_is_never_explored() -> None:
    search = AStarSearch(Board.from_key("312645078"), HeuristicMode.manhattan)
    result = search.run()

    assert result.solved
    assert GOAL_KEY not in search._explored


@pytest.mark.parametrize("mode", MODES, ids=str)
def test_children_of_explored_boards_are_not_counted(mode: HeuristicMode) -> None:
    # blank in the centre: slide up, then left
    start = Board.from_key("142305678")
    search = RecordingSearch(start, mode)
    result = search.run()

    assert result.moves == 2
    assert search.expanded_keys == ["142305678", "102345678"]
    # root + its 4 children, then right and left of "102345678";
    # sliding back down to the explored root is skipped
    assert search.generated_count() == 7
    assert result.directions() == [Direction.UP, Direction.LEFT]


def test_blank_on_edge_has_three_children() -> None:
    search = AStarSearch(Board.from_key("312045678"), HeuristicMode.misplaced)
    result = search.run()

    assert result.moves == 1
    assert search.generated_count() == 4


# -- configuration ------------------------------------------------------------


@pytest.mark.parametrize("mode", MODES, ids=str)
def test_pruning_frontier_duplicates_keeps_optimality(
    mode: HeuristicMode, goal_distances: dict[str, int]
) -> None:
    pruned = SearchConfig(prune_frontier_duplicates=True)
    for key in _sample_keys(goal_distances, max_depth=16, count=10, seed=3):
        start = Board.from_key(key)
        default = solve(start, mode)
        tight = solve(start, mode, pruned)

        assert tight.moves == default.moves == goal_distances[key]
        assert tight.generated <= default.generated
        _assert_valid_path(tight.path, start)


@pytest.mark.parametrize("mode", MODES, ids=str)
def test_lifo_tie_break_is_still_optimal(mode: HeuristicMode, goal_distances: dict[str, int]) -> None:
    lifo = SearchConfig(tie_break="lifo")
    for key in _sample_keys(goal_distances, max_depth=14, count=10, seed=5):
        result = solve(Board.from_key(key), mode, lifo)
        assert result.moves == goal_distances[key]


def test_unknown_tie_break_rejected() -> None:
    with pytest.raises(ValueError):
        SearchConfig(tie_break="random")  # type: ignore[arg-type]


def test_accepts_heuristic_instance() -> None:
    from backend.engine.puzzlesolver import Manhattan

    result = AStarSearch(Board.from_key("102345678"), Manhattan()).run()
    assert result.heuristic is HeuristicMode.manhattan
    assert result.moves == 1
