"""A* graph search for the 8-puzzle."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from enum import StrEnum

from backend.config import SearchConfig
from backend.engine.puzzlesolver.heuristics import (
    Heuristic,
    HeuristicMode,
    Manhattan,
    MisplacedTiles,
    make_heuristic,
)
from backend.engine.puzzlestate import SearchNode
from backend.models.board import GOAL_KEY, Board, Direction

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    solved = "solved"
    no_solution = "no_solution"


@dataclass
class SearchResult:
    """Outcome of one :meth:`AStarSearch.run`.

    ``path`` runs from the initial board to the goal and is empty when the
    frontier was exhausted without reaching the goal.
    """

    status: SearchStatus
    heuristic: HeuristicMode
    generated: int
    expanded: int
    path: list[Board] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.solved

    @property
    def moves(self) -> int | None:
        """Number of slides on the solution path, ``None`` if unsolved."""
        return len(self.path) - 1 if self.solved else None

    def directions(self) -> list[Direction]:
        """The blank's slide at each step of the path."""
        out: list[Direction] = []
        for prev, nxt in zip(self.path, self.path[1:]):
            for direction, child in prev.successors():
                if child == nxt:
                    out.append(direction)
                    break
        return out


class AStarSearch:
    """Best-first graph search ordered by f = g + h.

    The goal test is applied to the frontier head before it is popped, so the
    goal node itself is never added to the explored set. Children whose board
    is already explored are discarded before they reach the frontier; every
    other child is pushed and counted as generated.
    """

    def __init__(
        self,
        board: Board,
        heuristic: HeuristicMode | str | Heuristic = HeuristicMode.misplaced,
        config: SearchConfig | None = None,
    ) -> None:
        if isinstance(heuristic, (MisplacedTiles, Manhattan)):
            self.heuristic: Heuristic = heuristic
        else:
            self.heuristic = make_heuristic(heuristic)
        self.config = config or SearchConfig()
        self.board = board

        self._frontier: list[tuple[int, int, SearchNode]] = []
        self._frontier_g: dict[str, int] = {}
        self._explored: set[str] = set()
        self._counter = itertools.count()
        self._generated = 0
        self._expanded = 0

        self.root = SearchNode(board, self.heuristic)

    # -- public API -----------------------------------------------------------

    def run(self) -> SearchResult:
        """Search from the initial board until the goal is found or the frontier empties."""
        self._reset()
        logger.debug(
            "A* start: board=%s heuristic=%s h0=%d",
            self.root.key, self.heuristic.mode, self.root.h,
        )
        self._push(self.root)

        while self._frontier:
            head = self._frontier[0][2]
            if head.key == GOAL_KEY:
                path = head.path()
                self._frontier.clear()
                self._frontier_g.clear()
                logger.debug(
                    "A* solved in %d moves: generated=%d expanded=%d",
                    head.g, self._generated, self._expanded,
                )
                return self._result(SearchStatus.solved, path)

            _, _, node = heapq.heappop(self._frontier)
            if node.key in self._explored:
                # stale duplicate of an already expanded board
                continue
            self._explored.add(node.key)
            self._expand(node)

        logger.debug(
            "A* exhausted frontier without reaching the goal: generated=%d expanded=%d",
            self._generated, self._expanded,
        )
        return self._result(SearchStatus.no_solution, [])

    def generated_count(self) -> int:
        """Nodes created and pushed onto the frontier, root included."""
        return self._generated

    @property
    def expanded_count(self) -> int:
        return self._expanded

    # -- helpers --------------------------------------------------------------

    def _reset(self) -> None:
        self._frontier.clear()
        self._frontier_g.clear()
        self._explored.clear()
        self._counter = itertools.count()
        self._generated = 0
        self._expanded = 0

    def _push(self, node: SearchNode) -> None:
        tick = next(self._counter)
        tie = tick if self.config.tie_break == "fifo" else -tick
        heapq.heappush(self._frontier, (node.f, tie, node))
        self._frontier_g[node.key] = min(node.g, self._frontier_g.get(node.key, node.g))
        self._generated += 1

    def _expand(self, node: SearchNode) -> None:
        self._expanded += 1
        for _, board in node.board.successors():
            child = SearchNode(board, self.heuristic, parent=node)
            if child.key in self._explored:
                continue
            if (
                self.config.prune_frontier_duplicates
                and self._frontier_g.get(child.key, child.g + 1) <= child.g
            ):
                continue
            self._push(child)

    def _result(self, status: SearchStatus, path: list[Board]) -> SearchResult:
        return SearchResult(
            status=status,
            heuristic=self.heuristic.mode,
            generated=self._generated,
            expanded=self._expanded,
            path=path,
        )


def solve(
    board: Board,
    heuristic: HeuristicMode | str = HeuristicMode.misplaced,
    config: SearchConfig | None = None,
) -> SearchResult:
    """Run A* once on *board* and return the result."""
    return AStarSearch(board, heuristic, config).run()
