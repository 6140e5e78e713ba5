"""Steepest-ascent hill climbing for N-Queens."""

from __future__ import annotations

import logging
import random

from backend.engine.queensolver.result import QueensResult, TrialSummary
from backend.models.queens import QueensBoard, attacking_pairs

logger = logging.getLogger(__name__)


class HillClimbing:
    """Moves one queen at a time to the successor with the fewest attacking pairs.

    Gives up as soon as no successor strictly improves on the current board,
    so a run can end on a local minimum without a solution. ``cost`` counts
    every successor board generated.
    """

    def __init__(self, board: QueensBoard) -> None:
        self.board = board
        self.cost = 0

    def solve(self) -> QueensResult:
        rows = list(self.board.rows)
        n = len(rows)
        current = attacking_pairs(rows)
        self.cost = 0

        while current > 0:
            best_rows: list[int] | None = None
            best = current
            for col in range(n):
                for row in range(n):
                    if rows[col] == row:
                        continue
                    candidate = rows[:]
                    candidate[col] = row
                    self.cost += 1
                    pairs = attacking_pairs(candidate)
                    # first minimum wins ties
                    if pairs < best:
                        best, best_rows = pairs, candidate

            if best_rows is None:
                logger.debug("Hill climbing stuck at %d attacking pairs", current)
                return QueensResult(solved=False, board=QueensBoard(rows), cost=self.cost)

            rows, current = best_rows, best

        return QueensResult(solved=True, board=QueensBoard(rows), cost=self.cost)


def benchmark(n: int, trials: int, rng: random.Random | None = None) -> TrialSummary:
    """Run hill climbing on *trials* random boards of *n* queens."""
    rng = rng or random.Random()
    solved = 0
    total_cost = 0
    for _ in range(trials):
        result = HillClimbing(QueensBoard.random(n, rng)).solve()
        solved += result.solved
        total_cost += result.cost
    return TrialSummary(trials=trials, solved=solved, total_cost=total_cost)
