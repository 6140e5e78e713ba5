"""Result types shared by the N-Queens solvers."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.queens import QueensBoard


@dataclass
class QueensResult:
    solved: bool
    board: QueensBoard
    cost: int


@dataclass
class TrialSummary:
    """Aggregate of a batch of hill-climbing runs."""

    trials: int
    solved: int
    total_cost: int

    @property
    def percent_solved(self) -> float:
        return 100.0 * self.solved / self.trials if self.trials else 0.0

    @property
    def average_cost(self) -> float:
        return self.total_cost / self.trials if self.trials else 0.0
