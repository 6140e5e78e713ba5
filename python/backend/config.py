"""Tunable parameters for the search engines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True)
class SearchConfig:
    """A* engine parameters.

    Attributes:
        tie_break: Order among frontier entries with equal f. ``"fifo"`` pops
            the earliest inserted entry first, ``"lifo"`` the latest.
        prune_frontier_duplicates: Also skip a child whose board already sits
            on the frontier with an equal or smaller g. Off by default, in
            which case only the explored set filters children and the
            generated-node count matches the classic formulation.
    """

    tie_break: Literal["fifo", "lifo"] = "fifo"
    prune_frontier_duplicates: bool = False

    def __post_init__(self) -> None:
        if self.tie_break not in ("fifo", "lifo"):
            raise ValueError(f"Unknown tie_break {self.tie_break!r}.")


@dataclass(frozen=True)
class QueensConfig:
    """N-Queens parameters used by the frontends."""

    min_queens: int = 4
    min_population: int = 4
    trials: int = 200
    max_generations: Optional[int] = None
