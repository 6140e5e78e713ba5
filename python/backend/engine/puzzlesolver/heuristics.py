"""Heuristic estimates for the 8-puzzle.

Both heuristics ignore the blank and are admissible and consistent under
unit move cost:

* ``misplaced`` (h1): number of tiles not on their goal cell.
* ``manhattan`` (h2): sum of the tiles' grid distances to their goal cells.

The goal cell of value ``v`` is ``(v // 3, v % 3)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping, Union

from backend.models.board import SIZE, Board


class HeuristicMode(StrEnum):
    misplaced = "misplaced"
    manhattan = "manhattan"

    @property
    def label(self) -> str:
        return "H1" if self is HeuristicMode.misplaced else "H2"


def goal_positions() -> Mapping[int, tuple[int, int]]:
    """Read-only table of tile value → goal (row, col)."""
    return MappingProxyType({v: divmod(v, SIZE) for v in range(SIZE * SIZE)})


@dataclass(frozen=True)
class MisplacedTiles:
    mode = HeuristicMode.misplaced

    def __call__(self, board: Board) -> int:
        h = 0
        for i, row in enumerate(board.tiles):
            for j, v in enumerate(row):
                if v != 0 and v != i * SIZE + j:
                    h += 1
        return h


@dataclass(frozen=True)
class Manhattan:
    mode = HeuristicMode.manhattan

    positions: Mapping[int, tuple[int, int]] = field(default_factory=goal_positions)

    def __call__(self, board: Board) -> int:
        h = 0
        for i, row in enumerate(board.tiles):
            for j, v in enumerate(row):
                if v != 0:
                    gr, gc = self.positions[v]
                    h += abs(gr - i) + abs(gc - j)
        return h


Heuristic = Union[MisplacedTiles, Manhattan]


def make_heuristic(mode: HeuristicMode | str) -> Heuristic:
    """Return the heuristic for *mode*."""
    mode = HeuristicMode(mode)
    if mode is HeuristicMode.manhattan:
        return Manhattan()
    return MisplacedTiles()
