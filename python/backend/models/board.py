"""Board model for the 8-puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

SIZE = 3
GOAL_KEY = "012345678"


class InvalidBoardError(ValueError):
    """Raised when a board does not hold each of 0-8 exactly once in a 3×3 grid."""


class Direction(StrEnum):
    """Direction the *blank* slides in."""

    DOWN = "down"
    UP = "up"
    RIGHT = "right"
    LEFT = "left"


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.DOWN: (1, 0),
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
}


@dataclass(frozen=True)
class Board:
    """An immutable 3×3 tile arrangement.

    Tiles are stored row-major as a tuple of row tuples. 0 represents the
    blank. Every transition returns a new board; a board is never mutated.
    """

    tiles: tuple[tuple[int, ...], ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a nested row list.

        Example::

            Board.from_rows([[1, 0, 2], [3, 4, 5], [6, 7, 8]])
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise InvalidBoardError(
                f"Expected a {SIZE}×{SIZE} grid, got rows of lengths "
                f"{[len(row) for row in rows]}."
            )
        return cls(tiles=tuple(tuple(int(v) for v in row) for row in rows))

    @classmethod
    def from_flat(cls, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list."""
        if len(flat) != SIZE * SIZE:
            raise InvalidBoardError(
                f"Expected {SIZE * SIZE} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows(
            [list(flat[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)]
        )

    @classmethod
    def from_key(cls, key: str) -> Board:
        """Decode a canonical key produced by :meth:`key`."""
        if len(key) != SIZE * SIZE or not key.isdigit():
            raise InvalidBoardError(f"Malformed board key {key!r}.")
        return cls.from_flat([int(ch) for ch in key])

    # -- queries --------------------------------------------------------------

    def key(self) -> str:
        """Row-major concatenation of the nine cells, e.g. ``"012345678"``."""
        return "".join(str(v) for row in self.tiles for v in row)

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    @property
    def blank_pos(self) -> tuple[int, int]:
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    return (r, c)
        raise InvalidBoardError("Board has no blank tile.")

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return self.key() == GOAL_KEY

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position (value 3·row + col)."""
        return self.tiles[row][col] == row * SIZE + col

    # -- transitions ----------------------------------------------------------

    def slide(self, direction: Direction) -> Board | None:
        """Return the board with the blank moved one cell, or ``None`` at an edge."""
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            return None

        rows = [list(row) for row in self.tiles]
        rows[br][bc], rows[tr][tc] = rows[tr][tc], rows[br][bc]
        return Board(tiles=tuple(tuple(row) for row in rows))

    def successors(self) -> list[tuple[Direction, Board]]:
        """Every legal slide, in the order down, up, right, left."""
        out: list[tuple[Direction, Board]] = []
        for direction in Direction:
            child = self.slide(direction)
            if child is not None:
                out.append((direction, child))
        return out

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.tiles)


GOAL = Board.from_key(GOAL_KEY)
