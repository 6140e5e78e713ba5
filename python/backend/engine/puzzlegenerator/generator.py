"""Validates 8-puzzle input and generates solvable boards."""

from __future__ import annotations

import random

from backend.models.board import GOAL, SIZE, Board, InvalidBoardError


def validate(flat: list[int]) -> Board:
    """Return the board for *flat* if it holds each of 0-8 exactly once.

    Raises ``InvalidBoardError`` otherwise. Solvability is a separate check.
    """
    expected = SIZE * SIZE
    if len(flat) != expected:
        raise InvalidBoardError(f"Expected {expected} tiles, got {len(flat)}.")

    out_of_range = sorted({v for v in flat if not 0 <= v < expected})
    if out_of_range:
        raise InvalidBoardError(
            f"Tiles must be between 0 and {expected - 1}; got {out_of_range}."
        )

    repeated = sorted({v for v in flat if flat.count(v) > 1})
    if repeated:
        raise InvalidBoardError(f"Tiles must not repeat; repeated {repeated}.")

    return Board.from_flat(flat)


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    On an odd-width board a slide never changes the parity of the tile
    inversion count, and the goal has none, so the count must be even.
    """
    flat = [v for v in board.flat() if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions % 2 == 0


class PuzzleGenerator:
    """Creates random solvable puzzles."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (blank top-left)."""
        return GOAL

    @staticmethod
    def generate(rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board.

        Shuffles 0-8 until the permutation has even inversion parity.
        """
        rng = rng or random.Random()
        values = list(range(SIZE * SIZE))
        while True:
            rng.shuffle(values)
            board = Board.from_flat(values)
            if is_solvable(board):
                return board
