"""Board model: construction, canonical keys and slides."""

from __future__ import annotations

import random

import pytest

from backend.models.board import GOAL, GOAL_KEY, Board, Direction, InvalidBoardError


def test_goal_key() -> None:
    assert GOAL.key() == GOAL_KEY
    assert GOAL.tiles == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert GOAL.is_solved()
    assert GOAL.blank_pos == (0, 0)


def test_key_is_row_major() -> None:
    board = Board.from_rows([[8, 7, 6], [5, 4, 3], [2, 1, 0]])
    assert board.key() == "876543210"
    assert board.flat() == [8, 7, 6, 5, 4, 3, 2, 1, 0]
    assert board.blank_pos == (2, 2)
    assert not board.is_solved()


def test_key_round_trip_on_random_permutations() -> None:
    rng = random.Random(1234)
    seen: dict[str, Board] = {}
    for _ in range(2000):
        values = list(range(9))
        rng.shuffle(values)
        board = Board.from_flat(values)
        key = board.key()

        assert Board.from_key(key) == board
        # no two distinct boards share a key
        assert seen.setdefault(key, board) == board


@pytest.mark.parametrize(
    "rows",
    [
        [[0, 1, 2], [3, 4, 5]],
        [[0, 1], [2, 3], [4, 5]],
        [[0, 1, 2], [3, 4, 5], [6, 7, 8, 9]],
    ],
    ids=["two-rows", "two-cols", "ragged"],
)
def test_from_rows_rejects_wrong_shape(rows: list[list[int]]) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_rows(rows)


def test_from_flat_rejects_wrong_length() -> None:
    with pytest.raises(InvalidBoardError, match="Expected 9 tiles"):
        Board.from_flat([0, 1, 2])


@pytest.mark.parametrize("key", ["01234567", "01234567x", ""], ids=["short", "letter", "empty"])
def test_from_key_rejects_malformed(key: str) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_key(key)


def test_slide_moves_blank_and_leaves_source_untouched() -> None:
    board = Board.from_rows([[1, 0, 2], [3, 4, 5], [6, 7, 8]])

    left = board.slide(Direction.LEFT)
    down = board.slide(Direction.DOWN)

    assert left == GOAL
    assert down is not None and down.key() == "142305678"
    assert board.key() == "102345678"


def test_slide_blocked_at_edges() -> None:
    assert GOAL.slide(Direction.UP) is None
    assert GOAL.slide(Direction.LEFT) is None
    corner = Board.from_key("123456780")
    assert corner.slide(Direction.DOWN) is None
    assert corner.slide(Direction.RIGHT) is None


def test_successors_order_is_down_up_right_left() -> None:
    center = Board.from_key("123405678")
    directions = [d for d, _ in center.successors()]
    assert directions == [Direction.DOWN, Direction.UP, Direction.RIGHT, Direction.LEFT]

    assert [d for d, _ in GOAL.successors()] == [Direction.DOWN, Direction.RIGHT]


def test_is_tile_correct() -> None:
    board = Board.from_key("102345678")
    assert not board.is_tile_correct(0, 0)
    assert not board.is_tile_correct(0, 1)
    assert board.is_tile_correct(0, 2)
    assert board.is_tile_correct(2, 2)
