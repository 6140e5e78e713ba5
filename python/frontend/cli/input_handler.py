"""Line-oriented input parsing shared by the CLI frontends.

Puzzles are typed as three rows of three whitespace separated numbers::

    1 0 2
    3 4 5
    6 7 8
"""

from __future__ import annotations

from typing import Callable

from backend.engine.puzzlegenerator import validate
from backend.models.board import SIZE, Board, InvalidBoardError

Reader = Callable[[str], str]


def parse_puzzle(lines: list[str]) -> Board:
    """Parse row lines into a validated board.

    A single line holding all nine numbers is accepted too. Raises
    ``InvalidBoardError`` with a user-facing message on bad input.
    """
    tokens = [tok for line in lines for tok in line.split()]
    try:
        flat = [int(tok) for tok in tokens]
    except ValueError:
        raise InvalidBoardError(
            f"Tiles must be whole numbers, got {' '.join(tokens)!r}."
        ) from None
    return validate(flat)


def read_puzzle(reader: Reader | None = None) -> Board:
    """Read three row lines from *reader* and parse them."""
    reader = reader or input
    lines = [reader("") for _ in range(SIZE)]
    return parse_puzzle(lines)


def read_int(prompt: str, minimum: int, reader: Reader | None = None) -> int:
    """Prompt until the user enters an integer of at least *minimum*."""
    reader = reader or input
    while True:
        raw = reader(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            continue
        if value >= minimum:
            return value


def read_choice(prompt: str = "> ", reader: Reader | None = None) -> str:
    """Read one menu choice; end of input counts as quitting."""
    reader = reader or input
    try:
        return reader(prompt).strip()
    except EOFError:
        return "quit"
