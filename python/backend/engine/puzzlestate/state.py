"""A single node of the A* search tree."""

from __future__ import annotations

from typing import Callable, Optional

from backend.models.board import Board


class SearchNode:
    """Board snapshot plus its path cost, heuristic estimate and parent.

    ``g``, ``h`` and ``f`` are fixed at construction. Children point at their
    parent; parents never point at children, so the nodes form a tree.
    """

    __slots__ = ("_board", "_parent", "_g", "_h", "_f", "_key")

    def __init__(
        self,
        board: Board,
        heuristic: Callable[[Board], int],
        parent: Optional[SearchNode] = None,
    ) -> None:
        self._board = board
        self._parent = parent
        self._g = 0 if parent is None else parent.g + 1
        self._h = heuristic(board)
        self._f = self._g + self._h
        self._key = board.key()

    # -- read-only attributes -------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def parent(self) -> Optional[SearchNode]:
        return self._parent

    @property
    def g(self) -> int:
        return self._g

    @property
    def h(self) -> int:
        return self._h

    @property
    def f(self) -> int:
        return self._f

    @property
    def key(self) -> str:
        return self._key

    # -- path reconstruction --------------------------------------------------

    def path(self) -> list[Board]:
        """Boards from the root to this node."""
        boards: list[Board] = []
        node: Optional[SearchNode] = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards

    def __repr__(self) -> str:
        return f"SearchNode(key={self._key!r}, g={self._g}, h={self._h}, f={self._f})"
