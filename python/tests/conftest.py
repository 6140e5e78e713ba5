"""Shared fixtures: a breadth-first distance oracle over the whole 8-puzzle graph."""

from __future__ import annotations

from collections import deque

import pytest

from backend.models.board import GOAL_KEY

# blank index -> indices it can swap with on a 3×3 grid
_NEI = {
    0: (1, 3),
    1: (0, 2, 4),
    2: (1, 5),
    3: (0, 4, 6),
    4: (1, 3, 5, 7),
    5: (2, 4, 8),
    6: (3, 7),
    7: (4, 6, 8),
    8: (5, 7),
}


def bfs_distances(start_key: str = GOAL_KEY) -> dict[str, int]:
    """Shortest move count from *start_key* to every reachable board key.

    Slides are reversible, so distances from the goal equal distances to it.
    """
    dist = {start_key: 0}
    queue = deque([start_key])
    while queue:
        key = queue.popleft()
        z = key.index("0")
        d = dist[key] + 1
        for j in _NEI[z]:
            cells = list(key)
            cells[z], cells[j] = cells[j], cells[z]
            nxt = "".join(cells)
            if nxt not in dist:
                dist[nxt] = d
                queue.append(nxt)
    return dist


@pytest.fixture(scope="session")
def goal_distances() -> dict[str, int]:
    return bfs_distances()
