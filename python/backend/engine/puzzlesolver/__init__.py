from backend.engine.puzzlesolver.heuristics import (
    Heuristic,
    HeuristicMode,
    Manhattan,
    MisplacedTiles,
    goal_positions,
    make_heuristic,
)
from backend.engine.puzzlesolver.solver import AStarSearch, SearchResult, SearchStatus, solve

__all__ = [
    "AStarSearch",
    "Heuristic",
    "HeuristicMode",
    "Manhattan",
    "MisplacedTiles",
    "SearchResult",
    "SearchStatus",
    "goal_positions",
    "make_heuristic",
    "solve",
]
