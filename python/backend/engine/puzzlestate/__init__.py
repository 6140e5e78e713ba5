from backend.engine.puzzlestate.state import SearchNode

__all__ = ["SearchNode"]
