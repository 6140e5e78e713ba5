from backend.models.board import GOAL, GOAL_KEY, Board, Direction, InvalidBoardError
from backend.models.queens import QueensBoard

__all__ = ["GOAL", "GOAL_KEY", "Board", "Direction", "InvalidBoardError", "QueensBoard"]
