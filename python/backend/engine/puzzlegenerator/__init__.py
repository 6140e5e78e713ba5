from backend.engine.puzzlegenerator.generator import PuzzleGenerator, is_solvable, validate

__all__ = ["PuzzleGenerator", "is_solvable", "validate"]
