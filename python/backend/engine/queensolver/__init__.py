from backend.engine.queensolver.genetic import Genetic
from backend.engine.queensolver.hillclimbing import HillClimbing, benchmark
from backend.engine.queensolver.result import QueensResult, TrialSummary

__all__ = ["Genetic", "HillClimbing", "QueensResult", "TrialSummary", "benchmark"]
