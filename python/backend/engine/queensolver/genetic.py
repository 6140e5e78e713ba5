"""Genetic algorithm for N-Queens.

Each generation:

1. Sort the population by fitness (non-attacking pairs); stop if the fittest
   member is a solution.
2. Draw two distinct parents by fitness-weighted roulette.
3. Seed the successor generation with the parents' crossover.
4. Drop the least-fit quarter (plus one) of the remaining members.
5. Refill the successors by crossing a random survivor with one of the
   parents.
6. Mutate the least-fit quarter of the successors.

``cost`` is the number of generations bred.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from backend.engine.queensolver.result import QueensResult
from backend.models.queens import QueensBoard

logger = logging.getLogger(__name__)


def _fitness(board: QueensBoard) -> int:
    return board.fitness


class Genetic:
    def __init__(
        self,
        population: list[QueensBoard],
        rng: random.Random | None = None,
        max_generations: Optional[int] = None,
    ) -> None:
        if len(population) < 2:
            raise ValueError(
                f"Population needs at least 2 members, got {len(population)}."
            )
        self.population = list(population)
        self.pop_size = len(population)
        self.rng = rng or random.Random()
        self.max_generations = max_generations
        self.generations = 0

    def solve(self) -> QueensResult:
        self.generations = 0
        while True:
            self.population.sort(key=_fitness)
            best = self.population[-1]
            if best.is_solution():
                return QueensResult(solved=True, board=best, cost=self.generations)
            if self.max_generations is not None and self.generations >= self.max_generations:
                logger.debug(
                    "Genetic search stopped after %d generations, best fitness %d/%d",
                    self.generations, best.fitness, best.max_fitness,
                )
                return QueensResult(solved=False, board=best, cost=self.generations)

            self.population = self._breed()
            self.generations += 1

    # -- helpers --------------------------------------------------------------

    def _breed(self) -> list[QueensBoard]:
        pool = list(self.population)
        parent1 = self._select_parent(pool)
        parent2 = self._select_parent(pool)

        successors = [QueensBoard(self.crossover(parent1.rows, parent2.rows))]

        # pool is still sorted by ascending fitness
        del pool[: len(pool) // 4 + 1]
        survivors = pool or [parent1, parent2]

        while len(successors) < self.pop_size:
            mate = self.rng.choice(survivors)
            parent = parent1 if self.rng.random() < 0.5 else parent2
            successors.append(QueensBoard(self.crossover(parent.rows, mate.rows)))

        successors.sort(key=_fitness)
        for board in successors[: len(successors) // 4]:
            board.mutate(self.rng)
        return successors

    def _select_parent(self, pool: list[QueensBoard]) -> QueensBoard:
        """Remove and return a member, fitter members being more likely."""
        weights = [b.fitness for b in pool]
        if sum(weights) > 0:
            chosen = self.rng.choices(pool, weights=weights)[0]
        else:
            chosen = self.rng.choice(pool)
        pool.remove(chosen)
        return chosen

    def crossover(self, rows1: list[int], rows2: list[int]) -> list[int]:
        """Prefix of *rows1* up to a random cut point, then the rest of *rows2*."""
        cut = self.rng.randrange(len(rows1))
        return rows1[:cut] + rows2[cut:]
