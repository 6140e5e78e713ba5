"""N-Queens board model."""

from __future__ import annotations

import random


class QueensBoard:
    """One queen per column; ``rows[c]`` is the row of the queen in column *c*.

    ``fitness`` is the number of non-attacking queen pairs.
    """

    def __init__(self, rows: list[int]) -> None:
        if not rows:
            raise ValueError("A queens board needs at least one column.")
        self.rows: list[int] = list(rows)
        self.fitness: int = self.max_fitness - self.attacking_pairs()

    @classmethod
    def random(cls, n: int, rng: random.Random | None = None) -> QueensBoard:
        """Return a board with each queen on a random row of its column."""
        if n < 1:
            raise ValueError(f"Number of queens must be positive, got {n}.")
        rng = rng or random.Random()
        return cls([rng.randrange(n) for _ in range(n)])

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def max_fitness(self) -> int:
        n = len(self.rows)
        return n * (n - 1) // 2

    def attacking_pairs(self) -> int:
        return attacking_pairs(self.rows)

    def is_solution(self) -> bool:
        return self.fitness == self.max_fitness

    # -- mutation -------------------------------------------------------------

    def mutate(self, rng: random.Random) -> None:
        """Move one random queen to a random row in its column."""
        n = len(self.rows)
        self.rows[rng.randrange(n)] = rng.randrange(n)
        self.fitness = self.max_fitness - self.attacking_pairs()

    def __str__(self) -> str:
        n = len(self.rows)
        return "\n".join(
            " ".join("Q" if self.rows[c] == r else "-" for c in range(n))
            for r in range(n)
        )

    def __repr__(self) -> str:
        return f"QueensBoard({self.rows!r})"


def attacking_pairs(rows: list[int]) -> int:
    """Count queen pairs sharing a row or a diagonal."""
    pairs = 0
    for i in range(len(rows)):
        for j in range(i + 1, len(rows)):
            if rows[i] == rows[j] or abs(rows[i] - rows[j]) == j - i:
                pairs += 1
    return pairs
