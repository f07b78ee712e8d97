"""Exact travelling-salesman tour cost by dynamic programming over subsets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache

__all__ = ["tsp_min_cost"]


def tsp_min_cost(dist: Iterable[Sequence[float]]) -> float:
    """Return the cheapest cost of a tour from city 0 through all cities and back."""
    matrix = [list(row) for row in dist]
    n = len(matrix)
    if n == 0:
        raise ValueError("at least one city is required")
    if any(len(row) != n for row in matrix):
        raise ValueError("distance matrix must be square")
    full = (1 << n) - 1

    @lru_cache(maxsize=None)
    def best(mask: int, pos: int) -> float:
        if mask == full:
            return matrix[pos][0]
        return min(
            matrix[pos][city] + best(mask | (1 << city), city)
            for city in range(n)
            if not mask & (1 << city)
        )

    return best(1, 0)