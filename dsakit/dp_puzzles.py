"""Dynamic-programming and search puzzles over numbers, grids and card games."""

from __future__ import annotations

from fractions import Fraction
from functools import lru_cache
from itertools import combinations
from typing import Sequence

MOD = 1_000_000_007
_SOUP_CERTAIN = 4800
_SOUP_UNIT = 25
_TARGET = Fraction(24)


def number_of_ways(n: int, x: int) -> int:
    """Ways, modulo 1e9+7, to write ``n`` as a sum of ``x``-th powers of distinct positive integers."""
    if n < 0:
        raise ValueError("n must not be negative")
    if x < 1:
        raise ValueError("x must be positive")
    ways = [1] + [0] * n
    base = 1
    while (power := base**x) <= n:
        for total in range(n, power - 1, -1):
            ways[total] = (ways[total] + ways[total - power]) % MOD
        base += 1
    return ways[n]


def new21_game(n: int, k: int, max_pts: int) -> float:
    """Probability of ending with at most ``n`` points.

    Points are drawn uniformly from ``1..max_pts`` while the total is below ``k``.
    """
    if max_pts < 1:
        raise ValueError("max_pts must be positive")
    if k <= 0 or k + max_pts <= n:
        return 1.0
    window = float(max(0, min(n, k + max_pts - 1) - k + 1))
    chance = [0.0] * k
    for i in reversed(range(k)):
        chance[i] = window / max_pts
        leaving_index = i + max_pts
        if leaving_index < k:
            leaving = chance[leaving_index]
        else:
            leaving = 1.0 if leaving_index <= n else 0.0
        window += chance[i] - leaving
    return chance[0]


def _reaches(values: list[Fraction]) -> bool:
    if len(values) == 1:
        return values[0] == _TARGET
    for i, j in combinations(range(len(values)), 2):
        a, b = values[i], values[j]
        rest = [v for idx, v in enumerate(values) if idx not in (i, j)]
        results = [a + b, a - b, b - a, a * b]
        if b:
            results.append(a / b)
        if a:
            results.append(b / a)
        if any(_reaches(rest + [result]) for result in results):
            return True
    return False


def judge_point_24(cards: Sequence[int]) -> bool:
    """True if the cards combine to 24 with +, -, * and / in any order and grouping."""
    if not cards:
        raise ValueError("no cards given")
    return _reaches([Fraction(card) for card in cards])


def count_squares(matrix: Sequence[Sequence[int]]) -> int:
    """Number of square sub-matrices made entirely of ones."""
    total = 0
    previous: list[int] = []
    for row in matrix:
        current: list[int] = []
        for j, cell in enumerate(row):
            if cell != 1:
                size = 0
            elif j and previous:
                size = 1 + min(previous[j], previous[j - 1], current[j - 1])
            else:
                size = 1
            current.append(size)
            total += size
        previous = current
    return total


def _corner_path(grid: list[list[int]]) -> int:
    """Best haul walking from the top-right corner down to the bottom-right corner.

    Each step moves one row down and at most one column sideways, never
    touching the main diagonal before the final cell.
    """
    n = len(grid)
    unreachable = float("-inf")
    best: list[float] = [unreachable] * n
    best[n - 1] = grid[0][n - 1]
    for r in range(1, n):
        current: list[float] = [unreachable] * n
        for c in range(n):
            if c == r and r != n - 1:
                continue
            came_from = max(best[max(c - 1, 0):c + 2])
            if came_from != unreachable:
                current[c] = came_from + grid[r][c]
        best = current
    return int(best[n - 1])


def max_collected_fruits(fruits: Sequence[Sequence[int]]) -> int:
    """Most fruit three children collect walking from three corners to the far corner."""
    n = len(fruits)
    if n == 0:
        return 0
    grid = [list(row) for row in fruits]
    diagonal = 0
    for i in range(n):
        diagonal += grid[i][i]
        grid[i][i] = 0
    transposed = [list(column) for column in zip(*grid)]
    return diagonal + _corner_path(grid) + _corner_path(transposed)


def soup_servings(n: int) -> float:
    """Probability that soup A empties first, plus half the chance both empty together."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n >= _SOUP_CERTAIN:
        return 1.0
    units = (n + _SOUP_UNIT - 1) // _SOUP_UNIT

    @lru_cache(maxsize=None)
    def chance(a: int, b: int) -> float:
        if a <= 0 and b <= 0:
            return 0.5
        if a <= 0:
            return 1.0
        if b <= 0:
            return 0.0
        return 0.25 * sum(chance(a - serve, b - (4 - serve)) for serve in (4, 3, 2, 1))

    return chance(units, units)