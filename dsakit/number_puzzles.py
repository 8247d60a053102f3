"""Small number and sequence puzzles."""

from __future__ import annotations

import math
from itertools import accumulate, groupby
from typing import Iterable, Sequence

MOD = 1_000_000_007
_POWER_LIMIT = 30


def factorial(n: int) -> int:
    """n! for non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return math.prod(range(1, n + 1))


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for i in range(num_rows):
        if not rows:
            rows.append([1])
            continue
        prev = rows[-1]
        rows.append([1] + [a + b for a, b in zip(prev, prev[1:])] + [1])
    return rows


def is_power_of_two(n: int) -> bool:
    """True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def reordered_power_of_two(n: int) -> bool:
    """True if the digits of ``n`` can be rearranged into a power of two below 2**30."""
    target = sorted(str(n))
    return any(sorted(str(1 << i)) == target for i in range(_POWER_LIMIT))


def product_queries(n: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """Products, modulo 1e9+7, of ranges of the powers of two that sum to ``n``."""
    if n <= 0:
        raise ValueError("n must be positive")
    exponents = [bit for bit in range(n.bit_length()) if n >> bit & 1]
    prefix = list(accumulate(exponents, initial=0))
    answers: list[int] = []
    for left, right, *_ in queries:
        if not 0 <= left <= right < len(exponents):
            raise IndexError(f"query {left}..{right} out of range")
        answers.append(pow(2, prefix[right + 1] - prefix[left], MOD))
    return answers


def largest_good_integer(s: str) -> str:
    """Largest substring of three equal characters, or '' if there is none."""
    return max(
        (a + b + c for a, b, c in zip(s, s[1:], s[2:]) if a == b == c),
        default="",
    )


def zero_filled_subarrays(nums: Iterable[int]) -> int:
    """Number of contiguous subarrays made only of zeros."""
    total = 0
    for value, group in groupby(nums):
        if value == 0:
            run = sum(1 for _ in group)
            total += run * (run + 1) // 2
    return total