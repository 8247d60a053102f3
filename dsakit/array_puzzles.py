"""Array puzzles: basket swaps, fruit picking, runs of ones and subarray ORs."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from itertools import accumulate, groupby
from typing import Sequence


def min_swap_cost(basket1: Sequence[int], basket2: Sequence[int]) -> int:
    """Least cost to make two baskets equal by swapping, or -1 if impossible.

    A swap costs the smaller of the two fruits exchanged.
    """
    if len(basket1) != len(basket2):
        raise ValueError("baskets differ in size")
    if not basket1:
        return 0
    balance = Counter(basket1)
    balance.subtract(basket2)
    smallest = min(balance)
    excess: list[int] = []
    for value in sorted(balance):
        surplus = balance[value]
        if surplus % 2:
            return -1
        excess.extend([value] * (abs(surplus) // 2))
    return sum(min(value, 2 * smallest) for value in excess[: len(excess) // 2])


def longest_subarray_after_deletion(nums: Sequence[int]) -> int:
    """Longest run of ones after deleting exactly one element."""
    best = 0
    left = 0
    zeros = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > 1:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left)
    return best


def max_total_fruits(fruits: Sequence[Sequence[int]], start_pos: int, k: int) -> int:
    """Most fruit collectable within ``k`` steps; ``fruits`` is sorted ``[position, amount]``."""
    positions = [position for position, _ in fruits]
    prefix = list(accumulate((amount for _, amount in fruits), initial=0))

    def gather(low: int, high: int) -> int:
        first = bisect_left(positions, low)
        last = bisect_right(positions, high)
        return prefix[last] - prefix[first] if first < last else 0

    return max(
        (
            max(
                gather(start_pos - x, start_pos + k - 2 * x),
                gather(start_pos + 2 * x - k, start_pos + x),
            )
            for x in range(k + 1)
        ),
        default=0,
    )


def max_total_fruits_window(
    fruits: Sequence[Sequence[int]], start_pos: int, k: int
) -> int:
    """Same result as :func:`max_total_fruits`, found with a sliding window."""

    def cost(first: int, last: int) -> int:
        low, high = fruits[first][0], fruits[last][0]
        return high - low + min(abs(start_pos - low), abs(start_pos - high))

    best = 0
    total = 0
    left = 0
    for right, (_, amount) in enumerate(fruits):
        total += amount
        while left <= right and cost(left, right) > k:
            total -= fruits[left][1]
            left += 1
        best = max(best, total)
    return best


def total_fruit(fruits: Sequence[int]) -> int:
    """Longest contiguous stretch holding at most two kinds of fruit."""
    kinds: Counter[int] = Counter()
    left = 0
    best = 0
    for right, kind in enumerate(fruits):
        kinds[kind] += 1
        while len(kinds) > 2:
            dropped = fruits[left]
            kinds[dropped] -= 1
            if kinds[dropped] == 0:
                del kinds[dropped]
            left += 1
        best = max(best, right - left + 1)
    return best


class _MaxTree:
    """Max segment tree that finds the leftmost slot with at least a given value."""

    def __init__(self, values: Sequence[int]) -> None:
        size = 1
        while size < len(values):
            size *= 2
        self._size = size
        self._tree: list[float] = [float("-inf")] * (2 * size)
        self._tree[size:size + len(values)] = values
        for i in reversed(range(1, size)):
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])

    def take_leftmost(self, needed: int) -> bool:
        """Remove the leftmost value of at least ``needed``; False if none exists."""
        if self._tree[1] < needed:
            return False
        i = 1
        while i < self._size:
            i = 2 * i if self._tree[2 * i] >= needed else 2 * i + 1
        self._tree[i] = float("-inf")
        i //= 2
        while i:
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2
        return True


def unplaced_fruits(fruits: Sequence[int], baskets: Sequence[int]) -> int:
    """Fruits left over when each goes into the leftmost free basket large enough."""
    if len(fruits) != len(baskets):
        raise ValueError("fruits and baskets differ in length")
    tree = _MaxTree(baskets)
    return sum(1 for quantity in fruits if not tree.take_leftmost(quantity))


def longest_max_and_subarray(nums: Sequence[int]) -> int:
    """Length of the longest run of the maximum value (the largest bitwise AND)."""
    if not nums:
        return 0
    top = max(nums)
    return max(sum(1 for _ in run) for value, run in groupby(nums) if value == top)


def count_subarray_ors(arr: Sequence[int]) -> int:
    """Number of distinct bitwise ORs over all non-empty contiguous subarrays."""
    seen: set[int] = set()
    ending_here: set[int] = set()
    for value in arr:
        ending_here = {value} | {previous | value for previous in ending_here}
        seen |= ending_here
    return len(seen)