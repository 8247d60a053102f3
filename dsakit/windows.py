"""Sliding-window and queue-driven array and string problems."""

from __future__ import annotations

import heapq
import math
from collections import Counter, deque
from typing import Any, Iterable, Sequence


def _check_window(arr: Sequence[Any], k: int) -> None:
    if not 1 <= k <= len(arr):
        raise ValueError(f"window size {k} out of range for {len(arr)} items")


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Index of the station from which a full circuit is possible, or -1."""
    deficit = 0
    balance = 0
    start = 0
    for i, (fuel, spend) in enumerate(zip(gas, cost)):
        balance += fuel - spend
        if balance < 0:
            deficit += balance
            balance = 0
            start = i + 1
    return start if deficit + balance >= 0 else -1


def first_negative_in_windows(arr: Sequence[int], k: int) -> list[int]:
    """First negative number of every window of size ``k``; 0 where there is none."""
    _check_window(arr, k)
    negatives: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(arr):
        if value < 0:
            negatives.append(i)
        if i >= k - 1:
            while negatives and negatives[0] <= i - k:
                negatives.popleft()
            result.append(arr[negatives[0]] if negatives else 0)
    return result


def min_value_after_removals(s: str, k: int) -> int:
    """Smallest sum of squared character counts after removing ``k`` characters."""
    heap = [-count for count in Counter(s).values()]
    heapq.heapify(heap)
    for _ in range(k):
        if not heap:
            break
        count = -heapq.heappop(heap) - 1
        if count > 0:
            heapq.heappush(heap, -count)
    return sum(count * count for count in heap)


def interleave_halves(items: Iterable[Any]) -> list[Any]:
    """Interleave the first half of ``items`` with the second half.

    With an odd number of items the second half is the longer one, and its
    final item is left out of the result.
    """
    values = list(items)
    half = len(values) // 2
    first, second = values[:half], values[half:]
    return [item for pair in zip(first, second) for item in pair]


def max_of_subarrays(arr: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of size ``k``; empty when ``k`` exceeds the length."""
    if k < 1:
        raise ValueError("window size must be positive")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(arr):
        if window and window[0] <= i - k:
            window.popleft()
        while window and value >= arr[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(arr[window[0]])
    return result


def first_non_repeating(s: str) -> str:
    """For each prefix, its first non-repeating character, or '#' if none."""
    counts: Counter[str] = Counter()
    pending: deque[str] = deque()
    out: list[str] = []
    for ch in s:
        counts[ch] += 1
        pending.append(ch)
        while pending and counts[pending[0]] > 1:
            pending.popleft()
        out.append(pending[0] if pending else "#")
    return "".join(out)


def sum_of_window_min_max(arr: Sequence[int], k: int) -> int:
    """Sum over all windows of size ``k`` of the window's maximum plus minimum."""
    _check_window(arr, k)
    maxima: deque[int] = deque()
    minima: deque[int] = deque()
    total = 0
    for i, value in enumerate(arr):
        while maxima and maxima[0] <= i - k:
            maxima.popleft()
        while minima and minima[0] <= i - k:
            minima.popleft()
        while maxima and arr[maxima[-1]] <= value:
            maxima.pop()
        while minima and arr[minima[-1]] >= value:
            minima.pop()
        maxima.append(i)
        minima.append(i)
        if i >= k - 1:
            total += arr[maxima[0]] + arr[minima[0]]
    return total


def longest_unique_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, ch in enumerate(s):
        if last_seen.get(ch, -1) >= left:
            left = last_seen[ch] + 1
        last_seen[ch] = right
        best = max(best, right - left + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` containing every character of ``t`` with multiplicity."""
    if not t:
        return ""
    need: Counter[str] = Counter(t)
    missing = len(t)
    left = 0
    best_len = math.inf
    best_start = -1
    for right, ch in enumerate(s):
        if need[ch] > 0:
            missing -= 1
        need[ch] -= 1
        while missing == 0:
            if right - left + 1 < best_len:
                best_len = right - left + 1
                best_start = left
            need[s[left]] += 1
            if need[s[left]] > 0:
                missing += 1
            left += 1
    if best_start == -1:
        return ""
    return s[best_start:best_start + int(best_len)]