"""Greedy algorithms: fractional knapsack, Huffman codes and job sequencing."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Any, Sequence


def fractional_knapsack(
    values: Sequence[float], weights: Sequence[float], capacity: float
) -> float:
    """Greatest total value when items may be taken in fractions."""
    if len(values) != len(weights):
        raise ValueError("values and weights differ in length")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    if capacity < 0:
        raise ValueError("capacity must not be negative")

    items = sorted(zip(values, weights), key=lambda item: item[0] / item[1], reverse=True)
    total = 0.0
    remaining = capacity
    for value, weight in items:
        if remaining <= 0:
            break
        if weight > remaining:
            total += remaining * value / weight
            remaining = 0
        else:
            total += value
            remaining -= weight
    return total


def huffman_codes(frequencies: Sequence[int]) -> list[str]:
    """Huffman codes for the leaves, in left-to-right (preorder) order.

    Equal weights are merged in the order they entered the queue. A single
    symbol gets the empty code.
    """
    if not frequencies:
        raise ValueError("no symbols to encode")
    order = count()
    heap: list[tuple[int, int, Any]] = [(freq, next(order), None) for freq in frequencies]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_weight, _, left = heapq.heappop(heap)
        right_weight, _, right = heapq.heappop(heap)
        heapq.heappush(heap, (left_weight + right_weight, next(order), (left, right)))

    codes: list[str] = []
    stack = [(heap[0][2], "")]
    while stack:
        node, prefix = stack.pop()
        if node is None:
            codes.append(prefix)
            continue
        left, right = node
        stack.append((right, prefix + "1"))
        stack.append((left, prefix + "0"))
    return codes


def _find_slot(parent: list[int], slot: int) -> int:
    root = slot
    while parent[root] != root:
        root = parent[root]
    while parent[slot] != root:
        parent[slot], slot = root, parent[slot]
    return root


def job_sequencing(deadlines: Sequence[int], profits: Sequence[int]) -> tuple[int, int]:
    """Number of jobs done and their total profit, each job taking one unit slot."""
    if len(deadlines) != len(profits):
        raise ValueError("deadlines and profits differ in length")
    if not deadlines:
        return 0, 0
    latest = max(deadlines)
    parent = list(range(max(latest, 0) + 1))
    done = 0
    profit = 0
    for deadline, gain in sorted(zip(deadlines, profits), key=lambda job: job[1], reverse=True):
        if deadline <= 0:
            continue
        slot = _find_slot(parent, deadline)
        if slot > 0:
            parent[slot] = _find_slot(parent, slot - 1)
            done += 1
            profit += gain
    return done, profit