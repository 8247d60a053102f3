"""Segment tree answering range-minimum queries."""

from __future__ import annotations

from typing import Sequence


class MinSegmentTree:
    """Static segment tree over a sequence of numbers, answering range minima."""

    def __init__(self, values: Sequence[int]) -> None:
        self._n = len(values)
        self._tree: list[int] = [0] * (4 * max(self._n, 1))
        if self._n:
            self._build(values, 0, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, values: Sequence[int], idx: int, start: int, end: int) -> None:
        if start == end:
            self._tree[idx] = values[start]
            return
        mid = (start + end) // 2
        left, right = 2 * idx + 1, 2 * idx + 2
        self._build(values, left, start, mid)
        self._build(values, right, mid + 1, end)
        self._tree[idx] = min(self._tree[left], self._tree[right])

    def _query(self, idx: int, start: int, end: int, qs: int, qe: int) -> int | None:
        if qs > end or qe < start:
            return None
        if qs <= start and end <= qe:
            return self._tree[idx]
        mid = (start + end) // 2
        parts = [
            part
            for part in (
                self._query(2 * idx + 1, start, mid, qs, qe),
                self._query(2 * idx + 2, mid + 1, end, qs, qe),
            )
            if part is not None
        ]
        return min(parts)

    def query(self, qs: int, qe: int) -> int:
        """Minimum over indices ``qs..qe`` inclusive, clipped to the sequence.

        Raises ValueError when the range holds no element.
        """
        if qs > qe or qe < 0 or qs >= self._n:
            raise ValueError(f"range {qs}..{qe} holds no element")
        result = self._query(0, 0, self._n - 1, qs, qe)
        assert result is not None
        return result