"""Topological orderings, course scheduling, alien alphabets and strong components."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Callable, Iterable, Iterator, Sequence

_ALPHABET = 26
_UNSEEN, _GRAY, _BLACK = 0, 1, 2


def _post_order(
    start: int, neighbours: Callable[[int], Iterable[int]], visited: set[int]
) -> Iterator[int]:
    """Yield nodes reachable from ``start`` in depth-first post-order."""
    visited.add(start)
    stack = [(start, iter(neighbours(start)))]
    while stack:
        node, nbrs = stack[-1]
        for nbr in nbrs:
            if nbr not in visited:
                visited.add(nbr)
                stack.append((nbr, iter(neighbours(nbr))))
                break
        else:
            stack.pop()
            yield node


def _directed_adj(edges: Iterable[Sequence[int]]) -> defaultdict[int, list[int]]:
    adj: defaultdict[int, list[int]] = defaultdict(list)
    for u, v, *_ in edges:
        adj[u].append(v)
    return adj


def _kahn(v: int, adj: defaultdict[int, list[int]]) -> list[int]:
    indegree = [0] * v
    for nbrs in adj.values():
        for nbr in nbrs:
            indegree[nbr] += 1
    queue = deque(node for node in range(v) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        front = queue.popleft()
        order.append(front)
        for nbr in adj[front]:
            indegree[nbr] -= 1
            if indegree[nbr] == 0:
                queue.append(nbr)
    return order


def topo_sort_dfs(v: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Topological order as the reverse of depth-first finishing order."""
    adj = _directed_adj(edges)
    visited: set[int] = set()
    finished: list[int] = []
    for start in range(v):
        if start not in visited:
            finished.extend(_post_order(start, adj.__getitem__, visited))
    return finished[::-1]


def topo_sort_kahn(v: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Kahn's algorithm; nodes on a cycle are left out of the result."""
    return _kahn(v, _directed_adj(edges))


def course_order(n: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Order courses so that each ``[course, prereq]`` pair has prereq first.

    Returns an empty list when no such order exists.
    """
    adj: defaultdict[int, list[int]] = defaultdict(list)
    for course, prereq, *_ in prerequisites:
        adj[prereq].append(course)
    order = _kahn(n, adj)
    return order if len(order) == n else []


def _letter(c: str) -> int:
    index = ord(c) - ord("a")
    if not 0 <= index < _ALPHABET:
        raise ValueError(f"not a lowercase letter: {c!r}")
    return index


def _finish_or_cycle(
    start: int, adj: defaultdict[int, list[int]], state: list[int], finished: list[int]
) -> bool:
    """Depth-first visit appending finished nodes; False on a back edge."""
    state[start] = _GRAY
    stack = [(start, iter(adj[start]))]
    while stack:
        node, nbrs = stack[-1]
        for nbr in nbrs:
            if state[nbr] == _GRAY:
                return False
            if state[nbr] == _UNSEEN:
                state[nbr] = _GRAY
                stack.append((nbr, iter(adj[nbr])))
                break
        else:
            stack.pop()
            state[node] = _BLACK
            finished.append(node)
    return True


def alien_order(words: Sequence[str]) -> str:
    """Derive a letter order consistent with a sorted alien dictionary.

    Returns an empty string when the words admit no consistent order.
    """
    present = [False] * _ALPHABET
    for word in words:
        for c in word:
            present[_letter(c)] = True

    adj: defaultdict[int, list[int]] = defaultdict(list)
    for first, second in zip(words, words[1:]):
        if len(first) > len(second) and first.startswith(second):
            return ""
        for a, b in zip(first, second):
            if a != b:
                adj[_letter(a)].append(_letter(b))
                break

    state = [_UNSEEN] * _ALPHABET
    finished: list[int] = []
    for letter in range(_ALPHABET):
        if present[letter] and state[letter] == _UNSEEN:
            if not _finish_or_cycle(letter, adj, state, finished):
                return ""
    return "".join(chr(ord("a") + i) for i in reversed(finished))


def count_strongly_connected(adj: Sequence[Sequence[int]]) -> int:
    """Number of strongly connected components, by Kosaraju's algorithm."""
    visited: set[int] = set()
    finished: list[int] = []
    for start in range(len(adj)):
        if start not in visited:
            finished.extend(_post_order(start, adj.__getitem__, visited))

    transpose: defaultdict[int, list[int]] = defaultdict(list)
    for node, nbrs in enumerate(adj):
        for nbr in nbrs:
            transpose[nbr].append(node)

    visited = set()
    count = 0
    for node in reversed(finished):
        if node not in visited:
            count += 1
            for _ in _post_order(node, transpose.__getitem__, visited):
                pass
    return count