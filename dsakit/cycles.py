"""Cycle detection for undirected and directed graphs."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable, Sequence

_GRAY = 1
_BLACK = 2


def _undirected_adj(edges: Iterable[Sequence[int]]) -> defaultdict[int, list[int]]:
    adj: defaultdict[int, list[int]] = defaultdict(list)
    for u, v, *_ in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _directed_adj(edges: Iterable[Sequence[int]]) -> defaultdict[int, list[int]]:
    adj: defaultdict[int, list[int]] = defaultdict(list)
    for u, v, *_ in edges:
        adj[u].append(v)
    return adj


def has_cycle_undirected_bfs(v: int, edges: Iterable[Sequence[int]]) -> bool:
    """Detect a cycle in an undirected graph with breadth-first search."""
    adj = _undirected_adj(edges)
    visited: set[int] = set()
    parent: dict[int, int] = {}
    for start in range(v):
        if start in visited:
            continue
        visited.add(start)
        parent[start] = -1
        queue = deque([start])
        while queue:
            front = queue.popleft()
            for nbr in adj[front]:
                if nbr in visited:
                    if nbr != parent[front]:
                        return True
                else:
                    visited.add(nbr)
                    parent[nbr] = front
                    queue.append(nbr)
    return False


def has_cycle_undirected_dfs(v: int, edges: Iterable[Sequence[int]]) -> bool:
    """Detect a cycle in an undirected graph with depth-first search."""
    adj = _undirected_adj(edges)
    visited: set[int] = set()
    for start in range(v):
        if start in visited:
            continue
        visited.add(start)
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            node, parent, nbrs = stack[-1]
            for nbr in nbrs:
                if nbr not in visited:
                    visited.add(nbr)
                    stack.append((nbr, node, iter(adj[nbr])))
                    break
                if nbr != parent:
                    return True
            else:
                stack.pop()
    return False


def has_cycle_directed_kahn(v: int, edges: Iterable[Sequence[int]]) -> bool:
    """Detect a cycle in a directed graph by counting Kahn's topological order."""
    adj = _directed_adj(edges)
    indegree = [0] * v
    for nbrs in adj.values():
        for nbr in nbrs:
            indegree[nbr] += 1

    queue = deque(node for node in range(v) if indegree[node] == 0)
    processed = 0
    while queue:
        front = queue.popleft()
        processed += 1
        for nbr in adj[front]:
            indegree[nbr] -= 1
            if indegree[nbr] == 0:
                queue.append(nbr)
    return processed != v


def has_cycle_directed_dfs(v: int, edges: Iterable[Sequence[int]]) -> bool:
    """Detect a cycle in a directed graph via a back edge to the current path."""
    adj = _directed_adj(edges)
    state: dict[int, int] = {}
    for start in range(v):
        if start in state:
            continue
        state[start] = _GRAY
        stack = [(start, iter(adj[start]))]
        while stack:
            node, nbrs = stack[-1]
            for nbr in nbrs:
                seen = state.get(nbr)
                if seen is None:
                    state[nbr] = _GRAY
                    stack.append((nbr, iter(adj[nbr])))
                    break
                if seen == _GRAY:
                    return True
            else:
                stack.pop()
                state[node] = _BLACK
    return False