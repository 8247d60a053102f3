"""Bridges and articulation points of undirected graphs via low-link values."""

from __future__ import annotations

from collections import defaultdict
from itertools import count
from typing import Iterable, Sequence


def _low_link(
    n: int, edges: Iterable[Sequence[int]]
) -> tuple[dict[int, int], dict[int, int], list[tuple[int, int]], set[int]]:
    """Depth-first search over nodes ``0..n-1``.

    Returns discovery times, low-link values, tree edges as (parent, child)
    and the set of search roots.
    """
    adj: defaultdict[int, list[int]] = defaultdict(list)
    for u, v, *_ in edges:
        adj[u].append(v)
        adj[v].append(u)

    disc: dict[int, int] = {}
    low: dict[int, int] = {}
    tree_edges: list[tuple[int, int]] = []
    roots: set[int] = set()
    timer = count()

    for root in range(n):
        if root in disc:
            continue
        roots.add(root)
        disc[root] = low[root] = next(timer)
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, parent, nbrs = stack[-1]
            for nbr in nbrs:
                if nbr == parent:
                    continue
                if nbr in disc:
                    low[node] = min(low[node], disc[nbr])
                else:
                    disc[nbr] = low[nbr] = next(timer)
                    tree_edges.append((node, nbr))
                    stack.append((nbr, node, iter(adj[nbr])))
                    break
            else:
                stack.pop()
                if stack:
                    above = stack[-1][0]
                    low[above] = min(low[above], low[node])
    return disc, low, tree_edges, roots


def is_bridge(v: int, edges: Iterable[Sequence[int]], c: int, d: int) -> bool:
    """True if the edge between ``c`` and ``d`` is a bridge of the graph."""
    disc, low, tree_edges, _ = _low_link(v, edges)
    return any(
        low[child] > disc[parent] and {parent, child} == {c, d}
        for parent, child in tree_edges
    )


def articulation_points(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Sorted articulation points of an undirected graph on nodes ``0..n-1``."""
    disc, low, tree_edges, roots = _low_link(n, edges)
    points: set[int] = set()
    children: defaultdict[int, int] = defaultdict(int)
    for parent, child in tree_edges:
        if parent in roots:
            children[parent] += 1
        elif low[child] >= disc[parent]:
            points.add(parent)
    points.update(root for root, total in children.items() if total > 1)
    return sorted(points)