"""Disjoint sets, minimum spanning trees and network connection counting."""

from __future__ import annotations

import math
from typing import Iterable, Sequence


class DisjointSet:
    """Union-find over ``0..n-1`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, node: int) -> int:
        """Representative of the set holding ``node``."""
        root = node
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[node] != root:
            self.parent[node], node = root, self.parent[node]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; False if they were already one set."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self.rank[u] < self.rank[v]:
            self.parent[u] = v
        else:
            self.parent[v] = u
            if self.rank[u] == self.rank[v]:
                self.rank[u] += 1
        return True


def kruskal_mst(v: int, edges: Iterable[Sequence[int]]) -> int:
    """Total weight of a minimum spanning forest, by Kruskal's algorithm."""
    sets = DisjointSet(v)
    return sum(
        w
        for a, b, w, *_ in sorted(edges, key=lambda edge: edge[2])
        if sets.union(a, b)
    )


def prim_mst(v: int, adj: Sequence[Iterable[Sequence[int]]]) -> int:
    """Total weight of a minimum spanning tree, by Prim's algorithm.

    ``adj[u]`` lists ``[neighbour, weight]`` pairs. Raises ValueError when the
    graph is not connected.
    """
    if v == 0:
        return 0
    key: list[float] = [math.inf] * v
    in_tree = [False] * v
    key[0] = 0
    for _ in range(v):
        candidates = [
            (key[node], node)
            for node in range(v)
            if not in_tree[node] and key[node] < math.inf
        ]
        if not candidates:
            raise ValueError("graph is not connected")
        _, u = min(candidates)
        in_tree[u] = True
        for nbr, weight, *_ in adj[u]:
            if not in_tree[nbr] and weight < key[nbr]:
                key[nbr] = weight
    return int(sum(key))


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Cables to move so all ``n`` computers connect, or -1 if too few cables."""
    if len(connections) < n - 1:
        return -1
    sets = DisjointSet(n)
    for a, b, *_ in connections:
        sets.union(a, b)
    components = sum(1 for node in range(n) if sets.find(node) == node)
    return components - 1