"""Single-source and all-pairs shortest paths on weighted graphs."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict, deque
from typing import Iterable, Sequence

from dsakit.ordering import topo_sort_dfs

INF = 10**8
"""Sentinel for "no edge" in the matrices taken by :func:`floyd_warshall`."""


def _weighted_adj(
    edges: Iterable[Sequence[int]], *, undirected: bool
) -> defaultdict[int, list[tuple[int, int]]]:
    adj: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, w, *_ in edges:
        adj[u].append((v, w))
        if undirected:
            adj[v].append((u, w))
    return adj


def has_negative_cycle(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Bellman-Ford run from every node not yet reached; True on a negative cycle."""
    edge_list = [(u, v, w) for u, v, w, *_ in edges]
    dist: list[float] = [math.inf] * n
    for src in range(n):
        if dist[src] != math.inf:
            continue
        dist[src] = 0
        for _ in range(n - 1):
            for u, v, w in edge_list:
                if dist[u] + w < dist[v]:
                    dist[v] = dist[u] + w
        if any(dist[u] + w < dist[v] for u, v, w in edge_list):
            return True
    return False


def cheapest_price(
    n: int, flights: Iterable[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Cheapest cost from ``src`` to ``dst`` with at most ``k`` stops, or -1."""
    adj = _weighted_adj(flights, undirected=False)
    min_cost: list[float] = [math.inf] * n
    queue = deque([(src, 0, 0)])
    while queue:
        node, cost, stops = queue.popleft()
        if stops > k:
            continue
        for nbr, weight in adj[node]:
            total = cost + weight
            if total < min_cost[nbr]:
                min_cost[nbr] = total
                queue.append((nbr, total, stops + 1))
    best = min_cost[dst]
    return -1 if best == math.inf else int(best)


def dijkstra(v: int, edges: Iterable[Sequence[int]], src: int) -> list[float]:
    """Distances from ``src`` in an undirected graph; ``math.inf`` where unreachable."""
    adj = _weighted_adj(edges, undirected=True)
    dist: list[float] = [math.inf] * v
    dist[src] = 0
    heap = [(0, src)]
    while heap:
        node_dist, node = heapq.heappop(heap)
        if node_dist > dist[node]:
            continue
        for nbr, weight in adj[node]:
            candidate = node_dist + weight
            if candidate < dist[nbr]:
                dist[nbr] = candidate
                heapq.heappush(heap, (candidate, nbr))
    return dist


def floyd_warshall(dist: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs shortest distances; entries of :data:`INF` or more mean no path.

    The input matrix is left untouched and a new one is returned.
    """
    result = [list(row) for row in dist]
    n = len(result)
    for via in range(n):
        via_row = result[via]
        for row in result:
            to_via = row[via]
            if to_via >= INF:
                continue
            for j in range(n):
                if via_row[j] < INF and to_via + via_row[j] < row[j]:
                    row[j] = to_via + via_row[j]
    return result


def dag_shortest_paths(
    n: int, edges: Iterable[Sequence[int]], src: int
) -> list[float]:
    """Distances from ``src`` in a weighted DAG, relaxed in topological order."""
    edge_list = [tuple(edge) for edge in edges]
    adj = _weighted_adj(edge_list, undirected=False)
    dist: list[float] = [math.inf] * n
    dist[src] = 0
    for node in topo_sort_dfs(n, edge_list):
        if dist[node] == math.inf:
            continue
        for nbr, weight in adj[node]:
            if dist[node] + weight < dist[nbr]:
                dist[nbr] = dist[node] + weight
    return dist