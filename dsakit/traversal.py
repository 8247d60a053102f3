"""Graph construction, breadth/depth-first traversal, cloning and bipartite checks."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence


class Graph:
    """Adjacency-list graph whose nodes are integer labels."""

    def __init__(self) -> None:
        self.adj: dict[int, list[int]] = {}

    def add_edge(self, u: int, v: int, directed: bool = False) -> None:
        """Add an edge u -> v, and v -> u as well unless the graph is directed."""
        self.adj.setdefault(u, []).append(v)
        if not directed:
            self.adj.setdefault(v, []).append(u)

    def format_adjacency(self) -> str:
        """Render one line per node: ``node-> n1 n2 ``."""
        return "\n".join(
            f"{node}-> " + "".join(f"{nbr} " for nbr in nbrs)
            for node, nbrs in self.adj.items()
        )


@dataclass(eq=False)
class GraphNode:
    """A node of an explicitly linked graph; identity defines equality."""

    val: int = 0
    neighbors: list["GraphNode"] = field(default_factory=list, repr=False)


def bfs(adj: Sequence[Sequence[int]]) -> list[int]:
    """Breadth-first order of the nodes reachable from node 0."""
    if not adj:
        return []
    order: list[int] = []
    seen = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nbr in adj[node]:
            if nbr not in seen:
                seen.add(nbr)
                queue.append(nbr)
    return order


def dfs(adj: Sequence[Sequence[int]]) -> list[int]:
    """Depth-first preorder of the nodes reachable from node 0."""
    if not adj:
        return []
    order = [0]
    seen = {0}
    stack = [iter(adj[0])]
    while stack:
        for nbr in stack[-1]:
            if nbr not in seen:
                seen.add(nbr)
                order.append(nbr)
                stack.append(iter(adj[nbr]))
                break
        else:
            stack.pop()
    return order


def shortest_path_unweighted(adj: Sequence[Sequence[int]], src: int) -> list[int]:
    """Edge-count distance from ``src`` to every node; -1 where unreachable."""
    dist = [-1] * len(adj)
    dist[src] = 0
    queue = deque([src])
    while queue:
        node = queue.popleft()
        for nbr in adj[node]:
            if dist[nbr] == -1:
                dist[nbr] = dist[node] + 1
                queue.append(nbr)
    return dist


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Deep-copy the graph reachable from ``node`` using depth-first discovery."""
    if node is None:
        return None
    clones: dict[GraphNode, GraphNode] = {node: GraphNode(node.val)}
    stack = [node]
    while stack:
        current = stack.pop()
        for nbr in current.neighbors:
            if nbr not in clones:
                clones[nbr] = GraphNode(nbr.val)
                stack.append(nbr)
    for original, copy in clones.items():
        copy.neighbors = [clones[nbr] for nbr in original.neighbors]
    return clones[node]


def clone_graph_bfs(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Deep-copy the graph reachable from ``node`` using breadth-first discovery."""
    if node is None:
        return None
    clones: dict[GraphNode, GraphNode] = {node: GraphNode(node.val)}
    queue = deque([node])
    while queue:
        current = queue.popleft()
        for nbr in current.neighbors:
            if nbr not in clones:
                clones[nbr] = GraphNode(nbr.val)
                queue.append(nbr)
            clones[current].neighbors.append(clones[nbr])
    return clones[node]


def is_bipartite(v: int, edges: Iterable[Sequence[int]]) -> bool:
    """Two-colour the component containing node 0 of an undirected graph."""
    adj: defaultdict[int, list[int]] = defaultdict(list)
    for a, b, *_ in edges:
        adj[a].append(b)
        adj[b].append(a)

    colour = {0: 0}
    queue = deque([0])
    while queue:
        front = queue.popleft()
        own = colour[front]
        for nbr in adj[front]:
            if nbr not in colour:
                colour[nbr] = 1 - own
                queue.append(nbr)
            elif colour[nbr] == own:
                return False
    return True