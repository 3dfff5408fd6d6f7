"""Single-source and all-pairs shortest paths on weighted graphs."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

INF = math.inf


def get_path(parent: Sequence[int | None], dst: int) -> list[int]:
    """Follow ``parent`` links from ``dst`` back to the root and return the path."""
    path: list[int] = []
    node: int | None = dst
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path


class WeightedGraph:
    """An undirected graph with non-negative edge weights."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self.n = n
        self.adj: list[list[tuple[float, int]]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int, w: float) -> None:
        """Add an undirected edge of weight ``w``."""
        self.adj[u].append((w, v))
        self.adj[v].append((w, u))

    def dijkstra(self, src: int) -> tuple[list[float], list[int | None]]:
        """Return distances from ``src`` and each vertex's predecessor.

        Unreachable vertices have distance ``inf`` and predecessor ``None``.
        """
        dist: list[float] = [INF] * self.n
        parent: list[int | None] = [None] * self.n
        dist[src] = 0
        heap: list[tuple[float, int]] = [(0, src)]
        while heap:
            d, u = heapq.heappop(heap)
            if d > dist[u]:
                continue
            for w, v in self.adj[u]:
                candidate = d + w
                if candidate < dist[v]:
                    dist[v] = candidate
                    parent[v] = u
                    heapq.heappush(heap, (candidate, v))
        return dist, parent

    def dijkstra_distances(self, src: int) -> list[float]:
        """Return only the distances from ``src``."""
        return self.dijkstra(src)[0]

    def all_pairs(self) -> list[list[float]]:
        """Return the distance matrix, running Dijkstra from every vertex."""
        return [self.dijkstra_distances(i) for i in range(self.n)]


@dataclass
class BellmanFordResult:
    """Distances from the source and whether a negative cycle was found."""

    dist: list[float]
    has_negative_cycle: bool


def bellman_ford(
    n: int, edges: Iterable[tuple[int, int, float]], src: int
) -> BellmanFordResult:
    """Shortest paths over directed ``(u, v, w)`` edges that may be negative."""
    edge_list = list(edges)
    dist: list[float] = [INF] * n
    dist[src] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in edge_list:
            if dist[u] != INF and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    negative = any(
        dist[u] != INF and dist[u] + w < dist[v] for u, v, w in edge_list
    )
    return BellmanFordResult(dist, negative)


def spfa(
    n: int, adj: Sequence[Iterable[tuple[int, float]]], src: int
) -> list[float]:
    """Queue-based Bellman-Ford over ``adj[u] = [(v, w), ...]``.

    Raises ``ValueError`` when a negative cycle is reachable from ``src``.
    """
    dist: list[float] = [INF] * n
    edges_used = [0] * n
    in_queue = [False] * n
    dist[src] = 0
    queue = deque([src])
    in_queue[src] = True
    while queue:
        u = queue.popleft()
        in_queue[u] = False
        for v, w in adj[u]:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                edges_used[v] = edges_used[u] + 1
                if edges_used[v] >= n:
                    raise ValueError("negative cycle reachable from the source")
                if not in_queue[v]:
                    queue.append(v)
                    in_queue[v] = True
    return dist


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a weight matrix (``inf`` for no edge)."""
    return floyd_warshall_with_path(dist)[0]


def floyd_warshall_with_path(
    dist: Sequence[Sequence[float]],
) -> tuple[list[list[float]], list[list[int | None]]]:
    """All-pairs distances plus the next hop on each shortest path."""
    d = [list(row) for row in dist]
    n = len(d)
    next_hop: list[list[int | None]] = [
        [j if d[i][j] != INF and i != j else None for j in range(n)] for i in range(n)
    ]
    for k in range(n):
        row_k = d[k]
        for i in range(n):
            row_i = d[i]
            through = row_i[k]
            if through == INF:
                continue
            for j in range(n):
                candidate = through + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate
                    next_hop[i][j] = next_hop[i][k]
    return d, next_hop


def reconstruct_path(
    next_hop: Sequence[Sequence[int | None]], u: int, v: int
) -> list[int]:
    """Rebuild the path from ``u`` to ``v``; ``[]`` when there is none."""
    if next_hop[u][v] is None:
        return []
    path = [u]
    while u != v:
        u = next_hop[u][v]
        path.append(u)
    return path