"""Topological ordering of directed acyclic graphs."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence


class TopoGraph:
    """A directed graph on the vertices ``0..n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self.n = n
        self.adj: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge from ``u`` to ``v``."""
        self.adj[u].append(v)

    def _in_degrees(self) -> list[int]:
        degree = [0] * self.n
        for targets in self.adj:
            for v in targets:
                degree[v] += 1
        return degree

    def kahn_sort(self) -> list[int]:
        """Topological order by Kahn's algorithm.

        Raises ``ValueError`` when the graph has a cycle.
        """
        degree = self._in_degrees()
        queue = deque(i for i, d in enumerate(degree) if d == 0)
        order: list[int] = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self.adj[u]:
                degree[v] -= 1
                if degree[v] == 0:
                    queue.append(v)
        if len(order) != self.n:
            raise ValueError("graph has a cycle")
        return order

    def dfs_sort(self) -> list[int]:
        """Topological order as reversed depth-first finishing order."""
        visited = [False] * self.n
        finished: list[int] = []
        for start in range(self.n):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self.adj[start]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    if not visited[v]:
                        visited[v] = True
                        stack.append((v, iter(self.adj[v])))
                        break
                else:
                    finished.append(u)
                    stack.pop()
        finished.reverse()
        return finished

    def shortest_path_dag(
        self, src: int, weighted_adj: Sequence[Iterable[tuple[int, float]]]
    ) -> list[float]:
        """Shortest distances from ``src`` by relaxing ``weighted_adj`` in topological order.

        ``weighted_adj[u]`` lists ``(v, w)`` pairs; unreachable vertices get ``inf``.
        """
        dist: list[float] = [math.inf] * self.n
        dist[src] = 0
        for u in self.dfs_sort():
            if dist[u] == math.inf:
                continue
            for v, w in weighted_adj[u]:
                if dist[u] + w < dist[v]:
                    dist[v] = dist[u] + w
        return dist

    def all_topological_sorts(self) -> list[list[int]]:
        """Return every topological order, smaller vertices chosen first."""
        degree = self._in_degrees()
        placed = [False] * self.n
        current: list[int] = []
        result: list[list[int]] = []

        def extend() -> None:
            found = False
            for i in range(self.n):
                if degree[i] == 0 and not placed[i]:
                    placed[i] = True
                    current.append(i)
                    for v in self.adj[i]:
                        degree[v] -= 1
                    extend()
                    for v in self.adj[i]:
                        degree[v] += 1
                    current.pop()
                    placed[i] = False
                    found = True
            if not found:
                result.append(list(current))

        extend()
        return result