"""Maximum flow (Edmonds-Karp and Dinic) and bipartite matching."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass


class FlowNetwork:
    """A capacity matrix solved with Edmonds-Karp; flows update it in place."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self.n = n
        self._cap = [[0] * n for _ in range(n)]
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int, capacity: int) -> None:
        """Add ``capacity`` to the edge from ``u`` to ``v``."""
        self._cap[u][v] += capacity
        self._adj[u].append(v)
        self._adj[v].append(u)

    def _augmenting_path(self, s: int, t: int) -> list[int | None] | None:
        parent: list[int | None] = [None] * self.n
        visited = [False] * self.n
        visited[s] = True
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for v in self._adj[u]:
                if not visited[v] and self._cap[u][v] > 0:
                    parent[v] = u
                    visited[v] = True
                    if v == t:
                        return parent
                    queue.append(v)
        return None

    def max_flow(self, s: int, t: int) -> int:
        """Push as much flow as possible from ``s`` to ``t`` and return it.

        The residual capacities remain, so a second call adds only what is left.
        """
        flow = 0
        while (parent := self._augmenting_path(s, t)) is not None:
            path: list[tuple[int, int]] = []
            v = t
            while v != s:
                u = parent[v]
                path.append((u, v))
                v = u
            pushed = min(self._cap[u][v] for u, v in path)
            for u, v in path:
                self._cap[u][v] -= pushed
                self._cap[v][u] += pushed
            flow += pushed
        return flow

    def min_cut(self, s: int, t: int) -> set[int]:
        """Saturate the network and return the vertices still reachable from ``s``."""
        self.max_flow(s, t)
        reachable = {s}
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for v in self._adj[u]:
                if v not in reachable and self._cap[u][v] > 0:
                    reachable.add(v)
                    queue.append(v)
        return reachable


@dataclass
class _Arc:
    to: int
    rev: int
    cap: int


class DinicNetwork:
    """A residual graph of arcs solved with Dinic's blocking flows."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self.n = n
        self._graph: list[list[_Arc]] = [[] for _ in range(n)]
        self._level: list[int] = [-1] * n
        self._next: list[int] = [0] * n

    def add_edge(self, u: int, v: int, capacity: int) -> None:
        """Add an edge from ``u`` to ``v`` together with its reverse arc."""
        self._graph[u].append(_Arc(v, len(self._graph[v]), capacity))
        self._graph[v].append(_Arc(u, len(self._graph[u]) - 1, 0))

    def _build_levels(self, s: int, t: int) -> bool:
        level = [-1] * self.n
        level[s] = 0
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for arc in self._graph[u]:
                if arc.cap > 0 and level[arc.to] < 0:
                    level[arc.to] = level[u] + 1
                    queue.append(arc.to)
        self._level = level
        return level[t] >= 0

    def _push(self, u: int, t: int, limit: float) -> int:
        if u == t:
            return int(limit)
        arcs = self._graph[u]
        while self._next[u] < len(arcs):
            arc = arcs[self._next[u]]
            if arc.cap > 0 and self._level[u] + 1 == self._level[arc.to]:
                pushed = self._push(arc.to, t, min(limit, arc.cap))
                if pushed > 0:
                    arc.cap -= pushed
                    self._graph[arc.to][arc.rev].cap += pushed
                    return pushed
            self._next[u] += 1
        return 0

    def max_flow(self, s: int, t: int) -> int:
        """Push as much flow as possible from ``s`` to ``t`` and return it."""
        if s == t:
            return 0
        flow = 0
        while self._build_levels(s, t):
            self._next = [0] * self.n
            while (pushed := self._push(s, t, math.inf)) > 0:
                flow += pushed
        return flow


class BipartiteMatching:
    """Maximum matching between ``left`` and ``right`` vertices by augmenting paths."""

    def __init__(self, left: int, right: int) -> None:
        if left < 0 or right < 0:
            raise ValueError("side sizes must be non-negative")
        self.left = left
        self.right = right
        self._adj: list[list[int]] = [[] for _ in range(left)]

    def add_edge(self, u: int, v: int) -> None:
        """Allow left vertex ``u`` to be matched with right vertex ``v``."""
        if not 0 <= v < self.right:
            raise IndexError("right vertex out of range")
        self._adj[u].append(v)

    def max_matching(self) -> int:
        """Return the size of a maximum matching."""
        match_right: list[int | None] = [None] * self.right

        def augment(u: int, visited: list[bool]) -> bool:
            for v in self._adj[u]:
                if visited[v]:
                    continue
                visited[v] = True
                if match_right[v] is None or augment(match_right[v], visited):
                    match_right[v] = u
                    return True
            return False

        return sum(augment(u, [False] * self.right) for u in range(self.left))