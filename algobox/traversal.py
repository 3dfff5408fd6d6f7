"""Breadth- and depth-first traversal of unweighted graphs."""

from __future__ import annotations

from collections import deque


class Graph:
    """An unweighted graph on the vertices ``0..n-1`` stored as adjacency lists."""

    def __init__(self, n: int, directed: bool = False) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self.n = n
        self.directed = directed
        self.adj: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge from ``u`` to ``v`` (both ways when undirected)."""
        self.adj[u].append(v)
        if not self.directed:
            self.adj[v].append(u)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        visited = [False] * self.n
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self.adj[u]:
                if not visited[v]:
                    visited[v] = True
                    queue.append(v)
        return order

    def shortest_path(self, src: int, dst: int) -> list[int]:
        """Return a path with fewest edges from ``src`` to ``dst``, or ``[]``."""
        parent: list[int | None] = [None] * self.n
        seen = [False] * self.n
        seen[src] = True
        queue = deque([src])
        while queue:
            u = queue.popleft()
            for v in self.adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    queue.append(v)
        if not seen[dst]:
            return []
        path: list[int] = []
        node: int | None = dst
        while node is not None:
            path.append(node)
            node = parent[node]
        path.reverse()
        return path

    def _preorder(self, start: int, visited: list[bool]) -> list[int]:
        visited[start] = True
        order = [start]
        stack = [iter(self.adj[start])]
        while stack:
            for v in stack[-1]:
                if not visited[v]:
                    visited[v] = True
                    order.append(v)
                    stack.append(iter(self.adj[v]))
                    break
            else:
                stack.pop()
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first preorder."""
        return self._preorder(start, [False] * self.n)

    def dfs_iterative(self, start: int) -> list[int]:
        """Depth-first order computed with an explicit stack of vertices."""
        visited = [False] * self.n
        order: list[int] = []
        stack = [start]
        while stack:
            u = stack.pop()
            if visited[u]:
                continue
            visited[u] = True
            order.append(u)
            stack.extend(v for v in reversed(self.adj[u]) if not visited[v])
        return order

    def count_components(self) -> int:
        """Return the number of connected components."""
        visited = [False] * self.n
        count = 0
        for i in range(self.n):
            if not visited[i]:
                count += 1
                self._preorder(i, visited)
        return count

    def has_cycle_undirected(self) -> bool:
        """Return whether the graph, taken as undirected, contains a cycle."""
        visited = [False] * self.n
        for start in range(self.n):
            if visited[start]:
                continue
            visited[start] = True
            stack: list[tuple[int, int | None, object]] = [
                (start, None, iter(self.adj[start]))
            ]
            while stack:
                u, parent, neighbours = stack[-1]
                for v in neighbours:
                    if not visited[v]:
                        visited[v] = True
                        stack.append((v, u, iter(self.adj[v])))
                        break
                    if v != parent:
                        return True
                else:
                    stack.pop()
        return False

    def has_cycle_directed(self) -> bool:
        """Return whether the graph, taken as directed, contains a cycle."""
        white, grey, black = 0, 1, 2
        color = [white] * self.n
        for start in range(self.n):
            if color[start] != white:
                continue
            color[start] = grey
            stack = [(start, iter(self.adj[start]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    if color[v] == grey:
                        return True
                    if color[v] == white:
                        color[v] = grey
                        stack.append((v, iter(self.adj[v])))
                        break
                else:
                    color[u] = black
                    stack.pop()
        return False

    def is_bipartite(self) -> bool:
        """Return whether the vertices can be two-coloured with no edge inside a colour."""
        color: list[int | None] = [None] * self.n
        for start in range(self.n):
            if color[start] is not None:
                continue
            color[start] = 0
            queue = deque([start])
            while queue:
                u = queue.popleft()
                for v in self.adj[u]:
                    if color[v] is None:
                        color[v] = 1 - color[u]
                        queue.append(v)
                    elif color[v] == color[u]:
                        return False
        return True