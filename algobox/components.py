"""Strongly connected components, articulation points and bridges."""

from __future__ import annotations

from collections.abc import Iterator


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("vertex count must be non-negative")


class Kosaraju:
    """Directed graph whose SCCs are found with Kosaraju's two passes."""

    def __init__(self, n: int) -> None:
        _check_size(n)
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._radj: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge from ``u`` to ``v``."""
        self._adj[u].append(v)
        self._radj[v].append(u)

    def _finish_order(self) -> list[int]:
        visited = [False] * self.n
        finished: list[int] = []
        for start in range(self.n):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adj[start]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    if not visited[v]:
                        visited[v] = True
                        stack.append((v, iter(self._adj[v])))
                        break
                else:
                    finished.append(u)
                    stack.pop()
        return finished

    def _collect(self, start: int, visited: list[bool]) -> list[int]:
        visited[start] = True
        component = [start]
        stack = [iter(self._radj[start])]
        while stack:
            for v in stack[-1]:
                if not visited[v]:
                    visited[v] = True
                    component.append(v)
                    stack.append(iter(self._radj[v]))
                    break
            else:
                stack.pop()
        return component

    def strongly_connected_components(self) -> list[list[int]]:
        """Return the SCCs, each in discovery order on the reversed graph."""
        visited = [False] * self.n
        return [
            self._collect(u, visited)
            for u in reversed(self._finish_order())
            if not visited[u]
        ]


class Tarjan:
    """Directed graph whose SCCs are found with Tarjan's single pass."""

    def __init__(self, n: int) -> None:
        _check_size(n)
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge from ``u`` to ``v``."""
        self._adj[u].append(v)

    def strongly_connected_components(self) -> list[list[int]]:
        """Return the SCCs in the order they complete, sinks first."""
        disc: list[int | None] = [None] * self.n
        low = [0] * self.n
        on_stack = [False] * self.n
        pending: list[int] = []
        sccs: list[list[int]] = []
        timer = 0

        for root in range(self.n):
            if disc[root] is not None:
                continue
            disc[root] = low[root] = timer
            timer += 1
            pending.append(root)
            on_stack[root] = True
            stack = [(root, iter(self._adj[root]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    if disc[v] is None:
                        disc[v] = low[v] = timer
                        timer += 1
                        pending.append(v)
                        on_stack[v] = True
                        stack.append((v, iter(self._adj[v])))
                        break
                    if on_stack[v]:
                        low[u] = min(low[u], disc[v])
                else:
                    stack.pop()
                    if low[u] == disc[u]:
                        component: list[int] = []
                        while True:
                            w = pending.pop()
                            on_stack[w] = False
                            component.append(w)
                            if w == u:
                                break
                        sccs.append(component)
                    if stack:
                        parent = stack[-1][0]
                        low[parent] = min(low[parent], low[u])
        return sccs


class ArticulationGraph:
    """Undirected graph for finding cut vertices and cut edges."""

    def __init__(self, n: int) -> None:
        _check_size(n)
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int) -> None:
        """Add an undirected edge between ``u`` and ``v``."""
        self._adj[u].append(v)
        self._adj[v].append(u)

    def _lowlink(self) -> tuple[list[int], list[int], list[tuple[int, int]]]:
        """Discovery times, low-links and tree edges in the order children finish."""
        disc: list[int | None] = [None] * self.n
        low = [0] * self.n
        parent: list[int | None] = [None] * self.n
        tree_edges: list[tuple[int, int]] = []
        timer = 0
        for root in range(self.n):
            if disc[root] is not None:
                continue
            disc[root] = low[root] = timer
            timer += 1
            stack = [(root, iter(self._adj[root]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    if disc[v] is None:
                        parent[v] = u
                        disc[v] = low[v] = timer
                        timer += 1
                        stack.append((v, iter(self._adj[v])))
                        break
                    if v != parent[u]:
                        low[u] = min(low[u], disc[v])
                else:
                    stack.pop()
                    p = parent[u]
                    if p is not None:
                        low[p] = min(low[p], low[u])
                        tree_edges.append((p, u))
        return disc, low, tree_edges  # type: ignore[return-value]

    def _roots(self, tree_edges: list[tuple[int, int]]) -> Iterator[int]:
        children = {v for _, v in tree_edges}
        return (u for u in range(self.n) if u not in children)

    def articulation_points(self) -> list[int]:
        """Return the vertices whose removal disconnects their component, ascending."""
        disc, low, tree_edges = self._lowlink()
        roots = set(self._roots(tree_edges))
        root_children: dict[int, int] = {}
        cut: set[int] = set()
        for u, v in tree_edges:
            if u in roots:
                root_children[u] = root_children.get(u, 0) + 1
            elif low[v] >= disc[u]:
                cut.add(u)
        cut.update(r for r, count in root_children.items() if count > 1)
        return sorted(cut)

    def bridges(self) -> list[tuple[int, int]]:
        """Return the edges whose removal disconnects their component."""
        disc, low, tree_edges = self._lowlink()
        return [(u, v) for u, v in tree_edges if low[v] > disc[u]]