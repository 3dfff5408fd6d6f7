"""Disjoint-set union with path halving, and problems built on it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class UnionFind:
    """Disjoint sets over the integers ``0..n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n
        self._components = n

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s set."""
        parent = self._parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def _link(self, child: int, root: int) -> None:
        self._parent[child] = root
        self._size[root] += self._size[child]
        self._components -= 1

    def union_by_rank(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y`` by rank; return whether they were apart."""
        px, py = self.find(x), self.find(y)
        if px == py:
            return False
        if self._rank[px] < self._rank[py]:
            px, py = py, px
        if self._rank[px] == self._rank[py]:
            self._rank[px] += 1
        self._link(py, px)
        return True

    def union_by_size(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y`` by size; return whether they were apart."""
        px, py = self.find(x), self.find(y)
        if px == py:
            return False
        if self._size[px] < self._size[py]:
            px, py = py, px
        self._link(py, px)
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def component_size(self, x: int) -> int:
        """Return the size of ``x``'s set."""
        return self._size[self.find(x)]

    def components(self) -> int:
        """Return the number of disjoint sets."""
        return self._components


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count 4-connected groups of ``'1'`` cells."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    uf = UnionFind(rows * cols)
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] != "1":
                continue
            here = r * cols + c
            if r + 1 < rows and grid[r + 1][c] == "1":
                uf.union_by_rank(here, here + cols)
            if c + 1 < cols and grid[r][c + 1] == "1":
                uf.union_by_rank(here, here + 1)
    return len(
        {
            uf.find(r * cols + c)
            for r in range(rows)
            for c in range(cols)
            if grid[r][c] == "1"
        }
    )


def detect_cycle(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Return whether an undirected graph on ``n`` vertices has a cycle."""
    uf = UnionFind(n)
    return any(not uf.union_by_rank(u, v) for u, v in edges)


def kruskal_mst_weight(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning forest of ``(u, v, w)`` edges."""
    uf = UnionFind(n)
    return sum(
        w for u, v, w in sorted(edges, key=lambda e: e[2]) if uf.union_by_rank(u, v)
    )


def accounts_merge(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge ``[name, email, ...]`` accounts that share an email.

    Each result is the name followed by the sorted emails; groups come in
    the order their first email was seen.
    """
    email_id: dict[str, int] = {}
    email_name: dict[str, str] = {}
    for name, *emails in accounts:
        for email in emails:
            if email not in email_id:
                email_id[email] = len(email_id)
                email_name[email] = name
    uf = UnionFind(len(email_id))
    for _, *emails in accounts:
        for email in emails[1:]:
            uf.union_by_rank(email_id[emails[0]], email_id[email])
    groups: dict[int, list[str]] = {}
    for email, eid in email_id.items():
        groups.setdefault(uf.find(eid), []).append(email)
    result = []
    for emails in groups.values():
        emails.sort()
        result.append([email_name[emails[0]], *emails])
    return result