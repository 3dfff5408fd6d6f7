"""Minimum spanning trees: Kruskal, Prim and Borůvka."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from algobox.union_find import UnionFind


@dataclass(frozen=True)
class Edge:
    """An undirected edge between ``u`` and ``v`` of weight ``w``."""

    u: int
    v: int
    w: float


@dataclass
class MSTResult:
    """The edges of a spanning tree and their total weight."""

    edges: list[Edge] = field(default_factory=list)
    total_weight: float = 0


def _as_edges(edges: Iterable[Edge | tuple[int, int, float]]) -> list[Edge]:
    return [e if isinstance(e, Edge) else Edge(*e) for e in edges]


def kruskal(n: int, edges: Iterable[Edge | tuple[int, int, float]]) -> MSTResult:
    """Minimum spanning forest by taking the cheapest edges that join two trees.

    ``edges`` may hold ``Edge`` objects or ``(u, v, w)`` tuples.
    """
    uf = UnionFind(n)
    result = MSTResult()
    for edge in sorted(_as_edges(edges), key=lambda e: e.w):
        if uf.union_by_rank(edge.u, edge.v):
            result.edges.append(edge)
            result.total_weight += edge.w
            if len(result.edges) == n - 1:
                break
    return result


def prim(
    n: int, adj: Sequence[Iterable[tuple[float, int]]], src: int = 0
) -> MSTResult:
    """Minimum spanning tree of ``src``'s component grown from ``src``.

    ``adj[u]`` lists ``(weight, v)`` pairs.
    """
    key: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    key[src] = 0
    heap: list[tuple[float, int]] = [(0, src)]
    result = MSTResult()
    while heap:
        w, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True
        result.total_weight += w
        if parent[u] is not None:
            result.edges.append(Edge(parent[u], u, w))
        for edge_weight, v in adj[u]:
            if not in_tree[v] and edge_weight < key[v]:
                key[v] = edge_weight
                parent[v] = u
                heapq.heappush(heap, (edge_weight, v))
    return result


def boruvka(n: int, edges: Iterable[Edge | tuple[int, int, float]]) -> float:
    """Total weight of a minimum spanning tree found by Borůvka's rounds.

    Raises ``ValueError`` when the graph is not connected.
    """
    edge_list = _as_edges(edges)
    uf = UnionFind(n)
    total: float = 0
    while uf.components() > 1:
        cheapest: dict[int, Edge] = {}
        for edge in edge_list:
            pu, pv = uf.find(edge.u), uf.find(edge.v)
            if pu == pv:
                continue
            for root in (pu, pv):
                best = cheapest.get(root)
                if best is None or edge.w < best.w:
                    cheapest[root] = edge
        if not cheapest:
            raise ValueError("graph is not connected")
        for root in sorted(cheapest):
            edge = cheapest[root]
            if uf.union_by_rank(edge.u, edge.v):
                total += edge.w
    return total