"""Interval, bitmask, tree and digit dynamic programming."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass
class TreeNode:
    """A node of a rooted tree with any number of children."""

    val: int
    children: list[TreeNode] = field(default_factory=list)


def max_coins(nums: Sequence[int]) -> int:
    """Burst balloons: best total of products of adjacent values."""
    vals = [1, *nums, 1]
    n = len(vals)
    best = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for left in range(n - length):
            right = left + length
            best[left][right] = max(
                best[left][k] + vals[left] * vals[k] * vals[right] + best[k][right]
                for k in range(left + 1, right)
            )
    return best[0][n - 1]


def min_palindrome_cuts(s: str) -> int:
    """Fewest cuts splitting ``s`` into palindromes."""
    n = len(s)
    if n == 0:
        return 0
    pal = [[False] * n for _ in range(n)]
    for i in range(n):
        pal[i][i] = True
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            pal[i][j] = s[i] == s[j] and (length == 2 or pal[i + 1][j - 1])
    cuts: list[int] = []
    for i in range(n):
        if pal[0][i]:
            cuts.append(0)
        else:
            cuts.append(min(cuts[j - 1] + 1 for j in range(1, i + 1) if pal[j][i]))
    return cuts[-1]


def tsp(dist: Sequence[Sequence[float]]) -> float:
    """Cheapest tour from city 0 through every city and back (Held-Karp)."""
    n = len(dist)
    if n < 2:
        raise ValueError("need at least two cities")
    full = (1 << n) - 1
    cost = [[math.inf] * n for _ in range(1 << n)]
    cost[1][0] = 0
    for mask in range(1, 1 << n):
        for u in range(n):
            here = cost[mask][u]
            if not mask >> u & 1 or here == math.inf:
                continue
            for v in range(n):
                if mask >> v & 1:
                    continue
                nxt = mask | (1 << v)
                cost[nxt][v] = min(cost[nxt][v], here + dist[u][v])
    return min(cost[full][u] + dist[u][0] for u in range(1, n))


def assignment_problem(cost: Sequence[Sequence[int]]) -> int:
    """Cheapest assignment of ``n`` tasks (rows) to ``n`` workers (columns)."""
    n = len(cost)
    best = [math.inf] * (1 << n)
    best[0] = 0
    for mask in range(1 << n):
        if best[mask] == math.inf:
            continue
        row = mask.bit_count()
        if row == n:
            continue
        for col in range(n):
            if not mask >> col & 1:
                nxt = mask | (1 << col)
                best[nxt] = min(best[nxt], best[mask] + cost[row][col])
    return best[-1]


def tree_dp(root: TreeNode | None) -> tuple[int, int]:
    """Best sums of non-adjacent nodes as ``(with_root, without_root)``."""
    if root is None:
        return 0, 0
    with_root, without_root = root.val, 0
    for child in root.children:
        child_with, child_without = tree_dp(child)
        with_root += child_without
        without_root += max(child_with, child_without)
    return with_root, without_root


def count_no_repeat_digits(n: int) -> int:
    """Count the integers in ``1..n`` whose decimal digits are all distinct."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = str(n)

    @lru_cache(maxsize=None)
    def count(pos: int, used: int, tight: bool, started: bool) -> int:
        if pos == len(digits):
            return int(started)
        limit = int(digits[pos]) if tight else 9
        total = 0
        for d in range(limit + 1):
            if started and used >> d & 1:
                continue
            now_started = started or d > 0
            total += count(
                pos + 1,
                used | (1 << d) if now_started else used,
                tight and d == limit,
                now_started,
            )
        return total

    return count(0, 0, True, False)