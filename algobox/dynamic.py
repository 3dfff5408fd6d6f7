"""Classic dynamic programming problems."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number (``n`` itself for ``n <= 1``)."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Best total value with each item used at most once."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for w in range(capacity, weight - 1, -1):
            best[w] = max(best[w], best[w - weight] + value)
    return best[capacity]


def unbounded_knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Best total value when every item may be used any number of times."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    best = [0] * (capacity + 1)
    for w in range(1, capacity + 1):
        for weight, value in zip(weights, values):
            if weight <= w:
                best[w] = max(best[w], best[w - weight] + value)
    return best[capacity]


def coin_change(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins summing to ``amount``, or ``None`` if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for i in range(1, amount + 1):
        for c in coins:
            if 0 < c <= i:
                fewest[i] = min(fewest[i], fewest[i - c] + 1)
    return None if fewest[amount] > amount else fewest[amount]


def _lcs_table(s1: str, s2: str) -> list[list[int]]:
    table = [[0] * (len(s2) + 1) for _ in range(len(s1) + 1)]
    for i, a in enumerate(s1, 1):
        for j, b in enumerate(s2, 1):
            table[i][j] = (
                table[i - 1][j - 1] + 1
                if a == b
                else max(table[i - 1][j], table[i][j - 1])
            )
    return table


def lcs(s1: str, s2: str) -> int:
    """Length of the longest common subsequence."""
    return _lcs_table(s1, s2)[-1][-1]


def lcs_string(s1: str, s2: str) -> str:
    """One longest common subsequence of ``s1`` and ``s2``."""
    table = _lcs_table(s1, s2)
    chars: list[str] = []
    i, j = len(s1), len(s2)
    while i > 0 and j > 0:
        if s1[i - 1] == s2[j - 1]:
            chars.append(s1[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, in O(n log n)."""
    tails: list[int] = []
    for x in nums:
        pos = bisect_left(tails, x)
        if pos == len(tails):
            tails.append(x)
        else:
            tails[pos] = x
    return len(tails)


def edit_distance(s1: str, s2: str) -> int:
    """Levenshtein distance between two strings."""
    prev = list(range(len(s2) + 1))
    for i, a in enumerate(s1, 1):
        curr = [i]
        for j, b in enumerate(s2, 1):
            curr.append(
                prev[j - 1] if a == b else 1 + min(prev[j], curr[j - 1], prev[j - 1])
            )
        prev = curr
    return prev[-1]


def matrix_chain(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i + 1]``.
    """
    n = len(dims) - 1
    if n < 1:
        raise ValueError("need at least one matrix")
    cost = [[0] * n for _ in range(n)]
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][n - 1]


def longest_palindromic_subsequence(s: str) -> int:
    """Length of the longest palindromic subsequence of ``s``."""
    n = len(s)
    if n == 0:
        return 0
    best = [[0] * n for _ in range(n)]
    for i in range(n):
        best[i][i] = 1
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            if s[i] == s[j]:
                best[i][j] = best[i + 1][j - 1] + 2
            else:
                best[i][j] = max(best[i + 1][j], best[i][j - 1])
    return best[0][n - 1]


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane)."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = current = nums[0]
    for x in nums[1:]:
        current = max(x, current + x)
        best = max(best, current)
    return best


def rod_cutting(prices: Sequence[int], n: int) -> int:
    """Best revenue from a rod of length ``n``; ``prices[i]`` sells length ``i + 1``."""
    if n < 0:
        raise ValueError("length must be non-negative")
    if len(prices) < n:
        raise ValueError("prices must cover every length up to n")
    best = [0] * (n + 1)
    for i in range(1, n + 1):
        best[i] = max(prices[j - 1] + best[i - j] for j in range(1, i + 1))
    return best[n]


def can_partition(nums: Sequence[int]) -> bool:
    """Whether non-negative ``nums`` split into two parts of equal sum."""
    if any(x < 0 for x in nums):
        raise ValueError("values must be non-negative")
    total = sum(nums)
    if total % 2:
        return False
    target = total // 2
    reachable = [True] + [False] * target
    for x in nums:
        for j in range(target, x - 1, -1):
            reachable[j] = reachable[j] or reachable[j - x]
    return reachable[target]


def egg_drop(eggs: int, floors: int) -> int:
    """Fewest trials that always find the critical floor."""
    if eggs < 1:
        raise ValueError("need at least one egg")
    if floors < 0:
        raise ValueError("floors must be non-negative")
    prev = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        curr = [0] * (floors + 1)
        for f in range(1, floors + 1):
            curr[f] = min(1 + max(prev[x - 1], curr[f - x]) for x in range(1, f + 1))
        prev = curr
    return prev[floors]