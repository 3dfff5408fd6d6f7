"""Greedy algorithms: scheduling, intervals, Huffman coding and more."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from itertools import count


@dataclass(frozen=True)
class Job:
    """A job occupying ``[start, end)`` that earns ``profit``."""

    start: int
    end: int
    profit: int


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a character."""

    freq: int
    char: str | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def activity_selection(activities: Iterable[tuple[int, int]]) -> int:
    """Largest number of non-overlapping ``(start, end)`` activities."""
    chosen = 0
    last_end: int | None = None
    for start, end in sorted(activities, key=lambda a: a[1]):
        if last_end is None or start >= last_end:
            chosen += 1
            last_end = end
    return chosen


def merge_intervals(intervals: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping ``(start, end)`` intervals into a sorted list."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def weighted_job_scheduling(jobs: Iterable[Job]) -> int:
    """Largest total profit from a set of mutually compatible jobs."""
    ordered = sorted(jobs, key=lambda j: j.end)
    if not ordered:
        return 0
    ends = [job.end for job in ordered]
    best: list[int] = []
    for i, job in enumerate(ordered):
        latest = bisect_right(ends, job.start, 0, i) - 1
        including = job.profit + (best[latest] if latest >= 0 else 0)
        best.append(max(best[-1], including) if best else including)
    return best[-1]


def huffman_tree(freqs: Mapping[str, int] | Iterable[tuple[str, int]]) -> HuffmanNode:
    """Build a Huffman tree from character frequencies."""
    pairs = freqs.items() if isinstance(freqs, Mapping) else freqs
    tie = count()
    heap = [(freq, next(tie), HuffmanNode(freq, char)) for char, freq in pairs]
    if not heap:
        raise ValueError("need at least one character")
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(tie), HuffmanNode(total, None, left, right)))
    return heap[0][2]


def huffman_codes(freqs: Mapping[str, int] | Iterable[tuple[str, int]]) -> dict[str, str]:
    """Return the Huffman code of every character as a string of ``0``/``1``."""
    codes: dict[str, str] = {}
    stack: list[tuple[HuffmanNode, str]] = [(huffman_tree(freqs), "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            codes[node.char] = code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes


def fractional_knapsack(capacity: float, items: Iterable[tuple[int, int]]) -> float:
    """Best value when ``(weight, value)`` items may be taken in fractions."""
    total = 0.0
    remaining = capacity
    for weight, value in sorted(items, key=lambda it: it[1] / it[0], reverse=True):
        if remaining >= weight:
            total += value
            remaining -= weight
        else:
            total += remaining * value / weight
            break
    return total


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index is reachable when ``nums[i]`` is the jump range."""
    reach = 0
    for i, step in enumerate(nums):
        if i > reach:
            return False
        reach = max(reach, i + step)
    return True


def min_jumps(nums: Sequence[int]) -> int:
    """Fewest jumps to reach the last index, assuming it is reachable."""
    jumps = current_end = farthest = 0
    for i, step in enumerate(nums[:-1]):
        farthest = max(farthest, i + step)
        if i == current_end:
            jumps += 1
            current_end = farthest
    return jumps


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int | None:
    """Station from which the whole circuit can be driven, or ``None``."""
    total = tank = start = 0
    for i, (g, c) in enumerate(zip(gas, cost)):
        total += g - c
        tank += g - c
        if tank < 0:
            start = i + 1
            tank = 0
    return start if total >= 0 else None


def task_scheduler(tasks: Iterable[str], n: int) -> int:
    """Fewest time slots to run tasks with a cooldown of ``n`` between equal ones."""
    freq = Counter(tasks)
    if not freq:
        return 0
    max_freq = max(freq.values())
    max_count = sum(1 for f in freq.values() if f == max_freq)
    return max(sum(freq.values()), (max_freq - 1) * (n + 1) + max_count)


def min_meeting_rooms(intervals: Iterable[tuple[int, int]]) -> int:
    """Fewest rooms needed to hold all ``(start, end)`` meetings."""
    pairs = list(intervals)
    starts = sorted(s for s, _ in pairs)
    ends = sorted(e for _, e in pairs)
    rooms = j = 0
    for start in starts:
        if start >= ends[j]:
            j += 1
        else:
            rooms += 1
    return rooms