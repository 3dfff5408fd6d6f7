"""Binary min- and max-heaps and a running median."""

from __future__ import annotations

import heapq
import operator
from collections.abc import Callable, Iterable

_Order = Callable[[int, int], bool]


def _sift_up(data: list[int], i: int, before: _Order) -> None:
    while i > 0:
        parent = (i - 1) // 2
        if not before(data[i], data[parent]):
            break
        data[i], data[parent] = data[parent], data[i]
        i = parent


def _sift_down(data: list[int], i: int, before: _Order) -> None:
    n = len(data)
    while True:
        best = i
        for child in (2 * i + 1, 2 * i + 2):
            if child < n and before(data[child], data[best]):
                best = child
        if best == i:
            return
        data[i], data[best] = data[best], data[i]
        i = best


def _heapify(data: list[int], before: _Order) -> None:
    for i in reversed(range(len(data) // 2)):
        _sift_down(data, i, before)


def _pop_top(data: list[int], before: _Order) -> int:
    if not data:
        raise IndexError("pop from an empty heap")
    top = data[0]
    last = data.pop()
    if data:
        data[0] = last
        _sift_down(data, 0, before)
    return top


class MinHeap:
    """Binary heap with the smallest value on top."""

    _before = staticmethod(operator.lt)

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._data = list(items)
        _heapify(self._data, self._before)

    def push(self, value: int) -> None:
        """Add a value."""
        self._data.append(value)
        _sift_up(self._data, len(self._data) - 1, self._before)

    def pop(self) -> int:
        """Remove and return the smallest value."""
        return _pop_top(self._data, self._before)

    def top(self) -> int:
        """Return the smallest value without removing it."""
        if not self._data:
            raise IndexError("top of an empty heap")
        return self._data[0]

    def decrease_key(self, index: int, new_value: int) -> None:
        """Lower the value stored at ``index``."""
        if new_value > self._data[index]:
            raise ValueError("new value is larger than the current one")
        self._data[index] = new_value
        _sift_up(self._data, index, self._before)

    def delete_at(self, index: int) -> int:
        """Remove and return the value stored at ``index``."""
        data = self._data
        value = data[index]
        while index > 0:
            parent = (index - 1) // 2
            data[index], data[parent] = data[parent], data[index]
            index = parent
        self.pop()
        return value

    def merge(self, other: MinHeap) -> None:
        """Add every value of ``other`` to this heap."""
        for value in list(other):
            self.push(value)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __repr__(self) -> str:
        return f"MinHeap({self._data!r})"


class MaxHeap:
    """Binary heap with the largest value on top."""

    _before = staticmethod(operator.gt)

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._data = list(items)
        _heapify(self._data, self._before)

    def push(self, value: int) -> None:
        """Add a value."""
        self._data.append(value)
        _sift_up(self._data, len(self._data) - 1, self._before)

    def pop(self) -> int:
        """Remove and return the largest value."""
        return _pop_top(self._data, self._before)

    def top(self) -> int:
        """Return the largest value without removing it."""
        if not self._data:
            raise IndexError("top of an empty heap")
        return self._data[0]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __repr__(self) -> str:
        return f"MaxHeap({self._data!r})"


class MedianFinder:
    """Running median of a stream of numbers, kept in two heaps."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max-heap via negation
        self._high: list[int] = []

    def add_num(self, num: int) -> None:
        """Add a number to the stream."""
        heapq.heappush(self._low, -num)
        heapq.heappush(self._high, -heapq.heappop(self._low))
        if len(self._high) > len(self._low):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Return the median of all numbers added so far."""
        if not self._low:
            raise ValueError("no numbers added")
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return (-self._low[0] + self._high[0]) / 2.0


def k_smallest(items: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` smallest values in ascending order."""
    heap = MinHeap(items)
    return [heap.pop() for _ in range(min(k, len(heap)))]