import statistics

import pytest

from algobox.heaps import MaxHeap, MedianFinder, MinHeap, k_smallest


def drain(heap):
    return [heap.pop() for _ in range(len(heap))]


def test_min_heap_source_example():
    h = MinHeap()
    for x in (5, 3, 8, 1, 10):
        h.push(x)
    assert h.top() == 1
    assert h.pop() == 1
    assert h.top() == 3
    assert len(h) == 4


def test_min_heap_build_and_drain_sorted():
    data = [9, 4, 7, 2, 6, 1]
    h = MinHeap(data)
    assert h.top() == 1
    assert drain(h) == sorted(data)


def test_min_heap_empty_errors():
    h = MinHeap()
    with pytest.raises(IndexError):
        h.pop()
    with pytest.raises(IndexError):
        h.top()


def test_decrease_key():
    h = MinHeap([4, 6, 8, 10])
    idx = list(h).index(10)
    h.decrease_key(idx, 2)
    assert h.top() == 2
    assert drain(h) == [2, 4, 6, 8]


def test_decrease_key_larger_raises():
    h = MinHeap([1, 2, 3])
    with pytest.raises(ValueError):
        h.decrease_key(0, 5)


def test_delete_at():
    data = [7, 3, 9, 1, 5, 8]
    h = MinHeap(data)
    idx = list(h).index(5)
    assert h.delete_at(idx) == 5
    assert drain(h) == sorted([7, 3, 9, 1, 8])


def test_merge():
    a = MinHeap([5, 1, 9])
    b = MinHeap([4, 2])
    a.merge(b)
    assert drain(a) == [1, 2, 4, 5, 9]
    assert len(b) == 2


def test_max_heap_source_example():
    h = MaxHeap()
    for x in (4, 10, 3, 5, 1):
        h.push(x)
    assert h.top() == 10
    assert h.pop() == 10
    assert h.top() == 5


def test_max_heap_build_and_drain():
    data = [3, 1, 4, 1, 5, 9, 2, 6]
    h = MaxHeap(data)
    assert h.top() == 9
    assert drain(h) == sorted(data, reverse=True)


def test_max_heap_empty_errors():
    with pytest.raises(IndexError):
        MaxHeap().pop()
    with pytest.raises(IndexError):
        MaxHeap().top()


def test_median_finder_matches_statistics():
    mf = MedianFinder()
    seen = []
    for x in (5, 15, 1, 3, 8, 7, 9, 10):
        mf.add_num(x)
        seen.append(x)
        assert mf.find_median() == pytest.approx(statistics.median(seen))


def test_median_finder_empty_raises():
    with pytest.raises(ValueError):
        MedianFinder().find_median()


def test_k_smallest_source_example():
    assert k_smallest([7, 10, 4, 3, 20, 15], 3) == [3, 4, 7]


def test_k_smallest_k_larger_than_input():
    assert k_smallest([2, 1], 5) == [1, 2]