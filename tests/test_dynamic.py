from itertools import combinations

import pytest

from algobox.dynamic import (
    can_partition,
    coin_change,
    edit_distance,
    egg_drop,
    fib,
    knapsack_01,
    lcs,
    lcs_string,
    lis,
    longest_palindromic_subsequence,
    matrix_chain,
    max_subarray,
    rod_cutting,
    unbounded_knapsack,
)


def _is_subsequence(sub, s):
    it = iter(s)
    return all(ch in it for ch in sub)


def test_fib_example_and_recurrence():
    assert fib(10) == 55
    assert fib(0) == 0
    assert fib(1) == 1
    for n in range(2, 40):
        assert fib(n) == fib(n - 1) + fib(n - 2)


def test_knapsack_examples():
    wt, val = [2, 3, 4, 5], [3, 4, 5, 6]
    assert knapsack_01(5, wt, val) == 7
    assert unbounded_knapsack(5, wt, val) >= knapsack_01(5, wt, val)


def test_knapsack_matches_brute_force():
    wt, val = [3, 4, 2, 5, 1], [4, 5, 3, 8, 1]
    cap = 9
    best = max(
        sum(val[i] for i in combo)
        for k in range(len(wt) + 1)
        for combo in combinations(range(len(wt)), k)
        if sum(wt[i] for i in combo) <= cap
    )
    assert knapsack_01(cap, wt, val) == best


def test_knapsack_negative_capacity():
    with pytest.raises(ValueError):
        knapsack_01(-1, [1], [1])


def test_coin_change():
    assert coin_change([1, 5, 6, 9], 11) == 2
    assert coin_change([2], 3) is None
    assert coin_change([1, 2], 0) == 0


@pytest.mark.parametrize("s1, s2", [("AGGTAB", "GXTXAYB"), ("abc", "def"), ("", "x")])
def test_lcs_string_is_common_and_longest(s1, s2):
    sub = lcs_string(s1, s2)
    assert len(sub) == lcs(s1, s2)
    assert _is_subsequence(sub, s1)
    assert _is_subsequence(sub, s2)


def test_lis():
    assert lis([10, 9, 2, 5, 3, 7, 101, 18]) == 4
    assert lis(list(range(12))) == 12
    assert lis(list(range(12, 0, -1))) == 1
    assert lis([]) == 0


def test_edit_distance():
    assert edit_distance("horse", "ros") == 3
    assert edit_distance("ros", "horse") == 3
    assert edit_distance("kitten", "kitten") == 0
    assert edit_distance("", "abcd") == len("abcd")


def test_matrix_chain():
    assert matrix_chain([1, 2, 3, 4]) == 18
    assert matrix_chain([4, 5, 6]) == 4 * 5 * 6
    assert matrix_chain([7, 3]) == 0
    with pytest.raises(ValueError):
        matrix_chain([3])


def test_longest_palindromic_subsequence():
    assert longest_palindromic_subsequence("bbbab") == 4
    assert longest_palindromic_subsequence("racecar") == len("racecar")
    assert longest_palindromic_subsequence("") == 0


def test_max_subarray():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6
    assert max_subarray([3, 1, 4]) == sum([3, 1, 4])
    assert max_subarray([-7, -3, -9]) == -3
    with pytest.raises(ValueError):
        max_subarray([])


def test_rod_cutting_invariants():
    prices = [1, 5, 8, 9, 10, 17, 17, 20]
    for n in range(1, len(prices) + 1):
        assert rod_cutting(prices, n) >= prices[n - 1]
        assert rod_cutting(prices, n) >= rod_cutting(prices, n - 1)
    assert rod_cutting(prices, 0) == 0
    with pytest.raises(ValueError):
        rod_cutting([1, 2], 3)


def test_can_partition():
    assert can_partition([1, 5, 11, 5]) is True
    assert can_partition([1, 2, 4]) is False
    assert can_partition([]) is True
    with pytest.raises(ValueError):
        can_partition([1, -1])


def test_egg_drop():
    assert egg_drop(2, 10) == 4
    assert egg_drop(1, 10) == 10
    assert egg_drop(3, 10) <= egg_drop(2, 10)
    assert egg_drop(2, 0) == 0
    with pytest.raises(ValueError):
        egg_drop(0, 5)