from itertools import permutations

import pytest

from algobox.interval_dp import (
    TreeNode,
    assignment_problem,
    count_no_repeat_digits,
    max_coins,
    min_palindrome_cuts,
    tree_dp,
    tsp,
)

DIST = [[0, 10, 15, 20], [10, 0, 35, 25], [15, 35, 0, 30], [20, 25, 30, 0]]


def test_max_coins_example():
    assert max_coins([3, 1, 5, 8]) == 167


def test_max_coins_small_cases():
    assert max_coins([]) == 0
    assert max_coins([5]) == 5


def test_min_palindrome_cuts():
    assert min_palindrome_cuts("aab") == 1
    assert min_palindrome_cuts("racecar") == 0
    assert min_palindrome_cuts("abcde") == len("abcde") - 1
    assert min_palindrome_cuts("") == 0


def test_tsp_example():
    assert tsp(DIST) == 80


def test_tsp_matches_brute_force():
    dist = [
        [0, 3, 9, 4, 7],
        [3, 0, 2, 8, 6],
        [9, 2, 0, 5, 1],
        [4, 8, 5, 0, 3],
        [7, 6, 1, 3, 0],
    ]
    best = min(
        sum(dist[a][b] for a, b in zip((0, *order), (*order, 0)))
        for order in permutations(range(1, 5))
    )
    assert tsp(dist) == best


def test_tsp_needs_two_cities():
    with pytest.raises(ValueError):
        tsp([[0]])


def test_assignment_matches_brute_force():
    cost = [[9, 2, 7, 8], [6, 4, 3, 7], [5, 8, 1, 8], [7, 6, 9, 4]]
    best = min(sum(cost[r][c] for r, c in enumerate(p)) for p in permutations(range(4)))
    assert assignment_problem(cost) == best
    assert assignment_problem([]) == 0


def test_tree_dp_example():
    root = TreeNode(3, [TreeNode(2, [TreeNode(3)]), TreeNode(3, [TreeNode(1)])])
    with_root, without_root = tree_dp(root)
    assert max(with_root, without_root) == 7


def test_tree_dp_leaf_and_empty():
    assert tree_dp(None) == (0, 0)
    assert tree_dp(TreeNode(4)) == (4, 0)


def test_count_no_repeat_digits_example():
    assert count_no_repeat_digits(20) == 19


@pytest.mark.parametrize("n", [0, 1, 9, 10, 11, 99, 100, 321, 1000])
def test_count_no_repeat_digits_brute_force(n):
    expected = sum(1 for i in range(1, n + 1) if len(set(str(i))) == len(str(i)))
    assert count_no_repeat_digits(n) == expected


def test_count_no_repeat_digits_negative():
    with pytest.raises(ValueError):
        count_no_repeat_digits(-5)