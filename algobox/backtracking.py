"""Classic backtracking problems: queens, sudoku, subsets, permutations and more."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import permutations as _all_orderings

Board = list[list[str]]

_DIGITS = "123456789"


def n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens as rows of ``.``/``Q``."""
    solutions: list[list[str]] = []
    cols: set[int] = set()
    diag_down: set[int] = set()
    diag_up: set[int] = set()
    placement: list[int] = []

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * c + "Q" + "." * (n - c - 1) for c in placement])
            return
        for c in range(n):
            if c in cols or row - c in diag_down or row + c in diag_up:
                continue
            cols.add(c)
            diag_down.add(row - c)
            diag_up.add(row + c)
            placement.append(c)
            place(row + 1)
            placement.pop()
            cols.discard(c)
            diag_down.discard(row - c)
            diag_up.discard(row + c)

    place(0)
    return solutions


def is_valid_sudoku_move(board: Sequence[Sequence[str]], r: int, c: int, num: str) -> bool:
    """Return whether ``num`` may go at ``(r, c)`` without clashing in row, column or box."""
    box_r, box_c = 3 * (r // 3), 3 * (c // 3)
    return all(
        board[r][i] != num
        and board[i][c] != num
        and board[box_r + i // 3][box_c + i % 3] != num
        for i in range(9)
    )


def solve_sudoku(board: Board) -> bool:
    """Fill the empty (``.``) cells of a 9x9 board in place; return whether it worked.

    When no solution exists the board is left as it was given.
    """
    empty = next(
        ((r, c) for r in range(9) for c in range(9) if board[r][c] == "."),
        None,
    )
    if empty is None:
        return True
    r, c = empty
    for num in _DIGITS:
        if is_valid_sudoku_move(board, r, c, num):
            board[r][c] = num
            if solve_sudoku(board):
                return True
            board[r][c] = "."
    return False


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return all subsets of ``nums`` in backtracking order."""
    result: list[list[int]] = []

    def extend(start: int, current: list[int]) -> None:
        result.append(current)
        for i, x in enumerate(nums[start:], start):
            extend(i + 1, [*current, x])

    extend(0, [])
    return result


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return all distinct subsets of ``nums``, which may hold repeated values."""
    items = sorted(nums)
    result: list[list[int]] = []

    def extend(start: int, current: list[int]) -> None:
        result.append(current)
        for i, x in enumerate(items[start:], start):
            if i > start and x == items[i - 1]:
                continue
            extend(i + 1, [*current, x])

    extend(0, [])
    return result


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct permutations of ``nums`` in lexicographic order."""
    return [list(p) for p in sorted(set(_all_orderings(nums)))]


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return all permutations of ``nums`` generated by swapping in place."""
    items = list(nums)
    result: list[list[int]] = []

    def backtrack(start: int) -> None:
        if start == len(items):
            result.append(list(items))
            return
        for i in range(start, len(items)):
            items[start], items[i] = items[i], items[start]
            backtrack(start + 1)
            items[start], items[i] = items[i], items[start]

    backtrack(0)
    return result


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the combinations of positive candidates, reusable, that sum to ``target``."""
    if any(c <= 0 for c in candidates):
        raise ValueError("candidates must be positive")
    items = sorted(candidates)
    result: list[list[int]] = []

    def extend(start: int, remaining: int, current: list[int]) -> None:
        if remaining == 0:
            result.append(current)
            return
        for i, c in enumerate(items[start:], start):
            if c > remaining:
                break
            extend(i, remaining - c, [*current, c])

    extend(0, target, [])
    return result


def word_search(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return whether ``word`` can be traced through 4-adjacent cells, each used once."""
    rows = len(board)
    cols = len(board[0]) if rows else 0

    def match(r: int, c: int, idx: int, path: set[tuple[int, int]]) -> bool:
        if idx == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols):
            return False
        if (r, c) in path or board[r][c] != word[idx]:
            return False
        path.add((r, c))
        found = any(
            match(nr, nc, idx + 1, path)
            for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1))
        )
        path.discard((r, c))
        return found

    return any(match(r, c, 0, set()) for r in range(rows) for c in range(cols))


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses."""
    result: list[str] = []

    def build(current: str, opened: int, closed: int) -> None:
        if len(current) == 2 * n:
            result.append(current)
            return
        if opened < n:
            build(current + "(", opened + 1, closed)
        if closed < opened:
            build(current + ")", opened, closed + 1)

    build("", 0, 0)
    return result