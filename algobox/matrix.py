"""Matrix algorithms on lists of lists."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product ``a @ b``."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions do not match")
    cols = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in cols] for row in a]


def mat_pow(a: Sequence[Sequence[int]], p: int) -> Matrix:
    """Raise a square matrix to a non-negative integer power."""
    if p < 0:
        raise ValueError("power must be non-negative")
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    result: Matrix = [[int(i == j) for j in range(n)] for i in range(n)]
    base: Matrix = [list(row) for row in a]
    while p > 0:
        if p & 1:
            result = multiply(result, base)
        base = multiply(base, base)
        p >>= 1
    return result


def rotate90(mat: Matrix) -> None:
    """Rotate a matrix 90 degrees clockwise in place."""
    mat[:] = [list(row) for row in zip(*mat[::-1])]


def spiral_order(mat: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a matrix in clockwise spiral order."""
    rows = [list(row) for row in mat]
    result: list[int] = []
    while rows:
        result.extend(rows.pop(0))
        rows = [list(col) for col in zip(*rows)][::-1]
    return result


def search_sorted_matrix(mat: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix sorted along rows and columns, in O(rows + cols)."""
    if not mat:
        return False
    row, col = 0, len(mat[0]) - 1
    while row < len(mat) and col >= 0:
        value = mat[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def set_zeroes(mat: Matrix) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {r for r, row in enumerate(mat) if 0 in row}
    zero_cols = {c for row in mat for c, v in enumerate(row) if v == 0}
    for r, row in enumerate(mat):
        if r in zero_rows:
            row[:] = [0] * len(row)
        else:
            for c in zero_cols:
                row[c] = 0


def largest_rectangle_histogram(heights: Sequence[int]) -> int:
    """Return the largest rectangle area under a histogram."""
    stack: list[int] = []
    best = 0
    for i, height in enumerate([*heights, 0]):
        while stack and heights[stack[-1]] > height:
            top = heights[stack.pop()]
            width = i - stack[-1] - 1 if stack else i
            best = max(best, top * width)
        stack.append(i)
    return best


def maximal_rectangle(mat: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest all-ones rectangle in a 0/1 matrix."""
    if not mat:
        return 0
    heights = [0] * len(mat[0])
    best = 0
    for row in mat:
        heights = [h + 1 if cell == 1 else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_histogram(heights))
    return best


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count 4-connected groups of ``'1'`` cells; the grid is not modified."""
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "1"
    }
    count = 0
    while land:
        count += 1
        stack = [land.pop()]
        while stack:
            r, c = stack.pop()
            for cell in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                if cell in land:
                    land.remove(cell)
                    stack.append(cell)
    return count