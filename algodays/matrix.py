"""Matrix problems: reconstruction, spiral walks, magic squares and reshaping."""

from __future__ import annotations

from typing import Sequence

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def restore_matrix(row_sum: Sequence[int], col_sum: Sequence[int]) -> list[list[int]]:
    """A non-negative matrix whose row and column sums are the ones given."""
    cols_left = list(col_sum)
    matrix: list[list[int]] = []
    for remaining in row_sum:
        row: list[int] = []
        for j, available in enumerate(cols_left):
            value = min(remaining, available)
            row.append(value)
            remaining -= value
            cols_left[j] -= value
        matrix.append(row)
    return matrix


def spiral_matrix_iii(
    rows: int, cols: int, r_start: int, c_start: int
) -> list[list[int]]:
    """Grid cells in the order a clockwise spiral from the start visits them."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must be non-negative")
    total = rows * cols
    visited: list[list[int]] = []
    r, c = r_start, c_start
    direction = 0
    steps = 1
    while len(visited) < total:
        for _ in range(2):
            dr, dc = _DIRECTIONS[direction]
            for _ in range(steps):
                if 0 <= r < rows and 0 <= c < cols:
                    visited.append([r, c])
                r += dr
                c += dc
            direction = (direction + 1) % 4
        steps += 1
    return visited


def _is_magic(grid: Sequence[Sequence[int]], r: int, c: int) -> bool:
    block = [list(row[c : c + 3]) for row in grid[r : r + 3]]
    cells = [value for row in block for value in row]
    if any(not 1 <= value <= 9 for value in cells) or len(set(cells)) != 9:
        return False
    target = sum(cells) // 3
    lines = [
        *block,
        *zip(*block),
        [block[i][i] for i in range(3)],
        [block[i][2 - i] for i in range(3)],
    ]
    return all(sum(line) == target for line in lines)


def num_magic_squares_inside(grid: Sequence[Sequence[int]]) -> int:
    """Number of 3x3 subgrids that are magic squares of the numbers 1 to 9."""
    if not grid:
        return 0
    return sum(
        _is_magic(grid, r, c)
        for r in range(len(grid) - 2)
        for c in range(len(grid[0]) - 2)
    )


def equal_pairs(grid: Sequence[Sequence[int]]) -> int:
    """Number of (row, column) pairs of a square grid holding the same values."""
    if any(len(row) != len(grid) for row in grid):
        raise ValueError("grid must be square")
    columns = list(zip(*grid))
    return sum(tuple(row) == column for row in grid for column in columns)


def construct_2d_array(original: Sequence[int], m: int, n: int) -> list[list[int]]:
    """``original`` laid out row by row as an m-by-n matrix, or [] if sizes differ."""
    if len(original) != m * n:
        return []
    return [list(original[i * n : (i + 1) * n]) for i in range(m)]