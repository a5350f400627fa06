"""Backtracking searches: Sudoku, word paths, permutations, subsets, partitions."""

from __future__ import annotations

from typing import Iterator, Sequence

EMPTY = "."
DIGITS = "123456789"
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def is_safe(board: Sequence[Sequence[str]], row: int, col: int, num: str) -> bool:
    """True if ``num`` is absent from the row, column and box of a cell."""
    box_row, box_col = row - row % 3, col - col % 3
    return not any(
        board[row][x] == num
        or board[x][col] == num
        or board[box_row + x // 3][box_col + x % 3] == num
        for x in range(9)
    )


def _first_empty(board: Sequence[Sequence[str]]) -> tuple[int, int] | None:
    return next(
        (
            (r, c)
            for r, cells in enumerate(board)
            for c, value in enumerate(cells)
            if value == EMPTY
        ),
        None,
    )


def _fill(board: list[list[str]]) -> bool:
    cell = _first_empty(board)
    if cell is None:
        return True
    row, col = cell
    for num in DIGITS:
        if is_safe(board, row, col, num):
            board[row][col] = num
            if _fill(board):
                return True
            board[row][col] = EMPTY
    return False


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill a 9x9 board in place, '.' marking empty cells.

    Returns False, leaving the board as it was, when there is no solution.
    """
    if len(board) != 9 or any(len(cells) != 9 for cells in board):
        raise ValueError("board must be 9 by 9")
    return _fill(board)


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """True if ``word`` runs through adjacent cells of ``board``, each used once."""
    if not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()

    def matches(r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols):
            return False
        if (r, c) in used or board[r][c] != word[index]:
            return False
        used.add((r, c))
        found = any(matches(r + dr, c + dc, index + 1) for dr, dc in _STEPS)
        used.discard((r, c))
        return found

    return any(matches(r, c, 0) for r in range(rows) for c in range(cols))


def _swap_permutations(nums: list[int], start: int) -> Iterator[list[int]]:
    if start == len(nums):
        yield nums
        return
    for j in range(start, len(nums)):
        nums[start], nums[j] = nums[j], nums[start]
        yield from _swap_permutations(list(nums), start + 1)


def permute(nums: Sequence[int]) -> list[list[int]]:
    """All orderings of ``nums``, produced by successive swaps."""
    return list(_swap_permutations(list(nums), 0))


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``; each element doubles the list built so far."""
    result: list[list[int]] = [[]]
    for num in nums:
        result += [subset + [num] for subset in result]
    return result


def partition(s: str) -> list[list[str]]:
    """Every way to split ``s`` into palindromic substrings."""
    result: list[list[str]] = []
    parts: list[str] = []

    def split(start: int) -> None:
        if start == len(s):
            result.append(list(parts))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                parts.append(piece)
                split(end)
                parts.pop()

    split(0)
    return result