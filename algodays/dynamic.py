"""Dynamic-programming problems over sequences, strings and grids."""

from __future__ import annotations

from typing import Sequence


def num_trees(n: int) -> int:
    """Number of structurally unique binary search trees holding 1 to ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    counts = [1] * (n + 1)
    for size in range(2, n + 1):
        counts[size] = sum(
            counts[root - 1] * counts[size - root] for root in range(1, size + 1)
        )
    return counts[n]


def num_decodings(s: str) -> int:
    """Ways to decode a digit string where 'A' is 1 and 'Z' is 26."""
    if not s or s[0] == "0":
        return 0
    before, current = 1, 1  # ways for the prefixes of length i-2 and i-1
    for i in range(1, len(s)):
        ways = current if s[i] != "0" else 0
        if s[i - 1] == "1" or (s[i - 1] == "2" and s[i] <= "6"):
            ways += before
        before, current = current, ways
    return current


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    forward = backward = 1
    best: int | None = None
    for front, back in zip(nums, reversed(nums)):
        if forward == 0:
            forward = 1
        if backward == 0:
            backward = 1
        forward *= front
        backward *= back
        candidate = max(forward, backward)
        best = candidate if best is None else max(best, candidate)
    return best


def num_squares(n: int) -> int:
    """Fewest perfect squares summing to ``n``; 0 for ``n`` of 0 or less."""
    if n <= 0:
        return 0
    best = [0] + [n] * n
    for i in range(1, n + 1):
        root = 1
        while root * root <= i:
            best[i] = min(best[i], best[i - root * root] + 1)
            root += 1
    return best[n]


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Most points from one cell per row, losing the column distance between rows."""
    if not points or not points[0]:
        raise ValueError("points must not be empty")
    width = len(points[0])
    dp = [0] * width
    for row in points:
        dp = [d + p for d, p in zip(dp, row)]
        for j in range(1, width):
            dp[j] = max(dp[j], dp[j - 1] - 1)
        for j in range(width - 2, -1, -1):
            dp[j] = max(dp[j], dp[j + 1] - 1)
    return max(0, max(dp))


def strange_printer(s: str) -> int:
    """Fewest turns of a printer that prints runs of one character over others."""
    n = len(s)
    if n == 0:
        return 0
    turns = [[0] * n for _ in range(n)]
    for i in range(n - 1, -1, -1):
        turns[i][i] = 1
        for j in range(i + 1, n):
            if s[i] == s[j]:
                turns[i][j] = turns[i][j - 1]
            else:
                turns[i][j] = min(
                    turns[i][k] + turns[k + 1][j] for k in range(i, j)
                )
    return turns[0][n - 1]


def is_match(s: str, p: str) -> bool:
    """True if pattern ``p`` with '.' and '*' matches the whole of ``s``."""
    m, n = len(s), len(p)
    dp = [[False] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = True
    for j in range(2, n + 1):
        if p[j - 1] == "*":
            dp[0][j] = dp[0][j - 2]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            token = p[j - 1]
            if token == "." or token == s[i - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            elif token == "*" and j >= 2:
                repeated = p[j - 2]
                dp[i][j] = dp[i][j - 2] or (
                    dp[i - 1][j] and repeated in (s[i - 1], ".")
                )
    return dp[m][n]


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins that make up ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for value in range(1, amount + 1):
        for coin in coins:
            if 0 < coin <= value:
                fewest[value] = min(fewest[value], fewest[value - coin] + 1)
    return -1 if fewest[amount] == unreachable else fewest[amount]


def word_break(s: str, word_dict: Sequence[str]) -> bool:
    """True if ``s`` splits into a sequence of words from ``word_dict``."""
    if not s:
        return True
    ends = [False] * len(s)
    for i in range(len(s)):
        for word in word_dict:
            size = len(word)
            if size == 0 or i < size - 1:
                continue
            start = i - size + 1
            if (start == 0 or ends[start - 1]) and s[start : i + 1] == word:
                ends[i] = True
                break
    return ends[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path moving right or down from corner to corner."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    below: list[int] | None = None
    for row in reversed(grid):
        current = [0] * width
        for j in range(width - 1, -1, -1):
            options = []
            if j + 1 < width:
                options.append(current[j + 1])
            if below is not None:
                options.append(below[j])
            current[j] = row[j] + (min(options) if options else 0)
        below = current
    return below[0]


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(nums):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if nums[j] < value), default=0)
        )
    return max(lengths, default=0)


def can_partition(nums: Sequence[int]) -> bool:
    """True if non-empty ``nums`` splits into two parts of equal sum."""
    if not nums:
        return False
    if any(x < 0 for x in nums):
        raise ValueError("nums must be non-negative")
    total = sum(nums)
    if total % 2:
        return False
    reachable = 1
    for x in nums:
        reachable |= reachable << x
    return bool((reachable >> (total // 2)) & 1)


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest top-to-bottom path sum through a triangle of numbers."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        best = [value + min(best[j], best[j + 1]) for j, value in enumerate(row)]
    return best[0]


def max_subarray_sum_circular(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty subarray of a circular array."""
    if not nums:
        raise ValueError("nums must not be empty")
    best_max = best_min = None
    run_max = run_min = 0
    for x in nums:
        run_max = max(run_max + x, x)
        best_max = run_max if best_max is None else max(best_max, run_max)
        run_min = min(run_min + x, x)
        best_min = run_min if best_min is None else min(best_min, run_min)
    if best_max < 0:
        return best_max
    return max(best_max, sum(nums) - best_min)


def largest_altitude(gain: Sequence[int]) -> int:
    """Highest altitude reached starting at 0 and adding each gain in turn."""
    altitude = highest = 0
    for step in gain:
        altitude += step
        highest = max(highest, altitude)
    return highest