"""Array problems solved with sorting, counting, greedy passes and windows."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def min_difference(nums: Sequence[int]) -> int:
    """Smallest max-minus-min after changing at most three elements."""
    if len(nums) <= 4:
        return 0
    values = sorted(nums)
    n = len(values)
    return min(values[n - 4 + i] - values[i] for i in range(4))


def _max_subsequence(nums: Sequence[int], size: int) -> list[int]:
    """Lexicographically largest subsequence of ``nums`` with ``size`` elements."""
    to_drop = len(nums) - size
    stack: list[int] = []
    for x in nums:
        while to_drop > 0 and stack and stack[-1] < x:
            stack.pop()
            to_drop -= 1
        stack.append(x)
    return stack[:size]


def _merge_greatest(first: list[int], second: list[int]) -> list[int]:
    """Interleave two digit lists into the largest possible sequence."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) or j < len(second):
        if first[i:] >= second[j:]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    return merged


def max_number(nums1: Sequence[int], nums2: Sequence[int], k: int) -> list[int]:
    """Largest ``k``-digit number built from two digit arrays, keeping their orders.

    Returns an empty list when ``k`` exceeds the digits available.
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    best: list[int] = []
    for taken in range(max(0, k - len(nums2)), min(k, len(nums1)) + 1):
        candidate = _merge_greatest(
            _max_subsequence(nums1, taken), _max_subsequence(nums2, k - taken)
        )
        if candidate >= best:
            best = candidate
    return best


def candy(ratings: Sequence[int]) -> int:
    """Fewest candies for children in a row, higher ratings beating neighbours."""
    n = len(ratings)
    if n == 0:
        return 0
    candies = [1] * n
    for i in range(1, n):
        if ratings[i] > ratings[i - 1]:
            candies[i] = candies[i - 1] + 1
    for i in range(n - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            candies[i] = max(candies[i], candies[i + 1] + 1)
    return sum(candies)


def sort_people(names: Sequence[str], heights: Sequence[int]) -> list[str]:
    """Names ordered by their heights, tallest first."""
    if len(names) != len(heights):
        raise ValueError("names and heights must have equal length")
    ranked = sorted(zip(names, heights), key=lambda person: person[1], reverse=True)
    return [name for name, _ in ranked]


def get_winner(arr: Sequence[int], k: int) -> int:
    """Winner of the game in which the larger of the front two stays at the front.

    The winner is the first element to win ``k`` rounds in a row, or the
    largest element if no one does before the array runs out.
    """
    if not arr:
        raise ValueError("arr must not be empty")
    challengers = iter(arr)
    winner = next(challengers)
    streak = 0
    for challenger in challengers:
        if winner > challenger:
            streak += 1
        else:
            winner = challenger
            streak = 1
        if streak == k:
            return winner
    return winner


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones after flipping at most ``k`` zeros."""
    if k < 0:
        raise ValueError("k must be non-negative")
    best = low = zeros = 0
    for high, x in enumerate(nums):
        if x == 0:
            zeros += 1
        while zeros > k:
            if nums[low] == 0:
                zeros -= 1
            low += 1
        best = max(best, high - low + 1)
    return best


def single_number_iii(nums: Sequence[int]) -> list[int]:
    """Every element occurring exactly once, in order of first appearance."""
    return [value for value, count in Counter(nums).items() if count == 1]


def chalk_replacer(chalk: Sequence[int], k: int) -> int:
    """Index of the student who must replace the chalk once ``k`` pieces run out."""
    total = sum(chalk)
    if total <= 0:
        raise ValueError("the students must use some chalk")
    remaining = k % total
    for i, used in enumerate(chalk):
        if used > remaining:
            return i
        remaining -= used
    return -1


def longest_subarray(nums: Sequence[int]) -> int:
    """Length of the longest subarray whose bitwise AND is the largest possible."""
    if not nums:
        raise ValueError("nums must not be empty")
    top = max(nums)
    best = run = 0
    for x in nums:
        run = run + 1 if x == top else 0
        best = max(best, run)
    return best


def can_arrange(arr: Sequence[int], k: int) -> bool:
    """True if ``arr`` splits into pairs whose sums are all divisible by ``k``."""
    if k < 1:
        raise ValueError("k must be positive")
    remainders = Counter(x % k for x in arr)
    if remainders[0] % 2:
        return False
    return all(remainders[r] == remainders[k - r] for r in range(1, k // 2 + 1))


def largest_vals_from_labels(
    values: Sequence[int],
    labels: Sequence[int],
    num_wanted: int,
    use_limit: int,
) -> int:
    """Largest sum of at most ``num_wanted`` values, ``use_limit`` per label."""
    if len(values) != len(labels):
        raise ValueError("values and labels must have equal length")
    used: Counter[int] = Counter()
    total = taken = 0
    for value, label in sorted(zip(values, labels), reverse=True):
        if taken >= num_wanted:
            break
        if used[label] < use_limit:
            total += value
            used[label] += 1
            taken += 1
    return total


def single_number_ii(nums: Sequence[int]) -> int:
    """The element occurring exactly once, or -1 if there is none."""
    return next((value for value, count in Counter(nums).items() if count == 1), -1)