"""Problems about sums of elements: k-sums, subarrays, subsequences and paths."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

MOD = 1_000_000_007


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """All unique quadruplets of ``nums`` that sum to ``target``, each sorted."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            left, right = j + 1, n - 1
            while left < right:
                total = values[i] + values[j] + values[left] + values[right]
                if total == target:
                    result.append([values[i], values[j], values[left], values[right]])
                    while left < right and values[left] == values[left + 1]:
                        left += 1
                    while left < right and values[right] == values[right - 1]:
                        right -= 1
                    left += 1
                    right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return result


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Sum of the three elements whose total is closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are needed")
    if len(nums) == 3:
        return sum(nums)
    values = sorted(nums)
    best = values[0] + values[1] + values[2]
    for i, first in enumerate(values):
        left, right = i + 1, len(values) - 1
        wanted = target - first
        while left < right:
            pair = values[left] + values[right]
            if abs(pair + first - target) < abs(best - target):
                best = pair + first
            if pair < wanted:
                left += 1
            elif pair > wanted:
                right -= 1
            else:
                return target
    return best


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays whose sum is ``k``."""
    seen = Counter({0: 1})
    running = 0
    count = 0
    for x in nums:
        running += x
        count += seen[running - k]
        seen[running] += 1
    return count


def num_subseq(nums: Sequence[int], target: int) -> int:
    """Non-empty subsequences whose minimum plus maximum is at most ``target``.

    The count is taken modulo 1_000_000_007.
    """
    values = sorted(nums)
    total = 0
    j = len(values) - 1
    for i, low in enumerate(values):
        while j >= i and low + values[j] > target:
            j -= 1
        if i > j:
            continue
        total = (total + pow(2, j - i, MOD)) % MOD
    return total


def triangle_number(nums: Sequence[int]) -> int:
    """Number of triplets of ``nums`` that can be the sides of a triangle."""
    values = sorted(nums)
    count = 0
    for i in range(len(values) - 1, 1, -1):
        left, right = 0, i - 1
        while left < right:
            if values[left] + values[right] > values[i]:
                count += right - left
                right -= 1
            else:
                left += 1
    return count


def max_sum(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Best path score through two sorted arrays, switching at shared values.

    The score is taken modulo 1_000_000_007.
    """
    i = j = 0
    best = sum_a = sum_b = 0
    while i < len(nums1) and j < len(nums2):
        a, b = nums1[i], nums2[j]
        if a < b:
            sum_a += a
            i += 1
        elif a > b:
            sum_b += b
            j += 1
        else:
            best += max(sum_a, sum_b) + a
            sum_a = sum_b = 0
            i += 1
            j += 1
    sum_a += sum(nums1[i:])
    sum_b += sum(nums2[j:])
    best += max(sum_a, sum_b)
    return best % MOD