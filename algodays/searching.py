"""Binary searches and lookups over sorted or partly sorted data."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of two sorted arrays taken together.

    Raises ValueError when both are empty or the arrays are found not sorted.
    """
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    m, n = len(nums1), len(nums2)
    if m + n == 0:
        raise ValueError("both arrays are empty")

    low, high = 0, m
    neg_inf, pos_inf = float("-inf"), float("inf")
    while low <= high:
        part1 = (low + high) // 2
        part2 = (m + n + 1) // 2 - part1

        max_left1 = neg_inf if part1 == 0 else nums1[part1 - 1]
        min_right1 = pos_inf if part1 == m else nums1[part1]
        max_left2 = neg_inf if part2 == 0 else nums2[part2 - 1]
        min_right2 = pos_inf if part2 == n else nums2[part2]

        if max_left1 <= min_right2 and max_left2 <= min_right1:
            left = max(max_left1, max_left2)
            if (m + n) % 2 == 0:
                return (left + min(min_right1, min_right2)) / 2
            return float(left)
        if max_left1 > min_right2:
            high = part1 - 1
        else:
            low = part1 + 1

    raise ValueError("input arrays are not sorted")


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted array, or -1 if absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        else:
            if nums[mid] < target <= nums[right]:
                left = mid + 1
            else:
                right = mid - 1
    return -1


def count_pairs(mid: int, nums: Sequence[int]) -> int:
    """Number of pairs in sorted ``nums`` whose distance is at most ``mid``."""
    count = 0
    j = 0
    for i, value in enumerate(nums):
        while j < len(nums) and nums[j] - value <= mid:
            j += 1
        count += j - i - 1
    return count


def smallest_distance_pair(nums: Sequence[int], k: int) -> int:
    """The k-th smallest distance among all pairs of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    ordered = sorted(nums)
    left, right = 0, ordered[-1] - ordered[0]
    while left < right:
        mid = left + (right - left) // 2
        if count_pairs(mid, ordered) < k:
            left = mid + 1
        else:
            right = mid
    return left


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """The k-th positive integer missing from strictly increasing ``arr``."""
    if not arr:
        return k
    lo, hi = 0, len(arr) - 1
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if arr[mid] - mid - 1 < k:
            lo = mid + 1
        else:
            hi = mid
    if arr[lo] - lo - 1 < k:
        return lo + k + 1
    return lo + k


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """True if ``target`` is in a matrix sorted along its rows and columns."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if target > value:
            row += 1
        else:
            col -= 1
    return False


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The element that occurs exactly once, or 0 if there is none."""
    counts = Counter(nums)
    return next((value for value, count in counts.items() if count == 1), 0)