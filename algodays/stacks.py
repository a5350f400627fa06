"""Problems solved with stacks, monotonic stacks and deques."""

from __future__ import annotations

import operator
from collections import deque
from itertools import accumulate
from typing import Callable, Sequence

_REMOVABLE_PAIRS = frozenset({"AB", "CD"})

_RPN_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def min_length(s: str) -> int:
    """Length of ``s`` after repeatedly removing every "AB" and "CD"."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] + ch in _REMOVABLE_PAIRS:
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def reverse_parentheses(s: str) -> str:
    """Reverse the text inside each pair of parentheses, innermost first.

    Raises ValueError on a closing parenthesis without a matching opening one.
    """
    stack: list[str] = []
    for ch in s:
        if ch != ")":
            stack.append(ch)
            continue
        segment: list[str] = []
        while stack and stack[-1] != "(":
            segment.append(stack.pop())
        if not stack:
            raise ValueError("unbalanced parentheses: unexpected ')'")
        stack.pop()
        stack.extend(segment)
    return "".join(stack)


def remove_substring(s: str, sub: str, points: int) -> tuple[str, int]:
    """Greedily remove every two-character ``sub`` from ``s``.

    Returns the remaining string and the points earned, ``points`` per removal.
    """
    if len(sub) != 2:
        raise ValueError("sub must be exactly two characters long")
    first, second = sub
    stack: list[str] = []
    total = 0
    for ch in s:
        if stack and stack[-1] == first and ch == second:
            stack.pop()
            total += points
        else:
            stack.append(ch)
    return "".join(stack), total


def maximum_gain(s: str, x: int, y: int) -> int:
    """Maximum score from removing "ab" (worth ``x``) and "ba" (worth ``y``)."""
    if x >= y:
        rest, gained_first = remove_substring(s, "ab", x)
        _, gained_second = remove_substring(rest, "ba", y)
    else:
        rest, gained_first = remove_substring(s, "ba", y)
        _, gained_second = remove_substring(rest, "ab", x)
    return gained_first + gained_second


def survived_robots_healths(
    positions: Sequence[int], healths: Sequence[int], directions: str
) -> list[int]:
    """Healths of the robots left after all collisions, in input order."""
    if not len(positions) == len(healths) == len(directions):
        raise ValueError("positions, healths and directions must have equal length")
    health = list(healths)
    n = len(health)
    order = sorted(range(n), key=positions.__getitem__)
    result: list[int | None] = [None] * n
    moving_right: list[int] = []

    for idx in order:
        if directions[idx] == "R":
            moving_right.append(idx)
            continue
        while moving_right and health[idx] > 0:
            j = moving_right[-1]
            if health[j] < health[idx]:
                moving_right.pop()
                health[idx] -= 1
                result[j] = None
            elif health[j] > health[idx]:
                health[j] -= 1
                health[idx] = 0
            else:
                moving_right.pop()
                health[idx] = 0
                result[j] = None
        if health[idx] > 0:
            result[idx] = health[idx]

    for j in moving_right:
        result[j] = health[j]
    return [h for h in result if h is not None]


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Next greater element of each item in a circular array, -1 if none."""
    n = len(nums)
    result = [-1] * n
    pending: list[int] = []
    for i in range(2 * n):
        value = nums[i % n]
        while pending and nums[pending[-1]] < value:
            result[pending.pop()] = value
        if i < n:
            pending.append(i)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle in a histogram."""
    stack: list[int] = []
    best = 0
    bars = list(heights) + [0]
    for i, h in enumerate(bars):
        while stack and h < bars[stack[-1]]:
            height = bars[stack.pop()]
            width = i if not stack else i - stack[-1] - 1
            best = max(best, height * width)
        stack.append(i)
    return best


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest rectangle of '1' cells in a binary matrix."""
    if not matrix:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [h + 1 if cell == "1" else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def eval_rpn(tokens: Sequence[str]) -> int:
    """Evaluate an expression in reverse Polish notation.

    Division truncates toward zero. Raises ValueError on a malformed
    expression and ZeroDivisionError on division by zero.
    """
    stack: list[int] = []
    for token in tokens:
        if token in _RPN_OPERATORS or token == "/":
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            if token == "/":
                stack.append(_truncating_divide(left, right))
            else:
                stack.append(_RPN_OPERATORS[token](left, right))
        else:
            stack.append(int(token))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive elements."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(nums):
        while window and nums[window[-1]] <= value:
            window.pop()
        if window and window[0] == i - k:
            window.popleft()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def trap(heights: Sequence[int]) -> int:
    """Units of rain water trapped between the bars of an elevation map."""
    if not heights:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        max(min(left, right) - h, 0)
        for h, left, right in zip(heights, left_max, right_max)
    )