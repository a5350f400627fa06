"""Number-theory and arithmetic problems."""

from __future__ import annotations

import math
from itertools import combinations
from typing import Sequence


def min_steps(n: int) -> int:
    """Fewest copy-all and paste steps to get ``n`` characters from one."""
    steps = 0
    factor = 2
    while n > 1:
        while n % factor == 0:
            steps += factor
            n //= factor
        factor += 1
    return steps


def kth_factor(n: int, k: int) -> int:
    """The k-th smallest positive divisor of ``n``, or -1 if there are fewer."""
    if k < 1:
        raise ValueError("k must be at least 1")
    divisors = [d for d in range(1, n + 1) if n % d == 0]
    return divisors[k - 1] if k <= len(divisors) else -1


def arrange_coins(n: int) -> int:
    """Number of complete staircase rows that ``n`` coins build."""
    if n <= 0:
        return 0
    return (math.isqrt(8 * n + 1) - 1) // 2


def judge_square_sum(c: int) -> bool:
    """True if ``c`` is the sum of two squares of non-negative integers."""
    if c < 0:
        raise ValueError("c must be non-negative")
    a, b = 0, math.isqrt(c)
    while a <= b:
        total = a * a + b * b
        if total == c:
            return True
        if total < c:
            a += 1
        else:
            b -= 1
    return False


def lexical_order(n: int) -> list[int]:
    """The numbers 1 to ``n`` in lexicographical order."""
    result: list[int] = []
    current = 1
    for _ in range(n):
        result.append(current)
        if current * 10 <= n:
            current *= 10
        else:
            if current >= n:
                current //= 10
            current += 1
            while current % 10 == 0:
                current //= 10
    return result


def get_permutation(n: int, k: int) -> str:
    """The k-th permutation, in lexicographic order, of the digits 1 to ``n``."""
    if not 1 <= n <= 9:
        raise ValueError("n must be between 1 and 9")
    if not 1 <= k <= math.factorial(n):
        raise ValueError("k is out of range")
    digits = [str(d) for d in range(1, n + 1)]
    k -= 1
    chosen: list[str] = []
    for remaining in range(n, 0, -1):
        index, k = divmod(k, math.factorial(remaining - 1))
        chosen.append(digits.pop(index))
    return "".join(chosen)


def largest_triangle_area(points: Sequence[Sequence[int]]) -> float:
    """Area of the largest triangle with corners among ``points``."""
    if len(points) < 3:
        raise ValueError("at least three points are needed")
    return max(
        0.5 * abs(x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2))
        for (x1, y1, *_), (x2, y2, *_), (x3, y3, *_) in combinations(points, 3)
    )


def average_waiting_time(customers: Sequence[Sequence[int]]) -> float:
    """Average wait of customers served in order, each as (arrival, duration).

    The cook becomes free at time 1.
    """
    if not customers:
        raise ValueError("customers must not be empty")
    clock = 1
    waited = 0
    for arrival, duration in customers:
        clock = max(clock, arrival) + duration
        waited += clock - arrival
    return waited / len(customers)