"""String problems: arithmetic on digit strings, parsing, windows and partitions."""

from __future__ import annotations

import re
from collections import Counter
from functools import cmp_to_key
from typing import Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_DIGITS = "0123456789"
_DIGIT_RUN = re.compile(r"[0-9]+")


def multiply(num1: str, num2: str) -> str:
    """Product of two non-negative integers given as digit strings."""
    if num1 == "0" or num2 == "0":
        return "0"
    result = [0] * (len(num1) + len(num2))
    for i in reversed(range(len(num1))):
        a = int(num1[i])
        for j in reversed(range(len(num2))):
            total = a * int(num2[j]) + result[i + j + 1]
            result[i + j + 1] = total % 10
            result[i + j] += total // 10
    digits = "".join(map(str, result)).lstrip("0")
    return digits or "0"


def add_strings(num1: str, num2: str) -> str:
    """Sum of two non-negative integers given as digit strings."""
    out: list[str] = []
    carry = 0
    i, j = len(num1) - 1, len(num2) - 1
    while i >= 0 or j >= 0 or carry:
        total = carry
        if i >= 0:
            total += int(num1[i])
        if j >= 0:
            total += int(num2[j])
        carry, digit = divmod(total, 10)
        out.append(str(digit))
        i -= 1
        j -= 1
    return "".join(reversed(out))


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; unknown characters count as zero."""
    values = [_ROMAN_VALUES.get(ch, 0) for ch in s]
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


def zigzag_convert(s: str, num_rows: int) -> str:
    """Read ``s`` written in a zigzag over ``num_rows`` rows, row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1 or num_rows >= len(s):
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    index, step = 0, 1
    for ch in s:
        rows[index].append(ch)
        if index == 0:
            step = 1
        elif index == num_rows - 1:
            step = -1
        index += step
    return "".join("".join(row) for row in rows)


def num_different_integers(word: str) -> int:
    """Number of distinct integers formed by the digit runs in ``word``."""
    return len({run.lstrip("0") or "0" for run in _DIGIT_RUN.findall(word)})


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").split(" ")[-1])


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t``, or ""."""
    if not t:
        return ""
    need = Counter(t)
    missing = len(t)
    best_start, best_len = 0, None
    left = 0
    for right, ch in enumerate(s):
        if need[ch] > 0:
            missing -= 1
        need[ch] -= 1
        while missing == 0:
            width = right + 1 - left
            if best_len is None or width < best_len:
                best_start, best_len = left, width
            need[s[left]] += 1
            if need[s[left]] > 0:
                missing += 1
            left += 1
    return "" if best_len is None else s[best_start : best_start + best_len]


def partition_string(s: str) -> int:
    """Fewest substrings of ``s`` in which no character repeats (at least 1)."""
    count = 1
    seen: set[str] = set()
    for ch in s:
        if ch in seen:
            count += 1
            seen.clear()
        seen.add(ch)
    return count


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the first one wins a tie."""
    best = ""
    for centre in range(2 * len(s) - 1):
        left = centre // 2
        right = left + centre % 2
        while left >= 0 and right < len(s) and s[left] == s[right]:
            left -= 1
            right += 1
        if right - left - 1 > len(best):
            best = s[left + 1 : right]
    return best


def my_atoi(s: str) -> int:
    """Parse a leading signed integer, clamped to the 32-bit signed range."""
    i = 0
    while i < len(s) and s[i] == " ":
        i += 1
    sign = 1
    if i < len(s) and s[i] in "+-":
        sign = -1 if s[i] == "-" else 1
        i += 1
    value = 0
    while i < len(s) and s[i] in _DIGITS:
        value = value * 10 + int(s[i])
        if value * sign <= INT_MIN:
            return INT_MIN
        if value * sign >= INT_MAX:
            return INT_MAX
        i += 1
    return value * sign


def is_number(s: str) -> bool:
    """True if ``s``, trimmed of spaces, is a valid decimal number."""
    text = s.strip(" ")
    has_digit = has_dot = has_exp = False
    for i, ch in enumerate(text):
        if ch in _DIGITS:
            has_digit = True
        elif ch in "+-":
            if i > 0 and text[i - 1] not in "eE":
                return False
        elif ch == ".":
            if has_dot or has_exp:
                return False
            has_dot = True
        elif ch in "eE":
            if has_exp or not has_digit:
                return False
            has_exp = True
            has_digit = False
        else:
            return False
    return has_digit


def first_uniq_char(s: str) -> int:
    """Index of the first character occurring once in ``s``, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)


def _space_separated(text: str) -> list[str]:
    words = text.split(" ")
    if words and words[-1] == "":
        words.pop()
    return words


def uncommon_from_sentences(s1: str, s2: str) -> list[str]:
    """Words occurring exactly once across both sentences, in order of appearance."""
    counts = Counter(_space_separated(s1 + " " + s2))
    return [word for word, count in counts.items() if count == 1]


def are_sentences_similar(s1: str, s2: str) -> bool:
    """True if inserting one run of words into the shorter sentence gives the longer."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    longer, shorter = s1.split(" "), s2.split(" ")
    limit = min(len(longer), len(shorter))
    prefix = 0
    while prefix < limit and longer[prefix] == shorter[prefix]:
        prefix += 1
    suffix = 0
    while suffix < limit and longer[-1 - suffix] == shorter[-1 - suffix]:
        suffix += 1
    return prefix + suffix >= len(shorter)


def find_anagrams(s: str, p: str) -> list[int]:
    """Start indices of every substring of ``s`` that is an anagram of ``p``."""
    size = len(p)
    if size == 0:
        return []
    target = Counter(p)
    window: Counter[str] = Counter()
    result: list[int] = []
    for i, ch in enumerate(s):
        window[ch] += 1
        if i >= size - 1:
            start = i - size + 1
            if +window == target:
                result.append(start)
            window[s[start]] -= 1
    return result


def partition_labels(s: str) -> list[int]:
    """Sizes of the most parts ``s`` splits into with each letter in one part."""
    last = {ch: i for i, ch in enumerate(s)}
    sizes: list[int] = []
    start = end = 0
    for i, ch in enumerate(s):
        end = max(end, last[ch])
        if i == end:
            sizes.append(end - start + 1)
            start = i + 1
    return sizes


def orderly_queue(s: str, k: int) -> str:
    """Smallest string reachable by moving one of the first ``k`` letters to the end."""
    if k == 1:
        return min((s[i:] + s[:i] for i in range(len(s))), default=s)
    return "".join(sorted(s))


def kth_distinct(arr: Sequence[str], k: int) -> str:
    """The k-th string occurring exactly once in ``arr``, or "" if there are fewer."""
    counts = Counter(arr)
    distinct = [item for item in arr if counts[item] == 1]
    return distinct[k - 1] if 1 <= k <= len(distinct) else ""


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Sequence[int]) -> str:
    """Largest number formed by concatenating ``nums``, as a string."""
    if not nums:
        raise ValueError("nums must not be empty")
    parts = sorted(map(str, nums), key=cmp_to_key(_concat_order))
    if parts[0] == "0":
        return "0"
    return "".join(parts)