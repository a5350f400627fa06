"""Small data-structure designs: a FIFO queue, a wildcard word store, a running median."""

from __future__ import annotations

import heapq
from collections import defaultdict


class MyQueue:
    """First-in first-out queue kept in two stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def push(self, x: int) -> None:
        """Add ``x`` to the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> int:
        """Remove and return the front element; IndexError if empty."""
        self._refill()
        if not self._outbox:
            raise IndexError("pop from empty queue")
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the front element without removing it; IndexError if empty."""
        self._refill()
        if not self._outbox:
            raise IndexError("peek at empty queue")
        return self._outbox[-1]

    def empty(self) -> bool:
        """True when the queue holds no elements."""
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class WordDictionary:
    """Word store whose search accepts '.' as a one-character wildcard."""

    def __init__(self) -> None:
        self._by_length: defaultdict[int, list[str]] = defaultdict(list)

    def add_word(self, word: str) -> None:
        """Store ``word``."""
        self._by_length[len(word)].append(word)

    def search(self, word: str) -> bool:
        """True if a stored word matches ``word``, where '.' matches any character."""
        candidates = self._by_length.get(len(word), ())
        return any(
            all(p == "." or p == c for c, p in zip(candidate, word))
            for candidate in candidates
        )


class MedianFinder:
    """Running median over a stream of numbers."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max-heap of the lower half, negated
        self._high: list[int] = []  # min-heap of the upper half

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        if not self._low or -self._low[0] >= num:
            heapq.heappush(self._low, -num)
        else:
            heapq.heappush(self._high, num)

        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._low) < len(self._high):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Median of the numbers added so far; ValueError if none were added."""
        if not self._low:
            raise ValueError("no numbers have been added")
        if len(self._low) == len(self._high):
            return -self._low[0] / 2.0 + self._high[0] / 2.0
        return float(-self._low[0])