"""Graph problems: regions cut by slashes and course scheduling."""

from __future__ import annotations

from collections import deque
from typing import Sequence


class _DisjointSet:
    """Union-find over the integers 0 to size - 1."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, i: int) -> int:
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; False if they were already one."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] > self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_a] = root_b
        self._size[root_b] += self._size[root_a]
        return True


def regions_by_slashes(grid: Sequence[str]) -> int:
    """Number of regions an n-by-n grid of ' ', '/' and '\\' cells divides into."""
    if any(len(row) != len(grid) for row in grid):
        raise ValueError("grid must be square")
    side = len(grid) + 1

    def point(r: int, c: int) -> int:
        return side * r + c + 1

    corners = _DisjointSet(side * side + 1)
    for i in range(side):
        for p in (point(i, 0), point(i, side - 1), point(0, i), point(side - 1, i)):
            corners.union(0, p)

    regions = 1
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == "/":
                a, b = point(r, c + 1), point(r + 1, c)
            elif cell == "\\":
                a, b = point(r, c), point(r + 1, c + 1)
            else:
                continue
            if not corners.union(a, b):
                regions += 1
    return regions


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """True if the prerequisite graph over ``num_courses`` courses has no cycle."""
    following: list[list[int]] = [[] for _ in range(num_courses)]
    indegree = [0] * num_courses
    for course, required in prerequisites:
        if not (0 <= course < num_courses and 0 <= required < num_courses):
            raise ValueError(f"course out of range: {course}, {required}")
        following[course].append(required)
        indegree[required] += 1

    ready = deque(i for i, degree in enumerate(indegree) if degree == 0)
    finished = 0
    while ready:
        node = ready.popleft()
        finished += 1
        for nxt in following[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                ready.append(nxt)
    return finished == num_courses