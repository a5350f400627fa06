"""Singly linked list problems: insertion sort and spiral filling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Linked list holding ``values`` in order; None when there are none."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Values of the list from head to tail."""
    return [node.val for node in _nodes(head)]


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by relinking its nodes; returns the new head."""
    if head is None or head.next is None:
        return head
    anchor = ListNode(0, head)
    current = head.next
    head.next = None
    while current is not None:
        following = current.next
        spot = anchor
        while spot.next is not None and spot.next.val < current.val:
            spot = spot.next
        current.next = spot.next
        spot.next = current
        current = following
    return anchor.next


def _spiral_cells(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for c in range(left, right + 1):
            yield top, c
        top += 1
        for r in range(top, bottom + 1):
            yield r, right
        right -= 1
        if top <= bottom:
            for c in range(right, left - 1, -1):
                yield bottom, c
            bottom -= 1
        if left <= right:
            for r in range(bottom, top - 1, -1):
                yield r, left
            left += 1


def spiral_matrix(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """An m-by-n matrix filled clockwise from the top left with the list's values.

    Cells left over hold -1. Raises ValueError when the list has more values
    than the matrix has cells.
    """
    if m < 0 or n < 0:
        raise ValueError("dimensions must be non-negative")
    matrix = [[-1] * n for _ in range(m)]
    cells = _spiral_cells(m, n)
    for node in _nodes(head):
        cell = next(cells, None)
        if cell is None:
            raise ValueError("the list holds more values than the matrix has cells")
        r, c = cell
        matrix[r][c] = node.val
    return matrix