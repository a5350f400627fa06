"""Binary tree problems: builders, path sums, BST repair and reshaping."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree_preorder(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from its preorder listing, with None for each absent child.

    Raises ValueError when the listing ends before the tree is complete.
    """
    items = iter(values)

    def build() -> Optional[TreeNode]:
        try:
            value = next(items)
        except StopIteration:
            raise ValueError("preorder listing ends before the tree is complete") from None
        if value is None:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_tree_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from its level-order listing, with None for each absent child.

    Children missing from the end of the listing are taken as absent.
    """
    items = iter(values)
    root_value = next(items, None)
    if root_value is None:
        return None
    root = TreeNode(root_value)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left_value = next(items, None)
        if left_value is not None:
            node.left = TreeNode(left_value)
            pending.append(node.left)
        right_value = next(items, None)
        if right_value is not None:
            node.right = TreeNode(right_value)
            pending.append(node.right)
    return root


def insert_bst(
    root: Optional[TreeNode], value: int, allow_duplicates: bool = False
) -> TreeNode:
    """Insert ``value`` into a binary search tree and return its root.

    Equal values go to the right when ``allow_duplicates`` is set and are
    ignored otherwise.
    """
    if root is None:
        return TreeNode(value)
    node = root
    while True:
        if value < node.val:
            if node.left is None:
                node.left = TreeNode(value)
                break
            node = node.left
        elif value > node.val or allow_duplicates:
            if node.right is None:
                node.right = TreeNode(value)
                break
            node = node.right
        else:
            break
    return root


def bst_from_values(
    values: Iterable[int], allow_duplicates: bool = False
) -> Optional[TreeNode]:
    """Binary search tree made by inserting ``values`` in order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = insert_bst(root, value, allow_duplicates)
    return root


def _inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values of the tree in in-order sequence."""
    return [node.val for node in _inorder_nodes(root)]


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Values of the tree level by level, left to right."""
    if root is None:
        return []
    result: list[int] = []
    pending = deque([root])
    while pending:
        node = pending.popleft()
        result.append(node.val)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return result


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum along any path between two nodes; ValueError for an empty tree."""
    if root is None:
        raise ValueError("tree is empty")
    best = -math.inf

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return int(best)


def max_sum_bst(root: Optional[TreeNode]) -> int:
    """Largest key sum of a subtree that is a binary search tree, at least 0."""
    best = 0

    def visit(node: Optional[TreeNode]) -> Optional[tuple[int, float, float]]:
        nonlocal best
        if node is None:
            return 0, math.inf, -math.inf
        left = visit(node.left)
        right = visit(node.right)
        if left is None or right is None:
            return None
        left_sum, left_min, left_max = left
        right_sum, right_min, right_max = right
        if not left_max < node.val < right_min:
            return None
        total = node.val + left_sum + right_sum
        best = max(best, total)
        return total, min(node.val, left_min), max(node.val, right_max)

    visit(root)
    return best


def _balanced(values: Sequence[int]) -> Optional[TreeNode]:
    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = start + (end - start) // 2
        return TreeNode(values[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(values) - 1)


def balance_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """A height-balanced search tree holding the same values as ``root``."""
    return _balanced(inorder(root))


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """A balanced search tree of the values of ``root`` without any ``key``."""
    return _balanced([value for value in inorder(root) if value != key])


def recover_tree(root: Optional[TreeNode]) -> None:
    """Swap back, in place, the values of two nodes exchanged by mistake."""
    first = second = previous = None
    for node in _inorder_nodes(root):
        if previous is not None and node.val < previous.val:
            if first is None:
                first = previous
            second = node
        previous = node
    if first is not None and second is not None:
        first.val, second.val = second.val, first.val


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Value of the rightmost node on each level, top to bottom."""
    if root is None:
        return []
    view: list[int] = []
    level = [root]
    while level:
        view.append(level[-1].val)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return view


def flatten(root: Optional[TreeNode]) -> None:
    """Relink the tree in place into a right-leaning chain in preorder."""
    nodes = list(_preorder_nodes(root))
    for node, following in zip(nodes, nodes[1:]):
        node.left = None
        node.right = following