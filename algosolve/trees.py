"""Binary trees: level-order conversion, traversals, construction and search."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Optional, Sequence

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def tree_from_level_order(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_to_level_order(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return level-order values with None for missing children, trailing Nones dropped."""
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values level by level, alternating left-to-right and right-to-left."""
    result: list[list[int]] = []
    level = [root] if root is not None else []
    left_to_right = True
    while level:
        values = [node.val for node in level]
        result.append(values if left_to_right else values[::-1])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        left_to_right = not left_to_right
    return result


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder traversals."""
    positions: dict[int, int] = {}
    for index, value in enumerate(inorder):
        positions.setdefault(value, index)
    size = len(preorder)
    next_index = 0

    def solve(start: int, end: int) -> Optional[TreeNode]:
        nonlocal next_index
        if next_index >= size or start > end:
            return None
        element = preorder[next_index]
        next_index += 1
        position = positions.get(element, -1)
        node = TreeNode(element)
        node.left = solve(start, position - 1)
        node.right = solve(position + 1, end)
        return node

    return solve(0, size - 1)


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in root-left-right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def path_sum(root: Optional[TreeNode], target_sum: int) -> int:
    """Count downward paths whose values add up to ``target_sum``."""
    seen = Counter({0: 1})

    def walk(node: Optional[TreeNode], running: int) -> int:
        if node is None:
            return 0
        running += node.val
        found = seen[running - target_sum]
        seen[running] += 1
        found += walk(node.left, running) + walk(node.right, running)
        seen[running] -= 1
        return found

    return walk(root, 0)


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node of a binary search tree holding ``val``, or None."""
    node = root
    while node is not None:
        if node.val == val:
            return node
        node = node.left if val < node.val else node.right
    return None


def all_possible_fbt(n: int) -> list[TreeNode]:
    """Return every full binary tree with ``n`` nodes, all valued 0.

    Subtrees may be shared between the returned trees.
    """
    cache: dict[int, list[TreeNode]] = {}

    def build(size: int) -> list[TreeNode]:
        if size % 2 == 0:
            return []
        if size == 1:
            return [TreeNode(0)]
        if size in cache:
            return cache[size]
        result = [
            TreeNode(0, left, right)
            for left_size in range(1, size, 2)
            for left in build(left_size)
            for right in build(size - left_size - 1)
        ]
        cache[size] = result
        return result

    return build(n)