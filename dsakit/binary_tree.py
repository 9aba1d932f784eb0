"""Binary tree nodes, traversals and structural queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node; ``next_right`` links nodes on the same level."""

    data: Any
    left: Node | None = None
    right: Node | None = None
    next_right: Node | None = field(default=None, repr=False)


@dataclass(eq=False)
class ThreadedNode:
    """A node of a right-threaded binary tree.

    When ``right_thread`` is true, ``right`` points to the inorder successor
    rather than to a right child.
    """

    data: Any
    left: ThreadedNode | None = None
    right: ThreadedNode | None = field(default=None, repr=False)
    right_thread: bool = False


def preorder(root: Node | None) -> list[Any]:
    """Return the node values in preorder (node, left, right)."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root: Node | None) -> list[Any]:
    """Return the node values in inorder (left, node, right)."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: Node | None) -> list[Any]:
    """Return the node values in postorder (left, right, node)."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def inorder_iterative(root: Node | None) -> list[Any]:
    """Return the inorder values using an explicit stack instead of recursion."""
    result = []
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
        else:
            current = stack.pop()
            result.append(current.data)
            current = current.right
    return result


def height(root: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def nodes_at_level(root: Node | None, level: int) -> list[Any]:
    """Return the values on ``level``, counting the root as level 1."""
    if root is None or level < 1:
        return []
    if level == 1:
        return [root.data]
    return nodes_at_level(root.left, level - 1) + nodes_at_level(root.right, level - 1)


def level_order(root: Node | None) -> list[Any]:
    """Return the node values level by level, left to right."""
    return [
        value
        for level in range(1, height(root) + 1)
        for value in nodes_at_level(root, level)
    ]


def _width(root: Node | None, level: int) -> int:
    if root is None or level < 1:
        return 0
    if level == 1:
        return 1
    return _width(root.left, level - 1) + _width(root.right, level - 1)


def max_width(root: Node | None) -> int:
    """Return the largest number of nodes on any one level."""
    return max((_width(root, level) for level in range(1, height(root) + 1)), default=0)


def nodes_at_distance(root: Node | None, k: int) -> list[Any]:
    """Return the values of nodes exactly ``k`` edges below the root."""
    if root is None or k < 0:
        return []
    if k == 0:
        return [root.data]
    return nodes_at_distance(root.left, k - 1) + nodes_at_distance(root.right, k - 1)


def diameter(root: Node | None) -> int:
    """Return the number of nodes on the longest path between two leaves."""
    if root is None:
        return 0
    through_root = height(root.left) + height(root.right) + 1
    return max(through_root, diameter(root.left), diameter(root.right))


def are_identical(first: Node | None, second: Node | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.data == second.data
        and are_identical(first.left, second.left)
        and are_identical(first.right, second.right)
    )


def is_subtree(tree: Node | None, sub: Node | None) -> bool:
    """Tell whether ``sub`` matches some complete subtree of ``tree``."""
    if sub is None:
        return True
    if tree is None:
        return False
    if are_identical(tree, sub):
        return True
    return is_subtree(tree.left, sub) or is_subtree(tree.right, sub)


def _connect(node: Node | None) -> None:
    if node is None:
        return
    if node.left is not None:
        node.left.next_right = node.right
    if node.right is not None:
        node.right.next_right = node.next_right.left if node.next_right else None
    _connect(node.left)
    _connect(node.right)


def connect_level(root: Node) -> None:
    """Set ``next_right`` of every node to its right neighbour on the same level.

    The tree is assumed to be complete, as the linking relies on it.
    """
    root.next_right = None
    _connect(root)


def leftmost(node: ThreadedNode | Node | None) -> ThreadedNode | Node | None:
    """Return the leftmost node of the tree rooted at ``node``."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def threaded_inorder(root: ThreadedNode | None) -> list[Any]:
    """Return the inorder values of a right-threaded tree without a stack."""
    result = []
    current = leftmost(root)
    while current is not None:
        result.append(current.data)
        if current.right_thread:
            current = current.right
        else:
            current = leftmost(current.right)
    return result