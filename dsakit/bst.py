"""Binary search tree operations built on :class:`dsakit.binary_tree.Node`."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from dsakit.binary_tree import Node, inorder


@dataclass(eq=False)
class ParentNode:
    """A binary search tree node that also knows its parent."""

    data: Any
    left: ParentNode | None = None
    right: ParentNode | None = None
    parent: ParentNode | None = field(default=None, repr=False)


def is_bst(root: Node | None) -> bool:
    """Tell whether the tree is a binary search tree with distinct values."""

    def check(node: Node | None, low: Any, high: Any) -> bool:
        if node is None:
            return True
        if low is not None and node.data <= low:
            return False
        if high is not None and node.data >= high:
            return False
        return check(node.left, low, node.data) and check(node.right, node.data, high)

    return check(root, None, None)


def insert(root: Node | None, key: Any) -> Node:
    """Insert ``key`` and return the root; a key already present is ignored."""
    if root is None:
        return Node(key)
    if key < root.data:
        root.left = insert(root.left, key)
    elif key > root.data:
        root.right = insert(root.right, key)
    return root


def insert_allow_duplicates(root: Node | None, key: Any) -> Node:
    """Insert ``key`` and return the root; equal keys go to the right subtree."""
    if root is None:
        return Node(key)
    if key < root.data:
        root.left = insert_allow_duplicates(root.left, key)
    else:
        root.right = insert_allow_duplicates(root.right, key)
    return root


def insert_with_parent(root: ParentNode | None, key: Any) -> ParentNode:
    """Insert ``key`` into a parent-linked tree and return the root.

    Equal keys go to the left subtree.
    """
    if root is None:
        return ParentNode(key)
    if key <= root.data:
        child = insert_with_parent(root.left, key)
        root.left = child
    else:
        child = insert_with_parent(root.right, key)
        root.right = child
    child.parent = root
    return root


def min_value_node(root: Node | ParentNode | None) -> Node | ParentNode | None:
    """Return the node holding the smallest key, or None for an empty tree."""
    current = root
    while current is not None and current.left is not None:
        current = current.left
    return current


def min_value(root: Node | ParentNode | None) -> Any:
    """Return the smallest key of a non-empty tree."""
    node = min_value_node(root)
    if node is None:
        raise ValueError("tree is empty")
    return node.data


def delete(root: Node | None, key: Any) -> Node | None:
    """Remove one node holding ``key`` and return the new root."""
    if root is None:
        return None
    if key < root.data:
        root.left = delete(root.left, key)
    elif key > root.data:
        root.right = delete(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_value_node(root.right)
        root.data = successor.data
        root.right = delete(root.right, successor.data)
    return root


def ceil(root: Node | None, value: Any) -> Any:
    """Return the smallest key not less than ``value``, or None if there is none."""
    if root is None:
        return None
    if root.data == value:
        return root.data
    if root.data < value:
        return ceil(root.right, value)
    found = ceil(root.left, value)
    return found if found is not None and found >= value else root.data


def inorder_successor(node: ParentNode) -> ParentNode | None:
    """Return the node that follows ``node`` in inorder, or None if it is last."""
    if node.right is not None:
        return min_value_node(node.right)
    parent = node.parent
    while parent is not None and node is parent.right:
        node = parent
        parent = parent.parent
    return parent


def lowest_common_ancestor(root: Node | None, n1: Any, n2: Any) -> Node | None:
    """Return the lowest common ancestor of two keys assumed present in the tree."""
    current = root
    while current is not None:
        if current.data > n1 and current.data > n2:
            current = current.left
        elif current.data < n1 and current.data < n2:
            current = current.right
        else:
            return current
    return None


def _walk(root: Node | None, reverse: bool) -> Iterator[Any]:
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.right if reverse else current.left
        else:
            current = stack.pop()
            yield current.data
            current = current.left if reverse else current.right


def has_pair_with_sum(root: Node | None, target: Any) -> bool:
    """Tell whether two distinct nodes of a BST have keys adding up to ``target``."""
    ascending = _walk(root, reverse=False)
    descending = _walk(root, reverse=True)
    low = next(ascending, None)
    high = next(descending, None)
    if low is None:
        return False
    while low < high:
        pair_sum = low + high
        if pair_sum == target:
            return True
        if pair_sum < target:
            low = next(ascending)
        else:
            high = next(descending)
    return False


def _nodes_inorder(root: Node | None) -> Iterator[Node]:
    if root is None:
        return
    yield from _nodes_inorder(root.left)
    yield root
    yield from _nodes_inorder(root.right)


def binary_tree_to_bst(root: Node | None) -> None:
    """Rearrange the values of a binary tree in place so that it becomes a BST.

    The shape of the tree is kept; only the values move.
    """
    values = sorted(inorder(root))
    for node, value in zip(_nodes_inorder(root), values):
        node.data = value