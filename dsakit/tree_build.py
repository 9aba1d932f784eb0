"""Building binary trees from traversals and from sorted linked lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dsakit.binary_tree import Node
from dsakit.doubly_linked import DNode


def build_tree(inorder_seq: Sequence[Any], preorder_seq: Sequence[Any]) -> Node | None:
    """Rebuild a binary tree from its inorder and preorder traversals."""
    if len(inorder_seq) != len(preorder_seq):
        raise ValueError("traversals must have the same length")
    upcoming = iter(preorder_seq)

    def build(start: int, end: int) -> Node | None:
        if start > end:
            return None
        value = next(upcoming)
        node = Node(value)
        if start == end:
            if inorder_seq[start] != value:
                raise ValueError("traversals do not describe the same tree")
            return node
        try:
            index = list(inorder_seq[start : end + 1]).index(value) + start
        except ValueError:
            raise ValueError(
                f"value {value!r} not found in the inorder traversal"
            ) from None
        node.left = build(start, index - 1)
        node.right = build(index + 1, end)
        return node

    return build(0, len(inorder_seq) - 1)


def sorted_list_to_bst(head: DNode | None) -> DNode | None:
    """Turn a sorted doubly linked list into a balanced BST in place.

    The list nodes are reused: ``prev`` becomes the left child and ``next``
    the right child. Returns the root.
    """
    count = 0
    node = head
    while node is not None:
        count += 1
        node = node.next

    current = head

    def build(n: int) -> DNode | None:
        nonlocal current
        if n <= 0:
            return None
        left = build(n // 2)
        root = current
        assert root is not None
        root.prev = left
        current = root.next
        root.next = build(n - n // 2 - 1)
        return root

    return build(count)