"""Merging binary search trees."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from dsakit.binary_tree import Node, inorder


def merge_sorted(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list.

    On equal values the element from ``second`` is taken first.
    """
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def sorted_array_to_bst(values: Sequence[Any]) -> Node | None:
    """Build a balanced BST from a sorted sequence, taking the middle as root."""

    def build(start: int, end: int) -> Node | None:
        if start > end:
            return None
        mid = (start + end) // 2
        root = Node(values[mid])
        root.left = build(start, mid - 1)
        root.right = build(mid + 1, end)
        return root

    return build(0, len(values) - 1)


def merge_balanced(first: Node | None, second: Node | None) -> Node | None:
    """Merge two BSTs into a new balanced BST holding the keys of both."""
    return sorted_array_to_bst(merge_sorted(inorder(first), inorder(second)))


def _walk(root: Node | None) -> Iterator[Any]:
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
        else:
            current = stack.pop()
            yield current.data
            current = current.right


def merged_inorder(first: Node | None, second: Node | None) -> list[Any]:
    """Return the keys of two BSTs in sorted order without building a new tree."""
    left = _walk(first)
    right = _walk(second)
    result = []
    a = next(left, None)
    b = next(right, None)
    while a is not None and b is not None:
        if a < b:
            result.append(a)
            a = next(left, None)
        else:
            result.append(b)
            b = next(right, None)
    if a is not None:
        result.append(a)
        result.extend(left)
    if b is not None:
        result.append(b)
        result.extend(right)
    return result