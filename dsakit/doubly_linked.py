"""Doubly linked lists with insertion, removal and merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list.

    The same node type serves as a binary tree node, with ``prev`` as the
    left child and ``next`` as the right child.
    """

    data: Any
    next: DNode | None = field(default=None, repr=False)
    prev: DNode | None = field(default=None, repr=False)


def _split(head: DNode) -> DNode | None:
    fast = slow = head
    while fast.next is not None and fast.next.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[assignment]
    second = slow.next
    slow.next = None
    if second is not None:
        second.prev = None
    return second


def _merge(first: DNode | None, second: DNode | None) -> DNode | None:
    anchor = DNode(None)
    tail = anchor
    while first is not None and second is not None:
        if first.data < second.data:
            node, first = first, first.next
        else:
            node, second = second, second.next
        tail.next = node
        node.prev = tail
        tail = node
    rest = first if first is not None else second
    tail.next = rest
    if rest is not None:
        rest.prev = tail
    head = anchor.next
    if head is not None:
        head.prev = None
    return head


def merge_sort(head: DNode | None) -> DNode | None:
    """Sort a doubly linked list by its values and return the new head.

    Both ``next`` and ``prev`` links are rebuilt.
    """
    if head is None or head.next is None:
        return head
    second = _split(head)
    return _merge(merge_sort(head), merge_sort(second))


class DoublyLinkedList:
    """A doubly linked list that keeps a reference to its head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DNode | None = None
        tail: DNode | None = None
        for value in values:
            node = DNode(value, prev=tail)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def push(self, data: Any) -> DNode:
        """Insert ``data`` at the front and return its node."""
        node = DNode(data, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node
        return node

    def insert_before(self, node: DNode | None, data: Any) -> DNode:
        """Insert ``data`` just before ``node`` and return the new node."""
        if node is None:
            raise ValueError("the given next node cannot be None")
        new_node = DNode(data, next=node, prev=node.prev)
        node.prev = new_node
        if new_node.prev is not None:
            new_node.prev.next = new_node
        else:
            self.head = new_node
        return new_node

    def remove(self, node: DNode | None) -> None:
        """Unlink ``node`` from the list; nothing happens for None or an empty list."""
        if self.head is None or node is None:
            return
        if self.head is node:
            self.head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        if node.prev is not None:
            node.prev.next = node.next
        node.next = node.prev = None

    def sort(self) -> None:
        """Sort the list in place by merge sort."""
        self.head = merge_sort(self.head)

    def nodes(self) -> Iterator[DNode]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def __reversed__(self) -> Iterator[Any]:
        tail: DNode | None = None
        for tail in self.nodes():
            pass
        while tail is not None:
            yield tail.data
            tail = tail.prev

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())