"""Singly linked and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: ListNode | None = field(default=None, repr=False)


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of an acyclic linked list in order."""
    result = []
    node = head
    while node is not None:
        result.append(node.data)
        node = node.next
    return result


def add_two_lists(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Add two numbers stored as decimal digits, least significant first."""
    head: ListNode | None = None
    tail: ListNode | None = None
    carry = 0
    while first is not None or second is not None:
        total = carry
        if first is not None:
            total += first.data
            first = first.next
        if second is not None:
            total += second.data
            second = second.next
        carry = 1 if total >= 10 else 0
        node = ListNode(total % 10)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    if carry and tail is not None:
        tail.next = ListNode(carry)
    return head


def delete_at(head: ListNode | None, position: int) -> ListNode | None:
    """Remove the node at ``position`` and return the new head.

    A position past the end leaves the list unchanged.
    """
    if position < 0:
        raise ValueError("position must be non-negative")
    if head is None:
        return None
    if position == 0:
        return head.next
    previous: ListNode | None = head
    for _ in range(position - 1):
        if previous is None:
            break
        previous = previous.next
    if previous is None or previous.next is None:
        return head
    previous.next = previous.next.next
    return head


def delete_key(head: ListNode | None, key: Any) -> ListNode | None:
    """Remove the first node holding ``key`` and return the new head."""
    if head is None:
        return None
    if head.data == key:
        return head.next
    previous = head
    while previous.next is not None:
        if previous.next.data == key:
            previous.next = previous.next.next
            break
        previous = previous.next
    return head


def detect_and_remove_loop(head: ListNode | None) -> bool:
    """Break a cycle in the list if there is one; tell whether one was found."""
    slow = fast = head
    while slow is not None and fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            _remove_loop(slow, head)
            return True
    return False


def _remove_loop(loop_node: ListNode, head: ListNode) -> None:
    start = head
    while True:
        last = loop_node
        while last.next is not loop_node and last.next is not start:
            last = last.next
        if last.next is start:
            break
        start = start.next
    last.next = None


class CircularList:
    """A circular singly linked list with insertion at the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, data: Any) -> None:
        """Insert ``data`` at the beginning of the list."""
        node = ListNode(data)
        if self.head is None or self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self.head
            self._tail.next = node
        self.head = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        if node is None:
            return
        while True:
            yield node.data
            node = node.next
            if node is self.head:
                break

    def __len__(self) -> int:
        return self._size