"""Huffman coding with a min-heap and, for sorted input, with two queues."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class HuffmanNode:
    """A Huffman tree node; internal nodes carry ``None`` as their symbol."""

    data: Any
    freq: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _leaves(symbols: Sequence[Any], freqs: Sequence[int]) -> list[HuffmanNode]:
    if len(symbols) != len(freqs):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is needed")
    if any(freq < 0 for freq in freqs):
        raise ValueError("frequencies must be non-negative")
    return [HuffmanNode(symbol, freq) for symbol, freq in zip(symbols, freqs)]


def _join(left: HuffmanNode, right: HuffmanNode) -> HuffmanNode:
    return HuffmanNode(None, left.freq + right.freq, left, right)


def build_huffman_tree(symbols: Sequence[Any], freqs: Sequence[int]) -> HuffmanNode:
    """Build a Huffman tree by repeatedly joining the two least frequent nodes."""
    counter = itertools.count()
    heap = [(node.freq, next(counter), node) for node in _leaves(symbols, freqs)]
    heapq.heapify(heap)
    while len(heap) > 1:
        left = heapq.heappop(heap)[2]
        right = heapq.heappop(heap)[2]
        top = _join(left, right)
        heapq.heappush(heap, (top.freq, next(counter), top))
    return heap[0][2]


def build_huffman_tree_sorted(
    symbols: Sequence[Any], freqs: Sequence[int]
) -> HuffmanNode:
    """Build a Huffman tree in linear time from frequencies in non-decreasing order."""
    leaves = _leaves(symbols, freqs)
    if any(a > b for a, b in zip(freqs, freqs[1:])):
        raise ValueError("frequencies must be sorted in non-decreasing order")
    if len(leaves) == 1:
        return leaves[0]
    first: deque[HuffmanNode] = deque(leaves)
    second: deque[HuffmanNode] = deque()

    def take_min() -> HuffmanNode:
        if not first:
            return second.popleft()
        if not second:
            return first.popleft()
        if first[0].freq < second[0].freq:
            return first.popleft()
        return second.popleft()

    while first or len(second) != 1:
        left = take_min()
        right = take_min()
        second.append(_join(left, right))
    return second.popleft()


def _walk(node: HuffmanNode, prefix: str) -> Iterator[tuple[Any, str]]:
    if node.left is not None:
        yield from _walk(node.left, prefix + "0")
    if node.right is not None:
        yield from _walk(node.right, prefix + "1")
    if node.is_leaf:
        yield node.data, prefix


def codes(root: HuffmanNode) -> dict[Any, str]:
    """Map each symbol to its code: 0 for a left edge, 1 for a right edge."""
    return dict(_walk(root, ""))


def huffman_codes(symbols: Sequence[Any], freqs: Sequence[int]) -> dict[Any, str]:
    """Return the Huffman codes built with a min-heap."""
    return codes(build_huffman_tree(symbols, freqs))


def huffman_codes_sorted(
    symbols: Sequence[Any], freqs: Sequence[int]
) -> dict[Any, str]:
    """Return the Huffman codes built from sorted frequencies with two queues."""
    return codes(build_huffman_tree_sorted(symbols, freqs))