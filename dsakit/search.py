"""Searching in sequences."""

from collections.abc import Iterable, Sequence


def binary_search(values: Sequence[int], x: int) -> int | None:
    """Return an index of ``x`` in the sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while high >= low:
        mid = low + (high - low) // 2
        if values[mid] == x:
            return mid
        if values[mid] > x:
            high = mid - 1
        else:
            low = mid + 1
    return None


def linear_search(values: Iterable[int], x: int) -> int | None:
    """Return the index of the first occurrence of ``x``, or None if absent."""
    for index, value in enumerate(values):
        if value == x:
            return index
    return None


def has_pair_with_sum(values: Iterable[int], total: int) -> bool:
    """Tell whether two elements at different positions add up to ``total``."""
    ordered = sorted(values)
    low, high = 0, len(ordered) - 1
    while low < high:
        pair_sum = ordered[low] + ordered[high]
        if pair_sum == total:
            return True
        if pair_sum < total:
            low += 1
        else:
            high -= 1
    return False