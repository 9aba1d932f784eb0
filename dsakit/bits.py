"""Bit-manipulation tricks on 32-bit signed integers."""

from collections.abc import Iterable, Sequence

_BITS = 32
_MASK = (1 << _BITS) - 1
_SIGN = 1 << (_BITS - 1)


def _to_signed(value: int) -> int:
    value &= _MASK
    return value - (1 << _BITS) if value & _SIGN else value


def add(x: int, y: int) -> int:
    """Add two 32-bit integers with bitwise operations only, wrapping on overflow."""
    x &= _MASK
    y &= _MASK
    while y:
        carry = x & y
        x ^= y
        y = (carry << 1) & _MASK
    return _to_signed(x)


def add_one(x: int) -> int:
    """Add one to a 32-bit integer by flipping bits, wrapping on overflow."""
    x &= _MASK
    mask = 1
    while x & mask:
        x ^= mask
        mask = (mask << 1) & _MASK
    x ^= mask
    return _to_signed(x)


def get_single(values: Iterable[int]) -> int:
    """Return the value that occurs once where every other value occurs three times."""
    ones = twos = 0
    for value in values:
        twos |= ones & value
        ones ^= value
        common = ~(ones & twos)
        ones &= common
        twos &= common
    return ones


def change_to_zero(pair: Sequence[int]) -> list[int]:
    """Return a copy of a two-element 0/1 pair with the 1 replaced by the 0.

    Only indexing is used; no comparison or branching on the values.
    """
    if len(pair) != 2:
        raise ValueError("pair must have exactly two elements")
    if any(value not in (0, 1) for value in pair):
        raise ValueError("pair elements must be 0 or 1")
    result = list(pair)
    result[result[1]] = result[int(not result[1])]
    return result