"""Classic dynamic-programming problems."""

import math
from collections.abc import Iterable, Sequence
from functools import cache


def binomial_coefficient(n: int, k: int) -> int:
    """Return C(n, k); zero when ``k`` exceeds ``n``."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    if k > n:
        return 0
    return math.comb(n, k)


def count_change(coins: Iterable[int], amount: int) -> int:
    """Count the ways to make ``amount`` from unlimited coins of the given values."""
    coins = list(coins)
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def egg_drop(eggs: int, floors: int) -> int:
    """Return the minimum number of trials needed in the worst case."""
    if eggs < 1:
        raise ValueError("at least one egg is needed")
    if floors < 0:
        raise ValueError("floors must be non-negative")
    if floors <= 1 or eggs == 1:
        return floors
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0, 1] + [0] * (floors - 1)
        for floor in range(2, floors + 1):
            current[floor] = 1 + min(
                max(previous[drop - 1], current[floor - drop])
                for drop in range(1, floor + 1)
            )
        previous = current
    return previous[floors]


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of a 0/1 selection that fits in ``capacity``."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")

    @cache
    def best(room: int, count: int) -> int:
        if count == 0 or room == 0:
            return 0
        weight = weights[count - 1]
        without = best(room, count - 1)
        if weight > room:
            return without
        return max(values[count - 1] + best(room - weight, count - 1), without)

    return best(capacity, len(weights))