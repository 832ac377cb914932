"""Subset-sum questions answered by dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable


def _non_negative(values: Iterable[int]) -> list[int]:
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")
    return items


def is_subset_sum(values: Iterable[int], total: int) -> bool:
    """Whether some subset of ``values`` adds up to exactly ``total``.

    The empty subset counts, so a total of 0 is always reachable.
    """
    if total < 0:
        raise ValueError("total must not be negative")
    items = _non_negative(values)
    reachable = [True] + [False] * total
    for value in items:
        # Walk downwards so each value is used at most once.
        for amount in range(total, value - 1, -1):
            if reachable[amount - value]:
                reachable[amount] = True
    return reachable[total]


def money_sums(coins: Iterable[int]) -> list[int]:
    """Every positive sum that some subset of ``coins`` makes, ascending."""
    items = _non_negative(coins)
    reachable = {0}
    for coin in items:
        reachable |= {amount + coin for amount in reachable}
    return sorted(amount for amount in reachable if amount > 0)