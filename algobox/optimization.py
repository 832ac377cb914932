"""Optimisation problems solved by dynamic programming."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """A project that runs from ``start`` to ``end`` and pays ``reward``."""

    start: int
    end: int
    reward: int


def min_coins(coins: Iterable[int], target: int) -> int | None:
    """Fewest coins summing to ``target``, or ``None`` if unreachable."""
    values = list(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    if any(coin < 1 for coin in values):
        raise ValueError("coin values must be positive")
    best: list[float] = [0.0] + [math.inf] * target
    for amount in range(1, target + 1):
        best[amount] = min(
            (best[amount - c] + 1 for c in values if c <= amount), default=math.inf
        )
    return None if best[target] == math.inf else int(best[target])


def min_jumps(steps: Sequence[int]) -> int | None:
    """Fewest jumps from the first to the last position, or ``None``.

    ``steps[i]`` is the longest jump allowed from position ``i``.
    """
    if not steps or steps[0] == 0:
        return None
    jumps: list[int | None] = [0]
    for i in range(1, len(steps)):
        jumps.append(
            next(
                (
                    count + 1
                    for j, count in enumerate(jumps)
                    if count is not None and i <= j + steps[j]
                ),
                None,
            )
        )
    return jumps[-1]


def max_pages(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Most pages obtainable by buying each book at most once within ``budget``."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must not be negative")
    if any(price < 0 for price in prices):
        raise ValueError("prices must not be negative")
    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for money in range(budget, max(price, 1) - 1, -1):
            best[money] = max(best[money], count + best[money - price])
    return best[budget]


def edit_distance(a: str, b: str) -> int:
    """Fewest insertions, deletions and substitutions turning ``a`` into ``b``."""
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def rectangle_cuts(width: int, height: int) -> int:
    """Fewest straight cuts splitting a rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError("dimensions must be positive")
    cuts = [[0] * (height + 1) for _ in range(width + 1)]
    for i in range(1, width + 1):
        for j in range(1, height + 1):
            if i == j:
                continue
            best = min(
                (cuts[i - k][j] + cuts[k][j] + 1 for k in range(1, i)),
                default=math.inf,
            )
            best = min(
                best,
                min(
                    (cuts[i][k] + cuts[i][j - k] + 1 for k in range(1, j)),
                    default=math.inf,
                ),
            )
            cuts[i][j] = int(best)
    return cuts[width][height]


def removal_game(values: Sequence[int]) -> int:
    """Score of the first player when both take ends of the list optimally."""
    n = len(values)
    score = [[0] * n for _ in range(n)]

    def at(i: int, j: int) -> int:
        return score[i][j] if i <= j else 0

    for length in range(1, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            take_left = values[i] + min(at(i + 1, j - 1), at(i + 2, j))
            take_right = values[j] + min(at(i, j - 2), at(i + 1, j - 1))
            score[i][j] = max(take_left, take_right)
    return at(0, n - 1)


def removing_digits(n: int) -> int:
    """Fewest steps to reach 0 by subtracting one of the number's digits."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        digits = {int(d) for d in str(value)} - {0}
        steps[value] = 1 + min(steps[value - d] for d in digits)
    return steps[n]


def max_project_reward(projects: Iterable[Project]) -> int:
    """Largest total reward of projects that do not overlap.

    A project may start only after the previous one ends.
    """
    ordered = sorted(projects, key=lambda p: p.end)
    ends = [p.end for p in ordered]
    best = [0]
    for project in ordered:
        earlier = bisect_left(ends, project.start)
        best.append(max(best[-1], project.reward + best[earlier]))
    return best[-1]


def optimal_sequence(n: int) -> list[int]:
    """Numbers from 1 to ``n`` reached by +1, *2 and *3, preferring division.

    Returns an empty list when ``n`` is below 1.
    """
    sequence: list[int] = []
    while n >= 1:
        sequence.append(n)
        if n % 3 == 0:
            n //= 3
        elif n % 2 == 0:
            n //= 2
        else:
            n -= 1
    sequence.reverse()
    return sequence