"""Counting problems solved by dynamic programming, modulo 1e9+7."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

MOD = 10**9 + 7
_HALF = 500000004  # inverse of 2 modulo MOD


def _check_coins(coins: Iterable[int], target: int) -> list[int]:
    values = list(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    if any(coin < 1 for coin in values):
        raise ValueError("coin values must be positive")
    return values


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``."""
    values = _check_coins(coins, target)
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - c] for c in values if c <= amount) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Count multisets of coins summing to ``target``."""
    values = _check_coins(coins, target)
    ways = [1] + [0] * target
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def dice_combinations(n: int) -> int:
    """Count ordered throws of a six-sided die summing to ``n``.

    The count for 0 is 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    if n <= 6:
        return 2 ** (n - 1)
    window = [1, 2, 4, 8, 16, 32]
    for _ in range(7, n + 1):
        window = window[1:] + [sum(window) % MOD]
    return window[-1]


def array_descriptions(values: Sequence[int], upper: int) -> int:
    """Count arrays matching ``values`` with entries in 1..``upper``.

    A 0 in ``values`` is unknown; neighbouring entries differ by at most 1.
    """
    previous = [0] * (upper + 2)
    for index, known in enumerate(values):
        current = [0] * (upper + 2)
        for j in range(1, upper + 1):
            if known in (0, j):
                current[j] = (
                    1
                    if index == 0
                    else (previous[j - 1] + previous[j] + previous[j + 1]) % MOD
                )
        previous = current
    return sum(previous[1 : upper + 1]) % MOD


def grid_paths(grid: Sequence[Sequence[str]]) -> int:
    """Count right/down paths from the top-left to the bottom-right cell.

    Cells holding ``'.'`` are open; anything else is a trap.
    """
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must have equal length")
    counts = [0] * width
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell != ".":
                counts[j] = 0
            elif i == 0 and j == 0:
                counts[j] = 1
            else:
                left = counts[j - 1] if j else 0
                counts[j] = (left + counts[j]) % MOD
    return counts[-1]


def two_sets(n: int) -> int:
    """Count ways to split 1..n into two sets of equal sum."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    ways = [1] + [0] * half
    for value in range(1, n + 1):
        for amount in range(half, value - 1, -1):
            ways[amount] = (ways[amount] + ways[amount - value]) % MOD
    return ways[half] * _HALF % MOD


def compression_chains(length: int, rules: Iterable[tuple[str, str]]) -> int:
    """Count strings of ``length`` letters that compress down to ``'a'``.

    Each rule ``(pair, letter)`` replaces a leading ``pair`` by ``letter``;
    only the first letter of the pair takes part in the chain.
    """
    if length < 1:
        raise ValueError("length must be at least 1")
    pairs = [(pair, letter) for pair, letter in rules]
    if any(not pair for pair, _ in pairs):
        raise ValueError("rule pairs must not be empty")
    counts: Counter[str] = Counter({"a": 1})
    for _ in range(length - 1):
        nxt: Counter[str] = Counter()
        for pair, letter in pairs:
            if counts[letter]:
                nxt[pair[0]] += counts[letter]
        counts = nxt
    return sum(counts.values())