"""Split numbers into two halves with sums as close as possible."""

from __future__ import annotations

import math
from collections.abc import Iterable


def _half_toward_zero(total: int) -> int:
    return -((-total) // 2) if total < 0 else total // 2


def tug_of_war(values: Iterable[int]) -> tuple[list[int], list[int]]:
    """Split ``values`` into a group of ``n // 2`` items and the rest.

    The first group is chosen so that its sum is closest to half of the
    total (halved toward zero); among equally good groups the first one
    met by the search is kept. Both groups keep the input order.
    """
    items = list(values)
    n = len(items)
    wanted = n // 2
    half = _half_toward_zero(sum(items))
    chosen = [False] * n
    best: list[bool] | None = None
    best_diff = math.inf

    def explore(pos: int, count: int, total: int) -> None:
        nonlocal best, best_diff
        if pos == n or wanted - count > n - pos:
            return
        explore(pos + 1, count, total)
        count += 1
        total += items[pos]
        chosen[pos] = True
        if count == wanted:
            diff = abs(half - total)
            if diff < best_diff:
                best_diff = diff
                best = chosen.copy()
        else:
            explore(pos + 1, count, total)
        chosen[pos] = False

    explore(0, 0, 0)
    selection = best if best is not None else [False] * n
    first = [v for v, picked in zip(items, selection) if picked]
    second = [v for v, picked in zip(items, selection) if not picked]
    return first, second