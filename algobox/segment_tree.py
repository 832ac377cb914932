"""Segment tree with lazy range additions and range-sum queries."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Running totals of ``values``."""
    return list(accumulate(values))


class LazySegmentTree:
    """Range sums over a fixed-length sequence, with range additions.

    Ranges are 0-based and inclusive at both ends; a range whose start is
    past its end is empty.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._size = len(items)
        slots = max(4 * self._size, 1)
        self._sums = [0] * slots
        self._lazy = [0] * slots
        if items:
            self._build(1, 0, self._size - 1, items)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._sums[node] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, items)
        self._build(2 * node + 1, mid + 1, hi, items)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def _settle(self, node: int, lo: int, hi: int, delta: int) -> None:
        self._sums[node] += (hi - lo + 1) * delta
        if lo != hi:
            self._lazy[2 * node] += delta
            self._lazy[2 * node + 1] += delta

    def _push(self, node: int, lo: int, hi: int) -> None:
        pending = self._lazy[node]
        if pending:
            self._settle(node, lo, hi, pending)
            self._lazy[node] = 0

    def _check(self, start: int, end: int) -> None:
        if start < 0 or end >= self._size:
            raise IndexError(f"range [{start}, {end}] outside 0..{self._size - 1}")

    def range_add(self, start: int, end: int, delta: int) -> None:
        """Add ``delta`` to every element from ``start`` to ``end``."""
        self._check(start, end)
        if start <= end:
            self._update(1, 0, self._size - 1, start, end, delta)

    def _update(
        self, node: int, lo: int, hi: int, start: int, end: int, delta: int
    ) -> None:
        self._push(node, lo, hi)
        if hi < start or lo > end:
            return
        if start <= lo and hi <= end:
            self._settle(node, lo, hi, delta)
            return
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, start, end, delta)
        self._update(2 * node + 1, mid + 1, hi, start, end, delta)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def query(self, start: int, end: int) -> int:
        """Sum of the elements from ``start`` to ``end``."""
        self._check(start, end)
        if start > end:
            return 0
        return self._query(1, 0, self._size - 1, start, end)

    def _query(self, node: int, lo: int, hi: int, start: int, end: int) -> int:
        self._push(node, lo, hi)
        if hi < start or lo > end:
            return 0
        if start <= lo and hi <= end:
            return self._sums[node]
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, start, end) + self._query(
            2 * node + 1, mid + 1, hi, start, end
        )