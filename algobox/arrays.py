"""Questions about integer arrays and ranges."""

from __future__ import annotations

from collections.abc import Sequence


def largest_fixed_point(values: Sequence[int]) -> int | None:
    """Largest index ``i`` with ``values[i] == i``, or ``None`` if there is none."""
    return next(
        (i for i in reversed(range(len(values))) if values[i] == i),
        None,
    )


def max_xor_in_range(low: int, high: int) -> int:
    """Largest ``a ^ b`` over ``low <= a <= b <= high``."""
    if low < 0 or high < 0:
        raise ValueError("bounds must not be negative")
    return (1 << (low ^ high).bit_length()) - 1