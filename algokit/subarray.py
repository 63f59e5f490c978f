"""Maximum contiguous subarray sum."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of any non-empty contiguous run, checking every start and end."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return max(max(accumulate(items[start:])) for start in range(len(items)))