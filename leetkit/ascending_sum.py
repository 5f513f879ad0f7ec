"""Maximum sum of a strictly ascending run of numbers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def max_ascending_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a contiguous strictly ascending run; 0 if empty."""
    if not nums:
        return 0
    best = current = nums[0]
    for previous, value in pairwise(nums):
        current = current + value if value > previous else value
        best = max(best, current)
    return best