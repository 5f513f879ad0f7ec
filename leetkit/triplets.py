"""Count triplets where a square in one list equals a product of a pair in the other."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import combinations


def _count_one_way(squares_from: Sequence[int], pairs_from: Sequence[int]) -> int:
    squares = Counter(x * x for x in squares_from)
    return sum(squares[a * b] for a, b in combinations(pairs_from, 2))


def num_triplets(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Count (i, j, k) with j < k where a square in one list is a pair product in the other."""
    return _count_one_way(nums1, nums2) + _count_one_way(nums2, nums1)