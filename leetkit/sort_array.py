"""Merge sort of a list of integers."""

from __future__ import annotations

from collections.abc import Sequence


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def sort_array(nums: Sequence[int]) -> list[int]:
    """Return a new list with the values in ascending order."""
    if len(nums) <= 1:
        return list(nums)
    mid = len(nums) // 2
    return _merge(sort_array(nums[:mid]), sort_array(nums[mid:]))