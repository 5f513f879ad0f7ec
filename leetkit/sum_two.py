"""Sum of two integers."""

from __future__ import annotations


def sum_two_numbers(a: int, b: int) -> int:
    """Return a plus b."""
    return a + b