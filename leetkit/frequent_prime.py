"""Most frequent prime read along straight lines through a digit matrix."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import lru_cache
from math import isqrt

_DIRECTIONS = (
    (0, 1), (1, 1), (1, 0), (1, -1),
    (0, -1), (-1, -1), (-1, 0), (-1, 1),
)


@lru_cache(maxsize=None)
def _is_prime(n: int) -> bool:
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False
    return all(n % d for d in range(3, isqrt(n) + 1, 2))


def most_frequent_prime(mat: Sequence[Sequence[int]]) -> int:
    """Return the prime above 10 formed most often along the eight directions.

    Numbers are built digit by digit from each cell outwards in a straight
    line. Ties go to the larger prime; -1 when no such prime exists.
    """
    rows, cols = len(mat), len(mat[0])
    counts: Counter[int] = Counter()

    for i in range(rows):
        for j in range(cols):
            for di, dj in _DIRECTIONS:
                x, y, num = i, j, mat[i][j]
                while 0 <= x < rows and 0 <= y < cols:
                    if num > 10 and _is_prime(num):
                        counts[num] += 1
                    x, y = x + di, y + dj
                    if 0 <= x < rows and 0 <= y < cols:
                        num = num * 10 + mat[x][y]

    if not counts:
        return -1
    return max(counts.items(), key=lambda item: (item[1], item[0]))[0]