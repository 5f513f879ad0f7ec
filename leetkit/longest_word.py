"""Longest dictionary word that is a subsequence of a string."""

from __future__ import annotations

from collections.abc import Iterable


def _is_subsequence(word: str, s: str) -> bool:
    remaining = iter(s)
    return all(char in remaining for char in word)


def find_longest_word(s: str, dictionary: Iterable[str]) -> str:
    """Return the longest word of the dictionary that is a subsequence of s.

    Ties go to the lexicographically smallest word; no match gives "".
    """
    result = ""
    for word in dictionary:
        if _is_subsequence(word, s) and (
            len(word) > len(result) or (len(word) == len(result) and word < result)
        ):
            result = word
    return result