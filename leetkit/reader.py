"""Reading a stream of test-case values from text or files."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from typing import Optional, Union

from .errors import EmptyInputError
from .parser import parse
from .value import Val


class ValReader:
    """Iterator over the successive values in a stream of characters.

    Comments and blank stretches are skipped; a malformed value raises the
    matching ProcessInputError.
    """

    def __init__(self, chars: Iterable[str]) -> None:
        self._chars = iter(chars)
        self._lookahead: Optional[str] = None

    def _pull(self) -> Optional[str]:
        if self._lookahead is not None:
            char, self._lookahead = self._lookahead, None
            return char
        return next(self._chars, None)

    def _has_more(self) -> bool:
        if self._lookahead is None:
            self._lookahead = next(self._chars, None)
        return self._lookahead is not None

    def __iter__(self) -> "ValReader":
        return self

    def __next__(self) -> Val:
        while True:
            try:
                return parse(iter(self._pull, None))
            except EmptyInputError:
                if not self._has_more():
                    break
        raise StopIteration


def read_input(path: Union[str, os.PathLike]) -> Iterator[str]:
    """Return the characters of a file, replacing invalid UTF-8 sequences."""
    with open(path, "rb") as handle:
        data = handle.read()
    return iter(data.decode("utf-8", errors="replace"))