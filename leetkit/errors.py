"""Errors raised while reading the LeetCode test-case format."""

from __future__ import annotations


class ProcessInputError(Exception):
    """Base class for every failure of the test-case reader."""

    template = "{}"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(self.template.format(detail))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProcessInputError):
            return NotImplemented
        return type(self) is type(other) and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((type(self), self.detail))

    def __repr__(self) -> str:
        if self.detail:
            return f"{type(self).__name__}({self.detail!r})"
        return f"{type(self).__name__}()"


class InvalidInputError(ProcessInputError):
    """The input holds a character that no value can start with."""

    template = "Invalid input"


class EmptyInputError(ProcessInputError):
    """The input ended before any value was found."""

    template = "Empty input"


class UnexpectedError(ProcessInputError):
    """An internal inconsistency, such as an unparsable number."""

    template = "Unknow Error: {}"


class InvalidEscapeCharacterError(ProcessInputError):
    """A string holds a backslash escape that is not recognised."""

    template = "Invalid escape character: {}"


class InvalidKeyWordError(ProcessInputError):
    """A bare word is not one of true, false or null."""

    template = "Invalid key word: {}"