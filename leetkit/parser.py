"""Reader for the JSON-like format LeetCode uses for its test cases."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum, auto
from itertools import chain
from typing import Optional

from .errors import (
    EmptyInputError,
    InvalidEscapeCharacterError,
    InvalidInputError,
    InvalidKeyWordError,
    UnexpectedError,
)
from .value import Val, ValKind

_WHITESPACE = frozenset(" \n\r\t")
_NUMBER_START = frozenset("0123456789-+")
_NUMBER_BODY = _NUMBER_START | {"."}
_KEYWORD_START = frozenset("ftFTnN")
_ESCAPES = {"n": "\n", "\\": "\\", '"': '"'}
_KEYWORDS = {
    "true": Val(ValKind.BOOL, True),
    "false": Val(ValKind.BOOL, False),
    "null": Val(ValKind.NONE),
}
_I128_MIN = -(2**127)
_I128_MAX = 2**127 - 1


class _State(Enum):
    START = auto()
    LIST = auto()
    STRING = auto()
    NUMBER = auto()
    KEYWORD = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    END = auto()


class _Cursor:
    """One character of lookahead over the input, followed by a single space."""

    def __init__(self, chars: Iterator[str]) -> None:
        self._chars = chain(chars, " ")
        self._peeked: Optional[str] = None
        self._has_peeked = False

    def peek(self) -> Optional[str]:
        if not self._has_peeked:
            self._peeked = next(self._chars, None)
            self._has_peeked = True
        return self._peeked

    def advance(self) -> Optional[str]:
        char = self.peek()
        self._has_peeked = False
        return char


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _number(text: str) -> Val:
    if "." in text:
        try:
            return Val(ValKind.DOUBLE, float(text))
        except ValueError:
            raise UnexpectedError(f'"{text}" is not a valid double') from None
    try:
        number = int(text)
    except ValueError:
        raise UnexpectedError(f'"{text}" is not a valid integer') from None
    if not _I128_MIN <= number <= _I128_MAX:
        raise UnexpectedError(f'"{text}" is not a valid integer')
    return Val(ValKind.INT, number)


def _keyword(text: str) -> Val:
    try:
        return _KEYWORDS[text.lower()]
    except KeyError:
        raise InvalidKeyWordError(
            f'"{text}" is not a key word: true, false ou null'
        ) from None


def parse(chars: Iterable[str]) -> Val:
    """Read one value from the characters.

    When given an iterator, only the characters of the value (and at most one
    character after it) are consumed, so repeated calls read successive values.
    Raises EmptyInputError when no value is found before the input ends.
    """
    cursor = _Cursor(iter(chars))
    state = _State.START
    last_state = _State.END
    current: Optional[Val] = None
    stack: list[list[Val]] = []
    text: list[str] = []

    while (char := cursor.peek()) is not None:
        if state is _State.START:
            if char in _WHITESPACE:
                cursor.advance()
            elif char == "[":
                state = _State.LIST
                stack.append([])
                cursor.advance()
            elif char == '"':
                state = _State.STRING
                cursor.advance()
            elif char in _NUMBER_START:
                state = _State.NUMBER
                text.append(char)
                cursor.advance()
            elif char in _KEYWORD_START:
                state = _State.KEYWORD
                text.append(char)
                cursor.advance()
            elif char == "/":
                cursor.advance()
                following = cursor.peek()
                if following == "/":
                    state = _State.LINE_COMMENT
                    cursor.advance()
                elif following == "*":
                    state = _State.BLOCK_COMMENT
                    cursor.advance()
                else:
                    raise InvalidInputError()
            else:
                raise InvalidInputError()

        elif state is _State.LIST:
            if char in _WHITESPACE:
                cursor.advance()
            elif char == "[":
                stack.append([])
                cursor.advance()
            elif char == ",":
                if not stack:
                    raise UnexpectedError("Empty stack")
                if current is not None:
                    stack[-1].append(current)
                    current = None
                cursor.advance()
            elif char == "]":
                if not stack:
                    raise UnexpectedError("Empty stack")
                top = stack.pop()
                if current is not None:
                    top.append(current)
                current = Val(ValKind.VEC, top)
                if not stack:
                    state = _State.END
                cursor.advance()
            elif char == '"':
                last_state = _State.LIST
                state = _State.STRING
                cursor.advance()
            elif char in _NUMBER_START:
                last_state = _State.LIST
                state = _State.NUMBER
                text.append(char)
                cursor.advance()
            elif char in _KEYWORD_START:
                last_state = _State.LIST
                state = _State.KEYWORD
                text.append(char)
                cursor.advance()
            else:
                raise InvalidInputError()

        elif state is _State.STRING:
            if char == '"':
                state = last_state
                current = Val(ValKind.STR, "".join(text))
                text.clear()
                cursor.advance()
            elif char == "\\":
                cursor.advance()
                escaped = cursor.advance()
                if escaped is not None:
                    if escaped not in _ESCAPES:
                        raise InvalidEscapeCharacterError(
                            f'"\\{escaped}" is not a valid escape character'
                        )
                    text.append(_ESCAPES[escaped])
            else:
                text.append(char)
                cursor.advance()

        elif state is _State.NUMBER:
            if char in _NUMBER_BODY:
                text.append(char)
                cursor.advance()
            else:
                state = last_state
                current = _number("".join(text))
                text.clear()

        elif state is _State.KEYWORD:
            if _is_letter(char):
                text.append(char)
                cursor.advance()
            else:
                state = last_state
                current = _keyword("".join(text))
                text.clear()

        elif state is _State.LINE_COMMENT:
            if char in "\n\r":
                state = last_state
            cursor.advance()

        elif state is _State.BLOCK_COMMENT:
            cursor.advance()
            if char == "*" and cursor.peek() == "/":
                state = last_state
                cursor.advance()

        else:
            break

    if current is None:
        raise EmptyInputError()
    return current


def parse_str(text: str) -> Val:
    """Read the first value of a string."""
    return parse(iter(text))