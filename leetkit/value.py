"""Values read from the LeetCode test-case format and their conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .list_node import ListNode

_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _saturate(value: float, bounds: tuple[int, int]) -> int:
    if math.isnan(value):
        return 0
    low, high = bounds
    if value <= low:
        return low
    if value >= high:
        return high
    return int(value)


class ValError(Exception):
    """Base class for failed conversions of a value."""

    def __init__(self, payload: Any, message: str) -> None:
        self.payload = payload
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValError):
            return NotImplemented
        return type(self) is type(other) and self.payload == other.payload

    __hash__ = None  # type: ignore[assignment]


class WrongKindError(ValError):
    """The value is not of a kind that converts to the requested type."""

    def __init__(self, value: "Val", expected: str) -> None:
        self.expected = expected
        super().__init__(value, f"Expected {expected}, got {value!r}")


class NotAVectorError(ValError):
    """A vector was expected but the value is something else."""

    def __init__(self, value: "Val") -> None:
        super().__init__(value, f"Expected Vec, got {value!r}")


class NonIntegerElementsError(ValError):
    """Some elements of a vector do not convert to integers."""

    def __init__(self, values: list["Val"]) -> None:
        super().__init__(values, f"Expected all elements to be Int, got {values!r}")


class ValKind(Enum):
    """The kinds of value the format knows."""

    INT = "Int"
    DOUBLE = "Double"
    BOOL = "Bool"
    STR = "Str"
    VEC = "Vec"
    NONE = "None"


@dataclass(frozen=True)
class Val:
    """A parsed value: a kind together with its data."""

    kind: ValKind
    data: Any = None

    def __repr__(self) -> str:
        if self.kind is ValKind.NONE:
            return "None"
        return f"{self.kind.value}({self.data!r})"

    def as_int(self) -> int:
        """Convert to a 32-bit integer, truncating as a machine cast would."""
        if self.kind is ValKind.INT:
            return _wrap(self.data, 32)
        if self.kind is ValKind.DOUBLE:
            return _saturate(self.data, _I32)
        raise WrongKindError(self, "Int")

    def as_long(self) -> int:
        """Convert to a 64-bit integer, truncating as a machine cast would."""
        if self.kind is ValKind.INT:
            return _wrap(self.data, 64)
        if self.kind is ValKind.DOUBLE:
            return _saturate(self.data, _I64)
        raise WrongKindError(self, "Int")

    def as_double(self) -> float:
        """Convert a numeric value to a float."""
        if self.kind in (ValKind.INT, ValKind.DOUBLE):
            return float(self.data)
        raise WrongKindError(self, "Double")

    def as_string(self) -> str:
        """Return the text of a string value."""
        if self.kind is ValKind.STR:
            return self.data
        raise WrongKindError(self, "Str")

    def as_bool(self) -> bool:
        """Return the truth value of a boolean value."""
        if self.kind is ValKind.BOOL:
            return self.data
        raise WrongKindError(self, "Bool")

    def as_vec(self) -> list["Val"]:
        """Return the elements of a vector value."""
        if self.kind is ValKind.VEC:
            return list(self.data)
        raise WrongKindError(self, "Vec")

    def as_vec_int(self) -> list[int]:
        """Convert a vector of numbers to a list of 32-bit integers."""
        if self.kind is not ValKind.VEC:
            raise NotAVectorError(self)
        converted: list[int] = []
        failed: list[Val] = []
        for element in self.data:
            try:
                converted.append(element.as_int())
            except WrongKindError:
                failed.append(element)
        if failed:
            raise NonIntegerElementsError(failed)
        return converted

    def as_list_node(self) -> ListNode:
        """Convert a vector of numbers to a linked list."""
        return ListNode.from_iterable(self.as_vec_int())