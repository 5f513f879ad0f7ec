"""Singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import zip_longest
from typing import Optional


class ListNode:
    """A node of a singly linked list holding an integer."""

    __slots__ = ("val", "next")

    def __init__(self, val: int, next: Optional["ListNode"] = None) -> None:
        self.val = val
        self.next = next

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> "ListNode":
        """Build a list from the values in order; the values must not be empty."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        if head is None:
            raise ValueError("cannot build a list node from no values")
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListNode):
            return NotImplemented
        sentinel = object()
        return all(a == b for a, b in zip_longest(self, other, fillvalue=sentinel))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ",".join(str(v) for v in self) + "]"

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"