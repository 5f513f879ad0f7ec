"""Binary tree nodes built from level-order test-case values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from .value import Val, ValKind


@dataclass
class TreeNode:
    """A binary tree node holding an integer."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _node_from(value: Val) -> Optional[TreeNode]:
    if value.kind is ValKind.INT:
        return TreeNode(value.as_int())
    if value.kind is ValKind.NONE:
        return None
    raise ValueError("Invalid input")


def build_tree(values: Iterable[Val]) -> TreeNode:
    """Build a tree from level-order values, where null marks a missing node.

    Each level is given in full: a missing parent still takes two slots in the
    next level, and values placed under it are dropped. No values give a
    single node holding zero.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return TreeNode(0)
    if first.kind is not ValKind.INT:
        raise ValueError("Invalid input")
    root = TreeNode(first.as_int())

    depth = 1
    position = 0
    current: list[Optional[TreeNode]] = [root]
    new_layer: list[Optional[TreeNode]] = []

    for value in items:
        node = _node_from(value)
        new_layer.append(node)

        parent = current[position // 2]
        if parent is not None:
            if position % 2 == 0:
                parent.left = node
            else:
                parent.right = node

        position += 1
        if position == 2**depth:
            position = 0
            depth += 1
            current, new_layer = new_layer, []

    return root