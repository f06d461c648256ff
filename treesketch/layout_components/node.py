from collections.abc import Sequence as SequenceABC
from typing import Any, List, Optional, Sequence, Tuple

from .core import Slot


class BinaryTreeNode:
    def __init__(
        self,
        value: Any,
        left: Optional["BinaryTreeNode"] = None,
        right: Optional["BinaryTreeNode"] = None,
    ) -> None:
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"


class TreeNode:
    def __init__(self, val: Any, children: Optional[Sequence["TreeNode"]] = None) -> None:
        self.val = val
        self.children: List["TreeNode"] = list(children) if children else []

    def add(self, val: Any) -> "TreeNode":
        child = TreeNode(val)
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def is_binary(node: Any) -> bool:
    return getattr(node, "left", None) is not None or getattr(node, "right", None) is not None


def children_of(node: Any) -> List[Tuple[Any, Slot]]:
    """Return the children of ``node`` paired with how each should be placed.

    Nodes exposing a ``left``/``right`` pair are read as binary nodes whenever
    either side is set. Everything else falls back to a ``children`` sequence
    (strings excluded), whose members are spread evenly below the parent.
    """
    if is_binary(node):
        left = getattr(node, "left", None)
        right = getattr(node, "right", None)
        if left is not None and right is not None:
            return [(left, Slot.LEFT), (right, Slot.RIGHT)]
        return [(left if left is not None else right, Slot.BELOW)]

    children = getattr(node, "children", None)
    if not isinstance(children, SequenceABC) or isinstance(children, (str, bytes)):
        return []
    return [(child, Slot.SPREAD) for child in children if child is not None]


def display_value(node: Any, missing: str = "[?]") -> str:
    value = getattr(node, "value", None)
    if value is None:
        value = getattr(node, "val", None)
    if value is None:
        return missing
    return str(value)
