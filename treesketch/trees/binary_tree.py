import logging
from collections import deque
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from ..layout_components.node import BinaryTreeNode
from .base import LoggedTree

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _kids(node: BinaryTreeNode) -> List[BinaryTreeNode]:
    return [child for child in (node.left, node.right) if child is not None]


class BinaryTree(LoggedTree):

    def _walk(self) -> Iterator[Tuple[BinaryTreeNode, int, Optional[BinaryTreeNode]]]:
        """Yield ``(node, depth, parent)`` in level order, root at depth 1."""
        if self._root is None:
            return
        queue = deque([(self._root, 1, None)])
        while queue:
            node, depth, parent = queue.popleft()
            yield node, depth, parent
            for child in _kids(node):
                queue.append((child, depth + 1, node))

    def min_depth(self) -> int:
        for node, depth, _ in self._walk():
            if node.left is None and node.right is None:
                return depth
        return 0

    def max_depth(self) -> int:
        return max((depth for _, depth, _ in self._walk()), default=0)

    def next_larger(self, lower_bound: Number) -> Optional[Number]:
        smallest: Optional[Number] = None
        for node, _, _ in self._walk():
            if node.value > lower_bound and (smallest is None or node.value < smallest):
                smallest = node.value
        return smallest

    def max_sum(self) -> Number:
        """Largest sum along any path; a path may turn once at its highest node."""
        if self._root is None:
            return 0

        best: Dict[int, Number] = {}
        result: Optional[Number] = None
        stack: List[Tuple[BinaryTreeNode, bool]] = [(self._root, False)]
        while stack:
            node, expanded = stack.pop()
            if not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(_kids(node)))
                continue

            left = max(0, best[id(node.left)]) if node.left is not None else 0
            right = max(0, best[id(node.right)]) if node.right is not None else 0
            through = node.value + left + right
            result = through if result is None else max(result, through)
            best[id(node)] = node.value + max(left, right)

        return result

    def are_cousins(self, node1: BinaryTreeNode, node2: BinaryTreeNode) -> bool:
        if self._root is None or node1 is node2:
            return False
        if node1 is self._root or node2 is self._root:
            return False

        found: Dict[int, Tuple[int, BinaryTreeNode]] = {}
        for node, depth, parent in self._walk():
            if node is node1 or node is node2:
                found[id(node)] = (depth, parent)

        if id(node1) not in found or id(node2) not in found:
            return False
        depth1, parent1 = found[id(node1)]
        depth2, parent2 = found[id(node2)]
        return depth1 == depth2 and parent1 is not parent2

    def _path_to(self, target: BinaryTreeNode) -> Optional[List[BinaryTreeNode]]:
        if self._root is None:
            return None
        stack = [(self._root, [self._root])]
        while stack:
            node, path = stack.pop()
            if node is target:
                return path
            for child in (node.right, node.left):
                if child is not None:
                    stack.append((child, path + [child]))
        return None

    def lowest_common_ancestor(
        self, node1: BinaryTreeNode, node2: BinaryTreeNode
    ) -> Optional[BinaryTreeNode]:
        path1 = self._path_to(node1)
        path2 = self._path_to(node2)
        if path1 is None or path2 is None:
            logger.debug("Lowest common ancestor requested for a node outside the tree")
            return None

        ancestor = path1[0]
        for a, b in zip(path1, path2):
            if a is not b:
                break
            ancestor = a
        return ancestor

    @classmethod
    def serialize(cls, tree: "BinaryTree") -> str:
        """Level-order dump of ``tree``; missing children are written as ``null``."""
        if tree.root is None:
            return "[]"

        values: List[str] = []
        queue = deque([tree.root])
        while queue:
            node = queue.popleft()
            if node is None:
                values.append("null")
                continue
            values.append(str(node.value))
            if node.left is not None or node.right is not None:
                queue.append(node.left)
                queue.append(node.right)
        return f"[{','.join(values)}]"

    @classmethod
    def deserialize(cls, serialized: str, **kwargs) -> "BinaryTree":
        text = serialized.strip()
        if not (text.startswith("[") and text.endswith("]")):
            raise ValueError(f"Serialized tree must be wrapped in brackets: {serialized!r}")
        body = text[1:-1].strip()
        if not body:
            return cls(**kwargs)

        values = [_parse_value(token.strip()) for token in body.split(",")]
        if values[0] is None:
            return cls(**kwargs)

        root = BinaryTreeNode(values[0])
        queue = deque([root])
        index = 1
        while queue and index < len(values):
            node = queue.popleft()
            for side in ("left", "right"):
                if index >= len(values):
                    break
                if values[index] is not None:
                    child = BinaryTreeNode(values[index])
                    setattr(node, side, child)
                    queue.append(child)
                index += 1

        return cls(root, **kwargs)


def _parse_value(token: str) -> Any:
    if token in {"null", "None", ""}:
        return None
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError as exc:
        raise ValueError(f"Cannot parse tree value {token!r}") from exc
