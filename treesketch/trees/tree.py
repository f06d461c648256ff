from typing import Callable, Iterator, List

from ..layout_components.node import TreeNode
from .base import LoggedTree


class Tree(LoggedTree):

    def _nodes(self) -> Iterator[TreeNode]:
        if self._root is None:
            return
        stack: List[TreeNode] = [self._root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.children)

    def _collect(self, predicate: Callable[[TreeNode], bool]) -> List[TreeNode]:
        return [node for node in self._nodes() if predicate(node)]

    def sum_values(self) -> int:
        """Add up every value in the tree and log the tree with all nodes marked."""
        nodes = self._collect(lambda node: True)
        total = sum(node.val for node in nodes)
        self.log(f"sum_values - result (sum: {total})", nodes)
        return total

    def count_evens(self) -> int:
        evens = self._collect(lambda node: node.val % 2 == 0)
        self.log(f"count_evens - result (count: {len(evens)})", evens)
        return len(evens)

    def num_greater(self, lower_bound) -> int:
        greater = self._collect(lambda node: node.val > lower_bound)
        self.log(f"num_greater({lower_bound}) - result (count: {len(greater)})", greater)
        return len(greater)
