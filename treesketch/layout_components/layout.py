import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from ..errors import ConfigurationError
from .core import NodePosition, Slot, display_width
from .node import children_of

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class TreeArena:
    """Index-addressed copy of a tree's shape.

    Nodes are numbered in pre-order starting with the root at 0. The caller's
    objects are only ever looked up by identity, so nodes that compare equal
    (or are unhashable) never collide. A node reachable along more than one
    path keeps the first slot it was found in.
    """

    def __init__(self, root: Any) -> None:
        self.nodes: List[Any] = []
        self.depths: List[int] = []
        self.children: List[List[Tuple[int, Slot]]] = []
        self._index: Dict[int, int] = {}

        stack: List[Tuple[Any, Optional[int], Slot]] = [(root, None, Slot.BELOW)]
        while stack:
            node, parent, slot = stack.pop()
            if id(node) in self._index:
                logger.debug("Skipping %r, already placed in the tree", node)
                continue

            index = len(self.nodes)
            self._index[id(node)] = index
            self.nodes.append(node)
            self.children.append([])
            if parent is None:
                self.depths.append(0)
            else:
                self.depths.append(self.depths[parent] + 1)
                self.children[parent].append((index, slot))

            for child, child_slot in reversed(children_of(node)):
                stack.append((child, index, child_slot))

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def max_depth(self) -> int:
        return max(self.depths) if self.depths else 0

    def index_of(self, node: Any) -> Optional[int]:
        return self._index.get(id(node))

    def edges(self) -> List[Tuple[int, int]]:
        return [
            (parent, child)
            for parent, kids in enumerate(self.children)
            for child, _ in kids
        ]


class TreeLayout:

    def __init__(
        self,
        arena: TreeArena,
        texts: List[str],
        *,
        rows_per_offset: int = 1,
        left_padding: int = 1,
    ) -> None:
        if len(texts) != len(arena):
            raise ConfigurationError("Tree layout needs exactly one text per node.")
        self._arena = arena
        self._texts = texts
        self._rows_per_offset = max(1, rows_per_offset)
        self._left_padding = max(0, left_padding)
        self.positions: List[NodePosition] = []
        self.width = 0
        self.height = 0

    def initial_offset(self) -> int:
        depth = self._arena.max_depth
        if depth == 0:
            return 1
        return 2 ** (depth - 1) * 2

    def _child_x(self, slot: Slot, parent_x: int, offset: int, index: int, count: int) -> int:
        if slot == Slot.LEFT:
            return parent_x - offset
        if slot == Slot.RIGHT:
            return parent_x + offset
        if slot == Slot.BELOW or count == 1:
            return parent_x
        return round_half_up(parent_x + ((index / (count - 1)) * 2 - 1) * offset)

    def apply(self) -> List[NodePosition]:
        arena = self._arena
        positions: List[Optional[NodePosition]] = [None] * len(arena)

        stack: List[Tuple[int, int, int, int]] = [(0, 0, 0, self.initial_offset())]
        while stack:
            index, x, y, offset = stack.pop()
            text = self._texts[index]
            positions[index] = NodePosition(text=text, x=x, y=y, width=display_width(text))

            kids = arena.children[index]
            if not kids:
                continue

            next_offset = max(1, round_half_up(offset / 2))
            slash_rows = max(1, round_half_up(self._rows_per_offset * offset))
            child_y = y + slash_rows + 1

            pending = []
            for order, (child, slot) in enumerate(kids):
                child_x = self._child_x(slot, x, offset, order, len(kids))
                pending.append((child, child_x, child_y, next_offset))
            stack.extend(reversed(pending))

        self.positions = [position for position in positions if position is not None]
        self._normalize()
        return self.positions

    def _normalize(self) -> None:
        min_x = min(position.start_x for position in self.positions)
        max_x = max(position.end_x for position in self.positions)
        max_y = max(position.y for position in self.positions)

        shift = (-min_x if min_x < 0 else 0) + self._left_padding
        for position in self.positions:
            position.x += shift

        self.width = max_x + shift + 2
        self.height = max_y + 1
        logger.debug(
            "Laid out %d nodes on a %dx%d canvas (shift=%d)",
            len(self.positions),
            self.width,
            self.height,
            shift,
        )
