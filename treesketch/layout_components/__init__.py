from .core import LineChars, NodePosition, Slot, display_width
from .node import BinaryTreeNode, TreeNode, children_of, display_value
from .layout import TreeArena, TreeLayout
from .canvas import Canvas
from .renderer import TreeRenderer, render

__all__ = [
    "LineChars",
    "NodePosition",
    "Slot",
    "display_width",
    "BinaryTreeNode",
    "TreeNode",
    "children_of",
    "display_value",
    "TreeArena",
    "TreeLayout",
    "Canvas",
    "TreeRenderer",
    "render",
]
