from .tree_visualizer import *
from .errors import *

__version__ = "0.1.0"
__all__ = [
    "TreeRenderer",
    "render",
    "get_visual_tree_string",
    "LineChars",
    "Slot",
    "Canvas",
    "BinaryTreeNode",
    "TreeNode",
    "BinaryTree",
    "Tree",
    "TreeSketchError",
    "ConfigurationError",
    "LayoutOverflowError",
    "LayoutInvariantError",
]
