from .layout_components import BinaryTreeNode, Canvas, LineChars, Slot, TreeNode, TreeRenderer, render
from .trees import BinaryTree, Tree

get_visual_tree_string = render

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
]
