from .base import LoggedTree
from .binary_tree import BinaryTree
from .tree import Tree

__all__ = [
    "LoggedTree",
    "BinaryTree",
    "Tree",
]
