"""
Tree package for Evictree.

This package contains the binary search tree, its node type and shared enums.
"""

from .base import DuplicateKeyMode, natural_order
from .node import TreeNode
from .tree import BinarySearchTree, Comparator

__all__ = [
    "BinarySearchTree",
    "Comparator",
    "DuplicateKeyMode",
    "TreeNode",
    "natural_order"
]
