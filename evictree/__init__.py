"""
Evictree - Ordered Key/Value Trees with Eviction Policies
========================================================

A binary search tree keyed by a caller-supplied comparator, with a pluggable
policy that can cap its size by evicting least recently or least frequently
used keys.
"""

__version__ = "0.1.0"

from .exceptions import (
    EvictreeError,
    ConfigurationError,
    ValidationError,
    DuplicateKeyError,
    KeyNotFoundError,
    PolicyError
)
from .tree import BinarySearchTree, DuplicateKeyMode, TreeNode, natural_order
from .policy import (
    TreePolicy,
    TreeView,
    UnboundedPolicy,
    MostRecentlyUsedCapPolicy,
    MostFrequentlyUsedCapPolicy
)
from .config import PolicyKind, TreeConfig, create_policy, create_tree
from .models.stats import TreeStats, create_tree_stats

__all__ = [
    "BinarySearchTree",
    "DuplicateKeyMode",
    "TreeNode",
    "natural_order",
    "TreePolicy",
    "TreeView",
    "UnboundedPolicy",
    "MostRecentlyUsedCapPolicy",
    "MostFrequentlyUsedCapPolicy",
    "PolicyKind",
    "TreeConfig",
    "create_policy",
    "create_tree",
    "TreeStats",
    "create_tree_stats",
    "EvictreeError",
    "ConfigurationError",
    "ValidationError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "PolicyError"
]
