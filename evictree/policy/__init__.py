"""
Eviction policy package for Evictree.

This package contains the policy contract and the built-in policies.
"""

# Base classes
from .base import TreePolicy, TreeView

# Policies
from .policies import (
    UnboundedPolicy,
    MostRecentlyUsedCapPolicy,
    MostFrequentlyUsedCapPolicy
)

__all__ = [
    # Base classes
    "TreePolicy",
    "TreeView",
    # Policies
    "UnboundedPolicy",
    "MostRecentlyUsedCapPolicy",
    "MostFrequentlyUsedCapPolicy"
]
