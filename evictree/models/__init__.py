"""Data models for Evictree."""

from .stats import TreeStats, create_tree_stats

__all__ = ["TreeStats", "create_tree_stats"]
