"""
Base classes for tree eviction policies.
"""

import logging
import weakref
from abc import ABC, abstractmethod
from typing import Any, Hashable, List, Optional

from typing_extensions import Protocol, runtime_checkable

from evictree.exceptions import ConfigurationError, PolicyError

logger = logging.getLogger(__name__)


@runtime_checkable
class TreeView(Protocol):
    """Read-only view of a tree handed to ``ensure_capacity``."""

    def __len__(self) -> int:
        ...

    def is_empty(self) -> bool:
        ...


class TreePolicy(ABC):
    """
    Abstract base class for eviction policies attached to a binary search tree.

    A policy only ever sees keys. The tree reports every insertion, deletion and
    successful lookup, and after each insertion asks the policy which keys must
    be evicted to stay within its capacity bound.
    """

    def __init__(self):
        self.evicted_count = 0
        self._owner: Optional[weakref.ref] = None

    @property
    def capacity(self) -> Optional[int]:
        """Maximum number of tracked keys, or None when unbounded."""
        return None

    @abstractmethod
    def track_insertion(self, key: Hashable) -> None:
        """
        Record that a key has been inserted into the tree.

        Args:
            key: The key the inserted node is stored under
        """
        pass

    @abstractmethod
    def track_deletion(self, key: Hashable) -> None:
        """
        Purge all bookkeeping for a key removed from the tree.

        Args:
            key: The key that was deleted
        """
        pass

    @abstractmethod
    def track_usage(self, key: Hashable) -> None:
        """
        Record a successful lookup. Untracked keys are ignored.

        Args:
            key: The key that was found
        """
        pass

    @abstractmethod
    def ensure_capacity(self, tree: TreeView) -> List[Hashable]:
        """
        Compute the keys to evict so the policy respects its capacity.

        Args:
            tree: Read-only view of the tree the policy is attached to

        Returns:
            List of keys to delete, in eviction order
        """
        pass

    @abstractmethod
    def tracked_keys(self) -> List[Hashable]:
        """Return a snapshot of the keys currently tracked."""
        pass

    def __len__(self) -> int:
        return len(self.tracked_keys())

    def track_insertion_and_collect(self, key: Hashable, tree: TreeView) -> List[Hashable]:
        """
        Track an insertion, then return the keys the tree has to evict.

        The tree applies the returned keys as deletions once its own insert
        has completed, which in turn calls ``track_deletion`` for each of them
        and ``record_eviction`` for each one that was actually stored.

        Args:
            key: The key that was inserted
            tree: Read-only view of the tree

        Returns:
            List of keys to evict, possibly empty

        Raises:
            PolicyError: If ``ensure_capacity`` does not return a list
        """
        self.track_insertion(key)
        victims = self.ensure_capacity(tree)
        if victims is None:
            return []
        if not isinstance(victims, list):
            raise PolicyError(
                f"{type(self).__name__}.ensure_capacity must return a list, "
                f"got {type(victims).__name__}"
            )
        if victims:
            logger.debug(
                "%s selected %d key(s) for eviction", type(self).__name__, len(victims)
            )
        return victims

    def record_eviction(self, key: Hashable) -> None:
        """Count a victim that the tree actually removed."""
        self.evicted_count += 1

    def bind(self, tree: Any) -> None:
        """
        Attach the policy to a tree.

        A policy instance belongs to exactly one live tree.

        Raises:
            ConfigurationError: If the policy already belongs to another tree
        """
        owner = self._owner() if self._owner is not None else None
        if owner is not None and owner is not tree:
            raise ConfigurationError(
                f"{type(self).__name__} instance is already attached to another tree"
            )
        self._owner = weakref.ref(tree)
        logger.debug("%s bound to tree %#x", type(self).__name__, id(tree))

    def get_stats(self) -> dict:
        """Get eviction policy statistics."""
        return {
            'policy': type(self).__name__,
            'capacity': self.capacity,
            'tracked_keys': len(self),
            'evicted_count': self.evicted_count,
        }
