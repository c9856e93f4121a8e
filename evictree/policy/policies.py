"""
Eviction policies for binary search trees.
"""

from typing import Dict, Hashable, List, Optional

from evictree.policy.base import TreePolicy, TreeView
from evictree.utils.validation import validate_capacity

class UnboundedPolicy(TreePolicy):
    """
    No-operation policy that never evicts any key.

    This is the default policy of a tree when none is given.
    """

    def track_insertion(self, key: Hashable) -> None:
        pass

    def track_deletion(self, key: Hashable) -> None:
        pass

    def track_usage(self, key: Hashable) -> None:
        pass

    def ensure_capacity(self, tree: TreeView) -> List[Hashable]:
        """
        Return an empty list - nothing is ever evicted.

        Args:
            tree: The tree view (unused)

        Returns:
            List[Hashable]: Always empty
        """
        return []

    def tracked_keys(self) -> List[Hashable]:
        return []

class MostRecentlyUsedCapPolicy(TreePolicy):
    """
    Capacity-capped policy that keeps the most recently used keys.

    Keys are held in a recency list, most recent first. Insertions and
    successful lookups move a key to the front; when the list grows past the
    capacity the keys at the back (least recently used) are evicted.

    Args:
        capacity: Maximum number of keys kept in the tree
    """

    def __init__(self, capacity: int):
        super().__init__()
        validate_capacity(capacity)
        self._capacity = capacity
        self._keys: List[Hashable] = []

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def track_insertion(self, key: Hashable) -> None:
        """
        Push the key to the front of the recency list.

        A key that is already tracked is moved rather than listed twice.
        """
        if key in self._keys:
            self._keys.remove(key)
        self._keys.insert(0, key)

    def track_deletion(self, key: Hashable) -> None:
        """Remove the first occurrence of the key, if tracked."""
        if key in self._keys:
            self._keys.remove(key)

    def track_usage(self, key: Hashable) -> None:
        """Move a tracked key to the front; untracked keys are ignored."""
        if key in self._keys:
            self._keys.remove(key)
            self._keys.insert(0, key)

    def ensure_capacity(self, tree: TreeView) -> List[Hashable]:
        """
        Get the least recently used keys that exceed the capacity.

        Args:
            tree: The tree view (unused)

        Returns:
            List[Hashable]: Keys to evict, least recently used first
        """
        excess = len(self._keys) - self._capacity
        if excess <= 0:
            return []

        victims: List[Hashable] = []
        for key in reversed(self._keys):
            if len(victims) == excess:
                break
            if key not in victims:
                victims.append(key)
        return victims

    def tracked_keys(self) -> List[Hashable]:
        return list(self._keys)

class MostFrequentlyUsedCapPolicy(TreePolicy):
    """
    Capacity-capped policy that keeps the most frequently used keys.

    Every key carries a usage counter, set to 1 on first insertion and
    incremented on each re-insertion and each successful lookup. When more
    keys are tracked than the capacity allows, the lowest counters are evicted.
    Equal counters are resolved by the order in which keys started being
    tracked, oldest first.

    Args:
        capacity: Maximum number of keys kept in the tree
    """

    def __init__(self, capacity: int):
        super().__init__()
        validate_capacity(capacity)
        self._capacity = capacity
        self._counts: Dict[Hashable, int] = {}

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def track_insertion(self, key: Hashable) -> None:
        self._counts[key] = self._counts.get(key, 0) + 1

    def track_deletion(self, key: Hashable) -> None:
        self._counts.pop(key, None)

    def track_usage(self, key: Hashable) -> None:
        if key in self._counts:
            self._counts[key] += 1

    def usage_count(self, key: Hashable) -> int:
        """Return the usage counter of a key, 0 when untracked."""
        return self._counts.get(key, 0)

    def ensure_capacity(self, tree: TreeView) -> List[Hashable]:
        """
        Get the least frequently used keys that exceed the capacity.

        Args:
            tree: The tree view (unused)

        Returns:
            List[Hashable]: Keys to evict, lowest counter first
        """
        excess = len(self._counts) - self._capacity
        if excess <= 0:
            return []

        # sorted() is stable, so ties keep tracking order
        sorted_keys = sorted(self._counts, key=self._counts.__getitem__)
        return sorted_keys[:excess]

    def tracked_keys(self) -> List[Hashable]:
        return list(self._counts)
