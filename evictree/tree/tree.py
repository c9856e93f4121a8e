"""
Binary search tree with a pluggable eviction policy.

The tree is an unbalanced BST keyed by a caller-supplied comparator. Every
insertion, deletion and successful lookup is reported to the tree's policy,
and after each insertion the policy may name keys that the tree then evicts.
"""

import logging
from typing import Any, Callable, List, Optional, Union

from evictree.exceptions import DuplicateKeyError, KeyNotFoundError, ValidationError
from evictree.models.stats import TreeStats, create_tree_stats
from evictree.policy.base import TreePolicy
from evictree.policy.policies import UnboundedPolicy
from evictree.tree.base import DuplicateKeyMode
from evictree.tree.node import TreeNode
from evictree.utils.logging import MetricsLogger
from evictree.utils.validation import (
    validate_comparator,
    validate_key,
    validate_policy,
    validate_value,
)

# Configure logging
logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], int]


class BinarySearchTree:
    """
    Ordered key/value store backed by an unbalanced binary search tree.

    Keys are placed with ``comparator(a, b)``, which must return a negative
    number, zero or a positive number like a classic ``cmp`` function. A node
    is considered found when the comparator returns 0 for it.

    Args:
        comparator: Total-order function over keys
        policy: Eviction policy owned by this tree (defaults to UnboundedPolicy)
        duplicates: What inserting an already stored key does
        metrics: Optional metrics logger receiving lookup and eviction events
    """

    def __init__(
        self,
        comparator: Comparator,
        policy: Optional[TreePolicy] = None,
        duplicates: Union[DuplicateKeyMode, str] = DuplicateKeyMode.OVERWRITE,
        metrics: Optional[MetricsLogger] = None,
    ):
        validate_comparator(comparator)
        if policy is None:
            policy = UnboundedPolicy()
        validate_policy(policy)
        try:
            duplicates = DuplicateKeyMode(duplicates)
        except ValueError as e:
            raise ValidationError(f"Unknown duplicate key mode: {duplicates!r}") from e

        self._comparator = comparator
        self._policy = policy
        self._duplicates = duplicates
        self._metrics = metrics
        self._root: Optional[TreeNode] = None
        self._size = 0
        self._hits = 0
        self._misses = 0
        self._evictions = 0

        self._policy.bind(self)

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    @property
    def policy(self) -> TreePolicy:
        return self._policy

    @property
    def duplicates(self) -> DuplicateKeyMode:
        return self._duplicates

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __repr__(self) -> str:
        return (
            f"BinarySearchTree(size={self._size}, "
            f"policy={type(self._policy).__name__}, duplicates={self._duplicates.value})"
        )

    def insert(self, key: Any, value: Any) -> List[Any]:
        """
        Insert a key/value pair, then evict whatever the policy asks for.

        The policy is told about the key stored in the tree, which is the
        caller's key unless an equal key is already present.

        Args:
            key: The key to insert
            value: The value to store under the key

        Returns:
            List of keys evicted as a consequence of this insertion

        Raises:
            ValidationError: If key or value is None
            DuplicateKeyError: If the key is present and duplicates are rejected
        """
        validate_key(key, "insert")
        validate_value(value)

        stored_key = self._place(key, value)

        victims = self._policy.track_insertion_and_collect(stored_key, self)
        return self._evict(victims)

    def _place(self, key: Any, value: Any) -> Any:
        if self._root is None:
            self._root = TreeNode(key, value)
            self._size += 1
            return key

        first_match = None
        current = self._root
        while True:
            compare = self._comparator(key, current.key)
            if compare == 0:
                if self._duplicates is DuplicateKeyMode.REJECT:
                    raise DuplicateKeyError(key)
                if self._duplicates is DuplicateKeyMode.OVERWRITE:
                    current.value = value
                    return current.key
                if first_match is None:
                    first_match = current

            # Ties go right
            if compare < 0:
                if current.left is None:
                    current.left = TreeNode(key, value)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = TreeNode(key, value)
                    break
                current = current.right

        self._size += 1
        # Shadowed keys are tracked under the node that answers lookups
        return first_match.key if first_match is not None else key

    def _evict(self, victims: List[Any]) -> List[Any]:
        evicted = []
        for victim in victims:
            removed = 0
            while self._root is not None and self._remove(victim) is not None:
                removed += 1
            self._policy.track_deletion(victim)
            if not removed:
                logger.debug("Eviction victim %r was not stored in the tree", victim)
                continue

            evicted.append(victim)
            self._evictions += 1
            self._policy.record_eviction(victim)
            logger.debug("Evicted key %r (size=%d)", victim, self._size)
            if self._metrics is not None:
                self._metrics.log_eviction(type(self._policy).__name__, victim, size=self._size)
        return evicted

    def delete(self, key: Any) -> bool:
        """
        Delete a key from the tree.

        With shadowed duplicates only the first matching node is removed, and
        the policy keeps tracking the key while an equal node remains.

        Args:
            key: The key to delete

        Returns:
            bool: True if a node was removed, False if the key was not stored

        Raises:
            ValidationError: If key is None
            KeyNotFoundError: If the tree is empty
        """
        validate_key(key, "delete")
        if self._root is None:
            raise KeyNotFoundError("Cannot delete from an empty tree", key)

        removed_key = self._remove(key)
        if removed_key is None:
            return False

        remaining = self._find(removed_key)
        if remaining is None:
            self._policy.track_deletion(removed_key)
        elif remaining.key != removed_key:
            # Re-key the entry to the node that now answers lookups
            self._policy.track_deletion(removed_key)
            self._policy.track_insertion(remaining.key)
        return True

    def _remove(self, key: Any) -> Optional[Any]:
        """Unlink the first node equal to ``key`` and return its stored key."""
        parent = None
        current = self._root
        while current is not None:
            compare = self._comparator(key, current.key)
            if compare == 0:
                break
            parent = current
            current = current.left if compare < 0 else current.right

        if current is None:
            return None

        removed_key = current.key
        if current.is_leaf():
            self._replace_child(parent, current, None)
        elif current.left is not None and current.right is not None:
            # Copy the in-order successor in place, then splice it out
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left

            current.key = successor.key
            current.value = successor.value
            if successor_parent is current:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = current.left if current.left is not None else current.right
            self._replace_child(parent, current, child)

        self._size -= 1
        return removed_key

    def _replace_child(
        self, parent: Optional[TreeNode], node: TreeNode, child: Optional[TreeNode]
    ) -> None:
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def search(self, key: Any) -> Optional[Any]:
        """
        Look up the value stored under a key.

        A hit is reported to the policy as a usage of the stored key.

        Args:
            key: The key to look up

        Returns:
            The stored value, or None if the key is not in the tree

        Raises:
            ValidationError: If key is None
        """
        validate_key(key, "search")

        node = self._find(key)
        if node is None:
            self._misses += 1
            if self._metrics is not None:
                self._metrics.log_lookup(key, hit=False)
            return None

        self._hits += 1
        self._policy.track_usage(node.key)
        if self._metrics is not None:
            self._metrics.log_lookup(key, hit=True)
        return node.value

    def _find(self, key: Any) -> Optional[TreeNode]:
        current = self._root
        while current is not None:
            compare = self._comparator(key, current.key)
            if compare == 0:
                return current
            current = current.left if compare < 0 else current.right
        return None

    def contains_key(self, key: Any) -> bool:
        """
        Check whether a key is stored. Counts as a usage when it is.

        Raises:
            ValidationError: If key is None
        """
        validate_key(key, "contains_key")
        return self.search(key) is not None

    def get_stats(self) -> TreeStats:
        """Get a snapshot of the tree's size, lookup and eviction counters."""
        return create_tree_stats(
            size=self._size,
            policy=type(self._policy).__name__,
            capacity=self._policy.capacity,
            tracked_keys=len(self._policy),
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
        )
