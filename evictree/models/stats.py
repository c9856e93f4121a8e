"""
Stats Model
===========

Snapshot of a tree's size, lookup counters and eviction activity.
"""

from typing import Optional
import attrs


_non_negative_int = attrs.validators.and_(
    attrs.validators.instance_of(int),
    attrs.validators.ge(0)
)


@attrs.define(frozen=True)
class TreeStats:
    """Counters reported by ``BinarySearchTree.get_stats``."""

    size: int = attrs.field(validator=_non_negative_int)
    policy: str = attrs.field(validator=attrs.validators.instance_of(str))
    capacity: Optional[int] = attrs.field(
        default=None,
        validator=attrs.validators.optional(
            attrs.validators.and_(
                attrs.validators.instance_of(int),
                attrs.validators.gt(0)
            )
        )
    )
    tracked_keys: int = attrs.field(default=0, validator=_non_negative_int)

    # Lookup counters
    hits: int = attrs.field(default=0, validator=_non_negative_int)
    misses: int = attrs.field(default=0, validator=_non_negative_int)

    evictions: int = attrs.field(default=0, validator=_non_negative_int)

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Fraction of lookups that found their key, 0.0 before any lookup."""
        if not self.lookups:
            return 0.0
        return self.hits / self.lookups

    @property
    def bounded(self) -> bool:
        return self.capacity is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "size": self.size,
            "policy": self.policy,
            "capacity": self.capacity,
            "tracked_keys": self.tracked_keys,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": self.hit_rate,
            "evictions": self.evictions
        }

    def __str__(self) -> str:
        cap = self.capacity if self.bounded else "unbounded"
        return (
            f"TreeStats(size={self.size}/{cap}, policy={self.policy}, "
            f"hit_rate={self.hit_rate:.1%}, evictions={self.evictions})"
        )


def create_tree_stats(
    size: int,
    policy: str,
    capacity: Optional[int] = None,
    tracked_keys: int = 0,
    hits: int = 0,
    misses: int = 0,
    evictions: int = 0
) -> TreeStats:
    """
    Create a TreeStats with the given counters.

    Args:
        size: Number of nodes in the tree
        policy: Name of the policy class
        capacity: Capacity bound of the policy, None when unbounded
        tracked_keys: Number of keys the policy is tracking
        hits: Successful lookups
        misses: Failed lookups
        evictions: Keys removed by the policy

    Returns:
        TreeStats instance
    """
    return TreeStats(
        size=size,
        policy=policy,
        capacity=capacity,
        tracked_keys=tracked_keys,
        hits=hits,
        misses=misses,
        evictions=evictions
    )
