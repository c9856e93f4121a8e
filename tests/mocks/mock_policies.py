"""
Mock policies for testing purposes.
"""
from typing import Any, Hashable, List, Optional, Tuple

from evictree.policy.base import TreePolicy, TreeView

class RecordingPolicy(TreePolicy):
    """Policy that records every call and evicts whatever it is told to."""
    def __init__(self, victims: Optional[List[Hashable]] = None):
        super().__init__()
        self.calls: List[Tuple[str, Any]] = []
        self._victims = list(victims or [])
        self._keys: List[Hashable] = []

    def queue_victims(self, *keys: Hashable) -> None:
        """Make the next ensure_capacity call return these keys."""
        self._victims.extend(keys)

    def track_insertion(self, key: Hashable) -> None:
        self.calls.append(("insertion", key))
        self._keys.append(key)

    def track_deletion(self, key: Hashable) -> None:
        self.calls.append(("deletion", key))
        if key in self._keys:
            self._keys.remove(key)

    def track_usage(self, key: Hashable) -> None:
        self.calls.append(("usage", key))

    def ensure_capacity(self, tree: TreeView) -> List[Hashable]:
        self.calls.append(("ensure_capacity", len(tree)))
        victims, self._victims = self._victims, []
        return victims

    def tracked_keys(self) -> List[Hashable]:
        return list(self._keys)

class TupleReturningPolicy(RecordingPolicy):
    """Policy that breaks the contract by returning a tuple."""
    def ensure_capacity(self, tree: TreeView) -> List[Hashable]:
        return tuple(super().ensure_capacity(tree))
