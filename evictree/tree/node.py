from typing import Any, Optional


class TreeNode:
    """A single tree node identified by a key and holding a value."""
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        self.left: Optional["TreeNode"] = None
        self.right: Optional["TreeNode"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"TreeNode(key={self.key!r})"
