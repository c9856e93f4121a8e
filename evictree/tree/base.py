"""
Base types shared by tree implementations.
"""

from enum import Enum
from typing import Any

class DuplicateKeyMode(str, Enum):
    """What an insert does when the key compares equal to a stored key."""
    OVERWRITE = "overwrite"  # Replace the stored value in place
    SHADOW = "shadow"  # Add a second node on the right; the first match wins on lookup
    REJECT = "reject"  # Raise DuplicateKeyError

def natural_order(a: Any, b: Any) -> int:
    """
    Comparator using the keys' own ``<`` ordering.

    Returns:
        int: -1 if a < b, 1 if b < a, 0 otherwise
    """
    if a < b:
        return -1
    if b < a:
        return 1
    return 0
