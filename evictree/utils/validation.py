from typing import Any, Callable, Optional
from evictree.exceptions import ValidationError

def validate_key(key: Any, operation: str = "insert"):
    """Ensures a key was provided."""
    if key is None:
        raise ValidationError(f"No `key` provided for `{operation}`.")

def validate_value(value: Any):
    """Ensures a value was provided."""
    if value is None:
        raise ValidationError("No `value` provided for `insert`.")

def validate_comparator(comparator: Optional[Callable[[Any, Any], int]]):
    """Checks that the comparator is present and callable."""
    if comparator is None:
        raise ValidationError("No `comparator` has been provided.")

    if not callable(comparator):
        raise ValidationError("Comparator must be callable as comparator(a, b) -> int.")

def validate_capacity(capacity: Any):
    """Validates the capacity bound of a capped policy."""
    if capacity is None:
        raise ValidationError("No `capacity` has been provided.")

    # bool is an int subclass
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ValidationError("Capacity must be an integer.")

    if capacity <= 0:
        raise ValidationError(f"Capacity must be positive, got {capacity}.")

def validate_policy(policy: Any):
    """Ensures the policy implements the tree policy contract."""
    from evictree.policy.base import TreePolicy

    if policy is None:
        raise ValidationError("No `policy` has been provided.")

    if not isinstance(policy, TreePolicy):
        raise ValidationError(
            f"Policy must be a TreePolicy instance, got {type(policy).__name__}."
        )
