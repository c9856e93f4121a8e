import pytest
from evictree.exceptions import ValidationError
from evictree.policy import UnboundedPolicy
from evictree.tree import natural_order
from evictree.utils.validation import (
    validate_key,
    validate_value,
    validate_comparator,
    validate_capacity,
    validate_policy
)

def test_validate_key():
    validate_key("a")
    validate_key(0)
    validate_key("")
    with pytest.raises(ValidationError, match="No `key` provided for `insert`"):
        validate_key(None)
    with pytest.raises(ValidationError, match="for `delete`"):
        validate_key(None, "delete")

def test_validate_value():
    validate_value(0)
    validate_value(False)
    with pytest.raises(ValidationError, match="No `value` provided"):
        validate_value(None)

def test_validate_comparator():
    validate_comparator(natural_order)
    validate_comparator(lambda a, b: 0)
    with pytest.raises(ValidationError):
        validate_comparator(None)
    with pytest.raises(ValidationError):
        validate_comparator(42)

def test_validate_capacity():
    validate_capacity(1)
    validate_capacity(10_000)
    with pytest.raises(ValidationError, match="must be positive"):
        validate_capacity(0)
    with pytest.raises(ValidationError, match="must be an integer"):
        validate_capacity(1.0)
    with pytest.raises(ValidationError, match="must be an integer"):
        validate_capacity(True)
    with pytest.raises(ValidationError, match="No `capacity`"):
        validate_capacity(None)

def test_validate_policy():
    validate_policy(UnboundedPolicy())
    with pytest.raises(ValidationError, match="No `policy`"):
        validate_policy(None)
    with pytest.raises(ValidationError, match="got dict"):
        validate_policy({})

def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate_key(None)
