import pytest
from evictree.exceptions import (
    EvictreeError,
    ConfigurationError,
    ValidationError,
    DuplicateKeyError,
    KeyNotFoundError,
    PolicyError
)

def test_evictree_error_inheritance():
    """Test that all exceptions inherit from EvictreeError."""
    assert issubclass(ConfigurationError, EvictreeError)
    assert issubclass(ValidationError, EvictreeError)
    assert issubclass(DuplicateKeyError, EvictreeError)
    assert issubclass(KeyNotFoundError, EvictreeError)
    assert issubclass(PolicyError, EvictreeError)

def test_configuration_error_with_message():
    msg = "Invalid configuration"
    error = ConfigurationError(msg)
    assert str(error) == msg

def test_configuration_error_with_original_exception():
    original = ValueError("Invalid value")
    error = ConfigurationError("Configuration failed", original)
    assert "Original:" in str(error)
    assert "Invalid value" in str(error)

def test_validation_error_inheritance():
    """ValidationError is both an EvictreeError and a ValueError."""
    assert issubclass(ValidationError, ValueError)
    assert issubclass(DuplicateKeyError, ValidationError)

def test_duplicate_key_error_carries_key():
    error = DuplicateKeyError(("a", 1))
    assert error.key == ("a", 1)
    assert str(error) == "Key ('a', 1) is already present in the tree"

def test_key_not_found_error_is_key_error():
    error = KeyNotFoundError("Cannot delete from an empty tree", "k")
    assert isinstance(error, KeyError)
    assert error.key == "k"
    # Not quoted like a plain KeyError
    assert str(error) == "Cannot delete from an empty tree"

def test_policy_error_with_original_exception():
    with pytest.raises(PolicyError, match="Original: boom"):
        raise PolicyError("Policy failed", RuntimeError("boom"))
