class EvictreeError(Exception):
    """Base class for all Evictree exceptions."""
    pass

class ConfigurationError(EvictreeError):
    """Raised when a tree or policy configuration is invalid."""
    def __init__(self, message: str, original_exception: Exception = None):
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original: {str(self.original_exception)})"
        return self.message

class ValidationError(EvictreeError, ValueError):
    """Raised when a required argument is missing or malformed."""
    pass

class DuplicateKeyError(ValidationError):
    """Raised when inserting a key that is already stored and duplicates are rejected."""
    def __init__(self, key):
        super().__init__(f"Key {key!r} is already present in the tree")
        self.key = key

class KeyNotFoundError(EvictreeError, KeyError):
    """Raised when deleting from a tree that holds no nodes."""
    def __init__(self, message: str, key=None):
        super().__init__(message)
        self.key = key
        self.message = message

    def __str__(self) -> str:
        return self.message

class PolicyError(EvictreeError):
    """Raised when a policy breaks its contract with the tree."""
    def __init__(self, message: str, original_exception: Exception = None):
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original: {str(self.original_exception)})"
        return self.message
