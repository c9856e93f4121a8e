"""
Configuration for trees and their eviction policies.

A :class:`TreeConfig` describes which policy a tree uses, its capacity and how
duplicate keys are handled. It can be built directly, from a mapping, or from
``EVICTREE_*`` environment variables, and turned into a ready tree with
:func:`create_tree`.
"""

import logging
import os
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, model_validator

from evictree.exceptions import ConfigurationError
from evictree.policy.base import TreePolicy
from evictree.policy.policies import (
    MostFrequentlyUsedCapPolicy,
    MostRecentlyUsedCapPolicy,
    UnboundedPolicy,
)
from evictree.tree.base import DuplicateKeyMode
from evictree.tree.tree import BinarySearchTree

logger = logging.getLogger(__name__)


class PolicyKind(str, Enum):
    """Built-in eviction policies."""
    UNBOUNDED = "unbounded"
    MRU_CAP = "mru_cap"  # Keep the most recently used keys
    MFU_CAP = "mfu_cap"  # Keep the most frequently used keys


_POLICY_CLASSES = {
    PolicyKind.MRU_CAP: MostRecentlyUsedCapPolicy,
    PolicyKind.MFU_CAP: MostFrequentlyUsedCapPolicy,
}


class TreeConfig(BaseModel):
    """Configuration for a BinarySearchTree and its policy."""
    model_config = {"frozen": True, "extra": "forbid"}

    policy: PolicyKind = PolicyKind.UNBOUNDED
    capacity: Optional[int] = Field(default=None, gt=0)
    duplicates: DuplicateKeyMode = DuplicateKeyMode.OVERWRITE

    @model_validator(mode="after")
    def _check_capacity(self) -> "TreeConfig":
        if self.policy is PolicyKind.UNBOUNDED:
            if self.capacity is not None:
                raise ValueError("capacity is only valid for capped policies")
        elif self.capacity is None:
            raise ValueError(f"policy '{self.policy.value}' requires a capacity")
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TreeConfig":
        """
        Build a config from a plain mapping.

        Raises:
            ConfigurationError: If the mapping does not describe a valid config
        """
        try:
            return cls(**dict(data))
        except PydanticValidationError as e:
            raise ConfigurationError("Invalid tree configuration", e) from e

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> "TreeConfig":
        """
        Build a config from environment variables.

        Environment variables:
        - EVICTREE_POLICY: unbounded, mru_cap or mfu_cap
        - EVICTREE_CAPACITY: Capacity of a capped policy
        - EVICTREE_DUPLICATES: overwrite, shadow or reject

        Raises:
            ConfigurationError: If the variables do not describe a valid config
        """
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}

        if environ.get("EVICTREE_POLICY"):
            data["policy"] = environ["EVICTREE_POLICY"].strip().lower()
        if environ.get("EVICTREE_CAPACITY"):
            raw = environ["EVICTREE_CAPACITY"]
            try:
                data["capacity"] = int(raw)
            except ValueError as e:
                raise ConfigurationError(f"EVICTREE_CAPACITY must be an integer, got {raw!r}", e) from e
        if environ.get("EVICTREE_DUPLICATES"):
            data["duplicates"] = environ["EVICTREE_DUPLICATES"].strip().lower()

        return cls.from_mapping(data)


def create_policy(config: TreeConfig) -> TreePolicy:
    """
    Create a fresh policy instance described by a config.

    Args:
        config: The tree configuration

    Returns:
        A new, unbound policy
    """
    if config.policy is PolicyKind.UNBOUNDED:
        return UnboundedPolicy()
    return _POLICY_CLASSES[config.policy](config.capacity)


def create_tree(
    comparator: Callable[[Any, Any], int],
    config: Optional[TreeConfig] = None,
    **overrides: Any
) -> BinarySearchTree:
    """
    Create a tree with its own policy from a config.

    Args:
        comparator: Total-order function over keys
        config: Base configuration (defaults to an unbounded tree)
        **overrides: Config fields replacing those of ``config``

    Returns:
        A new BinarySearchTree

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    base = config.model_dump() if config is not None else {}
    config = TreeConfig.from_mapping({**base, **overrides})

    logger.debug(
        "Creating tree with policy=%s capacity=%s duplicates=%s",
        config.policy.value, config.capacity, config.duplicates.value
    )
    return BinarySearchTree(
        comparator,
        policy=create_policy(config),
        duplicates=config.duplicates,
    )
