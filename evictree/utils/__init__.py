"""Evictree utility modules."""

from .logging import (
    get_logger,
    get_metrics_logger,
    initialize_logging,
    shutdown_logging
)
from .logging_config import (
    LoggingPresets,
    configure_from_environment,
    get_logging_config
)

__all__ = [
    # Logging functions
    "get_logger",
    "get_metrics_logger",
    "initialize_logging",
    "shutdown_logging",
    # Logging configuration
    "LoggingPresets",
    "configure_from_environment",
    "get_logging_config"
]
