"""
Logging configuration utilities for Evictree.

This module provides pre-configured logging setups for different environments.
"""
import os
from typing import Any, Dict, Optional

from .logging import initialize_logging, ThreadSafeLogManager


class LoggingPresets:
    """Pre-configured logging setups for different environments."""

    @staticmethod
    def development(log_file: Optional[str] = None) -> ThreadSafeLogManager:
        """
        Development logging: DEBUG level, JSON lines, small rotating file.

        Args:
            log_file: Optional log file path

        Returns:
            Configured log manager
        """
        return initialize_logging(
            log_level="DEBUG",
            log_format="json",
            log_file=log_file,
            max_bytes=5 * 1024 * 1024,  # 5MB
            backup_count=3
        )

    @staticmethod
    def production(log_file: Optional[str] = None) -> ThreadSafeLogManager:
        """
        Production logging: INFO level, JSON lines, larger retention.

        Args:
            log_file: Optional log file path

        Returns:
            Configured log manager
        """
        return initialize_logging(
            log_level="INFO",
            log_format="json",
            log_file=log_file,
            max_bytes=50 * 1024 * 1024,  # 50MB
            backup_count=10
        )

    @staticmethod
    def testing(log_file: Optional[str] = None) -> ThreadSafeLogManager:
        return initialize_logging(
            log_level="WARNING",
            log_format="text",
            log_file=log_file,
            max_bytes=1 * 1024 * 1024,  # 1MB
            backup_count=1
        )


def configure_from_environment() -> ThreadSafeLogManager:
    """
    Configure logging based on environment variables.

    Environment variables:
    - EVICTREE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - EVICTREE_LOG_FORMAT: Log format (json, text)
    - EVICTREE_LOG_FILE: Log file path
    - EVICTREE_LOG_MAX_BYTES: Max file size in bytes
    - EVICTREE_LOG_BACKUP_COUNT: Number of backup files

    Returns:
        Configured log manager
    """
    log_level = os.getenv("EVICTREE_LOG_LEVEL", "INFO")
    log_format = os.getenv("EVICTREE_LOG_FORMAT", "json")
    log_file = os.getenv("EVICTREE_LOG_FILE")
    max_bytes = int(os.getenv("EVICTREE_LOG_MAX_BYTES", "10485760"))  # 10MB default
    backup_count = int(os.getenv("EVICTREE_LOG_BACKUP_COUNT", "5"))

    return initialize_logging(
        log_level=log_level,
        log_format=log_format,
        log_file=log_file,
        max_bytes=max_bytes,
        backup_count=backup_count
    )


def get_logging_config() -> Dict[str, Any]:
    """
    Get current logging configuration.

    Returns:
        Dictionary with current logging configuration
    """
    from . import logging as evictree_logging

    manager = evictree_logging._log_manager
    if manager is None:
        return {"status": "not_initialized"}

    return {
        "status": "initialized",
        "log_level": manager.log_level,
        "log_format": manager.log_format,
        "log_file": manager.log_file,
        "max_bytes": manager.max_bytes,
        "backup_count": manager.backup_count,
        "initialized": manager.initialized
    }
