"""
Structured logging for Evictree.

Library modules log through ``logging.getLogger(__name__)`` at DEBUG and
nothing is configured until an application calls :func:`initialize_logging`,
which attaches JSON (or plain text) handlers to the ``evictree`` logger.
Trees accept a :class:`MetricsLogger` to emit lookup and eviction events.
"""
import json
import logging
import logging.handlers
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

PACKAGE_LOGGER = "evictree"

# LogRecord attributes that are not user supplied `extra` fields
_RECORD_FIELDS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message", "asctime", "event",
}


class StructuredFormatter(logging.Formatter):
    """
    Formats each record as a single JSON object.

    Tree events logged through :class:`MetricsLogger` carry their fields in
    ``record.event``; plain ``extra={...}`` fields are included as well.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        log_entry.update(getattr(record, "event", {}))
        for key, value in record.__dict__.items():
            if key not in _RECORD_FIELDS and not key.startswith("_"):
                log_entry[key] = value

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class MetricsLogger:
    """
    Logger for tree lookup and eviction events.

    Both events are emitted at DEBUG.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _emit(self, message: str, event_type: str, key: Any, **fields):
        self.logger.debug(
            message,
            extra={"event": {"event_type": event_type, "tree_key": repr(key), **fields}},
        )

    def log_lookup(self, key: Any, hit: bool, **kwargs):
        """
        Log the outcome of a tree lookup.

        Args:
            key: The key looked up
            hit: Whether the key was found
            **kwargs: Additional metadata
        """
        if hit:
            self._emit("Lookup hit", "lookup_hit", key, **kwargs)
        else:
            self._emit("Lookup miss", "lookup_miss", key, **kwargs)

    def log_eviction(self, policy: str, key: Any, **kwargs):
        """
        Log a key evicted by a policy.

        Args:
            policy: Name of the policy that selected the key
            key: The evicted key
            **kwargs: Additional metadata, e.g. the tree size after eviction
        """
        self._emit("Key evicted", "eviction", key, policy=policy, **kwargs)


class ThreadSafeLogManager:
    """
    Owns the handlers attached to the ``evictree`` logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format ('json' or 'text')
        log_file: Path to a rotating log file (optional)
        max_bytes: Maximum size of the log file before rotation
        backup_count: Number of rotated files to keep
        stream: Console stream (defaults to stdout)
    """

    def __init__(self,
                 log_level: str = "INFO",
                 log_format: str = "json",
                 log_file: Optional[str] = None,
                 max_bytes: int = 10 * 1024 * 1024,  # 10MB
                 backup_count: int = 5,
                 stream: Any = None):
        self.log_level = getattr(logging, log_level.upper())
        self.log_format = log_format
        self.log_file = log_file
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self._lock = threading.RLock()
        self._handlers = []

        if log_format == "json":
            formatter = StructuredFormatter()
        else:
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        self._add_handler(logging.StreamHandler(stream or sys.stdout), formatter)
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            self._add_handler(
                logging.handlers.RotatingFileHandler(
                    log_file, maxBytes=max_bytes, backupCount=backup_count
                ),
                formatter,
            )
        logging.getLogger(PACKAGE_LOGGER).setLevel(self.log_level)

        self.metrics = MetricsLogger(self.get_logger("metrics"))

    def _add_handler(self, handler: logging.Handler, formatter: logging.Formatter):
        handler.setLevel(self.log_level)
        handler.setFormatter(formatter)
        logging.getLogger(PACKAGE_LOGGER).addHandler(handler)
        self._handlers.append(handler)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger nested under the ``evictree`` hierarchy."""
        if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
            name = f"{PACKAGE_LOGGER}.{name}"
        return logging.getLogger(name)

    @property
    def initialized(self) -> bool:
        return bool(self._handlers)

    def shutdown(self):
        """Detach and close every handler this manager installed."""
        with self._lock:
            package_logger = logging.getLogger(PACKAGE_LOGGER)
            for handler in self._handlers:
                package_logger.removeHandler(handler)
                handler.close()
            self._handlers = []
            package_logger.setLevel(logging.NOTSET)


# Global log manager instance with thread safety
_log_manager: Optional[ThreadSafeLogManager] = None
_log_manager_lock = threading.RLock()


def initialize_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    stream: Any = None
) -> ThreadSafeLogManager:
    """
    Initialize the global logging system.

    Only the first call configures handlers; later calls return the existing
    manager until :func:`shutdown_logging` is called.

    Returns:
        Configured log manager instance
    """
    global _log_manager

    with _log_manager_lock:
        if _log_manager is None:
            _log_manager = ThreadSafeLogManager(
                log_level=log_level,
                log_format=log_format,
                log_file=log_file,
                max_bytes=max_bytes,
                backup_count=backup_count,
                stream=stream
            )

    return _log_manager


def shutdown_logging():
    """Tear down the global log manager so logging can be re-initialized."""
    global _log_manager

    with _log_manager_lock:
        if _log_manager is not None:
            _log_manager.shutdown()
            _log_manager = None


def get_logger(name: str) -> logging.Logger:
    with _log_manager_lock:
        return initialize_logging().get_logger(name)


def get_metrics_logger() -> MetricsLogger:
    with _log_manager_lock:
        return initialize_logging().metrics
