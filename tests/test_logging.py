"""
Tests for the Evictree logging system.
"""

import io
import json
import logging

import pytest

from evictree import BinarySearchTree, MostRecentlyUsedCapPolicy, natural_order
from evictree.utils.logging import (
    initialize_logging,
    shutdown_logging,
    get_logger,
    get_metrics_logger
)
from evictree.utils.logging_config import (
    LoggingPresets,
    configure_from_environment,
    get_logging_config
)


def read_json_lines(path):
    with open(path, 'r') as f:
        return [json.loads(line) for line in f if line.strip()]


class TestLoggingSystem:
    """Test the logging system functionality."""

    @pytest.fixture(autouse=True)
    def fresh_logging(self):
        shutdown_logging()
        yield
        shutdown_logging()

    @pytest.fixture
    def log_file(self, tmp_path):
        return tmp_path / "logs" / "test.log"

    def test_basic_logging_initialization(self, log_file):
        log_manager = initialize_logging(
            log_level="DEBUG",
            log_format="json",
            log_file=str(log_file),
            stream=io.StringIO()
        )

        assert log_manager is not None
        assert log_manager.log_level == logging.DEBUG

        logger = get_logger("test.basic")
        assert logger.name == "evictree.test.basic"
        logger.info("Test message", extra={"test_field": "test_value"})

        assert log_file.exists()
        log_data = read_json_lines(log_file)[0]
        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "evictree.test.basic"
        assert log_data["message"] == "Test message"
        assert log_data["test_field"] == "test_value"

    def test_initialize_is_idempotent(self):
        first = initialize_logging(stream=io.StringIO())
        second = initialize_logging(log_level="DEBUG")
        assert first is second
        assert second.log_level == logging.INFO

    def test_text_format(self):
        stream = io.StringIO()
        initialize_logging(log_level="INFO", log_format="text", stream=stream)

        get_logger("test.text").warning("Plain message")
        line = stream.getvalue().strip()
        assert " - evictree.test.text - WARNING - Plain message" in line

    def test_level_filters_debug(self):
        stream = io.StringIO()
        initialize_logging(log_level="INFO", stream=stream)

        get_logger("test.level").debug("hidden")
        assert stream.getvalue() == ""

    def test_exception_is_structured(self, log_file):
        initialize_logging(log_file=str(log_file), stream=io.StringIO())
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            get_logger("test.errors").exception("Failure")

        log_data = read_json_lines(log_file)[0]
        assert log_data["exception"]["type"] == "RuntimeError"
        assert log_data["exception"]["message"] == "boom"

    def test_metrics_logger_records_tree_evictions(self, log_file):
        initialize_logging(log_level="DEBUG", log_file=str(log_file), stream=io.StringIO())

        tree = BinarySearchTree(
            natural_order, MostRecentlyUsedCapPolicy(1), metrics=get_metrics_logger()
        )
        tree.insert("a", 1)
        tree.insert("b", 2)
        tree.search("b")

        events = [
            entry for entry in read_json_lines(log_file)
            if entry["logger"] == "evictree.metrics"
        ]
        assert [entry["event_type"] for entry in events] == ["eviction", "lookup_hit"]
        assert {entry["level"] for entry in events} == {"DEBUG"}
        assert events[0]["policy"] == "MostRecentlyUsedCapPolicy"
        assert events[0]["tree_key"] == "'a'"
        assert events[0]["size"] == 1

    def test_library_debug_logs_reach_configured_handlers(self, log_file):
        initialize_logging(log_level="DEBUG", log_file=str(log_file), stream=io.StringIO())

        tree = BinarySearchTree(natural_order, MostRecentlyUsedCapPolicy(1))
        tree.insert("a", 1)
        tree.insert("b", 2)

        messages = [entry["message"] for entry in read_json_lines(log_file)]
        assert "Evicted key 'a' (size=1)" in messages


class TestLoggingConfig:
    """Test presets and environment configuration."""

    @pytest.fixture(autouse=True)
    def fresh_logging(self):
        shutdown_logging()
        yield
        shutdown_logging()

    def test_not_initialized(self):
        assert get_logging_config() == {"status": "not_initialized"}

    def test_testing_preset(self, tmp_path):
        LoggingPresets.testing(str(tmp_path / "test.log"))
        config = get_logging_config()
        assert config["status"] == "initialized"
        assert config["log_level"] == logging.WARNING
        assert config["log_format"] == "text"
        assert config["initialized"] is True

    def test_development_preset(self):
        LoggingPresets.development()
        config = get_logging_config()
        assert config["log_level"] == logging.DEBUG
        assert config["log_file"] is None

    def test_production_preset(self):
        LoggingPresets.production()
        assert get_logging_config()["backup_count"] == 10

    def test_configure_from_environment(self, monkeypatch, tmp_path):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("EVICTREE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("EVICTREE_LOG_FORMAT", "text")
        monkeypatch.setenv("EVICTREE_LOG_FILE", str(log_file))
        monkeypatch.setenv("EVICTREE_LOG_BACKUP_COUNT", "2")

        configure_from_environment()
        config = get_logging_config()
        assert config["log_level"] == logging.DEBUG
        assert config["log_format"] == "text"
        assert config["log_file"] == str(log_file)
        assert config["backup_count"] == 2

        get_logger("test.env").debug("From environment")
        assert "From environment" in log_file.read_text()
