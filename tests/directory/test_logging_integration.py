"""Tests for structured logging of directory operations."""

import json
import logging
from unittest.mock import Mock

import pytest
import structlog

from contacts_app.logging.config import (
    configure_logging,
    get_directory_logger,
    get_logger,
    log_directory_operation,
)


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test reconfigures it."""
    yield
    structlog.reset_defaults()


class TestLogDirectoryOperation:
    """Test the standardized operation event."""

    def test_success_event(self):
        """Successful operations are bound with result OK."""
        logger = Mock()

        log_directory_operation(logger, "add", True, "added")

        logger.bind.assert_called_once_with(operation="add", result="OK", reason="added")
        logger.bind.return_value.info.assert_called_once_with("Directory operation")

    def test_failure_is_info_not_warning(self):
        """Expected failures are ordinary outcomes."""
        logger = Mock()

        log_directory_operation(logger, "remove", False, "not_found")

        bound = logger.bind.return_value
        logger.bind.assert_called_once_with(operation="remove", result="FAIL", reason="not_found")
        bound.info.assert_called_once_with("Directory operation")
        bound.warning.assert_not_called()

    def test_context_is_bound(self):
        """Context is attached under its own key."""
        logger = Mock()

        log_directory_operation(logger, "add", False, "full", context={"size": 2})

        bound = logger.bind.return_value
        bound.bind.assert_called_once_with(context={"size": 2})
        bound.bind.return_value.info.assert_called_once_with("Directory operation")


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_loggers_available(self):
        """Factory helpers return usable loggers."""
        assert get_logger(__name__) is not None
        assert get_directory_logger(__name__) is not None

    def test_json_output(self, reset_structlog, caplog):
        """JSON mode renders one parseable object per event."""
        caplog.set_level(logging.INFO)
        configure_logging(level="INFO", format_json=True, include_timestamp=False)

        log_directory_operation(get_directory_logger("contacts_app.test"), "find", True, "found")

        messages = [r.getMessage() for r in caplog.records if r.name == "contacts_app.test"]
        event = json.loads(messages[-1])
        assert event["event"] == "Directory operation"
        assert event["operation"] == "find"
        assert event["result"] == "OK"
        assert event["subsystem"] == "directory"
        assert event["level"] == "info"

    def test_level_filters_info(self, reset_structlog, caplog):
        """Operation events are dropped below the configured level."""
        caplog.set_level(logging.WARNING)
        configure_logging(level="WARNING", format_json=True)

        log_directory_operation(get_directory_logger("contacts_app.quiet"), "add", True, "added")

        assert [r for r in caplog.records if r.name == "contacts_app.quiet"] == []
