"""Unit tests for logging configuration."""

import logging

import pytest

from shiplink import ClientSettings, configure_logging
from shiplink.core.logger import PACKAGE_LOGGER_NAME, build_console_filter


@pytest.fixture
def package_logger():
    """Restore the package logger after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestConfigureLogging:
    def test_single_handler_after_repeated_calls(self, package_logger):
        settings = ClientSettings(_env_file=None, CONSOLE_LOG_LEVEL="DEBUG")

        configure_logging(settings)
        logger = configure_logging(settings)

        assert logger is package_logger
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_json_output(self, package_logger):
        configure_logging(ClientSettings(_env_file=None, CONSOLE_LOG_FORMAT_JSON=True))
        handler = package_logger.handlers[0]
        record = logging.LogRecord(PACKAGE_LOGGER_NAME, logging.INFO, __file__, 1, "Bought pickup %s", ("p_1",), None)

        assert '"event": "Bought pickup p_1"' in handler.format(record)


class TestConsoleFilter:
    def test_drops_disabled_keys(self):
        settings = ClientSettings(
            _env_file=None,
            CONSOLE_LOG_INCLUDE_PATH=False,
            CONSOLE_LOG_INCLUDE_STATUS_CODE=False,
        )
        event = {"event": "sent", "path": "pickups/p_1", "method": "GET", "status_code": 200}

        assert build_console_filter(settings)(None, "info", event) == {"event": "sent", "method": "GET"}

    def test_keeps_everything_by_default(self):
        event = {"event": "sent", "path": "pickups/p_1", "method": "GET", "status_code": 200}

        assert build_console_filter(ClientSettings(_env_file=None))(None, "info", dict(event)) == event
