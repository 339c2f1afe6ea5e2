"""Unit tests for the loguru-backed Logger."""

import sys

import pytest
from loguru import logger as _loguru_logger

from pkg.logger.constant import LogLevel
from pkg.logger.logger import ILogger, Logger
from pkg.logger.type import LoggerConfig


@pytest.fixture(autouse=True)
def restore_loguru():
    yield
    _loguru_logger.remove()
    _loguru_logger.add(sys.stderr)


class TestLoggerConfig:
    """Tests for LoggerConfig."""

    def test_string_level_converted(self):
        assert LoggerConfig(level="warning").level is LogLevel.WARNING

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggerConfig(level="LOUD")


class TestLogger:
    """Tests for Logger."""

    def test_writes_to_stdout(self, capsys):
        logger = Logger(LoggerConfig(level="DEBUG", colorize=False, service_name="cache-test"))
        logger.info("[ConnectionCache] Created connection: localhost:6379")
        out = capsys.readouterr().out
        assert "Created connection: localhost:6379" in out
        assert "cache-test" in out

    def test_level_filters(self, capsys):
        logger = Logger(LoggerConfig(level="ERROR", colorize=False))
        logger.info("hidden")
        logger.error("shown")
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_implements_interface(self):
        assert isinstance(Logger(LoggerConfig(enable_console=False)), ILogger)
