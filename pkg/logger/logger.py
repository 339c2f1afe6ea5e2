import sys
from typing import Protocol, runtime_checkable

from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...

    def bind(self, **kwargs) -> _loguru_logger: ...  # type: ignore


class Logger(ILogger):
    """Console logger on top of loguru.

    Usage:
        logger = Logger(LoggerConfig(level="DEBUG"))
        cache = New(logger=logger)
    """

    def __init__(self, config: LoggerConfig):
        """Initialize logger with configuration.

        Args:
            config: Logger configuration
        """
        self.config = config
        self._loguru = _loguru_logger.bind(**{SERVICE_KEY: config.service_name})

        # Remove default handler
        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        def ensure_service(record):
            record["extra"].setdefault(SERVICE_KEY, self.config.service_name)
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_SERVICE} | "
            f"{LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"
        )

        _loguru_logger.add(
            sys.stdout,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=ensure_service,
        )

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self._loguru.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self._loguru.opt(depth=1).info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self._loguru.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self._loguru.opt(depth=1).error(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception with traceback."""
        self._loguru.opt(depth=1).exception(message, **kwargs)

    def bind(self, **kwargs) -> _loguru_logger:  # type: ignore
        """Bind extra context, returns a loguru logger."""
        return self._loguru.bind(**kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
