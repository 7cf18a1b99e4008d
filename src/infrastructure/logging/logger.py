"""Logging helpers shared by adapters and use cases.

Loggers write to dated files under ``<project root>/logs/<subdir>/`` and,
optionally, to the console. ``get_app_logger`` and ``get_usage_logger``
return process-wide singletons.
"""

from collections.abc import Callable
from datetime import datetime
import logging
from pathlib import Path

from src.utils.utils import get_project_root

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggerBuilder:
    """Fluent builder for configured ``logging.Logger`` instances."""

    def __init__(self) -> None:
        self._name = "app"
        self._subdir = "app"
        self._prefix = "app_logs"
        self._console = False
        self._level = logging.INFO
        self._formatter_factory: Callable[[], logging.Formatter] = (
            self._default_formatter
        )
        self._file_handler_factory: Callable[
            [Path, logging.Formatter], logging.Handler
        ] = self._default_file_handler
        self._console_handler_factory: Callable[
            [logging.Formatter], logging.Handler
        ] = self._default_console_handler

    def name(self, value: str) -> "LoggerBuilder":
        self._name = value
        return self

    def subdir(self, value: str) -> "LoggerBuilder":
        self._subdir = value
        return self

    def prefix(self, value: str) -> "LoggerBuilder":
        self._prefix = value
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, value: int) -> "LoggerBuilder":
        self._level = value
        return self

    def formatter(
        self,
        factory: Callable[[], logging.Formatter],
    ) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(
        self,
        factory: Callable[[Path, logging.Formatter], logging.Handler],
    ) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(
        self,
        factory: Callable[[logging.Formatter], logging.Handler],
    ) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Build the logger, reusing it when it is already configured.

        Returns:
            logging.Logger: Logger with file and optional console handlers.
        """
        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        if logger.handlers:
            return logger

        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"

        fmt = self._formatter_factory()
        logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        logger.propagate = False
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return datetime.now().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(DEFAULT_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.Handler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(fmt: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper around a built ``logging.Logger``."""

    _instance = None
    _subdir = "app"
    _prefix = "app_logs"

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._initialized = False
            cls._instance = instance
        return cls._instance

    def __init__(self, name: str = "app") -> None:
        if self._initialized:
            return
        self.logger = (
            LoggerBuilder()
            .name(name)
            .subdir(self._subdir)
            .prefix(self._prefix)
            .console(True)
            .build()
        )
        self._initialized = True

    def info(self, msg, *args, **kwargs) -> None:
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs) -> None:
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs) -> None:
        self.logger.error(msg, *args, **kwargs)

    def debug(self, msg, *args, **kwargs) -> None:
        self.logger.debug(msg, *args, **kwargs)

    def critical(self, msg, *args, **kwargs) -> None:
        self.logger.critical(msg, *args, **kwargs)


class AppLogger(Logger):
    """Application logger used by use cases and adapters."""

    _instance = None
    _subdir = "app"
    _prefix = "app_logs"


class UsageLogger(Logger):
    """Logger for user-facing interactions (CLI runs, page views)."""

    _instance = None
    _subdir = "usage"
    _prefix = "usage_logs"


def get_app_logger() -> AppLogger:
    """Return the application logger singleton."""
    return AppLogger("billing")


def get_usage_logger() -> UsageLogger:
    """Return the usage logger singleton."""
    return UsageLogger("billing.usage")


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "UsageLogger",
    "get_app_logger",
    "get_usage_logger",
]
