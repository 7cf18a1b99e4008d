"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_creates_configured_logger(tmp_path, monkeypatch):
    """LoggerBuilder should build loggers in the project logs directory."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240101"),
    )

    builder = logger_module.LoggerBuilder()
    billing_logger = (
        builder.name("billing.test")
        .subdir("billing")
        .prefix("invoices")
        .console(True)
        .level(logging.WARNING)
        .build()
    )

    assert billing_logger.name == "billing.test"
    assert billing_logger.level == logging.WARNING
    file_handlers = [
        h
        for h in billing_logger.handlers
        if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected_path = tmp_path / "logs" / "billing" / "20240101_invoices.log"
    assert file_handlers[0].baseFilename == str(expected_path)
    assert builder.build() is billing_logger
    assert len(billing_logger.handlers) == 2


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "logs.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger methods should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("billing")
    logger.info("invoice created")
    logger.warning("rate missing")
    logger.error("invoice missing")

    fake_logger.info.assert_called_with("invoice created")
    fake_logger.warning.assert_called_with("rate missing")
    fake_logger.error.assert_called_with("invoice missing")
    assert logger_module.Logger("billing") is logger


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should return singletons."""
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: MagicMock(),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
