"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from roundup_tracker.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_daily_file(tmp_path, monkeypatch):
    """LoggerBuilder should place the file under logs/<subdir>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240630"),
    )

    builder = logger_module.LoggerBuilder()
    built = (
        builder.name("roundup_tracker.test_builder")
        .subdir("reports")
        .prefix("wallet")
        .console(False)
        .level(logging.DEBUG)
        .build()
    )

    assert built.name == "roundup_tracker.test_builder"
    assert built.level == logging.DEBUG
    assert built.propagate is False
    file_handlers = [
        h for h in built.handlers if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    assert len(built.handlers) == 1
    expected_path = tmp_path / "logs" / "reports" / "20240630_wallet.log"
    assert file_handlers[0].baseFilename == str(expected_path)
    # A second build must not stack handlers.
    assert builder.build() is built
    assert len(built.handlers) == 1
    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


def test_builder_uses_custom_factories(tmp_path, monkeypatch):
    """Formatter and handler factories can be replaced."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    seen = {}

    def _file_factory(path, formatter):
        seen["path"] = path
        seen["formatter"] = formatter
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("roundup_tracker.test_factories")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert seen["formatter"] is fmt
    assert seen["path"].parent == tmp_path / "logs" / "app"
    built.handlers.clear()


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should log at INFO with the given formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "roundups.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert fmt._fmt == logger_module.LOG_FORMAT
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

    logger = logger_module.Logger("roundup_tracker")
    logger.info("hello")
    logger.warning("warn")
    logger.error("err")
    logger.debug("dbg")
    logger.critical("crit")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("other") is logger


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger each return one instance."""
    subdirs = []

    def _fake_build(self):
        subdirs.append(self._subdir)
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert subdirs == ["app", "usage"]
