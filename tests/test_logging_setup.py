"""Tests for logging_setup module."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from unittest import mock

import pytest

from vshelf.env_settings import clear_env_settings_cache
from vshelf.logging_setup import set_console_quiet, setup_logging


@pytest.fixture(autouse=True)
def _fresh_settings_cache() -> Iterator[None]:
    """setup_logging() reads LOG_LEVEL through the cached settings."""
    clear_env_settings_cache()
    yield
    clear_env_settings_cache()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_default_setup(self) -> None:
        """Test default logging setup."""
        with mock.patch.dict(os.environ, {}, clear=True):
            logger = setup_logging()
        assert logger.name == "vshelf"
        assert logger.level == logging.INFO
        assert len(logger.handlers) >= 1

    def test_level_from_env_settings(self) -> None:
        """Without an explicit level, LOG_LEVEL from the environment is used."""
        with mock.patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            logger = setup_logging()
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_explicit_level_overrides_env_settings(self) -> None:
        """An explicit level wins over LOG_LEVEL."""
        with mock.patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}, clear=True):
            logger = setup_logging(log_level="WARNING")
        assert logger.level == logging.WARNING

    def test_custom_log_level(self) -> None:
        """Test setting custom log level."""
        logger = setup_logging(log_level="DEBUG")
        assert logger.level == logging.DEBUG

    def test_invalid_log_level_defaults_to_info(self) -> None:
        """Test that invalid log level defaults to INFO."""
        logger = setup_logging(log_level="INVALID")
        assert logger.level == logging.INFO

    def test_case_insensitive_log_level(self) -> None:
        """Test that log level is case insensitive."""
        logger = setup_logging(log_level="warning")
        assert logger.level == logging.WARNING

    def test_repeated_setup_replaces_handlers(self) -> None:
        """Calling setup twice leaves a single console handler."""
        setup_logging(log_level="INFO")
        logger = setup_logging(log_level="INFO")
        assert len(logger.handlers) == 1

    def test_with_log_file(self, tmp_path: Path) -> None:
        """Test logging with file output."""
        log_file = tmp_path / "test.log"
        logger = setup_logging(log_level="INFO", log_file=log_file)

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1

        logger.info("シリーズ検出 message")
        for handler in file_handlers:
            handler.flush()
        assert "シリーズ検出 message" in log_file.read_text(encoding="utf-8")

    def test_log_file_creates_parent_dirs(self, tmp_path: Path) -> None:
        """Test that log file creation creates parent directories."""
        log_file = tmp_path / "nested" / "dir" / "test.log"
        setup_logging(log_level="INFO", log_file=log_file)
        assert log_file.parent.exists()

    def test_rich_console_enabled(self) -> None:
        """Test rich console handler."""
        from rich.logging import RichHandler

        logger = setup_logging(log_level="INFO", rich_console=True)
        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1

    def test_plain_console(self) -> None:
        """Test plain stream handler when rich is disabled."""
        from rich.logging import RichHandler

        logger = setup_logging(log_level="INFO", rich_console=False)
        assert not any(isinstance(h, RichHandler) for h in logger.handlers)
        assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)

    def test_quiet_console(self) -> None:
        """Quiet console only shows warnings."""
        logger = setup_logging(log_level="DEBUG", quiet_console=True)
        assert logger.handlers[0].level == logging.WARNING


class TestSetConsoleQuiet:
    """Tests for set_console_quiet function."""

    def test_toggle(self) -> None:
        """Console handler level follows the quiet flag."""
        logger = setup_logging(log_level="INFO")
        set_console_quiet(True)
        assert logger.handlers[0].level == logging.WARNING
        set_console_quiet(False)
        assert logger.handlers[0].level == logging.INFO

    def test_unquiet_restores_configured_level(self) -> None:
        """Leaving quiet mode returns to the level setup_logging() was given."""
        logger = setup_logging(log_level="DEBUG", quiet_console=True)
        assert logger.handlers[0].level == logging.WARNING
        set_console_quiet(False)
        assert logger.handlers[0].level == logging.DEBUG

    def test_unquiet_restores_error_level(self) -> None:
        """A level above WARNING is restored too, not lowered to INFO."""
        logger = setup_logging(log_level="ERROR")
        set_console_quiet(True)
        set_console_quiet(False)
        assert logger.handlers[0].level == logging.ERROR
