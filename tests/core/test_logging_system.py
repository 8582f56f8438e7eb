"""Tests for logging configuration."""

import logging
import logging.handlers
from pathlib import Path
from unittest.mock import patch

import pytest

from airac_explorer.core import logging_system
from airac_explorer.core.logging_system import (
    ROOT_LOGGER_NAME,
    get_logger,
    initialize_logging,
    is_initialized,
)


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo logger changes made by initialize_logging."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging_system._initialized = False


def _handler_types() -> list[type]:
    return [type(h) for h in logging.getLogger(ROOT_LOGGER_NAME).handlers]


class TestGetLogger:
    """Tests for get_logger."""

    def test_module_logger(self) -> None:
        """Test loggers nest under the package logger."""
        logger = get_logger("airac_explorer.cycles.catalog")

        assert logger.name == "airac_explorer.cycles.catalog"
        assert logger.parent is not None


class TestInitializeLogging:
    """Tests for initialize_logging."""

    def test_bundled_config_console_only(self) -> None:
        """Test file handlers are dropped without a log directory."""
        initialize_logging()

        assert is_initialized()
        assert _handler_types() == [logging.StreamHandler]
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.INFO

    def test_platform_dir_adds_file_handler(self, tmp_path: Path) -> None:
        """Test file handlers are written to the log directory."""
        with patch("airac_explorer.core.logging_system.get_log_dir", return_value=tmp_path):
            initialize_logging(use_platform_dir=True)

        handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
        file_handlers = [h for h in handlers if isinstance(h, logging.handlers.RotatingFileHandler)]

        assert len(file_handlers) == 1
        assert Path(file_handlers[0].baseFilename) == tmp_path / "airac_explorer.log"

        get_logger("airac_explorer.test").info("hello")
        file_handlers[0].flush()
        assert "hello" in (tmp_path / "airac_explorer.log").read_text(encoding="utf-8")

    def test_level_override(self) -> None:
        """Test the level argument applies to the package logger and console."""
        initialize_logging(level="DEBUG")

        logger = logging.getLogger(ROOT_LOGGER_NAME)
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_missing_config_uses_default(self, tmp_path: Path) -> None:
        """Test a missing file falls back to console logging."""
        initialize_logging(tmp_path / "absent.yaml")

        assert _handler_types() == [logging.StreamHandler]
        assert logging.getLogger(ROOT_LOGGER_NAME).handlers[0].level == logging.WARNING

    def test_malformed_config_uses_default(self, tmp_path: Path) -> None:
        """Test unparseable YAML falls back to console logging."""
        path = tmp_path / "logging.yaml"
        path.write_text("version: [1\n", encoding="utf-8")

        initialize_logging(path)

        assert _handler_types() == [logging.StreamHandler]

    def test_default_config_not_mutated(self) -> None:
        """Test overrides do not leak into the fallback config."""
        initialize_logging(Path("/nonexistent/logging.yaml"), level="DEBUG")

        console = logging_system.DEFAULT_CONFIG["handlers"]["console"]
        assert console["level"] == "WARNING"
