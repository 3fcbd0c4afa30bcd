"""
Tests for logging configuration.
"""

import logging

import pytest

from movie_catalog.utils.logging_config import configure_api_logging, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers added by the test and restore the root level."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()
    root.setLevel(level)


def test_console_only():
    """setup_logging without a file installs a single console handler."""
    setup_logging(level="WARNING")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_file_handler(tmp_path):
    """configure_api_logging with a file name adds a rotating file handler."""
    configure_api_logging(level="DEBUG", log_file="api.log", log_dir=str(tmp_path / "logs"))
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert (tmp_path / "logs" / "api.log").exists()


def test_unknown_level_falls_back_to_info():
    """An unrecognised level name configures INFO."""
    setup_logging(level="verbose")
    assert logging.getLogger().level == logging.INFO
