"""Tests for logging setup."""

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from slugcast.config.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_default_level_is_warning():
    setup_logging()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert any(isinstance(h, RichHandler) for h in root.handlers)


def test_configured_level():
    setup_logging(level="INFO")
    assert logging.getLogger().level == logging.INFO


def test_unknown_level_falls_back_to_warning():
    setup_logging(level="LOUD")
    assert logging.getLogger().level == logging.WARNING


def test_verbose_wins_and_unmutes_http_loggers():
    setup_logging(verbose=True, level="ERROR")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG


def test_log_file(tmp_path: Path):
    log_file = tmp_path / "logs" / "slugcast.log"
    setup_logging(log_file=log_file)

    logging.getLogger("slugcast.test").warning("disk is full")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "disk is full" in log_file.read_text()
