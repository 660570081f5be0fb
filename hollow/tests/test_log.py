"""
Tests for logging setup
"""

import logging

import pytest

from hollow.utils.log import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    logger = logging.getLogger("hollow")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


def test_configure_logging_level_from_argument():
    logger = configure_logging("debug")
    assert logger.name == "hollow"
    assert logger.level == logging.DEBUG


def test_configure_logging_level_from_environment(monkeypatch):
    monkeypatch.setenv("HOLLOW_LOG_LEVEL", "INFO")
    assert configure_logging().level == logging.INFO


def test_configure_logging_adds_one_handler():
    logger = configure_logging()
    configure_logging()

    streams = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(streams) == 1
