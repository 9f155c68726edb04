"""Tests for errtree logger helpers."""

import logging

import pytest

from errtree.config import load_settings
from errtree.logging import PACKAGE_LOGGER, configure_logging, get_logger


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        (None, "errtree"),
        ("errtree", "errtree"),
        ("errtree.traversal", "errtree.traversal"),
        ("myapp", "errtree.myapp"),
    ],
)
def test_get_logger_names(name, expected):
    assert get_logger(name).name == expected


def test_package_logger_has_null_handler():
    handlers = logging.getLogger(PACKAGE_LOGGER).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("critical", logging.CRITICAL), ("Debug", logging.DEBUG), ("WARN", logging.WARNING)],
)
def test_configure_logging_sets_level(value, expected):
    logger = configure_logging(load_settings(log_level=value))

    assert logger.name == PACKAGE_LOGGER
    assert logger.level == expected
