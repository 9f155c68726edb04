"""Top-level pytest configuration for errtree."""

import logging

import pytest

from errtree.config import get_settings, get_traversal_settings
from errtree.logging import PACKAGE_LOGGER

ENV_VARS = ("ERRTREE_LOG_LEVEL", "ERRTREE_WARN_ON_CYCLE", "ERRTREE_NATIVE_CHAINING")


def _clear_settings():
    get_settings.cache_clear()
    get_traversal_settings.cache_clear()


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and any ERRTREE_* variables around each test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    _clear_settings()
    yield
    _clear_settings()
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.NOTSET)
