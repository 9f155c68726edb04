# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errtree
"""
Logger helpers for errtree.

errtree is a library, so it never installs output handlers of its own. All
loggers live under the ``errtree`` namespace and the package logger carries a
``NullHandler``; applications opt in by configuring logging as usual.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from errtree.config import ErrTreeSettings

PACKAGE_LOGGER = "errtree"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger inside the errtree namespace.

    Args:
        name: Module or component name. Names outside the ``errtree``
            namespace are nested under it.

    Returns:
        A standard library logger
    """
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(settings: ErrTreeSettings) -> logging.Logger:
    """Apply the configured log level to the package logger.

    Args:
        settings: Loaded errtree settings

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.level)
    return logger
