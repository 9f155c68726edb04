# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errtree
"""
Configuration for errtree.

Settings are environment-driven (``ERRTREE_*`` variables) and loaded with
pydantic-settings. ``get_settings`` builds the process-wide instance lazily
and caches it; call ``get_settings.cache_clear()`` to reload. Loading never
touches logging configuration: applications call
``errtree.logging.configure_logging(get_settings())`` when they want the
configured level applied.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from errtree.errors import ConfigValidationError
from errtree.logging import get_logger

logger = get_logger(__name__)


class ErrTreeSettings(BaseSettings):
    """
    Settings for error tree traversal and errtree's own logging.
    Loads from environment variables using Pydantic v2's env support.
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRTREE_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    log_level: str = Field(default="WARNING", description="Level of the errtree logger")
    warn_on_cycle: bool = Field(
        default=True,
        description="Log skipped cyclic edges at WARNING instead of DEBUG",
    )
    native_chaining: bool = Field(
        default=False,
        description=(
            "Follow __cause__ and exception group members of errors that "
            "do not expose wrapped_errors()"
        ),
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Accept any level name known to the logging module."""
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        name = v.strip().upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"Invalid log level: {v}")
        return name

    @property
    def level(self) -> int:
        """The configured level as a logging module integer."""
        return logging.getLevelNamesMapping()[self.log_level]


def load_settings(**overrides: Any) -> ErrTreeSettings:
    """Load settings from the environment, applying explicit overrides.

    Args:
        **overrides: Field values taking precedence over the environment

    Returns:
        Validated settings

    Raises:
        ConfigValidationError: If any value fails validation
    """
    try:
        return ErrTreeSettings(**overrides)
    except ValidationError as e:
        keys = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
        logger.error("Invalid errtree settings for %s", ", ".join(keys) or "<unknown>")
        raise ConfigValidationError(
            f"Invalid errtree settings: {', '.join(keys)}",
            config_keys=keys,
            cause=e,
        ) from e


@lru_cache(maxsize=1)
def get_settings() -> ErrTreeSettings:
    """Get the process-wide settings."""
    return load_settings()


@lru_cache(maxsize=1)
def get_traversal_settings() -> ErrTreeSettings:
    """Get settings for tree traversal, which must never fail.

    Invalid configuration is reported once and the defaults are used
    instead.
    """
    try:
        return get_settings()
    except ConfigValidationError as e:
        logger.warning("Using default errtree settings for traversal: %s", e.message)
        return ErrTreeSettings.model_construct()
