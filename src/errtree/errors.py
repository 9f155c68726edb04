# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errtree
"""
Errors raised by errtree itself.

Tree construction and traversal never fail, so the only errors errtree raises
come from loading its configuration. They carry a code, a severity and a
context dictionary, and they take part in error trees like any other wrapper:
the underlying cause is exposed through ``wrapped_errors``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Final


class ErrorSeverity(str, Enum):
    """Severity levels for errtree errors."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


ERRTREE_ERROR: Final = "ERRTREE_ERROR"
CONFIG_ERROR: Final = "CONFIG_ERROR"
CONFIG_VALIDATION_ERROR: Final = "CONFIG_VALIDATION_ERROR"


class ErrTreeError(Exception):
    """Base class for errors raised by errtree."""

    message: str
    code: str
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __init__(
        self,
        message: str,
        code: str = ERRTREE_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new errtree error.

        Args:
            message: Human-readable error message
            code: Error code string
            severity: Severity level of the error
            context: Additional contextual information
            cause: Underlying error, exposed as the only wrapped child
            **kwargs: Additional context keys (merged into context)
        """
        super().__init__(message)
        full_context = dict(context or {})
        full_context.update(kwargs)

        self.message = message
        self.code = code
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)
        if cause is not None:
            self.__cause__ = cause

    def wrapped_errors(self) -> tuple[BaseException, ...]:
        """Expose the underlying cause, if any, to tree traversal."""
        if self.__cause__ is None:
            return ()
        return (self.__cause__,)

    def add_context(self, key: str, value: Any) -> ErrTreeError:
        """Add a key-value pair to the error context and return self for chaining."""
        self.context[key] = value
        return self

    def with_context(self, context: dict[str, Any]) -> ErrTreeError:
        """Return a new error with additional context."""
        new_error = self.__class__.__new__(self.__class__)
        ErrTreeError.__init__(
            new_error,
            self.message,
            code=self.code,
            severity=self.severity,
            context={**self.context, **context},
            cause=self.__cause__,
        )
        for attr_name, attr_value in self.__dict__.items():
            if attr_name not in ("message", "code", "severity", "context", "timestamp"):
                setattr(new_error, attr_name, attr_value)
        return new_error

    def __str__(self) -> str:
        """Get string representation of the error.

        Returns:
            String in format 'code: message'
        """
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.name,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }


class ConfigError(ErrTreeError):
    """Base class for configuration errors."""

    def __init__(
        self,
        message: str,
        code: str = CONFIG_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            cause=cause,
            **kwargs,
        )


class ConfigValidationError(ConfigError):
    """Raised when settings fail validation."""

    def __init__(
        self,
        message: str,
        config_keys: list[str] | None = None,
        code: str = CONFIG_VALIDATION_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        validation_kwargs = kwargs.copy()
        if config_keys:
            validation_kwargs["config_keys"] = list(config_keys)

        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            cause=cause,
            **validation_kwargs,
        )
