# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errtree

"""
Composable error trees for Python.
"""

from __future__ import annotations

from errtree.config import ErrTreeSettings, get_settings, load_settings
from errtree.errors import (
    ConfigError,
    ConfigValidationError,
    ErrorSeverity,
    ErrTreeError,
)
from errtree.nodes import (
    DoubleWrappedError,
    WrappedError,
    wrap,
    wrap_formatted,
    wrap_message,
    wrap_two,
    wrap_two_formatted,
)
from errtree.protocols import Wrapper, is_wrapper
from errtree.template import render_template
from errtree.traversal import (
    children_of,
    contains_message,
    contains_type,
    contains_value,
    get,
    get_all,
    get_all_type,
    get_type,
    iter_errors,
    walk,
)

__all__ = [
    # Capability contract
    "Wrapper",
    "is_wrapper",
    # Nodes and constructors
    "WrappedError",
    "DoubleWrappedError",
    "wrap",
    "wrap_message",
    "wrap_formatted",
    "wrap_two",
    "wrap_two_formatted",
    "render_template",
    # Traversal
    "contains_message",
    "contains_value",
    "contains_type",
    "get_type",
    "get_all_type",
    "get",
    "get_all",
    "walk",
    "iter_errors",
    "children_of",
    # Configuration
    "ErrTreeSettings",
    "get_settings",
    "load_settings",
    # Errors
    "ErrTreeError",
    "ConfigError",
    "ConfigValidationError",
    "ErrorSeverity",
]
