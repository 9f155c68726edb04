# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errtree
"""
The capability contract for errors that wrap other errors.

Any error type takes part in tree traversal by providing ``wrapped_errors``.
No base class is required and traversal never looks at concrete node types.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class Wrapper(Protocol):
    """Protocol for errors that expose the errors they directly wrap.

    The returned sequence is ordered (left to right) and treated as
    read-only by every traversal. ``None`` entries are skipped.
    """

    def wrapped_errors(self) -> Sequence[object]:
        """Return the child errors wrapped by this error."""
        ...


def is_wrapper(error: object) -> bool:
    """Check whether an error exposes wrapped children."""
    return isinstance(error, Wrapper)
