# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errtree
"""
Search operations over error trees.

Every operation walks the tree rooted at an error depth-first in pre-order:
a node is checked before its children and children are visited left to
right. A ``None`` root is accepted everywhere and simply matches nothing.

Only the ``Wrapper`` capability is used to find children, so custom error
types compose freely with the nodes in ``errtree.nodes``.

A child that already appears on the path from the root to the current node
closes a cycle. It is skipped (treated as a non-match) and logged; nodes that
are merely shared between branches are still visited on every branch.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from errtree.config import get_traversal_settings
from errtree.logging import get_logger
from errtree.protocols import is_wrapper

logger = get_logger(__name__)

E = TypeVar("E")

_EXHAUSTED = object()


def error_message(error: object) -> str:
    """Return the message an error renders."""
    return str(error)


def children_of(error: object) -> tuple[object, ...]:
    """Return the children traversal follows for a single error.

    Errors implementing ``Wrapper`` expose ``wrapped_errors()``. Other errors
    are leaves unless native chaining is enabled in the settings, in which
    case an explicit ``__cause__`` and exception group members count as
    children.
    """
    if error is None:
        return ()
    if is_wrapper(error):
        return tuple(error.wrapped_errors())  # type: ignore[attr-defined]
    if not get_traversal_settings().native_chaining:
        return ()

    children: list[object] = []
    if isinstance(error, BaseExceptionGroup):
        children.extend(error.exceptions)
    cause = getattr(error, "__cause__", None)
    if cause is not None:
        children.append(cause)
    return tuple(children)


def iter_errors(root: object) -> Iterator[object]:
    """Iterate over every error in a tree in pre-order.

    Args:
        root: Root error, may be ``None``

    Yields:
        Each error in the tree, ancestors before descendants
    """
    if root is None:
        return

    yield root
    stack: list[tuple[object, Iterator[object]]] = [(root, iter(children_of(root)))]
    on_path = {id(root)}
    while stack:
        node, children = stack[-1]
        child = next(children, _EXHAUSTED)
        if child is _EXHAUSTED:
            stack.pop()
            on_path.discard(id(node))
            continue
        if child is None:
            continue
        if id(child) in on_path:
            _log_cycle(node, child)
            continue

        yield child
        stack.append((child, iter(children_of(child))))
        on_path.add(id(child))


def _log_cycle(parent: object, child: object) -> None:
    log = logger.warning if get_traversal_settings().warn_on_cycle else logger.debug
    log(
        "Skipping cyclic error reference from %s to %s",
        type(parent).__name__,
        type(child).__name__,
    )


def walk(root: object, callback: Callable[[object], Any]) -> None:
    """Call ``callback`` with every error in the tree, in pre-order."""
    for error in iter_errors(root):
        callback(error)


def _type_key(target: object) -> type:
    if isinstance(target, type):
        return target
    return type(target)


def _type_matcher(target: object, subclasses: bool) -> Callable[[object], bool]:
    key = _type_key(target)
    if subclasses:
        return lambda error: isinstance(error, key)
    return lambda error: type(error) is key


def contains_message(root: object, substring: str) -> bool:
    """Check whether any error in the tree has a message containing ``substring``."""
    return any(substring in error_message(error) for error in iter_errors(root))


def contains_value(root: object, target: object) -> bool:
    """Check whether the tree contains ``target`` itself or an error equal to it.

    Exceptions compare by identity unless their type defines ``__eq__``.
    """
    return any(error is target or error == target for error in iter_errors(root))


def contains_type(root: object, target: object, *, subclasses: bool = False) -> bool:
    """Check whether the tree contains an error of the given type.

    Args:
        root: Root error, may be ``None``
        target: A class, or an example error whose type is used
        subclasses: Match instances of subclasses too

    Returns:
        True if a matching error was found
    """
    matches = _type_matcher(target, subclasses)
    return any(matches(error) for error in iter_errors(root))


def get_type(root: object, target: type[E] | E, *, subclasses: bool = False) -> E | None:
    """Return the first error of the given type in pre-order, or ``None``.

    A matching ancestor always wins over its matching descendants.
    """
    matches = _type_matcher(target, subclasses)
    for error in iter_errors(root):
        if matches(error):
            return error  # type: ignore[return-value]
    return None


def get_all_type(
    root: object, target: type[E] | E, *, subclasses: bool = False
) -> list[E]:
    """Return every error of the given type, in pre-order.

    Returns:
        Matching errors; an empty list when there are none
    """
    matches = _type_matcher(target, subclasses)
    return [error for error in iter_errors(root) if matches(error)]  # type: ignore[misc]


def get(root: object, message: str) -> object | None:
    """Return the first error whose message equals ``message`` exactly."""
    for error in iter_errors(root):
        if error_message(error) == message:
            return error
    return None


def get_all(root: object, message: str) -> list[object]:
    """Return every error whose message equals ``message`` exactly, in pre-order."""
    return [error for error in iter_errors(root) if error_message(error) == message]
