# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errtree
"""
Wrapping error nodes.

A wrapping node attaches a message to one or two underlying errors while
remaining a normal exception that can be raised and inspected. The
constructors accept absent (``None``) children so that callers can wrap a
possibly-missing error unconditionally:

    err = wrap_formatted("loading config: {{err}}", err)

returns ``None`` when ``err`` is ``None`` instead of a spurious wrapper.
"""

from __future__ import annotations

from typing import Any

from errtree.template import ERR, ERR1, ERR2, render_template


class WrappedError(Exception):
    """Error carrying a rendered message and at most one wrapped child."""

    __slots__ = ("_message", "_child")

    def __init__(self, message: object, child: BaseException | None = None) -> None:
        """Initialize a single-child wrapping node.

        Args:
            message: Rendered message; ``None`` is stored as an empty string
            child: Wrapped error, or ``None`` for a message-only error
        """
        text = "" if message is None else str(message)
        super().__init__(text)
        self._message = text
        self._child = child
        if child is not None:
            self.__cause__ = child

    @property
    def message(self) -> str:
        return self._message

    @property
    def child(self) -> BaseException | None:
        return self._child

    def wrapped_errors(self) -> tuple[BaseException, ...]:
        if self._child is None:
            return ()
        return (self._child,)

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r}, {self._child!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._message, self._child))


class DoubleWrappedError(Exception):
    """Error attributing one rendered message to two wrapped children.

    Children keep construction order. An absent child contributes nothing:
    it is left out of ``children`` and ``wrapped_errors()``.
    """

    __slots__ = ("_message", "_children")

    def __init__(
        self,
        message: object,
        child_a: BaseException | None = None,
        child_b: BaseException | None = None,
    ) -> None:
        text = "" if message is None else str(message)
        super().__init__(text)
        self._message = text
        self._children = tuple(c for c in (child_a, child_b) if c is not None)

    @property
    def message(self) -> str:
        return self._message

    @property
    def children(self) -> tuple[BaseException, ...]:
        return self._children

    def wrapped_errors(self) -> tuple[BaseException, ...]:
        return self._children

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        children = ", ".join(repr(c) for c in self._children)
        return f"{type(self).__name__}({self._message!r}, {children})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._message, *self._children))


def wrap_message(message: object, child: BaseException | None) -> WrappedError:
    """Wrap an error with an already rendered message.

    Unlike the formatted constructors this always returns a node: with an
    absent child the result is a plain message-only error.

    Args:
        message: Rendered message
        child: Error to wrap, may be ``None``

    Returns:
        A new single-child node
    """
    return WrappedError(message, child)


def wrap_formatted(template: object, child: BaseException | None) -> WrappedError | None:
    """Wrap an error, substituting its message for ``{{err}}`` in a template.

    Args:
        template: Message template
        child: Error to wrap, may be ``None``

    Returns:
        A new single-child node, or ``None`` when ``child`` is ``None``
    """
    if child is None:
        return None
    return WrappedError(render_template(template, **{ERR: child}), child)


def wrap_two(
    message: object,
    child_a: BaseException | None,
    child_b: BaseException | None,
) -> DoubleWrappedError | None:
    """Attribute one rendered message to two underlying errors.

    Args:
        message: Rendered message
        child_a: First wrapped error, may be ``None``
        child_b: Second wrapped error, may be ``None``

    Returns:
        A new double-child node, or ``None`` when both children are ``None``
    """
    if child_a is None and child_b is None:
        return None
    return DoubleWrappedError(message, child_a, child_b)


def wrap_two_formatted(
    template: object,
    child_a: BaseException | None,
    child_b: BaseException | None,
) -> DoubleWrappedError | None:
    """Like ``wrap_two``, substituting ``{{err1}}`` and ``{{err2}}`` first.

    Each placeholder receives ``str()`` of its own child; the placeholder of
    an absent child is removed.
    """
    if child_a is None and child_b is None:
        return None
    substitutions = {
        ERR1: "" if child_a is None else child_a,
        ERR2: "" if child_b is None else child_b,
    }
    message = render_template(template, **substitutions)
    return DoubleWrappedError(message, child_a, child_b)


def wrap(
    outer: BaseException | None, inner: BaseException | None
) -> BaseException | None:
    """Attach an existing outer error to the inner error it was caused by.

    The result reports the outer error's message and exposes both errors as
    children, outer first, so either can be found by traversal.

    Args:
        outer: Higher-level error
        inner: Underlying error

    Returns:
        A double-child node, ``inner`` itself when ``outer`` is ``None``, or
        ``None`` when both are ``None``
    """
    if outer is None:
        return inner
    return DoubleWrappedError(str(outer), outer, inner)
