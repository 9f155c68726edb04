# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errtree
"""
Message templates with ``{{name}}`` placeholders.
"""

from __future__ import annotations

from typing import Final

ERR: Final = "err"
ERR1: Final = "err1"
ERR2: Final = "err2"


def placeholder(name: str) -> str:
    """Return the literal placeholder token for a name, e.g. ``{{err}}``."""
    return "{{" + name + "}}"


def render_template(template: object, **substitutions: object) -> str:
    """Replace every ``{{name}}`` in a template with ``str(value)``.

    Substitutions are applied independently, so a value that itself
    contains a placeholder token is never expanded again. Unknown
    placeholders are left untouched.

    Args:
        template: Message template; non-strings are converted with ``str()``
        **substitutions: Placeholder names mapped to their values

    Returns:
        The rendered message
    """
    text = "" if template is None else str(template)
    if not substitutions:
        return text

    tokens = {placeholder(name): str(value) for name, value in substitutions.items()}
    parts: list[str] = []
    pos = 0
    while pos < len(text):
        start = text.find("{{", pos)
        if start < 0:
            break
        end = text.find("}}", start + 2)
        if end < 0:
            break
        token = text[start : end + 2]
        if token in tokens:
            parts.append(text[pos:start])
            parts.append(tokens[token])
            pos = end + 2
        else:
            parts.append(text[pos : start + 1])
            pos = start + 1
    parts.append(text[pos:])
    return "".join(parts)
