"""Recognize ``<name> be <expression>`` bindings."""

from __future__ import annotations

BIND_KEYWORD = " be "


def match_assignment(line: str) -> tuple[str, str] | None:
    """
    Split a binding statement into (name, expression).

    The line must contain exactly one `` be `` so that splitting yields two
    parts. Neither side is trimmed beyond the split.
    """
    parts = line.split(BIND_KEYWORD)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def translate_assignment(name: str, expression: str) -> str:
    # Always an immutable binding; there is no reassignment form.
    return f"let {name} = {expression};"
