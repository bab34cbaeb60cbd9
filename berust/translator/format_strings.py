"""
Interpolated-string helpers.

Converts ``{name}`` templates into positional ``{}`` templates and builds the
matching ``format!(...)`` expression.
"""

from __future__ import annotations

import re

PLACEHOLDER_RE = re.compile(r"\{([^}]+)\}")

POSITIONAL_MARKER = "{}"


def convert_format_string(template: str) -> tuple[str, list[str]]:
    """
    Replace every ``{name}`` placeholder with ``{}``.

    Matching stops at the first ``}``, so nested braces are not supported,
    and the inner text is not checked to be an identifier. ``{}`` itself is
    not a placeholder.

    Args:
        template: Text between the quotes of an interpolated literal

    Returns:
        (positional template, names in left-to-right order, duplicates kept)
    """
    names: list[str] = []

    def _collect(match: re.Match) -> str:
        names.append(match.group(1))
        return POSITIONAL_MARKER

    return PLACEHOLDER_RE.sub(_collect, template), names


def build_format_expression(template: str, names: list[str]) -> str:
    """Build ``format!("<template>", a, b)``; no trailing comma without names."""
    args = "".join(f", {name}" for name in names)
    return f'format!("{template}"{args})'
