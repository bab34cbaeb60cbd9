"""
Interpolated literal (``f"..."``) rewriting.

Forms handled, tried in order:

1. ``x = f"{y}"``         -> ``let x = format!("{}", y);`` (recorded in bindings)
2. ``println!(f"Hi {n}")`` -> ``println!("{}", format!("Hi {}", n));``
3. anything else          -> first ``f"..."`` span replaced by ``format!(...)``

Form 2 wraps the format expression in a second ``{}`` placeholder. This
doubled output is what existing translations contain and is kept as is.
"""

from __future__ import annotations

import re

from .context import TranslationContext
from .format_strings import build_format_expression, convert_format_string

SINGLE_PLACEHOLDER_ASSIGN_RE = re.compile(r'(\w+)\s*=\s*f"\{(\w+)\}"')
INTERPOLATED_LITERAL_RE = re.compile(r'f"([^"]*)"')

PRINT_PREFIX = "println!("


def has_interpolated_literal(line: str) -> bool:
    return 'f"' in line or line.startswith("print(f")


def translate_interpolation(line: str, context: TranslationContext) -> str:
    """
    Rewrite the first interpolated literal on ``line``.

    Args:
        line: Trimmed source line
        context: Translation context receiving single-placeholder bindings

    Returns:
        The rewritten line, or ``line`` unchanged if it holds no literal
    """
    assign = SINGLE_PLACEHOLDER_ASSIGN_RE.fullmatch(line)
    if assign:
        name, inner = assign.groups()
        context.bind(name, inner)
        return f'let {name} = format!("{{}}", {inner});'

    literal = INTERPOLATED_LITERAL_RE.search(line)
    if literal is None:
        return line

    template, names = convert_format_string(literal.group(1))
    format_call = build_format_expression(template, names)

    if line.startswith(PRINT_PREFIX):
        return f'println!("{{}}", {format_call});'

    return line.replace(literal.group(0), format_call, 1)
