"""
Per-line dispatch.

Each line runs through ``LINE_RULES`` in order and the first rule whose
predicate matches produces the output. ``passthrough`` always matches, so a
line is never rejected, only left untranslated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from ..core.logging import get_logger
from .assignment import match_assignment, translate_assignment
from .context import TranslationContext
from .interpolation import has_interpolated_literal, translate_interpolation

logger = get_logger(__name__)

PRINT_VARIABLE_RE = re.compile(r"println!\((\w+)\)")

EMPTY_CALL = "()"
STATEMENT_TERMINATOR = ";"


@dataclass(frozen=True)
class LineRule:
    """A named (predicate, transform) pair."""

    name: str
    matches: Callable[[str], bool]
    transform: Callable[[str, TranslationContext], str]


def _translate_print_variable(line: str, context: TranslationContext) -> str:
    variable = PRINT_VARIABLE_RE.fullmatch(line).group(1)
    return f'println!("{{}}", {variable});'


def _translate_assignment_line(line: str, context: TranslationContext) -> str:
    return translate_assignment(*match_assignment(line))


LINE_RULES: tuple[LineRule, ...] = (
    LineRule(
        "print_variable",
        lambda line: PRINT_VARIABLE_RE.fullmatch(line) is not None,
        _translate_print_variable,
    ),
    LineRule("interpolation", has_interpolated_literal, translate_interpolation),
    LineRule(
        "assignment",
        lambda line: match_assignment(line) is not None,
        _translate_assignment_line,
    ),
    LineRule(
        "bare_call",
        lambda line: line.endswith(EMPTY_CALL),
        lambda line, context: line + STATEMENT_TERMINATOR,
    ),
    LineRule("passthrough", lambda line: True, lambda line, context: line),
)


class LineTranslator:
    """Translate single lines with an ordered rule list."""

    def __init__(self, rules: tuple[LineRule, ...] = LINE_RULES):
        self.rules = rules

    def rule_for(self, line: str) -> LineRule:
        """Return the first rule matching ``line``, which must already be trimmed."""
        for rule in self.rules:
            if rule.matches(line):
                return rule
        raise LookupError(f"No rule matches line: {line!r}")

    def translate(self, line: str, context: TranslationContext) -> tuple[str, str]:
        """
        Translate one line.

        Returns:
            (translated text, name of the rule that produced it)
        """
        line = line.strip()
        rule = self.rule_for(line)
        logger.debug(
            "Rule applied",
            extra_data={"rule": rule.name, "line": line}
        )
        return rule.transform(line, context), rule.name
