"""
In-memory translation facade.

``Translator`` owns nothing but its components; every call to
``translate_lines``/``translate_source`` builds a fresh TranslationContext.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..core.config import settings
from ..core.logging import get_logger
from .block_tracker import BlockTracker
from .context import BlockState, TranslationContext
from .line_translator import LineTranslator

logger = get_logger(__name__)


@dataclass
class TranslationResult:
    """Result of translating one source."""

    lines: list[str]
    """Translated lines, one per input line"""

    bindings: dict[str, str] = field(default_factory=dict)
    """Binding table at the end of the run"""

    final_state: BlockState = BlockState.OUTSIDE
    """Block state left by the last line"""

    rules_applied: list[str] = field(default_factory=list)
    """Rule or block boundary that produced each output line"""

    @property
    def code(self) -> str:
        """Output text, every line newline-terminated."""
        return "".join(f"{line}\n" for line in self.lines)


class Translator:
    """
    Translate toy-notation source into Rust-style code.

    Example:
        >>> Translator().translate_source("x be 5").lines
        ['let x = 5;']
    """

    def __init__(
        self,
        line_translator: LineTranslator | None = None,
        indent_width: int | None = None,
    ):
        width = settings.INDENT_WIDTH if indent_width is None else indent_width
        self.block_tracker = BlockTracker(line_translator, indent_width=width)

    def translate_lines(
        self,
        lines: Iterable[str],
        context: TranslationContext | None = None,
    ) -> TranslationResult:
        """
        Translate ``lines`` strictly in order.

        Args:
            lines: Raw source lines (trailing newlines are stripped with the rest
                of the surrounding whitespace)
            context: Existing context to continue; a fresh one by default

        Returns:
            TranslationResult with one output line per input line
        """
        context = context or TranslationContext()
        output: list[str] = []
        rules: list[str] = []

        for line in lines:
            translated, rule = self.block_tracker.feed(line, context)
            output.append(translated)
            rules.append(rule)

        if context.inside_function:
            logger.warning(
                "Source ended inside a function body",
                extra_data={"lines": len(output)}
            )

        return TranslationResult(
            lines=output,
            bindings=dict(context.bindings),
            final_state=context.block_state,
            rules_applied=rules,
        )

    def translate_source(self, source: str) -> TranslationResult:
        """Translate ``source``, breaking lines on line feeds only."""
        lines = source.split("\n")
        if lines[-1] == "":
            lines.pop()
        return self.translate_lines(lines)


def translate(source: str) -> str:
    """Translate ``source`` and return the output text."""
    return Translator().translate_source(source).code
