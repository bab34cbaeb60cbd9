"""
Function-block state machine.

Transitions (no nesting):

    OUTSIDE --"name() {"--> INSIDE   emits "fn name() {"
    INSIDE  --"}"--------> OUTSIDE  emits "}"

Any other line goes to the LineTranslator; lines seen while INSIDE are
indented one level. An opener seen while INSIDE is an ordinary line, so the
first ``}`` after it closes the function early.
"""

from __future__ import annotations

from .context import BlockState, TranslationContext
from .line_translator import LineTranslator

BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"
EMPTY_CALL = "()"

FUNCTION_HEADER = "function_header"
FUNCTION_CLOSE = "function_close"


def is_function_open(line: str) -> bool:
    """``main() {``: ends with ``{`` and the first space-delimited token ends with ``()``."""
    return line.endswith(BLOCK_OPEN) and line.split(" ")[0].endswith(EMPTY_CALL)


def function_header(line: str) -> str:
    name = line.split("(")[0]
    return f"fn {name}() {{"


class BlockTracker:
    """Route trimmed lines through the block state machine."""

    def __init__(self, line_translator: LineTranslator | None = None, indent_width: int = 4):
        self.line_translator = line_translator or LineTranslator()
        self.indent = " " * indent_width

    def feed(self, line: str, context: TranslationContext) -> tuple[str, str]:
        """
        Consume one line and update ``context.block_state``.

        Returns:
            (output line, name of the boundary or rule that produced it)
        """
        trimmed = line.strip()

        if context.block_state is BlockState.OUTSIDE:
            if is_function_open(trimmed):
                context.block_state = BlockState.INSIDE
                return function_header(trimmed), FUNCTION_HEADER
            return self.line_translator.translate(trimmed, context)

        if trimmed == BLOCK_CLOSE:
            context.block_state = BlockState.OUTSIDE
            return BLOCK_CLOSE, FUNCTION_CLOSE

        translated, rule = self.line_translator.translate(trimmed, context)
        return self.indent + translated, rule
