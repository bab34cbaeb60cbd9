"""
berust.translator - line-oriented translation of the `be` toy notation.

The core (``Translator`` and its components) works on in-memory lines;
``convert_file`` and ``cli`` handle the filesystem.
"""

from .context import BlockState, TranslationContext
from .format_strings import build_format_expression, convert_format_string
from .line_translator import LINE_RULES, LineRule, LineTranslator
from .block_tracker import BlockTracker
from .translator import TranslationResult, Translator, translate
from .converter import convert_file, default_output_path

__all__ = [
    "BlockState",
    "TranslationContext",
    "convert_format_string",
    "build_format_expression",
    "LINE_RULES",
    "LineRule",
    "LineTranslator",
    "BlockTracker",
    "TranslationResult",
    "Translator",
    "translate",
    "convert_file",
    "default_output_path",
]
