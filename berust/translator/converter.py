"""
File boundary: read a source file, translate it, write the ``.rs`` output.
"""

from __future__ import annotations

from pathlib import Path

from ..core.config import settings
from ..core.errors import OutputWriteError, SourceNotFoundError
from ..core.logging import get_logger
from .translator import TranslationResult, Translator

logger = get_logger(__name__)


def default_output_path(source_path: str | Path, extension: str | None = None) -> Path:
    """Base name of ``source_path`` cut at its last dot, plus ``extension``, in the CWD."""
    extension = settings.OUTPUT_EXTENSION if extension is None else extension
    name = Path(source_path).name
    if "." in name:
        name = name[: name.rfind(".")]
    return Path(name + extension)


def convert_file(
    source_path: str | Path,
    *,
    output_path: str | Path | None = None,
    encoding: str | None = None,
    translator: Translator | None = None,
) -> tuple[Path, TranslationResult]:
    """
    Translate a source file and write the result.

    An existing output file is overwritten.

    Raises:
        SourceNotFoundError: The source cannot be opened or read
        OutputWriteError: The output cannot be created or written
    """
    encoding = encoding or settings.ENCODING
    source = Path(source_path)

    try:
        with source.open(encoding=encoding, newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceNotFoundError(str(source), str(exc)) from exc

    logger.info(
        "Source read",
        extra_data={"path": str(source), "bytes": len(text)}
    )

    result = (translator or Translator()).translate_source(text)

    output = Path(output_path) if output_path else default_output_path(source)
    try:
        output.write_text(result.code, encoding=encoding, newline="")
    except OSError as exc:
        raise OutputWriteError(str(output), str(exc)) from exc

    logger.info(
        "Output written",
        extra_data={"path": str(output), "lines": len(result.lines)}
    )
    return output, result
