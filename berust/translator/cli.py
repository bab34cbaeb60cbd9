"""Command line interface for berust."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..core.config import settings
from ..core.errors import OutputWriteError, SourceNotFoundError
from ..core.logging import setup_logging
from .converter import convert_file


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="berust",
        description="Translate a toy-notation source file into Rust-style code.",
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to the source file to translate.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help=f"Destination file (defaults to <source name>{settings.OUTPUT_EXTENSION} in the current directory).",
    )
    parser.add_argument(
        "--encoding",
        default=settings.ENCODING,
        help=f"Encoding to use when reading and writing files (default: {settings.ENCODING}).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress the completion message.",
    )
    parser.add_argument(
        "--log-level",
        help=f"Logging level for this run (default: {settings.LOG_LEVEL}).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    try:
        written_path, _ = convert_file(
            args.source,
            output_path=args.output,
            encoding=args.encoding,
        )
    except SourceNotFoundError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    except OutputWriteError as exc:
        print(f"Error creating output file: {exc}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"✅ Transpilation complete. Output written to: {written_path}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
