"""Command-line front end: reformat the table around one line of a text file.

Usage:
    text-tables README.rst --line 12
    text-tables notes.org --line 3 --mode org --in-place
    python -m text_tables notes.md --line 0 --mode markdown
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from text_tables import configuration
from text_tables.configuration import Mode
from text_tables.pipeline import reformat_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the text-tables command."""
    parser = argparse.ArgumentParser(prog="text-tables", description="Re-align the plain-text table around a given line")
    parser.add_argument("file", type=Path, help="Text file containing the table")
    parser.add_argument("--line", "-l", type=int, required=True, help="0-based line number inside the table")
    parser.add_argument(
        "--mode",
        "-m",
        choices=[m.value for m in Mode],
        default=None,
        help="Table dialect (default: TEXT_TABLES_MODE or restructuredtext)",
    )
    parser.add_argument("--in-place", "-i", action="store_true", help="Rewrite FILE instead of printing to stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command and return the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        config = configuration.build()
        if args.mode:
            config = configuration.override(config, mode=args.mode)
    except (ValidationError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    if config.show_status:
        logger.info("Table mode: %s", config.mode.value)

    try:
        text = args.file.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.file, exc)
        return 1

    result = reformat_text(text, args.line, config.mode)
    if result is None:
        logger.error("No table found at line %d of %s", args.line, args.file)
        return 1

    if args.in_place:
        try:
            args.file.write_text(result, encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write %s: %s", args.file, exc)
            return 1
        logger.info("Rewrote %s", args.file)
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
