"""Reformat operation: locate the table under the cursor, parse it and render it back.

The core never edits the document itself.  ``format_under_cursor`` returns
the range to replace and the replacement text; ``reformat_text`` applies
that replacement to an in-memory document for hosts that work on plain
strings (such as the command line).
"""

import logging

from text_tables.configuration import Mode
from text_tables.formats import get_format
from text_tables.reader import LineReader, Range, StringLineReader
from text_tables.table import RowType

logger = logging.getLogger(__name__)


def read_range(reader: LineReader, text_range: Range) -> str:
    """Return the full text of every line covered by *text_range*."""
    return "\n".join(reader.line_at(i).text for i in range(text_range.start.line, text_range.end.line + 1))


def format_under_cursor(reader: LineReader, line_nr: int, mode: Mode | str) -> tuple[Range, str] | None:
    """Return ``(range, replacement)`` for the table around *line_nr*, or None if there is none.

    Every rendered line is indented like the first line of the located table.
    """
    table_format = get_format(mode)

    text_range = table_format.locator.locate(reader, line_nr)
    if text_range is None:
        return None

    table = table_format.parser.parse(read_range(reader, text_range))
    if table is None or not any(row.type == RowType.DATA for row in table.rows):
        logger.debug("Nothing to format at line %d", line_nr)
        return None

    first_line = reader.line_at(text_range.start.line)
    indent = first_line.text[: first_line.first_non_whitespace_character_index]
    rendered = table_format.stringifier.stringify(table)
    replacement = "\n".join(indent + line for line in rendered.split("\n"))

    logger.info(
        "Reformatted table at lines %d-%d (%d rows, %d columns)",
        text_range.start.line,
        text_range.end.line,
        len(table.rows),
        len(table.cols),
    )
    return text_range, replacement


def reformat_text(text: str, line_nr: int, mode: Mode | str) -> str | None:
    """Return *text* with the table around *line_nr* reformatted, or None if there is no table.

    CRLF documents keep their CRLF line endings.
    """
    newline = "\r\n" if "\r\n" in text else "\n"
    text = text.replace("\r\n", "\n")
    reader = StringLineReader(text)
    result = format_under_cursor(reader, line_nr, mode)
    if result is None:
        return None

    text_range, replacement = result
    lines = text.split("\n")
    lines[text_range.start.line : text_range.end.line + 1] = replacement.split("\n")
    return newline.join(lines)
