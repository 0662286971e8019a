"""Table boundary detection over a line reader.

Every dialect finds its table the same way: starting from the cursor line,
scan outwards in both directions while lines look like table lines.  Only
the set of leading characters differs per dialect.
"""

import logging

from text_tables.reader import LineReader, Range

logger = logging.getLogger(__name__)


def is_table_like_line(reader: LineReader, line_nr: int, table_chars: tuple[str, ...]) -> bool:
    """Return True if line *line_nr* exists and its first non-whitespace character is in *table_chars*."""
    if line_nr < 0 or line_nr >= reader.line_count:
        return False
    line = reader.line_at(line_nr)
    first_idx = line.first_non_whitespace_character_index
    # Blank lines have no first character
    if first_idx >= len(line.text):
        return False
    return line.text[first_idx] in table_chars


def find_table_block(reader: LineReader, line_nr: int, table_chars: tuple[str, ...]) -> Range | None:
    """Return the range of the contiguous table-like block around *line_nr*, or None.

    Both cursors stop one line past the block, so the block itself is
    ``[start + 1, end - 1]``.  When the cursor line is not table-like neither
    cursor moves and no table is reported.
    """
    start = line_nr
    while is_table_like_line(reader, start, table_chars):
        start -= 1

    end = line_nr
    while is_table_like_line(reader, end, table_chars):
        end += 1

    if start == end:
        logger.debug("No table at line %d", line_nr)
        return None

    logger.debug("Located table at lines %d-%d", start + 1, end - 1)
    return Range(start=reader.line_at(start + 1).range.start, end=reader.line_at(end - 1).range.end)
