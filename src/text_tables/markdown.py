"""Markdown (GFM) pipe tables.

    | Name | Age |
    |------|----:|
    | Al   | 9   |

The separator under the header row is mandatory: one is inserted when the
input has none.  Column alignment is read from the separator cells and
written back the same way.
"""

import logging

from text_tables.cells import render_data_line, split_cells, table_lines
from text_tables.detection import find_table_block
from text_tables.patterns import (
    ALIGNMENT_MARKER,
    HORIZONTAL_SEPARATOR,
    MARKDOWN_SEPARATOR_RE,
    MARKDOWN_TABLE_CHARS,
    VERTICAL_SEPARATOR,
)
from text_tables.reader import LineReader, Range
from text_tables.table import Alignment, ColDef, RowType, Table

logger = logging.getLogger(__name__)


def parse_alignment(cell: str) -> Alignment:
    """Return the alignment encoded by a separator cell such as ':---:'."""
    if len(cell) > 1 and cell.startswith(ALIGNMENT_MARKER) and cell.endswith(ALIGNMENT_MARKER):
        return Alignment.CENTER
    if cell.endswith(ALIGNMENT_MARKER):
        return Alignment.RIGHT
    return Alignment.LEFT


class MarkdownParser:
    """Parser for pipe tables."""

    def parse(self, text: str | None) -> Table | None:
        if not text:
            return None

        result = Table()
        seen_header = False
        aligned = False
        for line in table_lines(text):
            if MARKDOWN_SEPARATOR_RE.match(line):
                # Only the rule under the header defines alignment
                if seen_header and not aligned:
                    for idx, cell in enumerate(split_cells(line)):
                        result.set_alignment(idx, parse_alignment(cell))
                    aligned = True
                result.add_row(RowType.SEPARATOR, [])
                continue
            result.add_row(RowType.DATA, split_cells(line))
            seen_header = True

        logger.debug("Parsed pipe table: %d rows, %d columns", len(result.rows), len(result.cols))
        return result


class MarkdownStringifier:
    """Stringifier for pipe tables."""

    def stringify(self, table: Table) -> str:
        result: list[str] = []
        done_header = False

        for i, row in enumerate(table.rows):
            if row.type == RowType.SEPARATOR:
                # Nothing may precede the header row
                if done_header:
                    result.append(self._separator_line(table.cols))
                continue

            result.append(render_data_line(table.cols, table.get_row(i)))
            if not done_header:
                done_header = True
                next_is_separator = i + 1 < len(table.rows) and table.rows[i + 1].type == RowType.SEPARATOR
                if not next_is_separator:
                    result.append(self._separator_line(table.cols))

        return "\n".join(result)

    @staticmethod
    def _separator_line(cols: list[ColDef]) -> str:
        cells = []
        for col in cols:
            begin = ALIGNMENT_MARKER if col.alignment == Alignment.CENTER else HORIZONTAL_SEPARATOR
            end = ALIGNMENT_MARKER if col.alignment in (Alignment.CENTER, Alignment.RIGHT) else HORIZONTAL_SEPARATOR
            cells.append(begin + HORIZONTAL_SEPARATOR * col.width + end)
        return VERTICAL_SEPARATOR + VERTICAL_SEPARATOR.join(cells) + VERTICAL_SEPARATOR


class MarkdownLocator:
    """Locator for pipe tables: lines starting with '|'."""

    def locate(self, reader: LineReader, line_nr: int) -> Range | None:
        return find_table_block(reader, line_nr, MARKDOWN_TABLE_CHARS)
