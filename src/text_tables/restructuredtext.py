"""reStructuredText grid tables.

    +------+-----+
    | Name | Age |
    +======+=====+
    | Al   | 9   |
    +------+-----+

Only '|'-leading lines are parsed; the '+' border lines are re-derived from
the column widths on output.  The first data row is always rendered as the
header.
"""

import logging

from text_tables.cells import render_data_line, split_cells, table_lines
from text_tables.detection import find_table_block
from text_tables.patterns import (
    HEADING_SEPARATOR,
    HORIZONTAL_SEPARATOR,
    INTERSECTION,
    RST_TABLE_CHARS,
)
from text_tables.reader import LineReader, Range
from text_tables.table import ColDef, RowType, Table

logger = logging.getLogger(__name__)


class ReStructuredTextParser:
    """Parser for grid tables."""

    def parse(self, text: str | None) -> Table | None:
        if not text:
            return None

        result = Table()
        for line in table_lines(text):
            if self.is_separator_row(line):
                result.add_row(RowType.SEPARATOR, [])
                continue
            result.add_row(RowType.DATA, split_cells(line))

        logger.debug("Parsed grid table: %d rows, %d columns", len(result.rows), len(result.cols))
        return result

    @staticmethod
    def is_separator_row(line: str) -> bool:
        """Return True for '|---' and '|===' lines."""
        return len(line) > 1 and line[1] in (HORIZONTAL_SEPARATOR, HEADING_SEPARATOR)


class ReStructuredTextStringifier:
    """Stringifier for grid tables."""

    def stringify(self, table: Table) -> str:
        result: list[str] = []
        done_header = False

        for i, row in enumerate(table.rows):
            # Separator rows are never echoed; every data row draws its own border
            if row.type == RowType.SEPARATOR:
                continue

            values = table.get_row(i)
            if not done_header:
                result.append(self._border_line(table.cols, HORIZONTAL_SEPARATOR))
                result.append(render_data_line(table.cols, values))
                result.append(self._border_line(table.cols, HEADING_SEPARATOR))
                done_header = True
                continue

            result.append(render_data_line(table.cols, values))
            result.append(self._border_line(table.cols, HORIZONTAL_SEPARATOR))

        return "\n".join(result)

    @staticmethod
    def _border_line(cols: list[ColDef], fill: str) -> str:
        return INTERSECTION + "".join(fill * (col.width + 2) + INTERSECTION for col in cols)


class ReStructuredTextLocator:
    """Locator for grid tables: lines starting with '+' or '|'."""

    def locate(self, reader: LineReader, line_nr: int) -> Range | None:
        return find_table_block(reader, line_nr, RST_TABLE_CHARS)
