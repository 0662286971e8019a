"""Org-mode tables.

    | Name | Age |
    |------+-----|
    | Al   | 9   |

Horizontal rules may appear anywhere and are kept in place; none is
required.
"""

import logging

from text_tables.cells import render_data_line, split_cells, table_lines
from text_tables.detection import find_table_block
from text_tables.patterns import HORIZONTAL_SEPARATOR, INTERSECTION, ORG_TABLE_CHARS, VERTICAL_SEPARATOR
from text_tables.reader import LineReader, Range
from text_tables.table import ColDef, RowType, Table

logger = logging.getLogger(__name__)


class OrgParser:
    """Parser for Org tables."""

    def parse(self, text: str | None) -> Table | None:
        if not text:
            return None

        result = Table()
        for line in table_lines(text):
            if self.is_separator_row(line):
                result.add_row(RowType.SEPARATOR, [])
                continue
            result.add_row(RowType.DATA, split_cells(line))

        logger.debug("Parsed org table: %d rows, %d columns", len(result.rows), len(result.cols))
        return result

    @staticmethod
    def is_separator_row(line: str) -> bool:
        """Return True for '|---+---|' rules."""
        return len(line) > 1 and line[1] == HORIZONTAL_SEPARATOR


class OrgStringifier:
    """Stringifier for Org tables."""

    def stringify(self, table: Table) -> str:
        result = []
        for i, row in enumerate(table.rows):
            if row.type == RowType.SEPARATOR:
                result.append(self._separator_line(table.cols))
            else:
                result.append(render_data_line(table.cols, table.get_row(i)))
        return "\n".join(result)

    @staticmethod
    def _separator_line(cols: list[ColDef]) -> str:
        rule = INTERSECTION.join(HORIZONTAL_SEPARATOR * (col.width + 2) for col in cols)
        return VERTICAL_SEPARATOR + rule + VERTICAL_SEPARATOR


class OrgLocator:
    """Locator for Org tables: lines starting with '|'."""

    def locate(self, reader: LineReader, line_nr: int) -> Range | None:
        return find_table_block(reader, line_nr, ORG_TABLE_CHARS)
