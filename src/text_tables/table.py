"""Format-independent table model and the per-dialect capability contracts.

A Table is built row by row by a Parser, rendered once by a Stringifier and
then discarded.  Column widths are derived from the cell values as rows are
added and are never set directly.
"""

from enum import Enum
from typing import Protocol

from pydantic import BaseModel, Field, PrivateAttr

from text_tables.reader import LineReader, Range


class RowType(str, Enum):
    """Kind of a parsed table line."""

    DATA = "data"
    SEPARATOR = "separator"


class Alignment(str, Enum):
    """Horizontal alignment of a column (only the Markdown dialect records it)."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Row(BaseModel):
    """One table line; separator rows carry no values."""

    type: RowType
    values: list[str] = Field(default_factory=list)


class ColDef(BaseModel):
    """Rendering definition of one logical column.

    The width only ever grows, through ``fit``; it cannot be assigned.
    """

    alignment: Alignment = Alignment.LEFT
    _width: int = PrivateAttr(default=0)

    @property
    def width(self) -> int:
        """Content width reserved for the column, excluding padding and borders."""
        return self._width

    def fit(self, value: str) -> None:
        """Widen the column so *value* fits."""
        self._width = max(self._width, len(value))


class Table(BaseModel):
    """Grid of rows with per-column widths inferred from the cell values."""

    rows: list[Row] = Field(default_factory=list)
    cols: list[ColDef] = Field(default_factory=list)

    def add_row(self, row_type: RowType, values: list[str]) -> None:
        """Append a row and widen the columns to fit its values.

        Rows with more values than there are columns grow the column set.
        Separator rows are stored without values.
        """
        if row_type == RowType.SEPARATOR:
            self.rows.append(Row(type=row_type))
            return

        self._ensure_cols(len(values))
        self.rows.append(Row(type=row_type, values=list(values)))
        for col, value in zip(self.cols, values):
            col.fit(value)

    def get_row(self, index: int) -> list[str]:
        """Return the values of row *index*, right-padded with '' to the column count."""
        if index < 0 or index >= len(self.rows):
            raise IndexError(f"Row index {index} out of range for table with {len(self.rows)} rows")
        values = self.rows[index].values
        return values + [""] * (len(self.cols) - len(values))

    def set_alignment(self, index: int, alignment: Alignment) -> None:
        """Set the alignment of column *index*, creating missing columns at width 0."""
        self._ensure_cols(index + 1)
        self.cols[index].alignment = alignment

    def _ensure_cols(self, count: int) -> None:
        # New columns start empty and are widened by the caller
        while len(self.cols) < count:
            self.cols.append(ColDef())


# ─── Capability Contracts ────────────────────────────────────────────────────


class Parser(Protocol):
    """Turns raw table text into a Table."""

    def parse(self, text: str | None) -> Table | None:
        """Return the parsed table, or None when there is nothing to format."""


class Stringifier(Protocol):
    """Renders a Table back to text, re-drawing its borders."""

    def stringify(self, table: Table) -> str:
        """Return the rendered table without a trailing newline."""


class Locator(Protocol):
    """Finds the line range a table occupies around a given line."""

    def locate(self, reader: LineReader, line_nr: int) -> Range | None:
        """Return the table's range, or None when *line_nr* is not inside a table."""
