"""Cell-level helpers shared by the dialect parsers and stringifiers."""

from text_tables.patterns import VERTICAL_SEPARATOR
from text_tables.table import ColDef


def table_lines(text: str) -> list[str]:
    """Split *text* into stripped lines, keeping only those starting with '|'."""
    stripped = (line.strip() for line in text.split("\n"))
    return [line for line in stripped if line.startswith(VERTICAL_SEPARATOR)]


def split_cells(line: str) -> list[str]:
    """Return the stripped cell values of a '|'-delimited line.

    The leading '|' and an optional trailing '|' are dropped before
    splitting, so '|' and '||' both yield a single empty value.
    """
    last_index = len(line) - (1 if line.endswith(VERTICAL_SEPARATOR) else 0)
    return [cell.strip() for cell in line[1:last_index].split(VERTICAL_SEPARATOR)]


def render_cell(value: str, width: int) -> str:
    """Return ' value ' right-padded so the content field is *width* wide."""
    return " " + value + " " * (width - len(value) + 1)


def render_data_line(cols: list[ColDef], values: list[str]) -> str:
    """Return a '| a | b |' line with every cell padded to its column width."""
    return VERTICAL_SEPARATOR + "".join(render_cell(value, col.width) + VERTICAL_SEPARATOR for col, value in zip(cols, values))
