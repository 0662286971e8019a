"""Unit tests for the Table model."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from text_tables.table import Alignment, ColDef, RowType, Table


def make_table(*rows: list[str]) -> Table:
    """Build a table whose rows are all data rows."""
    table = Table()
    for values in rows:
        table.add_row(RowType.DATA, values)
    return table


class TestAddRow:

    def test_fit_only_widens(self):
        col = ColDef()
        col.fit("abcd")
        col.fit("x")
        assert col.width == 4

    def test_widths_follow_longest_value(self):
        table = make_table(["a", "bb"], ["ccc", "d"])
        assert [col.width for col in table.cols] == [3, 2]

    def test_longer_row_grows_columns(self):
        table = make_table(["a"], ["b", "cccc", "dd"])
        assert len(table.cols) == 3
        assert [col.width for col in table.cols] == [1, 4, 2]

    def test_separator_rows_carry_no_values(self):
        table = Table()
        table.add_row(RowType.SEPARATOR, ["ignored"])
        assert table.rows[0].type == RowType.SEPARATOR
        assert table.rows[0].values == []
        assert table.cols == []

    def test_rows_keep_insertion_order(self):
        table = make_table(["first"], ["second"])
        table.add_row(RowType.SEPARATOR, [])
        table.add_row(RowType.DATA, ["third"])
        assert [row.type for row in table.rows] == [RowType.DATA, RowType.DATA, RowType.SEPARATOR, RowType.DATA]
        assert table.rows[3].values == ["third"]

    def test_widths_never_shrink(self):
        table = make_table(["long value"])
        table.add_row(RowType.DATA, ["x"])
        assert table.cols[0].width == len("long value")

    def test_width_covers_every_value_added(self):
        rows = [["a", "", "ccc"], ["dddd"], ["e", "ffffff"], [""]]
        table = make_table(*rows)
        for values in rows:
            for idx, value in enumerate(values):
                assert table.cols[idx].width >= len(value)

    def test_values_are_copied(self):
        values = ["a", "b"]
        table = make_table(values)
        values.append("c")
        assert table.rows[0].values == ["a", "b"]


class TestGetRow:

    def test_pads_short_rows(self):
        table = make_table(["a", "b", "c"], ["d"])
        assert table.get_row(1) == ["d", "", ""]

    def test_full_row_unchanged(self):
        table = make_table(["a", "b"])
        assert table.get_row(0) == ["a", "b"]

    def test_separator_row_is_all_empty(self):
        table = make_table(["a", "b"])
        table.add_row(RowType.SEPARATOR, [])
        assert table.get_row(1) == ["", ""]

    def test_always_column_count(self):
        table = make_table(["a"], ["b", "c", "d", "e"], ["f", "g"])
        for i in range(len(table.rows)):
            assert len(table.get_row(i)) == len(table.cols)

    def test_out_of_range_raises(self):
        table = make_table(["a"])
        with pytest.raises(IndexError):
            table.get_row(1)

    def test_negative_index_raises(self):
        table = make_table(["a"])
        with pytest.raises(IndexError):
            table.get_row(-1)

    def test_empty_table_raises(self):
        with pytest.raises(IndexError):
            Table().get_row(0)


class TestSetAlignment:

    def test_defaults_to_left(self):
        table = make_table(["a"])
        assert table.cols[0].alignment == Alignment.LEFT

    def test_creates_missing_columns(self):
        table = Table()
        table.set_alignment(2, Alignment.RIGHT)
        assert len(table.cols) == 3
        assert [col.width for col in table.cols] == [0, 0, 0]
        assert table.cols[2].alignment == Alignment.RIGHT

    def test_width_is_read_only(self):
        table = make_table(["abc"])
        with pytest.raises(AttributeError):
            table.cols[0].width = 10
        assert table.cols[0].width == 3

    def test_keeps_width(self):
        table = make_table(["abc"])
        table.set_alignment(0, Alignment.CENTER)
        assert table.cols[0].width == 3
        assert table.cols[0].alignment == Alignment.CENTER
