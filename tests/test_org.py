"""Unit tests for the Org-mode table dialect."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from text_tables.org import OrgLocator, OrgParser, OrgStringifier
from text_tables.reader import Position, Range, StringLineReader
from text_tables.table import RowType, Table


def parse(text):
    return OrgParser().parse(text)


def stringify(table):
    return OrgStringifier().stringify(table)


class TestParser:

    def test_empty_text_is_absent(self):
        assert parse("") is None

    def test_hline_is_separator(self):
        table = parse("| a | b |\n|---+---|\n| c | d |")
        assert [row.type for row in table.rows] == [RowType.DATA, RowType.SEPARATOR, RowType.DATA]
        assert table.get_row(2) == ["c", "d"]

    def test_equals_is_data(self):
        table = parse("|=|")
        assert table.rows[0].type == RowType.DATA
        assert table.get_row(0) == ["="]


class TestStringifier:

    def test_hline_redrawn(self):
        table = parse("|Name|Age|\n|-+-|\n|Al|9|")
        assert stringify(table) == "| Name | Age |\n|------+-----|\n| Al   | 9   |"

    def test_no_separator_required(self):
        table = parse("| a |\n| bb |")
        assert stringify(table) == "| a  |\n| bb |"

    def test_leading_and_trailing_hlines_kept(self):
        table = parse("|-|\n| a |\n|-|")
        assert stringify(table) == "|---|\n| a |\n|---|"

    def test_empty_table(self):
        assert stringify(Table()) == ""

    def test_idempotent(self):
        once = stringify(parse("|x|yy|\n|--|\n|zzz|"))
        assert stringify(parse(once)) == once


class TestLocator:

    def test_finds_block(self):
        reader = StringLineReader("* Heading\n  | a |\n  |---|\nbody")
        result = OrgLocator().locate(reader, 1)
        assert result == Range(start=Position(line=1, character=0), end=Position(line=2, character=7))

    def test_outside_table(self):
        assert OrgLocator().locate(StringLineReader("* Heading\nbody"), 1) is None
