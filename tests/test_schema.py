"""Unit tests for the Column/Row/Table models and row padding."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from csv_content.table.normalize import pad_rows
from csv_content.table.schema import Column, Row, Table


def make_row(values: list[str], is_header: bool = False) -> Row:
    """Build a Row of plain (unmarked) columns from a list of values."""
    return Row(columns=tuple(Column(value=v) for v in values), is_header=is_header)


# ===========================================================================
# Column tests
# ===========================================================================


class TestColumn:

    def test_defaults(self):
        col = Column()
        assert col.value == ""
        assert col.is_marked is False
        assert col.is_placeholder is False

    def test_placeholder_with_value_rejected(self):
        with pytest.raises(ValidationError):
            Column(value="a", is_placeholder=True)

    def test_marked_placeholder_rejected(self):
        with pytest.raises(ValidationError):
            Column(is_marked=True, is_placeholder=True)

    def test_frozen(self):
        col = Column(value="a")
        with pytest.raises(ValidationError):
            col.value = "b"


# ===========================================================================
# Row / Table tests
# ===========================================================================


class TestRowAndTable:

    def test_row_column_count_and_values(self):
        row = make_row(["a", "b", "c"])
        assert row.column_count == 3
        assert row.values == ["a", "b", "c"]

    def test_table_column_count(self):
        table = Table(rows=(make_row(["a", "b"]), make_row(["c", "d"])))
        assert table.column_count == 2

    def test_empty_table(self):
        table = Table()
        assert table.rows == ()
        assert table.column_count == 0

    def test_uneven_rows_rejected(self):
        with pytest.raises(ValidationError, match="Row 1 has 1 columns, expected 2"):
            Table(rows=(make_row(["a", "b"]), make_row(["c"])))

    def test_table_is_frozen(self):
        table = Table(rows=(make_row(["a"]),))
        with pytest.raises(ValidationError):
            table.rows = ()


# ===========================================================================
# pad_rows tests
# ===========================================================================


class TestPadRows:

    def test_pads_to_widest_row(self):
        rows = [make_row(["a"]), make_row(["b", "c", "d"]), make_row(["e", "f"])]
        padded = pad_rows(rows)
        assert [row.column_count for row in padded] == [3, 3, 3]

    def test_placeholders_are_empty_and_unmarked(self):
        padded = pad_rows([make_row(["a"]), make_row(["b", "c", "d"])])
        extra = padded[0].columns[1:]
        assert len(extra) == 2
        for col in extra:
            assert col.is_placeholder is True
            assert col.value == ""
            assert col.is_marked is False

    def test_original_columns_untouched(self):
        rows = [make_row(["a", "b"], is_header=True), make_row(["c", "d", "e"])]
        padded = pad_rows(rows)
        assert padded[0].values[:2] == ["a", "b"]
        assert padded[0].is_header is True
        assert padded[1] == rows[1]

    def test_input_rows_not_modified(self):
        rows = [make_row(["a"]), make_row(["b", "c"])]
        pad_rows(rows)
        assert rows[0].column_count == 1

    def test_same_length_output(self):
        rows = [make_row(["a"]), make_row([""]), make_row(["b", "c"])]
        assert len(pad_rows(rows)) == 3

    def test_no_placeholders_when_already_uniform(self):
        padded = pad_rows([make_row(["a", "b"]), make_row(["c", "d"])])
        assert not any(col.is_placeholder for row in padded for col in row.columns)

    def test_empty_rows_raises(self):
        with pytest.raises(ValueError):
            pad_rows([])
