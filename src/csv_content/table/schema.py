"""Pydantic models for a parsed CSV table.

The models are frozen: a table is built once, bottom-up (columns, then rows,
then the table), and only read afterwards.  The validators guarantee the
two structural invariants the renderer relies on: placeholder cells carry no
data, and every row of a table has the same number of columns.
"""

from pydantic import BaseModel, ConfigDict, model_validator


class Column(BaseModel):
    """One cell of a row.

    ``is_placeholder`` is only set on the empty cells appended to short rows
    so that every row has the table's full width.
    """

    model_config = ConfigDict(frozen=True)

    value: str = ""
    is_marked: bool = False
    is_placeholder: bool = False

    @model_validator(mode="after")
    def validate_placeholder(self) -> "Column":
        """Ensure placeholder cells are empty and unmarked."""
        if self.is_placeholder and (self.value or self.is_marked):
            raise ValueError("Placeholder columns must be empty and unmarked")
        return self


class Row(BaseModel):
    """An ordered sequence of cells plus the header flag."""

    model_config = ConfigDict(frozen=True)

    columns: tuple[Column, ...] = ()
    is_header: bool = False

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def values(self) -> list[str]:
        return [col.value for col in self.columns]


class Table(BaseModel):
    """A normalised CSV table in which every row has the same width."""

    model_config = ConfigDict(frozen=True)

    rows: tuple[Row, ...] = ()

    @model_validator(mode="after")
    def validate_row_widths(self) -> "Table":
        """Ensure every row has exactly as many columns as the first one."""
        if not self.rows:
            return self
        n_cols = self.rows[0].column_count
        for i, row in enumerate(self.rows):
            if row.column_count != n_cols:
                raise ValueError(f"Row {i} has {row.column_count} columns, expected {n_cols}")
        return self

    @property
    def column_count(self) -> int:
        """Uniform width of the table (0 for a table without rows)."""
        return self.rows[0].column_count if self.rows else 0
