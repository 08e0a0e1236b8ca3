"""Build a normalised Table from raw CSV content.

This is the only module that combines the reader, the classifiers and the
normaliser.  It performs no I/O of its own: the caller supplies the file
content as a string (see csv_content.widget.model for where that comes from).

Usage:
    python -m csv_content.table.pipeline path/to/features.csv --marker x
"""

import argparse
import logging
from pathlib import Path

from csv_content.table.classifiers import clean_cell, is_header_row, is_marked
from csv_content.table.normalize import pad_rows
from csv_content.table.patterns import DEFAULT_MARKER
from csv_content.table.reader import CsvReader
from csv_content.table.schema import Column, Row, Table

logger = logging.getLogger(__name__)


# ─── Row Building ─────────────────────────────────────────────────────────────


def build_row(fields: list[str], marker: str | None = DEFAULT_MARKER) -> Row:
    """Turn one record's unescaped fields into a classified Row."""
    values = [clean_cell(field) for field in fields]
    columns = tuple(Column(value=value, is_marked=is_marked(value, marker)) for value in values)
    return Row(columns=columns, is_header=is_header_row(values))


# ─── Main Entry Point ─────────────────────────────────────────────────────────


def build_table(file_contents: str | None, marker: str | None = DEFAULT_MARKER) -> Table | None:
    """Parse CSV content into a Table whose rows all have the same width.

    Returns None when there is no content at all; callers should treat that
    as "nothing to render" rather than as a failure.
    """
    if not file_contents:
        logger.info("No CSV content supplied; no table built")
        return None

    reader = CsvReader(file_contents)
    rows = [build_row(fields, marker) for fields in reader.rows()]
    logger.debug("Read %d logical lines", reader.row_index)

    if not rows:
        return Table()

    table = Table(rows=tuple(pad_rows(rows)))
    logger.info(
        "Built table: %d rows x %d columns (%d header rows)",
        len(table.rows),
        table.column_count,
        sum(1 for row in table.rows if row.is_header),
    )
    return table


def main():
    """Parse a local CSV file and log a summary of the resulting table."""
    parser = argparse.ArgumentParser(description="Parse a CSV file into a normalised content table")
    parser.add_argument("path", type=Path, help="CSV file to parse")
    parser.add_argument("--marker", default=DEFAULT_MARKER, help=f"Cell value that marks a cell (default: {DEFAULT_MARKER})")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

    with open(args.path, "r", encoding="utf-8") as fopen:
        contents = fopen.read()

    table = build_table(contents, args.marker)
    if table is None:
        logger.info("%s is empty", args.path)
        return
    for idx, row in enumerate(table.rows):
        marked = [col.value for col in row.columns if col.is_marked]
        logger.info("Row %d%s: %s (marked: %d)", idx, " [header]" if row.is_header else "", row.values, len(marked))


if __name__ == "__main__":
    main()
