"""Pad table rows to a uniform column count."""

import logging
from collections.abc import Sequence

from csv_content.table.schema import Column, Row

logger = logging.getLogger(__name__)

PLACEHOLDER = Column(is_placeholder=True)


def pad_rows(rows: Sequence[Row]) -> list[Row]:
    """Return the rows, each padded with placeholder columns to the widest row's width.

    Original columns keep their order and content; placeholders are only
    appended at the end.  Padding zero rows is undefined and raises.
    """
    if not rows:
        raise ValueError("Cannot pad an empty sequence of rows")

    max_cols = max(row.column_count for row in rows)
    padded: list[Row] = []
    for row in rows:
        missing = max_cols - row.column_count
        if missing:
            row = Row(columns=row.columns + (PLACEHOLDER,) * missing, is_header=row.is_header)
        padded.append(row)

    logger.debug("Padded %d rows to %d columns", len(padded), max_cols)
    return padded
