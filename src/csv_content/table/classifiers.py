"""Cell and row classification helpers for CSV tables.

Each function takes cell values (already split and unescaped) and either
cleans them or returns True/False to classify them as marked cells or
header rows.
"""

from collections.abc import Sequence

from csv_content.table.patterns import BLOCK_COMMENT_RE


def strip_comments(value: str) -> str:
    """Remove every ``/* ... */`` block comment from a cell value.

    The result is not re-trimmed: ``"x /* legacy */"`` becomes ``"x "``.
    """
    return BLOCK_COMMENT_RE.sub("", value)


def clean_cell(raw: str) -> str:
    """Trim an unescaped field and strip its comments."""
    return strip_comments(raw.strip())


def is_marked(value: str, marker: str | None) -> bool:
    """Return True if the cell value equals the marker, ignoring case."""
    if marker is None:
        return False
    return value.casefold() == marker.casefold()


def is_header_row(values: Sequence[str]) -> bool:
    """Return True if no value after the first one is non-empty.

    A row with only a label in the first column (e.g. "Features,,") is a
    header; so is a completely empty row.
    """
    return not any(values[1:])
