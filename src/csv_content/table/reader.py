"""Low-level CSV reading: logical lines, field splitting, and unescaping.

A logical line is one complete CSV record.  It may span several physical
lines when a quoted field contains a raw newline, so the reader keeps
joining physical lines while the accumulated text has an unbalanced quote.
Malformed input (an unterminated quote at end of file) is never an error:
whatever has been accumulated is emitted as the last record.
"""

import logging
from collections.abc import Iterator

from csv_content.table.patterns import DELIMITER, ESCAPED_QUOTE, LINE_BREAK_RE, QUOTE

logger = logging.getLogger(__name__)


# ─── Physical Lines ───────────────────────────────────────────────────────────


def iter_physical_lines(contents: str) -> Iterator[str]:
    """Yield physical lines without their line breaks.

    A trailing line break does not produce an extra empty line, so
    ``"a\\nb\\n"`` yields ``"a"`` and ``"b"`` and ``""`` yields nothing.
    """
    start = 0
    for match in LINE_BREAK_RE.finditer(contents):
        yield contents[start : match.start()]
        start = match.end()
    if start < len(contents):
        yield contents[start:]


def is_open_line(line: str) -> bool:
    """Return True if the line ends inside a quoted field (odd number of quotes)."""
    return is_odd(line.count(QUOTE))


def is_odd(count: int) -> bool:
    return count % 2 == 1


# ─── Logical Lines ────────────────────────────────────────────────────────────


class CsvReader:
    """Iterate over the logical lines of an in-memory CSV document.

    Each call to ``iter()`` starts again from the beginning of the content.
    ``row_index`` is the 1-based number of the last logical line emitted by
    the most recent iteration (0 before the first line).
    """

    def __init__(self, contents: str):
        self.contents = contents
        self.row_index = 0

    def __iter__(self) -> Iterator[str]:
        self.row_index = 0
        physical = iter_physical_lines(self.contents)
        for line in physical:
            # Running quote count: each physical line is scanned once
            quotes = line.count(QUOTE)
            parts = [line]
            while is_odd(quotes):
                next_line = next(physical, None)
                if next_line is None:
                    logger.debug("Unterminated quoted field at end of input (record %d)", self.row_index + 1)
                    break
                parts.append(next_line)
                quotes += next_line.count(QUOTE)

            self.row_index += 1
            yield "\n".join(parts)

    def rows(self) -> Iterator[list[str]]:
        """Yield each logical line as a list of unescaped field values."""
        for line in self:
            yield [unescape(field) for field in split_fields(line)]


# ─── Fields ───────────────────────────────────────────────────────────────────


def split_fields(line: str) -> list[str]:
    """Split a logical line on every comma that is not inside a quoted span.

    A comma splits the line when the number of quotes after it is even,
    i.e. when the quotes seen so far have the same parity as the total.
    For well-formed lines that is simply "not inside quotes".  A blank line
    yields a single empty field.
    """
    total_quotes = line.count(QUOTE)
    fields: list[str] = []
    seen_quotes = 0
    start = 0
    for idx, char in enumerate(line):
        if char == QUOTE:
            seen_quotes += 1
        elif char == DELIMITER and seen_quotes % 2 == total_quotes % 2:
            fields.append(line[start:idx])
            start = idx + 1
    fields.append(line[start:])
    return fields


def unescape(field: str) -> str:
    """Strip one pair of surrounding quotes and collapse doubled quotes.

    Fields that are not wrapped in quotes are returned unchanged (no
    trimming).  A lone quote character is not a wrapped field.
    """
    if len(field) >= 2 and field.startswith(QUOTE) and field.endswith(QUOTE):
        return field[1:-1].replace(ESCAPED_QUOTE, QUOTE)
    return field
