"""Compiled regex patterns and string constants for CSV table parsing.

The accepted dialect is comma-delimited with double-quote field quoting,
doubled-quote escaping, and optional ``/* ... */`` block comments inside a
field.  Used by reader.py, classifiers.py and the widget model.
"""

import re

# ─── Quoting ──────────────────────────────────────────────────────────────────

QUOTE = '"'
ESCAPED_QUOTE = '""'
DELIMITER = ","


# ─── Line / Comment Patterns ──────────────────────────────────────────────────

# Physical line break: CRLF, lone CR or lone LF
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

# Block comment such as "/* legacy */", shortest match, may span newlines
# inside a quoted field.  An unterminated "/*" never matches.
BLOCK_COMMENT_RE = re.compile(r"/\*(?:(?!\*/).)*\*/", re.DOTALL)


# ─── Defaults & Messages ──────────────────────────────────────────────────────

# Cell value that marks a feature as present ("yes" marker)
DEFAULT_MARKER = "x"

# Reported to the renderer when the widget has no source configured
MISSING_URL_MESSAGE = "You must specify the CsvFileUrl property."

# Prefix of an application-relative virtual path, e.g. "~/files/features.csv"
VIRTUAL_PATH_PREFIX = "~"
