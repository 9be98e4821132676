"""
Centralized constants for scass.

Fixed design values live here; anything a user may override belongs in
scass.core.settings instead.
"""

# ============================================================================
# Pipeline
# ============================================================================

RESULT_CHANNEL_CAPACITY = 100
"""Matches that may be buffered between the scan workers and the report writer."""


# ============================================================================
# Report Layout
# ============================================================================

DEFAULT_OUTPUT_FILE = "output.md"
"""Report file written when no -o/--output is given."""

MATCHED_LINE_PREFIX = ">>  "
"""Prefix marking the matched line inside a context block."""

CONTEXT_LINE_PREFIX = "    "
"""Prefix for every other line of a context block."""

LINE_NUMBER_WIDTH = 5
"""Right-aligned width of the line number column."""


# ============================================================================
# Default Search Terms
# ============================================================================

DEFAULT_SEARCH_TERMS = (
    "TODO",
    "FIXME",
    "BUG",
    "HACK",
    "PASSWORD",
    "SECRET",
    "API_KEY",
    "KEY",
    "TOKEN",
    "PRIVATE_KEY",
    "PUBLIC_KEY",
    "CREDENTIALS",
    "eval",
    "exec",
    "system",
    "pickle.loads",
    "os.system",
    "subprocess.Popen",
    "input",
    "paramiko",
    "document.write",
    "innerHTML",
    "console.log",
    "print",
    "alert",
    "SELECT *",
    "DROP TABLE",
    "race condition",
    "concurrency",
    "#nosec",
    "@SuppressWarnings",
    "Not Implemented",
    "TBD",
    "Temporary",
)
"""Risk and code-smell markers searched when no -w/--words value is given."""
