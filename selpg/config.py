"""
Configuration module for selpg.

This module contains default configuration values used across selpg,
including page geometry, reading parameters, exit codes and the table of
named output consumers.
"""

from typing import Dict, Tuple

# Page geometry
DEFAULT_PAGE_LENGTH = 72
"""int: Default number of lines per page in line-count mode."""

UNSET_PAGE = -1
"""int: Sentinel for a start or end page that was not supplied."""

MAX_PAGE = 2**31 - 2
"""int: Largest accepted page number or page length.

Matches the ceiling of a signed 32-bit counter minus one, so that
`end_page + 1` never overflows for tools that consume our output.
"""

FORM_FEED = "\f"
"""str: Page delimiter used in form-feed mode."""

# Reading parameters
READ_BLOCK_SIZE = 8192
"""int: Number of characters requested per read in form-feed mode."""

DEFAULT_ENCODING = "utf-8"
"""str: Encoding used for input and output streams."""

ENCODING_ERRORS = "surrogateescape"
"""str: Codec error handler for input and output streams.

Bytes that are not valid in DEFAULT_ENCODING are carried through as lone
surrogates on input and restored on output, so any byte sequence is copied
unchanged.
"""

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
"""int: Missing/invalid start page, I/O error or consumer failure."""

EXIT_BAD_END_PAGE = 2
EXIT_BAD_PAGE_LENGTH = 3

# Named consumers
CONSUMER_COMMANDS: Dict[str, Tuple[str, ...]] = {
    "lineno": ("cat", "-n"),
    "lp": ("lp",),
}
"""Dict[str, Tuple[str, ...]]: Consumer names accepted by `-d` and the argv they run.

Values passed to `-d` that are not listed here are treated as a command line
and split with shell quoting rules.
"""
