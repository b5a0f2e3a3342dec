"""Shared constants for throwif.

Default failure messages live here so the guard functions and their tests
agree on wording without importing each other.
"""

from __future__ import annotations

from typing import Final

# Label used whenever a caller does not name the argument under test.
UNSPECIFIED_ARGUMENT: Final = "unspecified"

NULL_OR_EMPTY_MESSAGE: Final = (
    "String argument cannot be None and must contain at least one character."
)
NULL_OR_WHITESPACE_MESSAGE: Final = (
    "String argument cannot be None and must contain at least one "
    "non-whitespace character."
)
NULL_MESSAGE: Final = "Argument cannot be None."
DEFAULT_STATE_MESSAGE: Final = "Argument cannot be '{zero}'."
INVALID_ARGUMENT_MESSAGE: Final = "The argument is invalid."
OUT_OF_RANGE_MESSAGE: Final = "Specified argument was out of the range of valid values."

# Environment variable toggling debug records for failing checks.
TRACE_FAILURES_VAR: Final = "THROWIF_TRACE_FAILURES"
