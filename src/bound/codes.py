"""Error code constants for bound schema errors.

These constants prevent stringly-typed error matching: client code
checks ``error.code`` instead of parsing messages.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Schema error codes."""

    # Declaration errors
    INVALID_SCHEMA = "INVALID_SCHEMA"

    # Construction errors
    UNKNOWN_ATTRIBUTE = "UNKNOWN_ATTRIBUTE"
    MISSING_ATTRIBUTE = "MISSING_ATTRIBUTE"
    TYPE_MISMATCH = "TYPE_MISMATCH"
