"""Error code constants for linkrecord decode failures.

These constants prevent stringly-typed error codes and let callers
branch on a failure without chaining isinstance checks.
"""

from enum import Enum


class DecodeErrorCode(str, Enum):
    """Decode error codes (all blocking; decoding is all-or-nothing)."""

    # Shape
    NOT_A_MAP = "NOT_A_MAP"
    MISSING_OR_WRONG_TYPE_FIELD = "MISSING_OR_WRONG_TYPE_FIELD"
    UNEXPECTED_FIELD = "UNEXPECTED_FIELD"

    # Values
    INVALID_DATETIME = "INVALID_DATETIME"
    MALFORMED_METADATA = "MALFORMED_METADATA"

    # Container
    MALFORMED_BLOCK = "MALFORMED_BLOCK"
