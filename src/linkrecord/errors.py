"""Exception taxonomy for linkrecord.

Decoding raises a subclass of RecordDecodeError; every subclass carries a
DecodeErrorCode in ``code``. Encoding a Record never fails, so the only
non-decode errors are raised when an invalid value is handed to a Record
or when a block container cannot hold the encoded map.
"""

from typing import Any, Optional

from linkrecord.codes import DecodeErrorCode


class RecordDecodeError(ValueError):
    """Base class for all decode failures."""

    code: DecodeErrorCode


class NotAMap(RecordDecodeError):
    """The top-level wire value is not a map."""

    code = DecodeErrorCode.NOT_A_MAP

    def __init__(self, found: Any = None):
        self.found_type = type(found).__name__
        super().__init__(f"wire value is not a map (got {self.found_type})")


class MissingOrWrongTypeField(RecordDecodeError):
    """A required key is absent or holds a value of the wrong wire type."""

    code = DecodeErrorCode.MISSING_OR_WRONG_TYPE_FIELD

    def __init__(self, key: str, expected: str, found: Optional[str] = None):
        self.key = key
        self.expected = expected
        self.found = found
        if found is None:
            message = f"missing map member: {key}"
        else:
            message = f"map member {key} must be {expected}, got {found}"
        super().__init__(message)


class UnexpectedField(RecordDecodeError):
    """The map carries a key outside the canonical four (strict decoding only)."""

    code = DecodeErrorCode.UNEXPECTED_FIELD

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"unexpected map member: {key!r}")


class InvalidDateTime(RecordDecodeError):
    """An integer timestamp is outside the representable range."""

    code = DecodeErrorCode.INVALID_DATETIME

    def __init__(self, key: str, value: int):
        self.key = key
        self.value = value
        super().__init__(f"invalid datetime in {key}: {value} ns is out of range")


class MalformedMetadata(RecordDecodeError):
    """The metadata string is not strict JSON text."""

    code = DecodeErrorCode.MALFORMED_METADATA

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"malformed metadata: {reason}")


class MalformedBlock(RecordDecodeError):
    """The block bytes are not valid DAG-CBOR."""

    code = DecodeErrorCode.MALFORMED_BLOCK

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"malformed block: {reason}")


class BlockEncodeError(ValueError):
    """The encoded map cannot be represented in a DAG-CBOR block."""


class InvalidMetadata(ValueError):
    """Raised when metadata cannot round-trip through canonical JSON."""


class TimestampRangeError(ValueError):
    """Raised when a Timestamp is constructed outside the representable range."""
