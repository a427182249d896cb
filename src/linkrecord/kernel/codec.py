"""Canonical map encoding for Record (pure logic).

The wire form is an IPLD map with exactly four members:

    created_at  integer  nanoseconds since the Unix epoch
    updated_at  integer  nanoseconds since the Unix epoch
    data        link     the CID itself, not its string form
    metadata    string   canonical compact JSON text

Decoding is fail-closed: the first violation raises, and nothing is
defaulted or coerced.
"""

from collections.abc import Mapping
from typing import Any, Dict, Tuple

from linkrecord._internal.canonical_json import canonicalize_text
from linkrecord.errors import (
    InvalidDateTime,
    InvalidMetadata,
    MalformedMetadata,
    MissingOrWrongTypeField,
    NotAMap,
    TimestampRangeError,
    UnexpectedField,
)
from linkrecord.kernel.links import is_link
from linkrecord.kernel.record import Record
from linkrecord.kernel.timestamp import Timestamp

CREATED_AT_LABEL = "created_at"
UPDATED_AT_LABEL = "updated_at"
DATA_LABEL = "data"
METADATA_LABEL = "metadata"

WIRE_LABELS: Tuple[str, ...] = (CREATED_AT_LABEL, UPDATED_AT_LABEL, DATA_LABEL, METADATA_LABEL)


def _is_integer(value: Any) -> bool:
    # bool is an int subclass but a distinct IPLD kind
    return isinstance(value, int) and not isinstance(value, bool)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


# label -> (check, expected kind name), in validation order
_FIELD_KINDS = {
    CREATED_AT_LABEL: (_is_integer, "integer"),
    UPDATED_AT_LABEL: (_is_integer, "integer"),
    DATA_LABEL: (is_link, "link"),
    METADATA_LABEL: (_is_string, "string"),
}


def _kind_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if _is_integer(value):
        return "integer"
    if is_link(value):
        return "link"
    return type(value).__name__


def encode(record: Record) -> Dict[str, Any]:
    """Encode a record into its canonical four-member map. Never fails."""
    return {
        CREATED_AT_LABEL: record.created_at.unix_nanos,
        UPDATED_AT_LABEL: record.updated_at.unix_nanos,
        DATA_LABEL: record.data,
        METADATA_LABEL: record.metadata_json,
    }


def _decode_timestamp(label: str, value: int) -> Timestamp:
    try:
        return Timestamp(value)
    except TimestampRangeError as e:
        raise InvalidDateTime(label, value) from e


def _decode_metadata(text: str) -> str:
    try:
        # Rejects "1e400" too: it parses to inf, which cannot be re-encoded
        return canonicalize_text(text)
    except InvalidMetadata as e:
        raise MalformedMetadata(str(e)) from e


def decode(wire: Any, strict: bool = True) -> Record:
    """Decode a canonical map back into a Record.

    Checks, first failure wins:
    1. wire is a map (NotAMap)
    2. each of the four members is present with its exact kind
       (MissingOrWrongTypeField)
    3. strict only: no members beyond the four (UnexpectedField)
    4. both timestamps are in range (InvalidDateTime)
    5. metadata is strict JSON text (MalformedMetadata)

    Args:
        wire: Decoded IPLD value, typically the output of a DAG-CBOR decoder
        strict: Reject members outside the canonical four

    Returns:
        Record holding exactly the decoded values

    Raises:
        RecordDecodeError: one of the subclasses above
    """
    if not isinstance(wire, Mapping):
        raise NotAMap(wire)

    for label, (check, expected) in _FIELD_KINDS.items():
        if label not in wire:
            raise MissingOrWrongTypeField(label, expected)
        value = wire[label]
        if not check(value):
            raise MissingOrWrongTypeField(label, expected, found=_kind_name(value))

    if strict:
        extras = [key for key in wire if key not in _FIELD_KINDS]
        if extras:
            # Stable choice when several are present
            raise UnexpectedField(sorted(extras, key=repr)[0])

    created_at = _decode_timestamp(CREATED_AT_LABEL, wire[CREATED_AT_LABEL])
    updated_at = _decode_timestamp(UPDATED_AT_LABEL, wire[UPDATED_AT_LABEL])
    metadata_json = _decode_metadata(wire[METADATA_LABEL])

    return Record(
        created_at=created_at,
        updated_at=updated_at,
        data=wire[DATA_LABEL],
        metadata_json=metadata_json,
    )
