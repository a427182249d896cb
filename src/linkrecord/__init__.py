"""linkrecord: versioned content-addressed records + canonical IPLD map encoding."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("linkrecord")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from linkrecord.kernel.record import Record, UNSET
from linkrecord.kernel.timestamp import Clock, Timestamp
from linkrecord.kernel.links import default_cid
from linkrecord.kernel.codec import encode, decode
from linkrecord.block import encode_block, decode_block
from linkrecord.codes import DecodeErrorCode
from linkrecord.errors import (
    RecordDecodeError,
    NotAMap,
    MissingOrWrongTypeField,
    UnexpectedField,
    InvalidDateTime,
    MalformedMetadata,
    MalformedBlock,
    BlockEncodeError,
    InvalidMetadata,
    TimestampRangeError,
)

__all__ = [
    "__version__",
    "Record",
    "UNSET",
    "Clock",
    "Timestamp",
    "default_cid",
    "encode",
    "decode",
    "encode_block",
    "decode_block",
    "DecodeErrorCode",
    "RecordDecodeError",
    "NotAMap",
    "MissingOrWrongTypeField",
    "UnexpectedField",
    "InvalidDateTime",
    "MalformedMetadata",
    "MalformedBlock",
    "BlockEncodeError",
    "InvalidMetadata",
    "TimestampRangeError",
]
