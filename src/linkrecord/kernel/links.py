"""Content-identifier helpers.

Links are ``multiformats.CID`` values. This module never computes a CID
from content; it only supplies the empty default and the link type check
the codec relies on.
"""

from typing import Any

from multiformats import CID, multihash

# CIDv1, identity codec, identity multihash over zero bytes: 0x01 0x00 0x00 0x00
_EMPTY_CID = CID("base32", 1, "identity", multihash.wrap(b"", "identity"))


def default_cid() -> CID:
    """The empty CID used when a record has no content yet.

    CID instances are immutable, so the shared value is safe to hand out.
    """
    return _EMPTY_CID


def is_link(value: Any) -> bool:
    """True only for CID instances; CID strings and bytes are not links."""
    return isinstance(value, CID)
