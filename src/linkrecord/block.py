"""DAG-CBOR block helpers.

Wraps the canonical map from ``linkrecord.kernel.codec`` in the DAG-CBOR
container, so a record can be handed to a block store as bytes. Computing
the CID of the resulting block is the store's job.
"""

import logging
from typing import Union

import dag_cbor
from dag_cbor.decoding import CBORDecodingError
from dag_cbor.encoding import CBOREncodingError

from linkrecord.errors import BlockEncodeError, MalformedBlock
from linkrecord.kernel.codec import decode, encode
from linkrecord.kernel.record import Record

logger = logging.getLogger(__name__)

# multicodec code for dag-cbor, for stores that build CIDs themselves
DAG_CBOR_CODEC = 0x71


def encode_block(record: Record) -> bytes:
    """Encode a record as DAG-CBOR bytes.

    DAG-CBOR integers are limited to 64 bits, so timestamps before about
    1385 CE or after about 2554 CE cannot be put in a block.

    Raises:
        BlockEncodeError: the container cannot represent the encoded map
    """
    try:
        data = dag_cbor.encode(encode(record))
    except (CBOREncodingError, ValueError) as e:
        raise BlockEncodeError(f"cannot encode record as DAG-CBOR: {e}") from e
    logger.debug("encoded record block (%d bytes)", len(data))
    return data


def decode_block(data: Union[bytes, bytearray, memoryview], strict: bool = True) -> Record:
    """Decode DAG-CBOR bytes into a Record.

    Raises:
        MalformedBlock: the bytes are not valid DAG-CBOR
        RecordDecodeError: the decoded value is not a canonical record map
    """
    try:
        wire = dag_cbor.decode(bytes(data))
    except (CBORDecodingError, ValueError) as e:
        raise MalformedBlock(str(e)) from e
    record = decode(wire, strict=strict)
    logger.debug("decoded record block (%d bytes)", len(data))
    return record
