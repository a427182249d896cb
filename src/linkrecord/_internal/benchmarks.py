"""Performance sentinel budgets and workloads for the record codec."""

from __future__ import annotations

import os
from typing import Any, Dict

from linkrecord.block import decode_block, encode_block
from linkrecord.kernel.codec import decode, encode
from linkrecord.kernel.links import default_cid
from linkrecord.kernel.record import Record
from linkrecord.kernel.timestamp import Timestamp


def _budget_from_env(var_name: str, default_ms: float) -> float:
    raw = os.getenv(var_name)
    if not raw:
        return default_ms
    try:
        return float(raw)
    except ValueError:
        return default_ms


MAX_MAP_ROUND_TRIP_MS = _budget_from_env("LINKRECORD_MAX_MAP_ROUND_TRIP_MS", 50.0)
MAX_BLOCK_ROUND_TRIP_MS = _budget_from_env("LINKRECORD_MAX_BLOCK_ROUND_TRIP_MS", 100.0)


def wide_metadata(width: int = 2000) -> Dict[str, Any]:
    """Metadata payload with ``width`` keys, each holding a small nested object."""
    return {
        f"key_{i:05d}": {"index": i, "label": f"item {i}", "tags": ["a", "b"], "ratio": i / 7}
        for i in range(width)
    }


def sentinel_record(width: int = 2000) -> Record:
    fixed = Timestamp(1_700_000_000_000_000_000)
    return Record(created_at=fixed, updated_at=fixed, data=default_cid(), metadata=wide_metadata(width))


def map_round_trip(record: Record) -> Record:
    return decode(encode(record))


def block_round_trip(record: Record) -> Record:
    return decode_block(encode_block(record))
