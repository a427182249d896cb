"""Centralized canonical JSON serialization for record metadata.

Metadata travels on the wire as an opaque string, so the same value must
always produce the same text and the text must parse back to an equal
value. This module owns both directions.

Rules:
- Sorted keys (recursively)
- Stable separators (",", ":")
- UTF-8 text (ensure_ascii=False)
- NaN and Infinity rejected in both directions
"""

import json
import math
from typing import Any

from linkrecord.errors import InvalidMetadata


def validate_json_value(obj: Any, path: str = "") -> None:
    """Validate that obj is a JSON tree that survives a dumps/loads round-trip.

    Allowed: None, bool, int, finite float, str, list, dict with str keys.
    Tuples are rejected because they come back as lists.

    Raises:
        InvalidMetadata: naming the offending path
    """
    where = path or "<root>"
    if obj is None or isinstance(obj, (bool, int, str)):
        return
    elif isinstance(obj, float):
        if not math.isfinite(obj):
            raise InvalidMetadata(f"Non-finite number at {where}: {obj!r}")
    elif isinstance(obj, dict):
        for key, value in obj.items():
            if not isinstance(key, str):
                raise InvalidMetadata(
                    f"Object keys must be strings at {where}, got {type(key).__name__}"
                )
            validate_json_value(value, f"{path}.{key}" if path else key)
    elif isinstance(obj, list):
        for i, item in enumerate(obj):
            validate_json_value(item, f"{path}[{i}]" if path else f"[{i}]")
    else:
        raise InvalidMetadata(
            f"Non-JSON type at {where}: {type(obj).__name__}. "
            f"Only None, bool, int, float, str, dict, and list are allowed."
        )


def canonical_dumps(obj: Any) -> str:
    """Serialize a validated JSON value to its canonical compact text."""
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def strict_loads(text: str) -> Any:
    """Parse JSON text, rejecting the NaN/Infinity extensions json accepts by default.

    Raises:
        ValueError: (json.JSONDecodeError for syntax errors)
    """
    return json.loads(text, parse_constant=_reject_constant)


def canonical_metadata(obj: Any) -> str:
    """Validate a JSON value and return its canonical text.

    Covers what the type walk cannot see, such as ints longer than the
    interpreter's int-to-str digit limit and nesting deeper than the
    recursion limit.

    Raises:
        InvalidMetadata: obj cannot round-trip through canonical JSON
    """
    try:
        validate_json_value(obj)
        return canonical_dumps(obj)
    except InvalidMetadata:
        raise
    except (ValueError, TypeError, RecursionError) as e:
        raise InvalidMetadata(f"Cannot serialize metadata: {e}") from e


def canonicalize_text(text: str) -> str:
    """Re-emit JSON text in canonical form.

    Raises:
        InvalidMetadata: text is not strict JSON, or parses to a value that
            cannot be re-encoded (e.g. "1e400" parses to infinity)
    """
    try:
        value = strict_loads(text)
    except (ValueError, RecursionError) as e:
        raise InvalidMetadata(f"Not strict JSON text: {e}") from e
    return canonical_metadata(value)
