"""Record entity: a timestamped link to external content plus free-form metadata."""

from __future__ import annotations

from typing import Any, Optional

from multiformats import CID
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from linkrecord._internal.canonical_json import canonical_metadata, canonicalize_text, strict_loads
from linkrecord._internal.clock import system_clock
from linkrecord.kernel.links import default_cid, is_link
from linkrecord.kernel.timestamp import Clock, Timestamp


class _Unset:
    """Sentinel for "leave this field alone"; None is a real metadata value (JSON null)."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


class Record(BaseModel):
    """A versioned, content-addressed record.

    Fields are read-only; ``update`` is the only mutation. Metadata is held
    as its canonical JSON text, so the record never shares a mutable object
    with a caller: ``Record(metadata=...)`` serializes the value on the way
    in, and ``record.metadata`` parses a fresh copy on every read.

    Equality is structural over all four fields. ``updated_at`` never
    precedes ``created_at`` for records built with ``create``/``default``
    and mutated with ``update``. Not internally synchronized: one writer
    per instance.
    """
    created_at: Timestamp
    updated_at: Timestamp
    data: CID = Field(default_factory=default_cid)  # link to externally stored bytes
    metadata_json: str = "null"  # canonical JSON text of the metadata

    model_config = ConfigDict(
        arbitrary_types_allowed=True,  # CID
        extra="forbid",
        frozen=True,
    )

    # Frozen for assignment, not for identity: update() still mutates
    __hash__ = None

    @model_validator(mode="before")
    @classmethod
    def metadata_to_json(cls, values: Any) -> Any:
        """Accept ``metadata=<JSON value>`` and store it as canonical text."""
        if isinstance(values, dict) and "metadata" in values:
            if "metadata_json" in values:
                raise ValueError("pass metadata or metadata_json, not both")
            values = dict(values)
            values["metadata_json"] = canonical_metadata(values.pop("metadata"))
        return values

    @field_validator("metadata_json")
    @classmethod
    def validate_metadata_json(cls, v: str) -> str:
        """Stored text is always canonical, whichever way it came in."""
        return canonicalize_text(v)

    @property
    def metadata(self) -> Any:
        """The metadata value; a new object on every access."""
        return strict_loads(self.metadata_json)

    @classmethod
    def create(
        cls,
        data: Optional[CID] = None,
        metadata: Any = None,
        clock: Optional[Clock] = None,
    ) -> Record:
        """New record stamped with a single clock reading for both timestamps."""
        now = (clock or system_clock)()
        return cls(
            created_at=now,
            updated_at=now,
            data=data if data is not None else default_cid(),
            metadata=metadata,
        )

    @classmethod
    def default(cls, clock: Optional[Clock] = None) -> Record:
        """Record stamped now, with the empty CID and null metadata."""
        return cls.create(clock=clock)

    def update(
        self,
        *,
        data: Any = UNSET,
        metadata: Any = UNSET,
        clock: Optional[Clock] = None,
    ) -> None:
        """Update the data, metadata or both, and refresh ``updated_at``.

        Both arguments are keyword-only and default to "unchanged", so
        ``update(data=cid)`` keeps the metadata and ``update(metadata=None)``
        sets it to JSON null. ``updated_at`` is refreshed even when nothing
        else changes, and never moves backwards if the clock does. Arguments
        are checked before anything is assigned, so a rejected update leaves
        the record untouched.

        Raises:
            TypeError: data is not a CID
            InvalidMetadata: metadata cannot round-trip through canonical JSON
        """
        if data is not UNSET and not is_link(data):
            raise TypeError(f"data must be a CID, got {type(data).__name__}")
        metadata_json = canonical_metadata(metadata) if metadata is not UNSET else UNSET

        now = (clock or system_clock)()
        self._assign("updated_at", max(now, self.updated_at))
        if data is not UNSET:
            self._assign("data", data)
        if metadata_json is not UNSET:
            self._assign("metadata_json", metadata_json)

    def _assign(self, name: str, value: Any) -> None:
        # Values are validated by update(); bypasses the frozen guard
        self.__dict__[name] = value
