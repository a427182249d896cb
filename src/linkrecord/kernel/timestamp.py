"""Nanosecond UTC timestamps (pure logic).

A Timestamp is a signed count of nanoseconds since the Unix epoch. The
representable range is the ``datetime`` range (years 1 through 9999, UTC)
at nanosecond precision. Values outside it cannot be constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

from linkrecord.errors import TimestampRangeError

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MICROSECOND = 1_000

# 0001-01-01T00:00:00Z
MIN_UNIX_NANOS = -62_135_596_800 * NANOS_PER_SECOND
# 9999-12-31T23:59:59.999999999Z
MAX_UNIX_NANOS = 253_402_300_799 * NANOS_PER_SECOND + 999_999_999

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in time, UTC, nanosecond resolution."""

    unix_nanos: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a point in time
        if isinstance(self.unix_nanos, bool) or not isinstance(self.unix_nanos, int):
            raise TypeError(
                f"unix_nanos must be int, got {type(self.unix_nanos).__name__}"
            )
        if not MIN_UNIX_NANOS <= self.unix_nanos <= MAX_UNIX_NANOS:
            raise TimestampRangeError(
                f"{self.unix_nanos} ns is outside "
                f"[{MIN_UNIX_NANOS}, {MAX_UNIX_NANOS}]"
            )

    @classmethod
    def from_datetime(cls, value: datetime) -> Timestamp:
        """Convert an aware datetime, normalizing it to UTC.

        Naive datetimes are rejected: their zone is unknown.
        """
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("naive datetime has no timezone; attach one before converting")
        try:
            delta = value.astimezone(timezone.utc) - _EPOCH
        except OverflowError as e:
            raise TimestampRangeError(f"{value!r} is outside the representable range") from e
        seconds = delta.days * 86_400 + delta.seconds
        return cls(seconds * NANOS_PER_SECOND + delta.microseconds * NANOS_PER_MICROSECOND)

    def to_datetime(self) -> datetime:
        """Aware UTC datetime, floored to the microsecond."""
        return _EPOCH + timedelta(microseconds=self.unix_nanos // NANOS_PER_MICROSECOND)

    def isoformat(self) -> str:
        """RFC 3339 text with nine fractional digits, e.g. 2024-05-01T12:00:00.000000001Z."""
        seconds, nanos = divmod(self.unix_nanos, NANOS_PER_SECOND)
        whole = _EPOCH + timedelta(seconds=seconds)
        return f"{whole.replace(tzinfo=None).isoformat()}.{nanos:09d}Z"

    def __str__(self) -> str:
        return self.isoformat()


# A Clock returns the current time. Injected wherever "now" is needed so
# the kernel never reads ambient time itself.
Clock = Callable[[], Timestamp]
