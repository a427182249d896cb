"""System wall clock.

Kept outside the kernel so the kernel never reads ambient time; the
kernel only calls whatever Clock it is handed.
"""

import time

from linkrecord.kernel.timestamp import Timestamp


def system_clock() -> Timestamp:
    """Current UTC wall-clock time with nanosecond resolution."""
    return Timestamp(time.time_ns())
