"""
Wall-clock source for generation counters.

Generations are UTC milliseconds since the epoch. Two bumps issued by
the same process never get the same value; bumps from different
processes in the same millisecond can.
"""

import threading
from collections.abc import Callable
from datetime import UTC, datetime


def utc_now_ms() -> int:
    """
    Return the current UTC time as integer milliseconds since the epoch.

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z
    """
    return int(datetime.now(UTC).timestamp() * 1000)


class GenerationClock:
    """Strictly increasing millisecond clock.

    Returns the wall-clock time, or the previous value plus one when the
    wall clock has not advanced (same millisecond or a step backwards).
    """

    def __init__(self, source: Callable[[], int] = utc_now_ms) -> None:
        self._source = source
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            value = max(self._source(), self._last + 1)
            self._last = value
            return value


# Process-wide default used by TimestampStore
generation_clock = GenerationClock()
