"""Frame pacing and millisecond timestamps."""

from __future__ import annotations

import time
from typing import Callable

_NS_PER_MS = 1_000_000


def current_timestamp() -> int:
    """Return a monotonic timestamp in whole milliseconds."""
    return time.monotonic_ns() // _NS_PER_MS


class FrameTimer:
    """Reports when a frame interval has passed since the last frame.

    ``clock`` returns a monotonic time in nanoseconds.
    """

    def __init__(self, interval_ms: int, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self.interval_ms = interval_ms
        self._clock = clock
        self._start = clock()

    def time_over(self) -> bool:
        """Return True and restart the interval once it has elapsed."""
        now = self._clock()
        elapsed_ms = (now - self._start) // _NS_PER_MS
        if elapsed_ms >= self.interval_ms:
            self._start = self._clock()
            return True
        return False