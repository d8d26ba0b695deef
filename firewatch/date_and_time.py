"""Real-time clock that can be set to a local calendar date and time."""

from __future__ import annotations

import time


def ctime_string(timestamp: float) -> str:
    """Format a timestamp like C ``ctime``, trailing newline included."""
    return time.ctime(timestamp) + "\n"


class RealTimeClock:
    """A clock that follows the system time shifted by a settable offset."""

    def __init__(self) -> None:
        self._offset = 0.0

    def now(self) -> int:
        """Return the clock's current time in whole epoch seconds."""
        return int(time.time() + self._offset)

    def read(self) -> str:
        """Return the current time formatted like C ``ctime``."""
        return ctime_string(self.now())

    def write(
        self, year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> None:
        """Set the clock to the given local date and time."""
        target = time.mktime((year, month, day, hour, minute, second, 0, 0, -1))
        self._offset = target - time.time()