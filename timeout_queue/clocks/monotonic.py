from __future__ import annotations

import time


class MonotonicClock:
    def time(self) -> float:
        """Return the current monotonic time in seconds."""
        return time.monotonic()
