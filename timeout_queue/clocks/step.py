from __future__ import annotations


class StepClock:
    def __init__(self, time: float = 0.0) -> None:
        self._time = time

    def step(self, time: float) -> None:
        assert time >= self._time, "The arrow of time only flows forward."
        self._time = time

    def advance(self, seconds: float) -> None:
        assert seconds >= 0, "The arrow of time only flows forward."
        self._time += seconds

    def time(self) -> float:
        """Return the current time in seconds."""
        return self._time
