from __future__ import annotations

from .monotonic import MonotonicClock
from .step import StepClock

__all__ = ["MonotonicClock", "StepClock"]
