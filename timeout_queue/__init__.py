from __future__ import annotations

from . import logging  # configure the package logger
from .clocks import MonotonicClock, StepClock
from .queue import TimedItem, TimeoutQueue

__all__ = ["MonotonicClock", "StepClock", "TimedItem", "TimeoutQueue", "logging"]
