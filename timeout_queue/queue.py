from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from itertools import count
from typing import TYPE_CHECKING, Generic, TypeVar

from timeout_queue.clocks import MonotonicClock

if TYPE_CHECKING:
    from collections.abc import Callable

    from timeout_queue.models.clock import Clock

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class TimedItem(Generic[T]):
    deadline: float
    sequence: int
    item: T = field(compare=False)


class TimeoutQueue(Generic[T]):
    """Queue of items that become available once their timeout has expired.

    Items are ordered by deadline, items sharing a deadline are dequeued in
    insertion order. The queue never notifies anyone, callers poll with `pop`.

    The queue is not thread safe, access from multiple threads must be
    serialized by the owner.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock if clock is not None else MonotonicClock()
        self._queue: list[TimedItem[T]] = []
        self._sequence = count()

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def __repr__(self) -> str:
        return f"TimeoutQueue(size={len(self._queue)}, next_deadline={self.next_deadline()})"

    @property
    def clock(self) -> Clock:
        return self._clock

    def is_empty(self) -> bool:
        return not self._queue

    def push(self, item: T, delay: float | timedelta) -> None:
        """Enqueue item, it can be dequeued with `pop` once delay has elapsed.

        Delay is given in seconds or as a timedelta, a delay of zero makes the
        item immediately available.
        """
        if isinstance(delay, timedelta):
            delay = delay.total_seconds()
        assert delay >= 0, "delay must be greater than or equal to 0"

        deadline = self._clock.time() + delay
        heapq.heappush(self._queue, TimedItem(deadline, next(self._sequence), item))
        logger.debug("pushed item with deadline %s (size=%s)", deadline, len(self._queue))

    def pop(self) -> T | None:
        """Dequeue the item with the earliest deadline if it has expired.

        Returns None when the queue is empty or when no item has expired yet,
        use `len` to tell the two apart.
        """
        if not self._queue or self._queue[0].deadline > self._clock.time():
            return None

        timed = heapq.heappop(self._queue)
        logger.debug("popped item with deadline %s (size=%s)", timed.deadline, len(self._queue))
        return timed.item

    def filter_pop(self, filter: Callable[[T], bool]) -> T | None:
        """Variant of `pop` that discards items at the front of the queue.

        Starting from the earliest deadline, every item for which filter
        returns False is removed and dropped, whether or not it has expired.
        The first item that passes the filter is dequeued if it has expired,
        otherwise it stays in the queue and None is returned.
        """
        now = self._clock.time()
        while self._queue:
            head = self._queue[0]
            if not filter(head.item):
                heapq.heappop(self._queue)
                logger.debug("discarded item with deadline %s (size=%s)", head.deadline, len(self._queue))
                continue
            if head.deadline > now:
                return None

            heapq.heappop(self._queue)
            logger.debug("popped item with deadline %s (size=%s)", head.deadline, len(self._queue))
            return head.item

        return None

    def pop_expired(self) -> list[T]:
        """Dequeue all expired items, earliest deadline first."""
        now = self._clock.time()
        items: list[T] = []
        while self._queue and self._queue[0].deadline <= now:
            items.append(heapq.heappop(self._queue).item)

        if items:
            logger.debug("popped %s expired items (size=%s)", len(items), len(self._queue))
        return items

    def peek(self) -> T | None:
        if not self._queue or self._queue[0].deadline > self._clock.time():
            return None
        return self._queue[0].item

    def next_deadline(self) -> float | None:
        return self._queue[0].deadline if self._queue else None

    def next_timeout(self) -> float | None:
        """Return the seconds until the earliest deadline, 0 if it has already expired."""
        deadline = self.next_deadline()
        if deadline is None:
            return None
        return max(deadline - self._clock.time(), 0.0)
