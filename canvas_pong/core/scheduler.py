"""
Cooperative timer scheduling for Canvas Pong

Everything in a match runs on one execution stream: the fixed-rate tick and
the one-shot ball freeze are both timers of the same Scheduler. The scheduler
keeps virtual time and only fires callbacks while it is being advanced, so a
callback always runs to completion before the next one starts.
"""

import heapq
import itertools
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

# Tolerance for float drift when comparing due times against the clock
_EPSILON = 1e-9


class TimerHandle:
    """A scheduled callback that can be cancelled"""

    def __init__(
        self, due: float, callback: Callable[[], None], interval: float | None = None
    ) -> None:
        self.due = due
        self.callback = callback
        self.interval = interval
        self.cancelled = False

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    def cancel(self) -> None:
        """Prevents any future run of the callback"""
        self.cancelled = True


class Scheduler:
    """Virtual-time timer queue advanced explicitly by its driver"""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, TimerHandle]] = []
        self._sequence = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedules a one-shot callback after delay seconds"""
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        handle = TimerHandle(self.now + delay, callback)
        self._push(handle)
        logger.debug("One-shot timer scheduled at t=%.3f", handle.due)
        return handle

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedules a callback every interval seconds, first run one interval from now"""
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        handle = TimerHandle(self.now + interval, callback, interval)
        self._push(handle)
        logger.debug("Repeating timer scheduled every %.4fs", interval)
        return handle

    def advance(self, seconds: float) -> int:
        """
        Moves the clock forward, running every timer that falls due.

        Timers fire in due-time order, ties in scheduling order. A repeating
        timer that is late fires once per missed interval.

        Args:
            seconds: Time to advance, in seconds

        Returns:
            int: Number of callbacks run
        """
        if seconds < 0:
            raise ValueError(f"cannot advance by a negative time ({seconds})")

        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target + _EPSILON:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue

            self.now = max(self.now, due)
            handle.callback()
            fired += 1

            if handle.interval is not None and not handle.cancelled:
                handle.due = due + handle.interval
                self._push(handle)

        self.now = max(self.now, target)
        return fired

    @property
    def pending(self) -> int:
        """Number of timers that will still fire"""
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def _push(self, handle: TimerHandle) -> None:
        heapq.heappush(self._queue, (handle.due, next(self._sequence), handle))
