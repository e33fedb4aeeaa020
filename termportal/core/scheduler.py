# termportal/core/scheduler.py

"""
Tick scheduling for termportal.

The game engine never sleeps or owns a timer. Instead it hands back a
TickRequest ("call my tick handler once more after D milliseconds") and the
host loop keeps those requests in a TickScheduler until they mature. A
request that is never handed back is simply never delivered, which is the
only cancellation mechanism there is.
"""

import heapq
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Tuple

logger = logging.getLogger("termportal")


@dataclass(frozen=True)
class TickRequest:
    """A one-shot request to deliver a Tick after delay_ms."""
    delay_ms: int
    token: str


@dataclass(frozen=True)
class Tick:
    """The event delivered when a TickRequest matures."""
    token: str


class TickScheduler:
    """
    Host-side queue of pending tick requests.

    The clock is injectable so tests can drive time by hand.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._queue: List[Tuple[float, int, str]] = []
        self._seq = 0

    @property
    def pending(self) -> int:
        return len(self._queue)

    def request(self, req: TickRequest) -> None:
        """Queue a tick to be delivered once req.delay_ms has elapsed."""
        deadline = self._clock() + req.delay_ms / 1000.0
        self._seq += 1
        heapq.heappush(self._queue, (deadline, self._seq, req.token))
        logger.debug(f"Tick {req.token} scheduled in {req.delay_ms}ms")

    def timeout_ms(self) -> int:
        """
        Milliseconds until the earliest pending tick, suitable for
        window.timeout(). Returns -1 (block) when nothing is pending.
        """
        if not self._queue:
            return -1
        remaining = self._queue[0][0] - self._clock()
        return max(0, int(remaining * 1000))

    def pop_due(self) -> List[Tick]:
        """Remove and return every tick whose deadline has passed, oldest first."""
        now = self._clock()
        due = []
        while self._queue and self._queue[0][0] <= now:
            _, _, token = heapq.heappop(self._queue)
            due.append(Tick(token))
        return due

    def clear(self) -> None:
        self._queue.clear()
