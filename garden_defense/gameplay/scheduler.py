"""
Simulation-time callback scheduler.
NO UI DEPENDENCIES.

Wave spawns and bomb fuses are deferred callbacks. They live in one
priority queue keyed by simulation time, and only advance when the
simulation ticks, so pausing freezes them and reset can drop them all
at once.
"""
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ScheduledCall:
    """Handle for one pending callback. Cancel it instead of removing it."""
    due: float
    callback: Callable[[], None]
    tag: str = ""
    cancelled: bool = False
    fired: bool = False

    @property
    def pending(self) -> bool:
        return not self.cancelled and not self.fired

    def cancel(self) -> None:
        self.cancelled = True


@dataclass(order=True)
class _QueueEntry:
    due: float
    seq: int
    call: ScheduledCall = field(compare=False)


class Scheduler:
    """
    Priority queue of callbacks ordered by due time.

    Calls due at the same time fire in the order they were scheduled.
    """

    def __init__(self):
        self.now: float = 0.0
        self._queue: List[_QueueEntry] = []
        self._counter = itertools.count()

    def schedule(self, delay: float, callback: Callable[[], None], tag: str = "") -> ScheduledCall:
        """Run callback once, delay seconds of simulation time from now."""
        call = ScheduledCall(due=self.now + max(0.0, delay), callback=callback, tag=tag)
        heapq.heappush(self._queue, _QueueEntry(call.due, next(self._counter), call))
        return call

    def advance(self, dt: float) -> int:
        """
        Move the clock forward by dt and fire everything that came due.
        Returns the number of callbacks fired.
        """
        self.now += dt
        fired = 0
        while self._queue and self._queue[0].due <= self.now:
            call = heapq.heappop(self._queue).call
            if call.cancelled:
                continue
            call.fired = True
            call.callback()
            fired += 1
        return fired

    def cancel_all(self) -> int:
        """Cancel every pending callback. Returns how many were cancelled."""
        cancelled = 0
        for entry in self._queue:
            if entry.call.pending:
                entry.call.cancel()
                cancelled += 1
        self._queue.clear()
        if cancelled:
            logger.debug(f"Cancelled {cancelled} scheduled callbacks")
        return cancelled

    def pending_count(self, tag: Optional[str] = None) -> int:
        """Count callbacks still waiting to fire, optionally by tag."""
        return sum(
            1 for entry in self._queue
            if entry.call.pending and (tag is None or entry.call.tag == tag)
        )

    def __len__(self) -> int:
        return self.pending_count()
