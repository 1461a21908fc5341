from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

Clock = Callable[[], float]


class ManualClock:
    """A clock that only moves when told to. Used by tests and replays."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError('time cannot move backwards')
        self.now += seconds
        return self.now


@dataclass
class ScheduledTask:
    """Handle for a pending callback."""
    due: float
    callback: Callable[..., Any]
    interval: Optional[float] = None
    cancelled: bool = field(default=False)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    """Cooperative timer queue.

    Nothing runs in the background: callbacks fire only from `run_due()`,
    in due order, on the caller's thread. A repeating task that fell behind
    fires once with the number of intervals that elapsed, so a long-idle
    host pays for one call, not one per missed interval.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or time.monotonic
        self._queue: List[Tuple[float, int, ScheduledTask]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._clock()

    def call_later(self, delay: float, callback: Callable[[], Any]) -> ScheduledTask:
        task = ScheduledTask(due=self.now() + delay, callback=callback)
        self._push(task)
        return task

    def call_every(self, interval: float, callback: Callable[[int], Any]) -> ScheduledTask:
        """Schedules `callback(count)` every `interval` seconds; `count` is the intervals elapsed."""
        if interval <= 0:
            raise ValueError('interval must be positive')
        task = ScheduledTask(due=self.now() + interval, callback=callback, interval=interval)
        self._push(task)
        return task

    def _push(self, task: ScheduledTask) -> None:
        heapq.heappush(self._queue, (task.due, next(self._seq), task))

    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)

    def run_due(self) -> int:
        """Runs every callback due at the current time. Returns how many ran."""
        now = self.now()
        ran = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            if task.interval is None:
                task.callback()
            else:
                count = int((now - task.due) // task.interval) + 1
                task.due += count * task.interval
                task.callback(count)
                if not task.cancelled:
                    self._push(task)
            ran += 1
        return ran
