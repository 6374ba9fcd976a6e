"""Monotonic stopwatch used for elapsed/ETA figures and redraw throttling."""

from __future__ import annotations

import time
from typing import Callable


TimeSource = Callable[[], float]


class Chronometer:
    """Stopwatch over a monotonic time source.

    ``reset()`` returns the time elapsed since the previous start and restarts
    the watch; ``peek()`` reads the elapsed time without restarting it.
    """

    __slots__ = ("_timer", "start")

    def __init__(self, timer: TimeSource = time.perf_counter):
        self._timer = timer
        self.start = timer()

    def reset(self) -> float:
        previous = self.start
        self.start = self._timer()
        return self.start - previous

    def peek(self) -> float:
        return self._timer() - self.start
