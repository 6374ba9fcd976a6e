"""Progress driven by wall time instead of iteration count."""

from __future__ import annotations

from typing import Optional, TextIO

from tickbar.core.adapter import ProgressAdapter, ProgressCursor
from tickbar.core.holders import Holder

# Counter resolution of a timer bar
TIMER_STEPS = 1000


class TimerHolder(Holder):
    """Supplies the step count of a timer bar; there are no elements to read."""

    kind = "timer"

    def __init__(self, steps: int = TIMER_STEPS):
        super().__init__((), total=steps)

    def length(self) -> Optional[int]:
        return None


class TimerCursor(ProgressCursor):
    """Yields the elapsed seconds until the adapter's duration has passed."""

    __slots__ = ()

    def __next__(self) -> float:
        adapter = self._adapter
        self.check_current()
        if self.exhausted:
            raise StopIteration

        state = adapter.state
        elapsed = state.chronometer.peek()
        if elapsed >= adapter.seconds:
            self.exhausted = True
            state.manual_set(1.0)
            adapter.finish()
            raise StopIteration

        state.manual_set(elapsed / adapter.seconds)
        state.tick(advance=False)
        self.index += 1
        return elapsed


class TimerAdapter(ProgressAdapter):
    """Loop for ``seconds`` of wall time, showing how much of it has passed.

    Example::

        for elapsed in TimerAdapter(2.0, prefix="waiting "):
            poll()
    """

    cursor_class = TimerCursor

    def __init__(
        self,
        seconds: float,
        prefix: str = "",
        bar_size: Optional[int] = None,
        min_update_time: Optional[float] = None,
        sink: Optional[TextIO] = None,
        state=None,
    ):
        if seconds <= 0:
            raise ValueError(f"timer duration must be positive, got {seconds}")
        self.seconds = float(seconds)
        super().__init__(
            TimerHolder(),
            prefix=prefix,
            bar_size=bar_size,
            min_update_time=min_update_time,
            sink=sink,
            state=state,
        )
