"""Shared progress state driven by the adapters.

One ``ProgressState`` belongs to exactly one adapter. It owns the counters,
the display configuration, the pending suffix text and the two chronometers
(overall elapsed time, time since the last redraw), and decides on every
tick whether the line is due for a redraw.
"""

from __future__ import annotations

import sys
import time
from typing import Optional, TextIO

from tickbar.core.clock import Chronometer, TimeSource
from tickbar.core.render import LineRenderer
from tickbar.utils.logging import LogTemplates, get_logger

logger = get_logger("core.state")

# Guards the percentage division when the total is zero
EPSILON = 1e-13

DEFAULT_BAR_SIZE = 30
# Found experimentally: redrawing more often than this costs visible throughput
DEFAULT_MIN_UPDATE_TIME = 0.15


class ProgressState:
    """Counters, configuration and redraw throttling for one traversal at a time."""

    def __init__(
        self,
        total: Optional[int] = None,
        prefix: str = "",
        bar_size: int = DEFAULT_BAR_SIZE,
        min_update_time: float = DEFAULT_MIN_UPDATE_TIME,
        sink: Optional[TextIO] = None,
        timer: TimeSource = time.perf_counter,
        renderer=None,
    ):
        self.total = total
        self.done = 0
        self.prefix = prefix
        self.suffix = ""
        self.bar_size = max(0, int(bar_size))
        self.min_update_time = float(min_update_time)
        self.sink = sink if sink is not None else sys.stderr
        self.term_cols = 0
        self.renders = 0

        self.chronometer = Chronometer(timer)
        self.refresh = Chronometer(timer)
        self.renderer = renderer if renderer is not None else LineRenderer()
        self._drawn = False
        self._drawn_at_total = False

    # ------------------------------------------------------------------ #
    # Traversal lifecycle
    # ------------------------------------------------------------------ #
    def begin_traversal(self, total: Optional[int]) -> None:
        """Reset the counters and both clocks for a fresh traversal."""
        self.total = total
        self.done = 0
        self.suffix = ""
        self._drawn = False
        self._drawn_at_total = False
        self.chronometer.reset()
        self.refresh.reset()

    def tick(self, advance: bool = True, final: bool = False) -> bool:
        """Advance by one step, redrawing when due.

        A redraw happens on the first tick of a traversal, on the tick that
        observes ``done == total`` (once), whenever more than
        ``min_update_time`` has passed since the previous redraw, and when
        ``final`` is set. The suffix is cleared on every tick.

        Returns True when the line was redrawn.
        """
        at_total = self.total is not None and self.done >= self.total
        due = (
            final
            or not self._drawn
            or (at_total and not self._drawn_at_total)
            or self.refresh.peek() > self.min_update_time
        )
        if due:
            self.refresh.reset()
            self.render()
            self._drawn = True
            if at_total:
                self._drawn_at_total = True

        self.suffix = ""
        if advance and not at_total:
            self.done += 1
        return due

    def render(self) -> None:
        self.renderer.draw(self)
        self.renders += 1

    # ------------------------------------------------------------------ #
    # Progress math
    # ------------------------------------------------------------------ #
    @property
    def complete(self) -> float:
        """Completed fraction; 0.0 when the total is unknown."""
        if self.total is None:
            return 0.0
        return self.done / (self.total + EPSILON)

    def eta(self, elapsed: float) -> Optional[float]:
        """Seconds left, or None before anything has completed."""
        complete = self.complete
        if complete <= 0.0:
            return None
        return elapsed / complete - elapsed

    @property
    def remaining(self) -> Optional[int]:
        if self.total is None:
            return None
        return self.total - self.done

    # ------------------------------------------------------------------ #
    # Caller-facing mutators
    # ------------------------------------------------------------------ #
    def append_suffix(self, text) -> None:
        self.suffix += str(text)

    def set_prefix(self, prefix: str) -> None:
        self.prefix = str(prefix)

    def set_bar_size(self, size: int) -> None:
        self.bar_size = max(0, int(size))

    def set_min_update_time(self, seconds: float) -> None:
        self.min_update_time = float(seconds)

    def set_sink(self, sink: TextIO) -> None:
        self.sink = sink

    def manual_set(self, fraction: float) -> None:
        """Jump to ``fraction`` of the total, clamped to [0, 1]."""
        if self.total is None:
            logger.debug(LogTemplates.MANUAL_SET_IGNORED.format(fraction=fraction))
            return
        fraction = min(1.0, max(0.0, float(fraction)))
        self.done = int(round(fraction * self.total))

    def advance(self, amount: int) -> None:
        """Move the counter by ``amount`` steps without ticking."""
        done = self.done + int(amount)
        if self.total is not None:
            done = min(done, self.total)
        self.done = max(0, done)
