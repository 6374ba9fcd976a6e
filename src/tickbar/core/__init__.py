"""Iteration decoration and redraw throttling."""

from tickbar.core.adapter import ProgressAdapter, ProgressCursor
from tickbar.core.clock import Chronometer
from tickbar.core.holders import (
    BorrowedConstHolder,
    BorrowedMutHolder,
    OwnedHolder,
    resolve_holder,
)
from tickbar.core.ranges import IntRange
from tickbar.core.render import LineRenderer, render_line
from tickbar.core.state import ProgressState
from tickbar.core.timer import TimerAdapter

__all__ = [
    "BorrowedConstHolder",
    "BorrowedMutHolder",
    "Chronometer",
    "IntRange",
    "LineRenderer",
    "OwnedHolder",
    "ProgressAdapter",
    "ProgressCursor",
    "ProgressState",
    "TimerAdapter",
    "render_line",
    "resolve_holder",
]
