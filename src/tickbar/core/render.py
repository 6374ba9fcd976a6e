"""Progress line formatting and in-place redraw.

``render_line`` is a pure function of the progress figures; ``LineRenderer``
adds the carriage return, pads the line to the widest one drawn so far and
writes it to the state's sink.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tickbar.core.state import ProgressState

BAR_FILL = "#"
BAR_EMPTY = " "
UNKNOWN = "?"


def filled_segments(complete: float, bar_size: int) -> int:
    """Number of filled bar cells for ``complete``, clamped to [0, bar_size]."""
    return min(bar_size, max(0, int(round(complete * bar_size))))


def format_bar(complete: float, bar_size: int) -> str:
    filled = filled_segments(complete, bar_size)
    return "[" + BAR_FILL * filled + BAR_EMPTY * (bar_size - filled) + "]"


def format_eta(eta: Optional[float]) -> str:
    if eta is None:
        return UNKNOWN
    return f"{eta:.1f}"


def render_line(state: "ProgressState", elapsed: float) -> str:
    """Build the visible progress line (no carriage return, no padding).

    Layout::

        <prefix>{ 42.0%} [############                  ] ( 1.3s < 1.8s) <suffix>

    With an unknown total the percentage block shows the running count and
    the ETA is rendered as ``?``.
    """
    if state.total is None:
        head = f"{{{state.done} it}} "
    else:
        head = f"{{{100 * state.complete:4.1f}%}} "
    return (
        f"{state.prefix}{head}{format_bar(state.complete, state.bar_size)}"
        f" ({elapsed:4.1f}s < {format_eta(state.eta(elapsed))}s) {state.suffix}"
    )


class LineRenderer:
    """Writes progress lines over each other on a text stream."""

    def draw(self, state: "ProgressState") -> str:
        line = render_line(state, state.chronometer.peek())
        # Pad so a shorter line fully covers the previous, longer one
        state.term_cols = max(state.term_cols, len(line))
        padded = line.ljust(state.term_cols)
        state.sink.write("\r" + padded)
        state.sink.flush()
        return padded
