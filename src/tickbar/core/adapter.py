"""Progress adapter: wraps an iterable so traversal drives a progress line.

Example::

    bar = ProgressAdapter(OwnedHolder([1, 2, 3]), prefix="work ")
    for value in bar:
        bar << value

Every call to the cursor's ``__next__`` (the final, exhausting call
included) performs exactly one tick of the shared ``ProgressState``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional, TextIO

from tickbar.core.holders import Holder
from tickbar.core.state import ProgressState
from tickbar.exceptions import AdapterCopyError, StaleCursorError
from tickbar.utils.logging import LogTemplates, get_logger

logger = get_logger("core.adapter")


class ProgressCursor(Iterator):
    """Position in one traversal of a ``ProgressAdapter``.

    Holds a non-owning back-reference to the adapter that created it and is
    valid only until that adapter begins another traversal.
    """

    __slots__ = ("_adapter", "_generation", "_it", "_length", "index", "exhausted")

    def __init__(self, adapter: "ProgressAdapter", generation: int):
        self._adapter = adapter
        self._generation = generation
        self._it = adapter.holder.open()
        self._length = adapter.holder.length()
        self.index = -1
        self.exhausted = False

    def __iter__(self) -> "ProgressCursor":
        return self

    def check_current(self) -> None:
        if self._generation != self._adapter.generation:
            raise StaleCursorError(
                "cursor belongs to a traversal that has been restarted"
            )

    def __next__(self) -> Any:
        adapter = self._adapter
        self.check_current()
        if self.exhausted:
            raise StopIteration

        adapter.holder.check_size(self._length)
        try:
            value = next(self._it)
        except StopIteration:
            self.exhausted = True
            adapter.finish()
            raise

        adapter.state.tick()
        self.index += 1
        return value


class ProgressAdapter:
    """Iterable wrapper that renders progress while it is traversed.

    The adapter is parameterised by a holder (owned, mutable borrow or
    read-only borrow); everything else is shared. Adapters cannot be copied.
    """

    cursor_class = ProgressCursor

    def __init__(
        self,
        holder: Holder,
        prefix: str = "",
        bar_size: Optional[int] = None,
        min_update_time: Optional[float] = None,
        sink: Optional[TextIO] = None,
        state: Optional[ProgressState] = None,
    ):
        self.holder = holder
        self.state = state if state is not None else ProgressState(total=holder.total())
        self.generation = 0
        self._cursor: Optional[ProgressCursor] = None

        if prefix:
            self.state.set_prefix(prefix)
        if bar_size is not None:
            self.state.set_bar_size(bar_size)
        if min_update_time is not None:
            self.state.set_min_update_time(min_update_time)
        if sink is not None:
            self.state.set_sink(sink)

    # ------------------------------------------------------------------ #
    # Iteration protocol
    # ------------------------------------------------------------------ #
    def begin(self) -> ProgressCursor:
        """Start a traversal; any earlier cursor becomes stale."""
        total = self.holder.total()
        self.generation += 1
        self.state.begin_traversal(total)
        logger.debug(
            LogTemplates.TRAVERSAL_START.format(
                prefix=self.state.prefix, total=total, holder=self.holder.kind
            )
        )
        self._cursor = self.cursor_class(self, self.generation)
        return self._cursor

    __iter__ = begin

    def finish(self) -> None:
        """Final tick once the underlying iterable is exhausted."""
        self.state.tick(advance=False, final=True)
        logger.debug(
            LogTemplates.TRAVERSAL_DONE.format(
                prefix=self.state.prefix,
                done=self.state.done,
                elapsed=self.state.chronometer.peek(),
            )
        )

    # ------------------------------------------------------------------ #
    # Forwarders
    # ------------------------------------------------------------------ #
    def update(self) -> bool:
        """Tick once outside the iteration protocol."""
        return self.state.tick()

    def append(self, text: Any) -> "ProgressAdapter":
        self.state.append_suffix(text)
        return self

    def __lshift__(self, text: Any) -> "ProgressAdapter":
        return self.append(text)

    def manual_set(self, fraction: float) -> None:
        self.state.manual_set(fraction)

    def advance(self, amount: int) -> None:
        self.state.advance(amount)

    def assign(self, value: Any) -> None:
        """Replace the element at the current cursor position."""
        if self._cursor is None or self._cursor.index < 0:
            raise StaleCursorError("no element has been produced yet")
        self.holder.store(self._cursor.index, value)

    # ------------------------------------------------------------------ #
    # Configuration
    # ------------------------------------------------------------------ #
    def set_prefix(self, prefix: str) -> None:
        self.state.set_prefix(prefix)

    def set_bar_size(self, size: int) -> None:
        self.state.set_bar_size(size)

    def set_min_update_time(self, seconds: float) -> None:
        self.state.set_min_update_time(seconds)

    def set_ostream(self, sink: TextIO) -> None:
        self.state.set_sink(sink)

    set_output_sink = set_ostream

    @property
    def done(self) -> int:
        return self.state.done

    @property
    def total(self) -> Optional[int]:
        return self.state.total

    # ------------------------------------------------------------------ #
    # Duplication guard
    # ------------------------------------------------------------------ #
    def __copy__(self):
        raise AdapterCopyError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise AdapterCopyError(f"{type(self).__name__} cannot be copied")

    def __reduce_ex__(self, protocol):
        raise AdapterCopyError(f"{type(self).__name__} cannot be pickled")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.holder!r}, "
            f"done={self.state.done}, total={self.state.total})"
        )
