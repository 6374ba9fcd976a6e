"""Construction entry points: ``tqdm``, ``trange`` and ``ttimer``.

Which holder an iterable gets is decided here (see
``tickbar.core.holders.resolve_holder``); display settings come from the
keyword arguments, then from an optional ``ProgressConfig``, then from the
defaults.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, TextIO

from tickbar.config import ProgressConfig
from tickbar.core.adapter import ProgressAdapter
from tickbar.core.holders import OwnedHolder, resolve_holder
from tickbar.core.ranges import IntRange
from tickbar.core.state import ProgressState
from tickbar.core.timer import TimerAdapter


def _build_state(
    total: Optional[int],
    prefix: Optional[str],
    bar_size: Optional[int],
    min_update_time: Optional[float],
    file: Optional[TextIO],
    config: Optional[ProgressConfig],
) -> ProgressState:
    cfg = config or ProgressConfig()
    return ProgressState(
        total=total,
        prefix=cfg.prefix if prefix is None else prefix,
        bar_size=cfg.bar_size if bar_size is None else bar_size,
        min_update_time=cfg.min_update_time if min_update_time is None else min_update_time,
        sink=file if file is not None else cfg.resolve_sink(),
    )


def tqdm(
    iterable: Iterable[Any],
    total: Optional[int] = None,
    *,
    owned: bool = False,
    readonly: bool = False,
    prefix: Optional[str] = None,
    bar_size: Optional[int] = None,
    min_update_time: Optional[float] = None,
    file: Optional[TextIO] = None,
    config: Optional[ProgressConfig] = None,
) -> ProgressAdapter:
    """Wrap ``iterable`` in a progress adapter.

    Args:
        iterable: Sequence, collection or one-shot iterator to traverse
        total: Explicit element count; needed for iterators whose length
            cannot be hinted, overrides ``len()`` otherwise
        owned: Take a private copy instead of borrowing the caller's object
        readonly: Borrow a mutable sequence without allowing ``assign()``
        prefix: Text shown before the percentage
        bar_size: Number of bar cells (default 30)
        min_update_time: Minimum seconds between redraws (default 0.15)
        file: Output stream (default ``sys.stderr``)
        config: Defaults for the display settings above

    Returns:
        A ``ProgressAdapter``; iterate it like the wrapped iterable.
    """
    holder = resolve_holder(iterable, total=total, owned=owned, readonly=readonly)
    state = _build_state(holder.total(), prefix, bar_size, min_update_time, file, config)
    return ProgressAdapter(holder, state=state)


def trange(
    first: int,
    last: Optional[int] = None,
    step: int = 1,
    **kwargs: Any,
) -> ProgressAdapter:
    """Progress over ``IntRange(first, last, step)``; ``trange(n)`` counts 0..n-1."""
    holder = OwnedHolder(IntRange(first, last, step))
    state = _build_state(
        holder.total(),
        kwargs.pop("prefix", None),
        kwargs.pop("bar_size", None),
        kwargs.pop("min_update_time", None),
        kwargs.pop("file", None),
        kwargs.pop("config", None),
    )
    if kwargs:
        raise TypeError(f"trange() got unexpected keyword arguments: {', '.join(kwargs)}")
    return ProgressAdapter(holder, state=state)


def ttimer(
    seconds: float,
    *,
    prefix: Optional[str] = None,
    bar_size: Optional[int] = None,
    min_update_time: Optional[float] = None,
    file: Optional[TextIO] = None,
    config: Optional[ProgressConfig] = None,
) -> TimerAdapter:
    """Loop for ``seconds`` of wall time; each step yields the elapsed seconds."""
    state = _build_state(None, prefix, bar_size, min_update_time, file, config)
    return TimerAdapter(seconds, state=state)
