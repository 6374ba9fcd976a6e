"""Shared Click options for tickbar CLI commands.

Display options given on the command line override the values loaded from
the ``--config`` file.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

import click

from tickbar.config import Config, ProgressConfig

F = TypeVar("F", bound=Callable[..., None])


def prefix_option(func: F) -> F:
    """Text shown before the percentage."""
    return click.option(
        "-p",
        "--prefix",
        type=str,
        default=None,
        help="Text printed before the percentage",
    )(func)


def bar_size_option(func: F) -> F:
    """Bar width option."""
    return click.option(
        "--bar-size",
        type=click.IntRange(min=0),
        default=None,
        help="Number of bar cells (default: 30)",
    )(func)


def min_update_time_option(func: F) -> F:
    """Redraw throttle option."""
    return click.option(
        "--min-update-time",
        type=click.FloatRange(min=0.0),
        default=None,
        help="Minimum seconds between redraws (default: 0.15)",
    )(func)


def display_options(func: F) -> F:
    """All display options at once."""
    return prefix_option(bar_size_option(min_update_time_option(func)))


def progress_config(
    ctx: click.Context,
    prefix: Optional[str],
    bar_size: Optional[int],
    min_update_time: Optional[float],
) -> ProgressConfig:
    """Merge CLI display options over the loaded config's progress section."""
    cfg: Config = (ctx.obj or {}).get("config") or Config()
    progress = ProgressConfig(**vars(cfg.progress))
    if prefix is not None:
        progress.prefix = prefix
    if bar_size is not None:
        progress.bar_size = bar_size
    if min_update_time is not None:
        progress.min_update_time = min_update_time
    return progress
