"""Demonstration loops for each way of building a progress bar."""

from __future__ import annotations

import time
from typing import Callable, Dict, Optional

import click

from tickbar.api import tqdm, trange, ttimer
from tickbar.cli.common_options import display_options, progress_config
from tickbar.config import ProgressConfig
from tickbar.utils.logging import LogTemplates, get_logger

logger = get_logger("cli.demo")


def make_values(size: int) -> list:
    """``size`` consecutive integers starting at 1000."""
    return list(range(1000, 1000 + size))


def demo_mutable(size: int, pause: float, progress: ProgressConfig) -> list:
    """Borrow a list and double every element through the bar."""
    values = make_values(size)
    bar = tqdm(values, config=progress, prefix=progress.prefix + "tqdm from mutable borrow ")
    for value in bar:
        bar.assign(value * 2)
        time.sleep(pause)
        bar << value * 2
    return values


def demo_readonly(size: int, pause: float, progress: ProgressConfig) -> list:
    values = tuple(make_values(size))
    bar = tqdm(values, config=progress, prefix=progress.prefix + "tqdm from read-only borrow ")
    seen = []
    for value in bar:
        time.sleep(pause)
        bar << value
        seen.append(value)
    return seen


def demo_owned(size: int, pause: float, progress: ProgressConfig) -> list:
    bar = tqdm(make_values(size), owned=True, config=progress, prefix=progress.prefix + "tqdm from owned copy ")
    seen = []
    for value in bar:
        time.sleep(pause)
        bar << value
        seen.append(value)
    return seen


def demo_range(size: int, pause: float, progress: ProgressConfig) -> list:
    bar = trange(100, 100 + size, config=progress, prefix=progress.prefix + "tqdm range ")
    seen = []
    for value in bar:
        time.sleep(pause)
        bar << value
        seen.append(value)
    return seen


def demo_timer(seconds: float, progress: ProgressConfig) -> int:
    steps = 0
    for _ in ttimer(seconds, config=progress, prefix=progress.prefix + "tqdm timer "):
        time.sleep(0.03)
        steps += 1
    return steps


DEMOS: Dict[str, Callable[[int, float, ProgressConfig], object]] = {
    "mutable": demo_mutable,
    "readonly": demo_readonly,
    "owned": demo_owned,
    "range": demo_range,
}


@click.command(name="demo")
@click.option("--size", type=click.IntRange(min=0), default=5000, show_default=True,
              help="Number of elements per demo loop")
@click.option("--sleep", "sleep_us", type=click.IntRange(min=0), default=200, show_default=True,
              help="Microseconds of simulated work per element")
@click.option("--timer", "timer_seconds", type=click.FloatRange(min=0.0, min_open=True),
              default=2.0, show_default=True, help="Duration of the timer demo in seconds")
@click.option("--only", type=click.Choice(sorted([*DEMOS, "timer"])), default=None,
              help="Run a single demo")
@display_options
@click.pass_context
def demo(
    ctx: click.Context,
    size: int,
    sleep_us: int,
    timer_seconds: float,
    only: Optional[str],
    prefix: Optional[str],
    bar_size: Optional[int],
    min_update_time: Optional[float],
) -> None:
    """Run the example progress loops one after another."""
    progress = progress_config(ctx, prefix, bar_size, min_update_time)
    pause = sleep_us / 1_000_000

    names = [only] if only else ["timer", *DEMOS]
    for name in names:
        logger.info(LogTemplates.DEMO_START.format(name=name))
        if name == "timer":
            demo_timer(timer_seconds, progress)
        else:
            DEMOS[name](size, pause, progress)
        # The bar never ends its own line
        progress.resolve_sink().write("\n")
