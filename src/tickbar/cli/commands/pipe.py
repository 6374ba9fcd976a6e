"""Pass-through command: copy stdin to stdout while drawing progress."""

from __future__ import annotations

import sys
from typing import Optional

import click

from tickbar.api import tqdm
from tickbar.cli.common_options import display_options, progress_config


@click.command(name="pipe")
@click.option("-t", "--total", type=click.IntRange(min=0), default=None,
              help="Expected number of lines (shows a percentage instead of a count)")
@display_options
@click.pass_context
def pipe(
    ctx: click.Context,
    total: Optional[int],
    prefix: Optional[str],
    bar_size: Optional[int],
    min_update_time: Optional[float],
) -> None:
    """Copy stdin to stdout line by line; progress goes to stderr."""
    progress = progress_config(ctx, prefix, bar_size, min_update_time)
    stdin = click.get_text_stream("stdin")

    bar = tqdm(stdin, total=total, config=progress, file=sys.stderr)
    for line in bar:
        click.echo(line, nl=False)
    sys.stderr.write("\n")
