"""Click application entrypoint for tickbar."""

from __future__ import annotations

import logging
import signal
import sys
from pathlib import Path
from types import FrameType
from typing import Optional

import click

from tickbar.__version__ import __version__
from tickbar.cli.exit_codes import (
    EXIT_SUCCESS,
    EXIT_ERROR,
    EXIT_USAGE,
    EXIT_SIGINT,
    EXIT_SIGTERM,
)
from tickbar.config import Config, load_config
from tickbar.exceptions import TickbarError
from tickbar.utils.logging import LogTemplates, get_logger, level_from_name, setup_logging

from .commands.config import init_config
from .commands.demo import demo
from .commands.pipe import pipe


SIGNAL_EXIT_CODES = {signal.SIGINT: EXIT_SIGINT, signal.SIGTERM: EXIT_SIGTERM}


class SignalInterrupt(KeyboardInterrupt):
    """KeyboardInterrupt that remembers which signal stopped the command."""

    def __init__(self, signum: int):
        self.signum = signum
        super().__init__(f"{signal.Signals(signum).name} received")


def _handle_signal(signum: int, frame: Optional[FrameType]) -> None:
    """Turn SIGINT/SIGTERM into an exception that unwinds the running loop."""
    click.echo(f"\n{signal.Signals(signum).name} received, stopping...", err=True)
    raise SignalInterrupt(signum)


def _interrupt_exit_code(exc: BaseException) -> int:
    # click reports an interrupted command as Abort chained to the interrupt
    cause = exc.__cause__ if isinstance(exc, click.Abort) else exc
    return SIGNAL_EXIT_CODES.get(getattr(cause, "signum", None), EXIT_SIGINT)


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        click.echo(f"tickbar {__version__}")
        ctx.exit()


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-V",
    "--version",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_print_version,
    help="Show the version and exit.",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file (see init-config)",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase log verbosity (-v for INFO, -vv for DEBUG)",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Also write detailed logs to this file",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    log_file: Optional[Path],
) -> None:
    """tickbar: throttled in-place progress bars for Python iterables."""
    ctx.ensure_object(dict)

    cfg = Config()
    if config is not None:
        try:
            cfg = load_config(config)
        except TickbarError as exc:
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(EXIT_ERROR)

    # CLI verbosity takes precedence over the config file
    if verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        log_level = level_from_name(cfg.runtime.log_level)

    setup_logging(level=log_level, log_file=log_file or cfg.runtime.log_file)
    logger = get_logger("cli")
    if config is not None:
        logger.info(LogTemplates.CONFIG_LOADED.format(path=config))

    ctx.obj["config"] = cfg


cli.add_command(init_config)
cli.add_command(demo)
cli.add_command(pipe)


def main(argv: list[str] | None = None) -> int:
    """Main entry point with signal handling."""
    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    logger = get_logger("cli")
    try:
        code = cli(argv, standalone_mode=False)
        # Exit codes requested through ctx.exit() come back as the return value
        return code if isinstance(code, int) else EXIT_SUCCESS
    except (KeyboardInterrupt, click.Abort) as exc:
        return _interrupt_exit_code(exc)
    except click.UsageError as exc:
        exc.show()
        return EXIT_USAGE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except TickbarError as exc:
        logger.error(f"tickbar error: {exc}")
        return EXIT_ERROR
    except Exception as exc:
        logger.exception(f"Unexpected error: {exc}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
