"""quotekit CLI entry point.

Defines the top-level ``quotekit`` command (via Click-Extra) and registers
the codec subcommands.

Notes
- The CLI version is sourced from `quotekit.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ quotekit quote 'say "hi"'
    $ quotekit char unquote "'\\''"
    $ quotekit escape "it's 100%" -e % -s "'"
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from quotekit import __version__
from quotekit.logging import (
    DEFAULT_FLIGHT_RECORDER_CAPACITY,
    LogSettings,
    configure_logging,
    log_startup,
)

from .codec_cmds import char, escape, is_quoted, quote, unescape, unquote
from .helpers import parse_log_level

logger = logging.getLogger(__name__)


HELP = """quotekit command-line interface.

    Quote, unquote and escape text with configurable delimiters and escape
    characters. Whole strings are quoted with the quoter configured through the
    QUOTEKIT_* environment variables; single characters and plain escaping use
    explicit options.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('Examples:', fg='blue', bold=True, underline=True)}",
        "  quotekit quote 'say \"hi\"'",
        "  quotekit char quote \"'\"",
        "  quotekit unescape 'h%%ello%\\' wo%%rld%\\'' -e %",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("quotekit", appauthor=False)) / "latest.log",
    envvar="QUOTEKIT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar="QUOTEKIT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to --log-path "
        "when a WARNING/ERROR occurs, or on clean exit if --force-flush is set."
    ),
    default=False,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Force-flush the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L quotekit=DEBUG -L click_extra=WARNING)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def quotekit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """quotekit command-line interface."""
    settings = LogSettings(
        level=LogSettings.level_for(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    configure_logging(settings)
    log_startup(logger, settings, app_version=__version__)

    ctx.call_on_close(logging.shutdown)


quotekit.add_command(quote)
quotekit.add_command(unquote)
quotekit.add_command(is_quoted)
quotekit.add_command(escape)
quotekit.add_command(unescape)
quotekit.add_command(char)
