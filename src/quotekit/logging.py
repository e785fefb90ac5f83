"""Logging setup for the quotekit CLI.

The CLI logs through two handlers attached to the root logger:

- a Rich console handler on stderr whose level follows ``-v``/``-q``;
- an optional "flight recorder", a ``MemoryHandler`` that keeps recent records
  at DEBUG granularity and writes them to ``--log-path`` when a WARNING or
  worse is logged (or on exit when force-flush is requested).

`LogSettings` gathers the options of the ``quotekit`` group, `configure_logging`
installs the handlers and `log_startup` records which quoter the environment
selects, so a saved log explains why a command quoted the way it did.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from quotekit import config

if TYPE_CHECKING:
    from logging import Handler, Logger

PROJECT_PREFIX = "quotekit"

DEFAULT_LEVEL = logging.WARNING
DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000

CONSOLE_FORMAT = "%(prefix)s %(message)s"
CONSOLE_DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"
FILE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"


def _is_project_logger(name: str) -> bool:
    return name == PROJECT_PREFIX or name.startswith(PROJECT_PREFIX + ".")


class LibraryPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Tag records from other packages with ``[package]`` for the console.

    Sets ``record.prefix`` to the top-level package of the logger name
    (``click_extra.commands`` gives ``[click_extra]``) and to an empty string
    for quotekit's own loggers. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_project_logger(record.name):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


@dataclass(frozen=True)
class LogSettings:  # pylint: disable=too-many-instance-attributes
    """Logging options collected from the ``quotekit`` group.

    Attributes:
        level: Console level. Ignored in debug mode, which logs everything.
        debug: Show logger names, timestamps and source paths on the console.
        color: Allow ANSI colors on the console.
        log_path: File the flight recorder writes to.
        flight_recorder: Whether the flight recorder is installed.
        capacity: Number of records the flight recorder keeps.
        force_flush: Write the flight recorder buffer on exit even without a warning.
        logger_levels: Minimum levels for individual loggers, by name.
    """

    level: int = DEFAULT_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = False
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @staticmethod
    def level_for(verbose_count: int, quiet_count: int) -> int:
        """Shift the WARNING default one level per ``-v`` or ``-q``, clamped."""
        level = DEFAULT_LEVEL - 10 * verbose_count + 10 * quiet_count
        return max(logging.DEBUG, min(logging.CRITICAL, level))

    @property
    def console_level(self) -> int:
        return logging.DEBUG if self.debug else self.level


def console_handler(settings: LogSettings) -> RichHandler:
    """Return a RichHandler writing to stderr at the configured console level."""
    console = Console(color_system="auto" if settings.color else None, stderr=True)
    handler = RichHandler(
        level=settings.console_level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter(CONSOLE_DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(LibraryPrefixFilter())
    return handler


def flight_recorder_handler(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a MemoryHandler buffering records for *path*.

    The buffer is written when a WARNING or worse arrives, when it is full, and
    on close if *flush_on_close* is set. The file is truncated on first write,
    so it only ever holds the latest run.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LogSettings) -> list[Handler]:
    """Install the quotekit handlers on the root logger.

    Replaces any handlers already on the root logger, applies the per-logger
    levels and creates the flight recorder's directory when needed.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[Handler] = [console_handler(settings)]
    if settings.flight_recorder and settings.log_path is not None:
        settings.log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            flight_recorder_handler(
                settings.log_path, settings.capacity, settings.force_flush
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: Logger,
    settings: LogSettings,
    *,
    app_version: str,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Log a summary of the run and the quoting configuration it picked up.

    One INFO line names the version and the logging setup. DEBUG lines follow
    with the Python version, the ``QUOTEKIT_*`` variables that are set, the
    default quoter they produce (or why they produce none), the flight
    recorder settings and the per-logger levels.
    """
    logger.info(
        "quotekit %s (console=%s, flight recorder=%s)",
        app_version,
        logging.getLevelName(settings.console_level),
        "on" if settings.flight_recorder else "off",
    )
    logger.debug("Python %s on %s", sys.version.split()[0], sys.platform)

    overrides = config.get_overrides(environ)
    if overrides:
        logger.debug(
            "Environment: %s",
            ", ".join(f"{name}={value!r}" for name, value in overrides.items()),
        )
    else:
        logger.debug("Environment: no QUOTEKIT_* variables set")

    try:
        logger.debug("Default quoter: %r", config.get_default_quoter(environ))
    except config.InvalidSettingError as e:
        logger.debug("Default quoter unavailable: %s", e)

    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%d, flush on exit=%s",
            settings.log_path,
            settings.capacity,
            settings.force_flush,
        )
    logger.debug(
        "Logger levels: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>",
    )
