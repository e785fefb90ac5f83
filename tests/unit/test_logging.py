"""Unit tests for quotekit.logging."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from quotekit import config
from quotekit.logging import (
    LibraryPrefixFilter,
    LogSettings,
    configure_logging,
    console_handler,
    flight_recorder_handler,
    log_startup,
)

# pylint: disable=magic-value-comparison

STARTUP_LOGGER = "quotekit.tests.startup"


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("quotekit", ""),
        ("quotekit.config", ""),
        ("click_extra.commands", "[click_extra]"),
        ("quotekitten", "[quotekitten]"),
    ],
)
def test_prefix_filter(name, prefix):
    """Only quotekit's own loggers go unprefixed; records are never dropped."""
    record = _record(name)
    assert LibraryPrefixFilter().filter(record) is True
    assert record.prefix == prefix  # type: ignore[attr-defined]


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 9, logging.CRITICAL),
        (1, 1, logging.WARNING),
    ],
)
def test_level_for_verbosity(verbose, quiet, expected):
    assert LogSettings.level_for(verbose, quiet) == expected


def test_console_handler_levels():
    """The requested level is used unless debug mode forces DEBUG."""
    handler = console_handler(LogSettings(level=logging.INFO))
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert any(isinstance(f, LibraryPrefixFilter) for f in handler.filters)

    debug_handler = console_handler(LogSettings(level=logging.ERROR, debug=True))
    assert debug_handler.level == logging.DEBUG
    assert not debug_handler.filters


def test_flight_recorder_buffers_until_warning(tmp_path):
    """Records stay in memory until a WARNING flushes them to the file."""
    path = tmp_path / "flight.log"
    handler = flight_recorder_handler(path, capacity=10)
    assert isinstance(handler, MemoryHandler)
    target = handler.target
    assert isinstance(target, logging.FileHandler)

    logger = logging.getLogger("quotekit.tests.flight")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.debug("buffered")
        assert not path.exists()
        logger.warning("boom")
        text = path.read_text(encoding="utf-8")
        assert "buffered" in text
        assert "boom" in text
    finally:
        logger.removeHandler(handler)
        handler.close()
        target.close()


@pytest.mark.usefixtures("restore_root_logging")
def test_configure_logging_installs_handlers(tmp_path):
    """The flight recorder is added only when enabled; logger levels are applied."""
    log_path = tmp_path / "nested" / "latest.log"
    settings = LogSettings(
        log_path=log_path,
        flight_recorder=True,
        logger_levels={"quotekit.tests.noisy": logging.ERROR},
    )
    handlers = configure_logging(settings)
    try:
        assert [type(h) for h in handlers] == [RichHandler, MemoryHandler]
        assert logging.getLogger().handlers == handlers
        assert log_path.parent.is_dir()
        assert logging.getLogger("quotekit.tests.noisy").level == logging.ERROR
    finally:
        for handler in handlers:
            handler.close()
        logging.getLogger("quotekit.tests.noisy").setLevel(logging.NOTSET)

    handlers = configure_logging(LogSettings(log_path=log_path))
    assert [type(h) for h in handlers] == [RichHandler]


def _startup_messages(caplog, settings, environ) -> list[str]:
    logger = logging.getLogger(STARTUP_LOGGER)
    with caplog.at_level(logging.DEBUG, logger=STARTUP_LOGGER):
        log_startup(logger, settings, app_version="9.9.9", environ=environ)
    return [r.getMessage() for r in caplog.records if r.name == STARTUP_LOGGER]


def test_log_startup_reports_quoter_and_environment(caplog):
    """The startup record names the QUOTEKIT_* variables and the quoter they give."""
    environ = {
        config.LEFT_QUOTE_ENV: "<",
        config.RIGHT_QUOTE_ENV: ">",
        "UNRELATED": "x",
    }
    settings = LogSettings(flight_recorder=True, capacity=5)
    messages = _startup_messages(caplog, settings, environ)

    assert messages[0] == "quotekit 9.9.9 (console=WARNING, flight recorder=on)"
    assert (
        "Environment: QUOTEKIT_LEFT_QUOTE='<', QUOTEKIT_RIGHT_QUOTE='>'" in messages
    )
    assert (
        "Default quoter: Quoter(left_quote='<', right_quote='>', "
        "escape_char='\\\\', use_escape=True)"
    ) in messages
    assert "Flight recorder: path=None, capacity=5, flush on exit=False" in messages
    assert "Logger levels: <none>" in messages


def test_log_startup_with_clean_environment(caplog):
    settings = LogSettings(logger_levels={"click_extra": logging.WARNING})
    messages = _startup_messages(caplog, settings, {})

    assert messages[0] == "quotekit 9.9.9 (console=WARNING, flight recorder=off)"
    assert "Environment: no QUOTEKIT_* variables set" in messages
    assert not any(m.startswith("Flight recorder:") for m in messages)
    assert "Logger levels: {'click_extra': 'WARNING'}" in messages


def test_log_startup_tolerates_invalid_settings(caplog):
    """A bad setting is logged, not raised; the command itself reports it."""
    messages = _startup_messages(
        caplog, LogSettings(), {config.ESCAPE_CHAR_ENV: "ab"}
    )
    assert any(
        m.startswith("Default quoter unavailable: Invalid value 'ab'") for m in messages
    )
