"""Fixtures for end-to-end CLI logging tests.

Registers a test-only `log-demo` command on the top-level `quotekit` group
that emits messages at every level, and provides a CliRunner running inside
an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from quotekit.entrypoints.cli.main import quotekit

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on a quotekit logger and a third-party logger."""
    logger = logging.getLogger("quotekit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any section registries it keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register `log-demo` on the `quotekit` group for the duration of a test."""
    quotekit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(quotekit, "log-demo")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside `runner.isolated_filesystem()`."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the root-logger configuration performed by the CLI group."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    third_party = logging.getLogger("some.thirdparty")
    third_party_level = third_party.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    third_party.setLevel(third_party_level)
