"""Configuration utilities for quotekit.

This module centralizes the environment variables that control the default
:class:`~quotekit.quoter.Quoter` used by the command-line interface.
"""

import os
from collections.abc import Mapping

from quotekit.quoter import (
    DEFAULT_ESCAPE_CHAR,
    DEFAULT_LEFT_QUOTE,
    DEFAULT_RIGHT_QUOTE,
    DEFAULT_USE_ESCAPE,
    Quoter,
)

LEFT_QUOTE_ENV = "QUOTEKIT_LEFT_QUOTE"  # pragma: no mutate
RIGHT_QUOTE_ENV = "QUOTEKIT_RIGHT_QUOTE"  # pragma: no mutate
ESCAPE_CHAR_ENV = "QUOTEKIT_ESCAPE_CHAR"  # pragma: no mutate
USE_ESCAPE_ENV = "QUOTEKIT_USE_ESCAPE"  # pragma: no mutate
ENV_VARS = (LEFT_QUOTE_ENV, RIGHT_QUOTE_ENV, ESCAPE_CHAR_ENV, USE_ESCAPE_ENV)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class InvalidSettingError(Exception):
    """Raised when a quotekit environment variable holds an invalid value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")
        self.name = name
        self.value = value
        self.reason = reason


def _get_char(environ: Mapping[str, str], name: str, default: str) -> str:
    if not (value := environ.get(name)):
        return default
    if len(value) != 1:
        raise InvalidSettingError(name, value, "expected a single character")
    return value


def _get_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    if not (value := environ.get(name)):
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise InvalidSettingError(name, value, "expected a boolean (true/false)")


def get_default_quoter(environ: Mapping[str, str] | None = None) -> Quoter:
    """Build the default quoter from the environment.

    Reads `QUOTEKIT_LEFT_QUOTE`, `QUOTEKIT_RIGHT_QUOTE`, `QUOTEKIT_ESCAPE_CHAR`
    and `QUOTEKIT_USE_ESCAPE`; unset or empty variables fall back to the
    `Quoter` defaults.

    Args:
        environ: Mapping to read from. Defaults to `os.environ`; override in
            tests to avoid touching the process environment.

    Returns:
        A `Quoter` reflecting the configured settings.

    Raises:
        InvalidSettingError: If a variable holds an invalid value.
    """
    if environ is None:
        environ = os.environ
    return Quoter(
        left_quote=_get_char(environ, LEFT_QUOTE_ENV, DEFAULT_LEFT_QUOTE),
        right_quote=_get_char(environ, RIGHT_QUOTE_ENV, DEFAULT_RIGHT_QUOTE),
        escape_char=_get_char(environ, ESCAPE_CHAR_ENV, DEFAULT_ESCAPE_CHAR),
        use_escape=_get_flag(environ, USE_ESCAPE_ENV, DEFAULT_USE_ESCAPE),
    )


def get_overrides(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the quotekit variables set to a non-empty value, in `ENV_VARS` order."""
    if environ is None:
        environ = os.environ
    return {name: environ[name] for name in ENV_VARS if environ.get(name)}
