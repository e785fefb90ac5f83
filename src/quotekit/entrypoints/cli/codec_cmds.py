"""quotekit codec commands.

Thin Click wrappers over the library:

- ``quotekit quote|unquote|is-quoted`` operate on whole strings through a
  :class:`~quotekit.quoter.Quoter` whose defaults come from the environment
  (see :mod:`quotekit.config`).
- ``quotekit escape|unescape`` apply the string-level escape codec.
- ``quotekit char quote|unquote|is-quoted`` apply the single-character codec.

Behavior
- Results are written to **stdout**; notices and errors go to **stderr**.
- ``is-quoted`` prints ``true``/``false`` and exits with status 0/1.

Failure modes
- Malformed tokens → ``ClickException`` (exit status 1).
- Invalid ``QUOTEKIT_*`` settings → error line on stderr, exit status 2.
"""

from __future__ import annotations

import logging

import click

from quotekit import chars, config, strings
from quotekit.errors import QuoteError
from quotekit.quoter import Quoter

from .helpers import error, warn

logger = logging.getLogger(__name__)

CONFIG_ERROR_EXIT_CODE = 2

DEFAULT_CHAR_ESCAPE = "\\"
DEFAULT_CHAR_QUOTE = "'"


class CharParamType(click.ParamType):
    """Click parameter type accepting exactly one character."""

    name = "char"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> str:
        if isinstance(value, str) and len(value) == 1:
            return value
        self.fail(f"{value!r} is not a single character", param, ctx)


CHAR = CharParamType()


def _resolve_quoter(
    ctx: click.Context,
    left: str | None,
    right: str | None,
    escape_char: str | None,
    no_escape: bool,
) -> Quoter:
    try:
        quoter = config.get_default_quoter()
    except config.InvalidSettingError as e:
        error(str(e))
        ctx.exit(CONFIG_ERROR_EXIT_CODE)
    if left is not None or right is not None:
        quoter = quoter.with_quotes(left or quoter.left_quote, right or quoter.right_quote)
    if escape_char is not None:
        quoter = quoter.with_escape(escape_char)
    if no_escape:
        quoter = quoter.without_escape()
    logger.debug("Using %r", quoter)
    return quoter


def _quoter_options(func):
    func = click.option(
        "--no-escape",
        "no_escape",
        is_flag=True,
        default=False,
        help="Disable escaping (overrides QUOTEKIT_USE_ESCAPE).",
    )(func)
    func = click.option(
        "--escape-char",
        "-e",
        type=CHAR,
        default=None,
        help="Escape character (default from QUOTEKIT_ESCAPE_CHAR).",
    )(func)
    func = click.option(
        "--right",
        "-r",
        type=CHAR,
        default=None,
        help="Right quote (default from QUOTEKIT_RIGHT_QUOTE).",
    )(func)
    func = click.option(
        "--left",
        "-l",
        type=CHAR,
        default=None,
        help="Left quote (default from QUOTEKIT_LEFT_QUOTE).",
    )(func)
    return func


def _char_codec_options(func):
    for name, short, default in (
        ("--right", "-r", DEFAULT_CHAR_QUOTE),
        ("--left", "-l", DEFAULT_CHAR_QUOTE),
        ("--escape-char", "-e", DEFAULT_CHAR_ESCAPE),
    ):
        func = click.option(
            name,
            short,
            type=CHAR,
            default=default,
            show_default=True,
            help=f"{name.lstrip('-').replace('-', ' ').capitalize()}.",
        )(func)
    return func


# ============================================================================
#                           Whole-string quoting
# ============================================================================


@click.command()
@click.argument("text")
@_quoter_options
@click.pass_context
def quote(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    text: str,
    left: str | None,
    right: str | None,
    escape_char: str | None,
    no_escape: bool,
) -> None:
    """Quote TEXT."""
    quoter = _resolve_quoter(ctx, left, right, escape_char, no_escape)
    click.echo(quoter.quote(text))


@click.command()
@click.argument("text")
@_quoter_options
@click.pass_context
def unquote(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    text: str,
    left: str | None,
    right: str | None,
    escape_char: str | None,
    no_escape: bool,
) -> None:
    """Unquote TEXT, resolving escape sequences."""
    quoter = _resolve_quoter(ctx, left, right, escape_char, no_escape)
    try:
        click.echo(quoter.unquote(text))
    except QuoteError as e:
        raise click.ClickException(str(e)) from e


@click.command("is-quoted")
@click.argument("text")
@_quoter_options
@click.pass_context
def is_quoted(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    text: str,
    left: str | None,
    right: str | None,
    escape_char: str | None,
    no_escape: bool,
) -> None:
    """Report whether TEXT is enclosed in the quotes (exit status 0/1)."""
    quoter = _resolve_quoter(ctx, left, right, escape_char, no_escape)
    result = quoter.is_quoted(text)
    click.echo("true" if result else "false")
    ctx.exit(0 if result else 1)


# ============================================================================
#                           String-level escaping
# ============================================================================


def _has_dangling_escape(text: str, escape_char: str) -> bool:
    trailing = len(text) - len(text.rstrip(escape_char))
    return trailing % 2 == 1


@click.command()
@click.argument("text")
@click.option(
    "--escape-char",
    "-e",
    type=CHAR,
    default=DEFAULT_CHAR_ESCAPE,
    show_default=True,
    help="Escape character.",
)
@click.option(
    "--special",
    "-s",
    "specials",
    type=CHAR,
    multiple=True,
    help="Additional character to escape. Repeatable.",
)
def escape(text: str, escape_char: str, specials: tuple[str, ...]) -> None:
    """Escape the escape character and every SPECIAL character in TEXT."""
    click.echo(strings.escape(text, escape_char, *specials))


@click.command()
@click.argument("text")
@click.option(
    "--escape-char",
    "-e",
    type=CHAR,
    default=DEFAULT_CHAR_ESCAPE,
    show_default=True,
    help="Escape character.",
)
def unescape(text: str, escape_char: str) -> None:
    """Remove escape characters from TEXT."""
    if _has_dangling_escape(text, escape_char):
        warn("Trailing escape character has nothing to escape and was dropped.")
    click.echo(strings.unescape(text, escape_char))


# ============================================================================
#                           Single-character codec
# ============================================================================


@click.group()
def char() -> None:
    """Single-character quoting commands."""


@char.command("quote")
@click.argument("ch", type=CHAR)
@_char_codec_options
def char_quote(ch: str, escape_char: str, left: str, right: str) -> None:
    """Quote the single character CH."""
    click.echo(chars.quote_char(ch, escape_char, left, right))


@char.command("unquote")
@click.argument("token")
@_char_codec_options
def char_unquote(token: str, escape_char: str, left: str, right: str) -> None:
    """Decode the quoted character TOKEN."""
    try:
        click.echo(chars.unquote_char(token, escape_char, left, right))
    except QuoteError as e:
        raise click.ClickException(str(e)) from e


@char.command("is-quoted")
@click.argument("token")
@_char_codec_options
@click.pass_context
def char_is_quoted(
    ctx: click.Context, token: str, escape_char: str, left: str, right: str
) -> None:
    """Report whether TOKEN is a valid quoted character (exit status 0/1)."""
    result = chars.is_quoted_char(token, escape_char, left, right)
    click.echo("true" if result else "false")
    ctx.exit(0 if result else 1)
