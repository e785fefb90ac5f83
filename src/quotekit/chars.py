"""Quoting of single characters.

A quoted character is a token of the form ``left + body + right`` where the
body is either one character other than the escape character, or the escape
character followed by one of the escape character, the left quote, or the
right quote:

    >>> quote_char("x", "\\\\", "'", "'")
    "'x'"
    >>> quote_char("'", "\\\\", "'", "'")
    "'\\\\''"
    >>> unquote_char("[\\\\]]", "\\\\", "[", "]")
    ']'

``is_quoted_char`` is a pure query and never raises; ``unquote_char`` raises
:class:`~quotekit.errors.NullInputError` or
:class:`~quotekit.errors.MalformedTokenError`.
"""

from collections.abc import Iterator
from typing import TextIO

from quotekit.errors import MalformedTokenError, NullInputError
from quotekit.utils import require_char

SHORT_TOKEN_LENGTH = 3
ESCAPED_TOKEN_LENGTH = 4


def _iter_quoted_char(
    ch: str, escape_char: str, left_quote: str, right_quote: str
) -> Iterator[str]:
    require_char("ch", ch)
    require_char("escape_char", escape_char)
    require_char("left_quote", left_quote)
    require_char("right_quote", right_quote)
    yield left_quote
    if ch in (escape_char, left_quote, right_quote):
        yield escape_char
    yield ch
    yield right_quote


def quote_char(ch: str, escape_char: str, left_quote: str, right_quote: str) -> str:
    """Quote a single character.

    Args:
        ch: The character to quote.
        escape_char: Character used to escape itself and the quotes.
        left_quote: Opening delimiter.
        right_quote: Closing delimiter.

    Returns:
        The quoted token, e.g. ``'x'`` or ``'\\''``.
    """
    return "".join(_iter_quoted_char(ch, escape_char, left_quote, right_quote))


def write_quoted_char(
    out: TextIO, ch: str, escape_char: str, left_quote: str, right_quote: str
) -> None:
    """Quote a single character and append the token to *out*.

    Args:
        out: Caller-owned text buffer receiving the token.
        ch: The character to quote.
        escape_char: Character used to escape itself and the quotes.
        left_quote: Opening delimiter.
        right_quote: Closing delimiter.
    """
    for fragment in _iter_quoted_char(ch, escape_char, left_quote, right_quote):
        out.write(fragment)


def _malformed_reason(
    token: str, escape_char: str, left_quote: str, right_quote: str
) -> str | None:
    """Return why *token* is not a quoted character, or ``None`` if it is."""
    n = len(token)
    if n < SHORT_TOKEN_LENGTH:
        return "too short to hold a quoted character"
    if n > ESCAPED_TOKEN_LENGTH:
        return "body holds more than one character"
    if token[0] != left_quote or token[-1] != right_quote:
        return "missing quote delimiters"
    if n == SHORT_TOKEN_LENGTH:
        if token[1] == escape_char:
            return "dangling escape character"
        return None
    if token[1] != escape_char:
        return "body holds more than one character"
    if token[2] not in (escape_char, left_quote, right_quote):
        return f"invalid escape sequence {token[1:3]!r}"
    return None


def is_quoted_char(
    token: str | None, escape_char: str, left_quote: str, right_quote: str
) -> bool:
    """Test whether *token* is a valid quoted character.

    Args:
        token: The candidate token; may be ``None``.
        escape_char: Character used to escape itself and the quotes.
        left_quote: Opening delimiter.
        right_quote: Closing delimiter.

    Returns:
        True if *token* decodes to exactly one character, False otherwise
        (including ``None``, empty and malformed tokens).
    """
    if token is None:
        return False
    return _malformed_reason(token, escape_char, left_quote, right_quote) is None


def unquote_char(
    token: str | None, escape_char: str, left_quote: str, right_quote: str
) -> str:
    """Decode a quoted character.

    Args:
        token: The quoted token, e.g. ``'x'`` or ``'\\\\'``.
        escape_char: Character used to escape itself and the quotes.
        left_quote: Opening delimiter.
        right_quote: Closing delimiter.

    Returns:
        The single decoded character.

    Raises:
        NullInputError: If *token* is ``None``.
        MalformedTokenError: If *token* is not a valid quoted character.
    """
    if token is None:
        raise NullInputError("token")
    reason = _malformed_reason(token, escape_char, left_quote, right_quote)
    if reason is not None:
        raise MalformedTokenError(token, reason)
    return token[1] if len(token) == SHORT_TOKEN_LENGTH else token[2]
