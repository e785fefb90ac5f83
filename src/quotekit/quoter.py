"""Configurable quoting of whole strings.

A :class:`Quoter` is an immutable value object holding the left and right
quotes, the escape character and whether escaping is enabled. Builder methods
return modified copies, so configurations can be chained and shared freely:

    >>> q = Quoter().with_quotes("<", ">").with_escape("#")
    >>> q.quote("hello <world>")
    '<hello #<world#>>'
    >>> q.unquote("<hello #<world#>>")
    'hello <world>'
"""

from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import TextIO

from quotekit.errors import MalformedTokenError, NullInputError
from quotekit.strings import iter_escaped, iter_unescaped
from quotekit.utils import require_char

DEFAULT_LEFT_QUOTE = '"'
DEFAULT_RIGHT_QUOTE = '"'
DEFAULT_ESCAPE_CHAR = "\\"
DEFAULT_USE_ESCAPE = True

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACK_QUOTE = "`"


@dataclass(frozen=True)
class Quoter:
    """Quote and unquote strings with configurable delimiters.

    Attributes:
        left_quote: Opening delimiter.
        right_quote: Closing delimiter.
        escape_char: Character escaping itself and the delimiters.
        use_escape: When False, bodies are copied verbatim in both directions.
    """

    left_quote: str = DEFAULT_LEFT_QUOTE
    right_quote: str = DEFAULT_RIGHT_QUOTE
    escape_char: str = DEFAULT_ESCAPE_CHAR
    use_escape: bool = DEFAULT_USE_ESCAPE

    def __post_init__(self) -> None:
        require_char("left_quote", self.left_quote)
        require_char("right_quote", self.right_quote)
        require_char("escape_char", self.escape_char)

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def with_quotes(self, left_quote: str, right_quote: str) -> "Quoter":
        """Return a copy using distinct left and right quotes."""
        return replace(self, left_quote=left_quote, right_quote=right_quote)

    def with_quote(self, quote: str) -> "Quoter":
        """Return a copy using *quote* on both sides."""
        return self.with_quotes(quote, quote)

    def with_single_quotes(self) -> "Quoter":
        return self.with_quote(SINGLE_QUOTE)

    def with_double_quotes(self) -> "Quoter":
        return self.with_quote(DOUBLE_QUOTE)

    def with_back_quotes(self) -> "Quoter":
        return self.with_quote(BACK_QUOTE)

    def with_escape(self, escape_char: str) -> "Quoter":
        """Return a copy using *escape_char*, with escaping enabled."""
        return replace(self, escape_char=escape_char, use_escape=True)

    def using_escape(self) -> "Quoter":
        return replace(self, use_escape=True)

    def without_escape(self) -> "Quoter":
        return replace(self, use_escape=False)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def is_quoted(self, text: str | None) -> bool:
        """Return True if *text* starts with the left and ends with the right quote.

        Never raises; ``None`` and strings shorter than two characters are not
        quoted.
        """
        if text is None or len(text) < 2:
            return False
        return text[0] == self.left_quote and text[-1] == self.right_quote

    def quote(self, text: str | None) -> str:
        """Quote *text*, escaping the delimiters and the escape character.

        Raises:
            NullInputError: If *text* is ``None``.
        """
        if text is None:
            raise NullInputError("text")
        return "".join(self._iter_quoted(text))

    def write_quoted(self, out: TextIO, text: str | None) -> None:
        """Quote *text* and append the result to *out*."""
        if text is None:
            raise NullInputError("text")
        for fragment in self._iter_quoted(text):
            out.write(fragment)

    def unquote(self, text: str | None) -> str:
        """Remove the quotes from *text* and resolve escape sequences.

        An escape character in the last body position has nothing to escape
        and is kept as is.

        Raises:
            NullInputError: If *text* is ``None``.
            MalformedTokenError: If *text* is not enclosed in the quotes.
        """
        return "".join(self._iter_unquoted(self._check_quoted(text)))

    def write_unquoted(self, out: TextIO, text: str | None) -> None:
        """Unquote *text* and append the result to *out*.

        Nothing is written when *text* is rejected.
        """
        for fragment in self._iter_unquoted(self._check_quoted(text)):
            out.write(fragment)

    def unquote_if_necessary(self, text: str | None) -> str | None:
        """Unquote *text* if it is quoted; otherwise return it unchanged."""
        if text is None:
            return None
        if self.is_quoted(text):
            return self.unquote(text)
        return text

    def write_unquoted_if_necessary(self, out: TextIO, text: str | None) -> None:
        """Append the unquoted *text* (or *text* itself) to *out*.

        Nothing is written when *text* is ``None``.
        """
        if text is None:
            return
        if self.is_quoted(text):
            self.write_unquoted(out, text)
        else:
            out.write(text)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _iter_quoted(self, text: str) -> Iterator[str]:
        yield self.left_quote
        if self.use_escape:
            yield from iter_escaped(
                text, self.escape_char, (self.left_quote, self.right_quote)
            )
        else:
            yield text
        yield self.right_quote

    def _iter_unquoted(self, text: str) -> Iterator[str]:
        body = text[1:-1]
        if self.use_escape:
            yield from iter_unescaped(body, self.escape_char, keep_trailing_escape=True)
        else:
            yield body

    def _check_quoted(self, text: str | None) -> str:
        if text is None:
            raise NullInputError("text")
        if not self.is_quoted(text):
            raise MalformedTokenError(text, "string is not properly quoted")
        return text
