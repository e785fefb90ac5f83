"""quotekit

Character-level quoting and escaping. Quote or unquote a single character
between configurable delimiters, escape or unescape special characters in a
string, and quote whole strings with a reusable `Quoter`.
"""

from quotekit.chars import is_quoted_char, quote_char, unquote_char, write_quoted_char
from quotekit.errors import ErrorKind, MalformedTokenError, NullInputError, QuoteError
from quotekit.quoter import Quoter
from quotekit.strings import escape, unescape, write_escaped, write_unescaped

__all__ = [
    "__version__",
    "ErrorKind",
    "MalformedTokenError",
    "NullInputError",
    "QuoteError",
    "Quoter",
    "escape",
    "is_quoted_char",
    "quote_char",
    "unescape",
    "unquote_char",
    "write_escaped",
    "write_quoted_char",
    "write_unescaped",
]
__version__ = "0.1.0"
