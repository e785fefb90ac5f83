"""Escaping and unescaping of whole strings.

``escape`` prefixes every occurrence of the escape character, and of any extra
special character, with the escape character. ``unescape`` reverses it: an
escape character is dropped and the character following it is copied
literally. A lone escape character at the end of the input is dropped.

Both operations are total; ``None`` maps to ``None``.
"""

from collections.abc import Iterator
from enum import Enum
from typing import TextIO

from quotekit.utils import require_char


class _State(Enum):
    NORMAL = "normal"
    AFTER_ESCAPE = "after_escape"


def iter_escaped(text: str, escape_char: str, specials: tuple[str, ...]) -> Iterator[str]:
    """Yield the fragments of *text* with the escape targets escaped."""
    require_char("escape_char", escape_char)
    targets = {escape_char}
    for special in specials:
        targets.add(require_char("special", special))
    for ch in text:
        if ch in targets:
            yield escape_char
        yield ch


def iter_unescaped(
    text: str, escape_char: str, keep_trailing_escape: bool = False
) -> Iterator[str]:
    """Yield the fragments of *text* with escape sequences resolved.

    A trailing lone escape character is dropped unless *keep_trailing_escape*
    is set, in which case it is emitted literally.
    """
    require_char("escape_char", escape_char)
    state = _State.NORMAL
    for ch in text:
        if state is _State.AFTER_ESCAPE:
            yield ch
            state = _State.NORMAL
        elif ch == escape_char:
            state = _State.AFTER_ESCAPE
        else:
            yield ch
    if state is _State.AFTER_ESCAPE and keep_trailing_escape:
        yield escape_char


def escape(text: str | None, escape_char: str, *specials: str) -> str | None:
    """Escape the escape character and the given special characters.

    Args:
        text: The string to escape; may be ``None``.
        escape_char: The escape character.
        *specials: Additional characters to escape. Duplicates are ignored.

    Returns:
        The escaped string, or ``None`` if *text* is ``None``.

    Example:
        >>> escape("it's 100%", "%", "'")
        "it%'s 100%%"
    """
    if text is None:
        return None
    return "".join(iter_escaped(text, escape_char, specials))


def write_escaped(out: TextIO, text: str | None, escape_char: str, *specials: str) -> None:
    """Escape *text* like :func:`escape` and append the result to *out*.

    Nothing is written when *text* is ``None``.
    """
    if text is None:
        return
    for fragment in iter_escaped(text, escape_char, specials):
        out.write(fragment)


def unescape(text: str | None, escape_char: str) -> str | None:
    """Remove escape characters from *text*.

    Args:
        text: The string to unescape; may be ``None``.
        escape_char: The escape character.

    Returns:
        The unescaped string, or ``None`` if *text* is ``None``.

    Example:
        >>> unescape("h%%ello%' wo%%rld%'%", "%")
        "h%ello' wo%rld'"
    """
    if text is None:
        return None
    return "".join(iter_unescaped(text, escape_char))


def write_unescaped(out: TextIO, text: str | None, escape_char: str) -> None:
    """Unescape *text* like :func:`unescape` and append the result to *out*."""
    if text is None:
        return
    for fragment in iter_unescaped(text, escape_char):
        out.write(fragment)
