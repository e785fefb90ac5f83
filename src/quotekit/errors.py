"""Error definitions for the quoting/escaping codec."""

from enum import Enum

# ============================================================================
#                               Error kinds
# ============================================================================


class ErrorKind(Enum):
    """Tag identifying the category of a codec failure.

    Kinds:
    - NULL_INPUT: a required input was ``None``.
    - MALFORMED_TOKEN: a token is not a structurally valid quoted value.
    """

    NULL_INPUT = "null_input"
    MALFORMED_TOKEN = "malformed_token"


# ============================================================================
#                               Codec errors
# ============================================================================


class QuoteError(Exception):
    """Base class for all quotekit errors."""

    kind: ErrorKind


class NullInputError(QuoteError, TypeError):
    """Raised when a decoding operation receives ``None``."""

    kind = ErrorKind.NULL_INPUT

    def __init__(self, name: str = "token") -> None:
        super().__init__(f"The {name} cannot be None.")
        self.name = name


class MalformedTokenError(QuoteError, ValueError):
    """Raised when a token is not properly quoted."""

    kind = ErrorKind.MALFORMED_TOKEN

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"Malformed quoted token {token!r}: {reason}")
        self.token = token
        self.reason = reason
