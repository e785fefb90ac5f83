"""CLI helpers for quotekit.

The NAME=LEVEL logger option parser and message emitters that write to
stderr with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, warn

__all__ = ["error", "parse_log_level", "warn"]
