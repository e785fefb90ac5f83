"""Entrypoints (inbound adapters) for quotekit.

Expose the codec to the outside world. Parse and validate inputs, call the
library functions, and present results.
"""
