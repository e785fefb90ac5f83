"""Command-line interface for quotekit."""
