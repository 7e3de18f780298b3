"""Command-line interface for oxydendrum."""
