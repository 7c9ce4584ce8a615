"""Command-line interface for Decorum."""
