"""Command-line interface for tickbar."""

from tickbar.cli.main import cli, main

__all__ = ["cli", "main"]
