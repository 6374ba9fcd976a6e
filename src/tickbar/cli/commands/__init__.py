"""Subcommands of the tickbar CLI."""
