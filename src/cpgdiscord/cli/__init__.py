"""Command-line interface for CpGDiscord."""

from cpgdiscord.cli.main import cli, main

__all__ = ["cli", "main"]
