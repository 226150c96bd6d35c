"""Installation validation command."""

from __future__ import annotations

import sys

import click

from cpgdiscord import __version__
from cpgdiscord.cli.exit_codes import EXIT_ERROR


@click.command()
@click.option("--full", is_flag=True, help="Also import CpGDiscord's own modules")
def validate(full: bool) -> None:
    """Validate CpGDiscord installation and dependencies."""
    from cpgdiscord.utils.validators import validate_installation

    click.echo("Validating CpGDiscord installation...")

    issues = validate_installation(full_check=full)
    if not issues:
        click.echo("✓ All checks passed!")
        click.echo(f"  CpGDiscord version: {__version__}")
    else:
        click.echo("✗ Issues found:")
        for issue in issues:
            click.echo(f"  - {issue}")
        sys.exit(EXIT_ERROR)
