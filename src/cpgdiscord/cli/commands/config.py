"""The ``init-config`` command."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cpgdiscord.cli.exit_codes import EXIT_ERROR


@click.command(name="init-config")
@click.option(
    "-o",
    "--output-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("cpgdiscord.yaml"),
    show_default=True,
    help="Where to write the YAML template",
)
@click.option("--stdout", is_flag=True, help="Print the template instead of writing it")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing file")
def init_config(output_file: Path, stdout: bool, force: bool) -> None:
    """Write a YAML template with the default FDRP parameters.

    Fill in input_file and output_file, then run
    ``cpgdiscord fdrp -c <file>``.
    """
    from cpgdiscord.resources import get_default_config

    template = get_default_config()
    if stdout:
        click.echo(template, nl=False)
        return

    if output_file.exists() and not force:
        click.echo(f"Error: {output_file} already exists (use --force to overwrite)", err=True)
        sys.exit(EXIT_ERROR)

    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(template, encoding="utf-8")
    click.echo(f"Wrote FDRP config template: {output_file}")
    click.echo(f"Run with: cpgdiscord fdrp -c {output_file}")
