"""Run execution helpers for the CLI."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from cpgdiscord.cli.exit_codes import EXIT_ERROR
from cpgdiscord.config import Config, load_config
from cpgdiscord.exceptions import ConfigurationError
from cpgdiscord.utils.logging import level_from_name, setup_logging


@dataclass
class RunOptions:
    """Container for ``fdrp`` command options; None means use config or default."""

    input_file: Optional[Path]
    output_file: Optional[Path]
    config_path: Optional[Path] = None
    cpg_set: Optional[Path] = None
    min_qual: Optional[int] = None
    max_depth: Optional[int] = None
    min_overlap: Optional[int] = None
    seed: Optional[int] = None
    no_progress: bool = False
    log_file: Optional[Path] = None
    # -v count (used to determine if config should override)
    noise: int = 0


def resolve_config(opts: RunOptions) -> Config:
    """Merge defaults, config file and CLI options.

    Priority: CLI arg (if provided) > config file > hardcoded default.
    """
    cfg = load_config(opts.config_path) if opts.config_path else Config()

    if opts.input_file is not None:
        cfg.input_file = opts.input_file
    if opts.output_file is not None:
        cfg.output_file = opts.output_file
    if opts.cpg_set is not None:
        cfg.cpg_set = opts.cpg_set

    if opts.min_qual is not None:
        cfg.fdrp.min_qual = opts.min_qual
    if opts.max_depth is not None:
        cfg.fdrp.max_depth = opts.max_depth
    if opts.min_overlap is not None:
        cfg.fdrp.min_overlap = opts.min_overlap
    if opts.seed is not None:
        cfg.fdrp.seed = opts.seed

    if opts.no_progress:
        cfg.runtime.enable_progress = False
    if opts.log_file is not None:
        cfg.runtime.log_file = opts.log_file

    return cfg


def execute_run(
    opts: RunOptions,
    logger: logging.Logger,
    ctx: Optional[click.Context] = None,
):
    """
    Execute one FDRP run with the given options.

    Args:
        opts: Run options from the command line
        logger: Logger instance for output
        ctx: Optional Click context for displaying help on error

    Returns:
        PipelineResult of the run
    """
    try:
        cfg = resolve_config(opts)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)

    # CLI -v flags take precedence over the config file log level
    if opts.noise == 0:
        setup_logging(
            level=level_from_name(cfg.runtime.log_level),
            log_file=cfg.runtime.log_file,
        )

    if not cfg.input_file or not cfg.output_file:
        click.echo("Error: Both --input and --output are required", err=True)
        click.echo("These can be provided via CLI arguments or in a config file (-c)", err=True)
        if ctx is None:
            ctx = click.get_current_context(silent=True)
        if ctx is not None:
            click.echo(ctx.get_help())
        sys.exit(EXIT_ERROR)

    # Validate configuration FIRST (fail fast on user errors like missing files)
    try:
        cfg.validate()
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)

    # Import pipeline here to keep `--help` free of pysam/pandas imports
    from cpgdiscord.core.pipeline import FdrpPipeline

    mode = f"restricted to {cfg.cpg_set}" if cfg.cpg_set else "all CpGs"
    logger.info(f"Computing FDRP for {cfg.input_file} ({mode})")

    result = FdrpPipeline(cfg, logger=logger).run()

    click.echo(
        f"Scored {result.rows_written:,} CpG sites from {result.stats.accepted_reads:,} "
        f"reads -> {result.output_file} ({result.elapsed:.1f}s)"
    )
    return result
