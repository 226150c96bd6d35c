"""The ``fdrp`` command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from cpgdiscord.cli.common_options import fdrp_options
from cpgdiscord.cli.exit_codes import EXIT_ERROR, EXIT_SIGINT
from cpgdiscord.cli.pipeline import RunOptions, execute_run
from cpgdiscord.exceptions import CpGDiscordError
from cpgdiscord.utils.logging import get_logger, setup_logging


@click.command(name="fdrp")
@fdrp_options
@click.pass_context
def fdrp(
    ctx: click.Context,
    input_file: Optional[Path],
    output_file: Optional[Path],
    config: Optional[Path],
    cpg_set: Optional[Path],
    min_qual: Optional[int],
    max_depth: Optional[int],
    min_overlap: Optional[int],
    seed: Optional[int],
    no_progress: bool,
    verbose: int,
    log_file: Optional[Path],
) -> None:
    """Compute the fraction of discordant read pairs (FDRP) per CpG.

    Writes one line per CpG: chrom, start, start + 2, fdrp.
    """
    if verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    setup_logging(level=log_level, log_file=log_file)
    logger = get_logger("cli")

    try:
        opts = RunOptions(
            input_file=input_file,
            output_file=output_file,
            config_path=config,
            cpg_set=cpg_set,
            min_qual=min_qual,
            max_depth=max_depth,
            min_overlap=min_overlap,
            seed=seed,
            no_progress=no_progress,
            log_file=log_file,
            noise=verbose,
        )
        execute_run(opts, logger, ctx)

    except KeyboardInterrupt:
        logger.info("Run interrupted by user")
        sys.exit(EXIT_SIGINT)
    except CpGDiscordError as exc:
        logger.error(f"FDRP failed: {exc}")
        sys.exit(EXIT_ERROR)
