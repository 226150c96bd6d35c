"""Shared Click options for CpGDiscord CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

import click

F = TypeVar("F", bound=Callable[..., None])


def input_option(func: F) -> F:
    """Input BAM option.

    Existence is checked when the run starts so the error names the path.
    """
    return click.option(
        "-i",
        "--input",
        "input_file",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Input Bismark BAM file",
    )(func)


def output_option(func: F) -> F:
    """Output table option."""
    return click.option(
        "-o",
        "--output",
        "output_file",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Output TSV (chrom, start, end, fdrp)",
    )(func)


def config_option(func: F) -> F:
    """Configuration file option."""
    return click.option(
        "-c",
        "--config",
        type=click.Path(exists=True, path_type=Path),
        help="Configuration file (YAML)",
    )(func)


def cpg_set_option(func: F) -> F:
    """Target CpG list option."""
    return click.option(
        "-s",
        "--cpg-set",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Tab-separated list of target CpGs (chrom, position) [default: all CpGs]",
    )(func)


def min_qual_option(func: F) -> F:
    return click.option(
        "-q",
        "--min-qual",
        type=click.IntRange(0, 255),
        default=None,
        help="Minimum mapping quality [default: 10]",
    )(func)


def max_depth_option(func: F) -> F:
    return click.option(
        "-d",
        "--max-depth",
        type=click.IntRange(min=1),
        default=None,
        help="Maximum reads sampled per CpG [default: 40]",
    )(func)


def min_overlap_option(func: F) -> F:
    return click.option(
        "-l",
        "--min-overlap",
        type=click.IntRange(min=0),
        default=None,
        help="Minimum overlap (bp) for a read pair to be compared [default: 35]",
    )(func)


def seed_option(func: F) -> F:
    return click.option(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reservoir sampling",
    )(func)


def no_progress_option(func: F) -> F:
    return click.option(
        "--no-progress",
        is_flag=True,
        help="Disable progress bars",
    )(func)


def verbose_option(func: F) -> F:
    """Verbosity option (unified: use -v/--verbose everywhere)."""
    return click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v for INFO, -vv for DEBUG)",
    )(func)


def log_file_option(func: F) -> F:
    return click.option(
        "--log-file",
        type=click.Path(path_type=Path, dir_okay=False),
        help="Path for log file output",
    )(func)


def fdrp_options(func: F) -> F:
    """Apply all options of the ``fdrp`` command.

    Usage:
        @click.command()
        @fdrp_options
        def fdrp(input_file, output_file, ...):
            pass
    """
    # Apply options in reverse order (Click applies them bottom-up)
    decorators = [
        input_option,
        output_option,
        config_option,
        cpg_set_option,
        min_qual_option,
        max_depth_option,
        min_overlap_option,
        seed_option,
        no_progress_option,
        verbose_option,
        log_file_option,
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func
