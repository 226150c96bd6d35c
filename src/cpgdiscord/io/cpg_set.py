"""Target CpG list loading.

The list is tab-separated and BED-like: chromosome, 0-based position of the
C of the CpG, then any further columns (ignored). Lines starting with '#'
are comments.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import pandas as pd

from cpgdiscord.core.types import CpGSite
from cpgdiscord.exceptions import FileFormatError, InputFileError
from cpgdiscord.utils.logging import LogTemplates, get_logger


def load_target_sites(
    path: Union[str, Path],
    references: Sequence[str],
    logger: Optional[logging.Logger] = None,
) -> set[CpGSite]:
    """Load target CpG sites, resolving chromosome names to reference indices.

    Args:
        path: Tab-separated file with chromosome and position columns
        references: Reference names indexed by tid (from the BAM header)
        logger: Optional logger

    Returns:
        Set of CpGSite; rows on chromosomes absent from ``references`` are dropped
    """
    logger = logger or get_logger("cpg_set")
    path = Path(path)
    if not path.exists():
        raise InputFileError(f"CpG set file not found: {path}", path=path)

    try:
        df = pd.read_csv(
            path,
            sep="\t",
            header=None,
            comment="#",
            usecols=[0, 1],
            dtype={0: str},
        )
    except pd.errors.EmptyDataError:
        logger.warning(f"CpG set file is empty: {path}")
        return set()
    except (ValueError, pd.errors.ParserError) as e:
        raise FileFormatError(f"Malformed CpG set file {path}: {e}")

    df.columns = ["chrom", "pos"]
    positions = pd.to_numeric(df["pos"], errors="coerce")
    if positions.isna().any():
        bad = df.loc[positions.isna(), "pos"].iloc[0]
        raise FileFormatError(f"Malformed CpG set file {path}: invalid position {bad!r}")
    fractional = positions % 1 != 0
    if fractional.any():
        bad = df.loc[fractional, "pos"].iloc[0]
        raise FileFormatError(
            f"Malformed CpG set file {path}: position {bad!r} is not an integer"
        )

    tids = {name: tid for tid, name in enumerate(references)}
    df["tid"] = df["chrom"].map(tids)
    unknown = df["tid"].isna()
    if unknown.any():
        missing = sorted(df.loc[unknown, "chrom"].unique())
        logger.warning(
            f"Skipping {int(unknown.sum()):,} target CpGs on chromosomes not in the "
            f"alignment header: {', '.join(missing)}"
        )

    known = ~unknown
    sites = {
        CpGSite(int(tid), int(pos))
        for tid, pos in zip(df.loc[known, "tid"], positions[known])
    }
    logger.info(LogTemplates.FILE_LOADED.format(count=len(sites), path=path))
    return sites
