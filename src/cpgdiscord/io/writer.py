"""FDRP result table output."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence, Union

import pandas as pd

from cpgdiscord.core.types import CpGSite
from cpgdiscord.exceptions import OutputWriteError
from cpgdiscord.utils.logging import LogTemplates, get_logger

FDRP_COLUMNS = ["chrom", "start", "end", "fdrp"]


def fdrp_frame(results: Mapping[CpGSite, float], references: Sequence[str]) -> pd.DataFrame:
    """Result mapping as a table; ``end`` is ``start + 2`` (the CpG dinucleotide)."""
    rows = [
        (references[site.tid], site.pos, site.pos + 2, score)
        for site, score in results.items()
    ]
    return pd.DataFrame(rows, columns=FDRP_COLUMNS)


def write_fdrp_table(
    results: Mapping[CpGSite, float],
    references: Sequence[str],
    output: Union[str, Path],
    logger: Optional[logging.Logger] = None,
) -> int:
    """Write one tab-separated line per site: chrom, start, end, fdrp.

    Rows follow the iteration order of ``results``. Sites without a score
    (fewer than two reads) are written as ``NaN``.

    Returns:
        Number of rows written

    Raises:
        OutputWriteError: If the destination cannot be written
    """
    logger = logger or get_logger("writer")
    output = Path(output)
    df = fdrp_frame(results, references)

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, sep="\t", header=False, index=False, na_rep="NaN")
    except OSError as e:
        raise OutputWriteError(f"Cannot write output file {output}: {e}", path=output)

    logger.info(LogTemplates.FILE_CREATED.format(path=output, size=output.stat().st_size))
    return len(df)
