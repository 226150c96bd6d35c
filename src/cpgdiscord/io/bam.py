"""
Bismark BAM reader - turn aligned segments into ReadRecords

Bismark stores per-base methylation calls in the XM tag, one character per
query base. Only CpG-context calls are used:

- ``Z``: methylated C in CpG context
- ``z``: unmethylated C in CpG context

Calls are placed on the reference through the aligned (match) pairs. Reads
aligned to the bottom strand (XG:Z:GA; reverse flag when XG is absent) call
the C on the reverse strand, i.e. the G of the CpG, so the forward-strand
site is one base to the left.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

import pysam

from cpgdiscord.constants import (
    BOTTOM_STRAND_CONVERSION,
    GENOME_CONVERSION_TAG,
    METHYLATED_CPG_CALL,
    METHYLATION_TAG,
    UNMETHYLATED_CPG_CALL,
)
from cpgdiscord.core.types import CpGCall, ReadRecord
from cpgdiscord.exceptions import FileFormatError, InputFileError
from cpgdiscord.utils.logging import get_logger


def open_alignment(path: Union[str, Path]) -> pysam.AlignmentFile:
    """Open a SAM/BAM/CRAM file for sequential reading.

    Raises:
        InputFileError: If the file does not exist
        FileFormatError: If the file cannot be parsed as an alignment file
    """
    path = Path(path)
    if not path.exists():
        raise InputFileError(f"Input file not found: {path}", path=path)
    try:
        return pysam.AlignmentFile(str(path), "r", check_sq=False)
    except (OSError, ValueError) as e:
        raise FileFormatError(f"Cannot open alignment file {path}: {e}")


def chromosome_names(alignment: pysam.AlignmentFile) -> list[str]:
    """Reference names indexed by tid."""
    return list(alignment.references)


def is_bottom_strand(segment: pysam.AlignedSegment) -> bool:
    if segment.has_tag(GENOME_CONVERSION_TAG):
        return segment.get_tag(GENOME_CONVERSION_TAG) == BOTTOM_STRAND_CONVERSION
    return segment.is_reverse


def record_from_segment(segment: pysam.AlignedSegment) -> ReadRecord:
    """Build a ReadRecord from a mapped Bismark alignment.

    Raises:
        FileFormatError: If the segment has no XM tag or the tag is shorter
            than the aligned query
    """
    if not segment.has_tag(METHYLATION_TAG):
        raise FileFormatError(
            f"Read {segment.query_name} has no {METHYLATION_TAG} tag; "
            "is this a Bismark alignment?"
        )
    xm = segment.get_tag(METHYLATION_TAG)
    shift = 1 if is_bottom_strand(segment) else 0

    calls: dict[int, bool] = {}
    for qpos, rpos in segment.get_aligned_pairs(matches_only=True):
        if qpos >= len(xm):
            raise FileFormatError(
                f"Read {segment.query_name}: {METHYLATION_TAG} tag has {len(xm)} "
                f"calls but the alignment reaches query position {qpos}"
            )
        call = xm[qpos]
        if call == METHYLATED_CPG_CALL or call == UNMETHYLATED_CPG_CALL:
            calls[rpos - shift] = call == METHYLATED_CPG_CALL

    return ReadRecord(
        tid=segment.reference_id,
        mapq=segment.mapping_quality,
        start=segment.reference_start,
        end=segment.reference_end - 1,
        cpgs=tuple(CpGCall(pos, methylated) for pos, methylated in sorted(calls.items())),
    )


def iter_reads(
    alignment: pysam.AlignmentFile, logger: Optional[logging.Logger] = None
) -> Iterator[ReadRecord]:
    """Yield ReadRecords in file order, skipping unmapped segments."""
    logger = logger or get_logger("bam")
    unmapped = 0
    try:
        for segment in alignment.fetch(until_eof=True):
            if segment.is_unmapped:
                unmapped += 1
                continue
            yield record_from_segment(segment)
    except (OSError, ValueError) as e:
        raise FileFormatError(f"Error reading alignment file {alignment.filename!r}: {e}")

    if unmapped:
        logger.info(f"Skipped {unmapped:,} unmapped reads")
