"""
Aggregation Driver - route a read stream into per-site reservoirs and score them

Reads are consumed in one sequential pass. Each accepted read is encoded
once per CpG site it carries a call for and offered to that site's
reservoir; reservoirs are created on first use. After the stream ends every
site is scored in site order.

Two modes share the same path:

- full mode: no target set, every call routes the read to its site
- restricted mode: calls outside ``target_sites`` are dropped before routing,
  so only target sites are scored and excluded calls never mark a window
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Callable, Iterable, Optional

from cpgdiscord.constants import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MIN_OVERLAP,
    DEFAULT_MIN_QUAL,
    MAX_READ_HALF_LENGTH,
    PROGRESS_INTERVAL,
)
from cpgdiscord.core.reservoir import RandomSampler, Sampler, SiteReads
from cpgdiscord.core.types import CpGSite, ReadRecord
from cpgdiscord.core.window import encode_window, fits_window, window_size
from cpgdiscord.utils.logging import get_logger

# Called with (total reads seen, reads passing the quality filter)
ProgressSink = Callable[[int, int], None]


@dataclass
class FdrpStats:
    """Counters collected while aggregating reads."""

    total_reads: int = 0
    accepted_reads: int = 0
    low_quality_reads: int = 0
    out_of_window_reads: int = 0
    sites: int = 0

    @property
    def accepted_percentage(self) -> float:
        if self.total_reads == 0:
            return 0.0
        return (self.accepted_reads / self.total_reads) * 100


class FdrpCalculator:
    """Accumulate reads per CpG site and compute FDRP scores."""

    def __init__(
        self,
        min_qual: int = DEFAULT_MIN_QUAL,
        max_depth: int = DEFAULT_MAX_DEPTH,
        min_overlap: int = DEFAULT_MIN_OVERLAP,
        target_sites: Optional[AbstractSet[CpGSite]] = None,
        sampler: Optional[Sampler] = None,
        progress: Optional[ProgressSink] = None,
        progress_interval: int = PROGRESS_INTERVAL,
        half_length: int = MAX_READ_HALF_LENGTH,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        if progress_interval < 1:
            raise ValueError(f"progress_interval must be >= 1, got {progress_interval}")

        self.logger = logger or get_logger(self.__class__.__name__)
        self.min_qual = min_qual
        self.max_depth = max_depth
        self.min_overlap = min_overlap
        self.target_sites = target_sites
        self.sampler = sampler or RandomSampler()
        self.progress = progress
        self.progress_interval = progress_interval
        self.half_length = half_length

        self.site_reads: dict[CpGSite, SiteReads] = {}
        self.stats = FdrpStats()

    @property
    def restricted(self) -> bool:
        return self.target_sites is not None

    def _get_site(self, site: CpGSite) -> SiteReads:
        reads = self.site_reads.get(site)
        if reads is None:
            reads = SiteReads(
                site,
                self.max_depth,
                self.sampler,
                window_size=window_size(self.half_length),
            )
            self.site_reads[site] = reads
        return reads

    def add_read(self, read: ReadRecord) -> None:
        """Route one read to every CpG site it carries a call for."""
        self.stats.total_reads += 1

        if self.target_sites is not None:
            read = read.restrict_to(self.target_sites)

        if read.mapq < self.min_qual:
            self.stats.low_quality_reads += 1
        else:
            for site in read.cpg_sites():
                if not fits_window(read, site.pos, self.half_length):
                    self.stats.out_of_window_reads += 1
                    self.logger.debug(
                        f"Read {read.start}-{read.end} exceeds the window of {site}; skipped"
                    )
                    continue
                window = encode_window(read, site.pos, self.half_length)
                self._get_site(site).add_read(window)
            self.stats.accepted_reads += 1

        if self.progress is not None and self.stats.total_reads % self.progress_interval == 0:
            self.progress(self.stats.total_reads, self.stats.accepted_reads)

    def sites(self) -> list[CpGSite]:
        """Accumulated sites in genomic order."""
        return sorted(self.site_reads)

    def results(self, sites: Optional[Iterable[CpGSite]] = None) -> dict[CpGSite, float]:
        """Score every accumulated site.

        Args:
            sites: Optional iterable over ``self.sites()`` (e.g. wrapped in a
                progress bar); defaults to all sites in order

        Returns:
            Mapping site -> FDRP, in site order; sites with fewer than two
            retained reads map to NaN
        """
        if sites is None:
            sites = self.sites()

        result: dict[CpGSite, float] = {}
        for site in sites:
            result[site] = self.site_reads[site].compute_fdrp(self.min_overlap)

        self.stats.sites = len(result)
        return result

    def run(self, reads: Iterable[ReadRecord]) -> dict[CpGSite, float]:
        """Consume ``reads`` and return the scored sites."""
        for read in reads:
            self.add_read(read)

        self.logger.info(
            f"Processed {self.stats.total_reads:,} reads, "
            f"{self.stats.accepted_reads:,} passed MAPQ >= {self.min_qual} "
            f"({self.stats.accepted_percentage:.1f}%)"
        )
        if self.stats.out_of_window_reads:
            self.logger.warning(
                f"{self.stats.out_of_window_reads:,} read/site pairs exceeded the "
                f"{window_size(self.half_length)} bp window and were skipped"
            )
        return self.results()


def compute(
    reads: Iterable[ReadRecord],
    min_qual: int = DEFAULT_MIN_QUAL,
    max_depth: int = DEFAULT_MAX_DEPTH,
    min_overlap: int = DEFAULT_MIN_OVERLAP,
    target_sites: Optional[AbstractSet[CpGSite]] = None,
    sampler: Optional[Sampler] = None,
    progress: Optional[ProgressSink] = None,
) -> dict[CpGSite, float]:
    """Compute FDRP for every CpG site covered by ``reads``.

    Args:
        reads: Read records in any order
        min_qual: Reads with mapping quality below this are ignored
        max_depth: Reservoir size per site
        min_overlap: Minimum shared covered bases for a pair to count as discordant
        target_sites: Optional set of sites to restrict scoring to
        sampler: Random source for reservoir sampling (seedable)
        progress: Optional sink called every PROGRESS_INTERVAL reads

    Returns:
        Ordered mapping CpGSite -> FDRP
    """
    calculator = FdrpCalculator(
        min_qual=min_qual,
        max_depth=max_depth,
        min_overlap=min_overlap,
        target_sites=target_sites,
        sampler=sampler,
        progress=progress,
    )
    return calculator.run(reads)
