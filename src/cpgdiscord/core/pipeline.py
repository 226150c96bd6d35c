"""
FDRP pipeline - BAM in, per-CpG FDRP table out

Wires the file collaborators around the core:

1. open the alignment and resolve reference names
2. load the optional target CpG set
3. stream reads through FdrpCalculator
4. score every site and write the TSV
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from cpgdiscord.config import Config
from cpgdiscord.core.driver import FdrpCalculator, FdrpStats
from cpgdiscord.core.reservoir import RandomSampler
from cpgdiscord.core.types import CpGSite
from cpgdiscord.io.bam import chromosome_names, iter_reads, open_alignment
from cpgdiscord.io.cpg_set import load_target_sites
from cpgdiscord.io.writer import write_fdrp_table
from cpgdiscord.utils.logging import LogTemplates, get_logger
from cpgdiscord.utils.progress import ReadProgress, iter_progress


@dataclass
class PipelineResult:
    """Outcome of one FDRP run."""

    output_file: Path
    stats: FdrpStats
    scores: dict[CpGSite, float] = field(default_factory=dict)
    rows_written: int = 0
    elapsed: float = 0.0

    @property
    def degenerate_sites(self) -> int:
        return sum(1 for score in self.scores.values() if math.isnan(score))


class FdrpPipeline:
    """Run FDRP over one BAM file according to a Config."""

    def __init__(self, config: Config, logger: Optional[logging.Logger] = None) -> None:
        self.config = config
        self.logger = logger or get_logger(self.__class__.__name__)

    def run(self) -> PipelineResult:
        cfg = self.config
        cfg.validate()
        started = time.time()

        self.logger.info(f"Input: {cfg.input_file}")
        self.logger.info(
            f"Parameters: min_qual={cfg.fdrp.min_qual}, max_depth={cfg.fdrp.max_depth}, "
            f"min_overlap={cfg.fdrp.min_overlap}, seed={cfg.fdrp.seed}"
        )

        with open_alignment(cfg.input_file) as alignment:
            references = chromosome_names(alignment)

            target_sites = None
            if cfg.cpg_set is not None:
                target_sites = load_target_sites(cfg.cpg_set, references, logger=self.logger)
                self.logger.info(f"Restricting to {len(target_sites):,} target CpG sites")

            with ReadProgress(enabled=cfg.runtime.enable_progress, logger=self.logger) as progress:
                calculator = FdrpCalculator(
                    min_qual=cfg.fdrp.min_qual,
                    max_depth=cfg.fdrp.max_depth,
                    min_overlap=cfg.fdrp.min_overlap,
                    target_sites=target_sites,
                    sampler=RandomSampler(cfg.fdrp.seed),
                    progress=progress,
                    progress_interval=cfg.runtime.progress_interval,
                    logger=self.logger,
                )
                for read in iter_reads(alignment, logger=self.logger):
                    calculator.add_read(read)
                progress(calculator.stats.total_reads, calculator.stats.accepted_reads)

        stats = calculator.stats
        self.logger.info(
            LogTemplates.READ_STATS.format(
                total=stats.total_reads,
                accepted=stats.accepted_reads,
                percent=stats.accepted_percentage,
            )
        )
        if stats.out_of_window_reads:
            self.logger.warning(
                f"{stats.out_of_window_reads:,} read/site pairs exceeded the encoding "
                "window and were skipped"
            )

        sites = calculator.sites()
        scores = calculator.results(
            iter_progress(sites, total=len(sites), desc="FDRP", enabled=cfg.runtime.enable_progress)
        )

        result = PipelineResult(output_file=Path(cfg.output_file), stats=stats, scores=scores)
        self.logger.info(
            LogTemplates.SITE_STATS.format(sites=len(scores), degenerate=result.degenerate_sites)
        )

        result.rows_written = write_fdrp_table(scores, references, cfg.output_file, logger=self.logger)
        result.elapsed = time.time() - started
        return result
