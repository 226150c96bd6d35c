"""File collaborators of the FDRP core: BAM input, target CpG lists, TSV output."""

from cpgdiscord.io.bam import chromosome_names, iter_reads, open_alignment, record_from_segment
from cpgdiscord.io.cpg_set import load_target_sites
from cpgdiscord.io.writer import write_fdrp_table

__all__ = [
    "open_alignment",
    "iter_reads",
    "record_from_segment",
    "chromosome_names",
    "load_target_sites",
    "write_fdrp_table",
]
