"""FDRP core: window encoding, reservoir sampling and pairwise discordance."""

from cpgdiscord.core.discordance import compute_fdrp, count_discordant_pairs
from cpgdiscord.core.driver import FdrpCalculator, FdrpStats, compute
from cpgdiscord.core.reservoir import RandomSampler, Sampler, SiteReads
from cpgdiscord.core.types import CpGCall, CpGSite, ReadRecord
from cpgdiscord.core.window import encode_window, fits_window

__all__ = [
    "CpGCall",
    "CpGSite",
    "ReadRecord",
    "encode_window",
    "fits_window",
    "Sampler",
    "RandomSampler",
    "SiteReads",
    "compute_fdrp",
    "count_discordant_pairs",
    "FdrpCalculator",
    "FdrpStats",
    "compute",
]
