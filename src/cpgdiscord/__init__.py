"""CpGDiscord: per-CpG read-pair methylation discordance from bisulfite BAMs."""

from cpgdiscord.__version__ import __version__
from cpgdiscord.core.driver import FdrpCalculator, compute
from cpgdiscord.core.types import CpGCall, CpGSite, ReadRecord

__all__ = ["__version__", "FdrpCalculator", "compute", "CpGCall", "CpGSite", "ReadRecord"]
