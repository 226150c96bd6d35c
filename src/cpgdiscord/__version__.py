"""Version information for CpGDiscord."""

__version__ = "0.3.0"
__author__ = "CpGDiscord developers"
__license__ = "GPL-2.0"
__description__ = "Fraction of discordant read pairs (FDRP) from Bismark bisulfite alignments"
