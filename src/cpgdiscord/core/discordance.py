"""
Pairwise Discordance Engine - FDRP over a set of encoded windows

For every unordered pair of retained windows:

- overlap: number of positions both windows cover (bit 0 in both)
- discordant: some position is a CpG call in both windows (bits 0 and 1 in
  both) and exactly one of the two calls is methylated (bit 2 differs)

A pair is counted discordant only when its overlap reaches ``min_overlap``.
The denominator is every unordered pair, ``m * (m - 1) / 2``, including the
pairs rejected by the overlap filter.
"""

from __future__ import annotations

import numpy as np

from cpgdiscord.constants import COVERED, CPG, METHYLATED

CALLED = COVERED | CPG


def num_overlap_bases(a: np.ndarray, b: np.ndarray) -> int:
    """Number of positions covered by both windows."""
    return int(np.count_nonzero((a & b) & COVERED))


def is_discordant(a: np.ndarray, b: np.ndarray) -> bool:
    """Whether two windows disagree on methylation at a shared CpG call."""
    shared_calls = ((a & b) & CALLED) == CALLED
    differ = ((a ^ b) & METHYLATED) != 0
    return bool(np.any(shared_calls & differ))


def overlap_matrix(windows: np.ndarray) -> np.ndarray:
    """All-pairs shared coverage length, shape ``(m, m)``."""
    covered = ((windows & COVERED) != 0).astype(np.int32)
    return covered @ covered.T


def discordance_matrix(windows: np.ndarray) -> np.ndarray:
    """All-pairs discordance flags, shape ``(m, m)``."""
    called = (windows & CALLED) == CALLED
    methylated = (called & ((windows & METHYLATED) != 0)).astype(np.int32)
    unmethylated = (called & ((windows & METHYLATED) == 0)).astype(np.int32)
    conflicts = methylated @ unmethylated.T
    return (conflicts + conflicts.T) > 0


def count_discordant_pairs(windows: np.ndarray, min_overlap: int) -> tuple[int, int]:
    """Count discordant pairs and total pairs among ``windows``.

    Returns:
        Tuple of (discordant pairs passing the overlap filter, all unordered pairs)
    """
    m = windows.shape[0]
    total_pairs = m * (m - 1) // 2
    if m < 2:
        return 0, total_pairs

    eligible = overlap_matrix(windows) >= min_overlap
    discordant = discordance_matrix(windows) & eligible
    upper = np.triu(discordant, k=1)
    return int(np.count_nonzero(upper)), total_pairs


def compute_fdrp(windows: np.ndarray, min_overlap: int) -> float:
    """Fraction of discordant read pairs.

    Sites with fewer than two windows have no pairs and score NaN.
    """
    discordant, total_pairs = count_discordant_pairs(windows, min_overlap)
    if total_pairs == 0:
        return float("nan")
    return discordant / total_pairs
