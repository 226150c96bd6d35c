"""
Reservoir Accumulator - bounded uniform sample of encoded reads per CpG site

Each CpG site owns one SiteReads. Reads arrive one at a time in a single
pass with no advance knowledge of the total, and at most ``max_depth``
windows are retained (Algorithm R). The random source is an explicit
Sampler shared by all accumulators of a run so tests can script or seed it.
"""

from __future__ import annotations

from typing import Optional, Protocol

import numpy as np

from cpgdiscord.constants import WINDOW_SIZE
from cpgdiscord.core.discordance import compute_fdrp
from cpgdiscord.core.types import CpGSite


class Sampler(Protocol):
    """Source of uniform random integers."""

    def randint(self, low: int, high: int) -> int:
        """Return a uniform integer in ``[low, high]`` (both inclusive)."""
        ...


class RandomSampler:
    """Sampler backed by a numpy Generator."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def randint(self, low: int, high: int) -> int:
        return int(self._rng.integers(low, high, endpoint=True))


class SiteReads:
    """Reservoir of encoded windows anchored on one CpG site."""

    def __init__(
        self,
        site: CpGSite,
        max_depth: int,
        sampler: Sampler,
        window_size: int = WINDOW_SIZE,
    ) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        self.site = site
        self.max_depth = max_depth
        self.sampler = sampler
        self.window_size = window_size
        self._windows: list[np.ndarray] = []
        self._num_total_reads = 0

    @property
    def num_total_reads(self) -> int:
        """Number of reads ever offered to this site."""
        return self._num_total_reads

    def get_num_reads(self) -> int:
        """Number of windows currently retained, ``min(n, max_depth)``."""
        return len(self._windows)

    def add_read(self, window: np.ndarray) -> None:
        """Offer one encoded window to the reservoir."""
        self._num_total_reads += 1
        n = self._num_total_reads

        if n <= self.max_depth:
            self._windows.append(window)
            return

        # Keep the new window with probability max_depth / n
        j = self.sampler.randint(1, n)
        if j <= self.max_depth:
            self._windows[j - 1] = window

    def windows(self) -> np.ndarray:
        """Retained windows as an ``(m, window_size)`` uint8 matrix."""
        if not self._windows:
            return np.zeros((0, self.window_size), dtype=np.uint8)
        return np.vstack(self._windows)

    def compute_fdrp(self, min_overlap: int) -> float:
        """FDRP over the retained windows; NaN when fewer than two are held."""
        return compute_fdrp(self.windows(), min_overlap)

    def __repr__(self) -> str:
        return (
            f"SiteReads(site={self.site}, retained={self.get_num_reads()}, "
            f"total={self.num_total_reads}, max_depth={self.max_depth})"
        )
