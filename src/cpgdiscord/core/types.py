"""Value types shared by the FDRP core and its collaborators.

Coordinates are 0-based. A CpG site is identified by the position of the C
on the forward strand; read spans are inclusive on both ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import AbstractSet


@dataclass(frozen=True, order=True)
class CpGSite:
    """A CpG site keyed by reference index and forward-strand C position.

    Ordering is (tid, pos); BAM headers list references in genome order, so
    sorting sites gives genomic coordinate order.
    """

    tid: int
    pos: int


@dataclass(frozen=True)
class CpGCall:
    """One methylation call carried by a read."""

    pos: int
    methylated: bool


@dataclass(frozen=True)
class ReadRecord:
    """An aligned read reduced to what the FDRP computation needs."""

    tid: int
    mapq: int
    start: int
    end: int
    cpgs: tuple[CpGCall, ...] = field(default_factory=tuple)

    def cpg_sites(self) -> list[CpGSite]:
        """Distinct CpG sites this read carries calls for, in position order."""
        seen: set[int] = set()
        sites = []
        for call in self.cpgs:
            if call.pos not in seen:
                seen.add(call.pos)
                sites.append(CpGSite(self.tid, call.pos))
        return sites

    def restrict_to(self, target_sites: AbstractSet[CpGSite]) -> ReadRecord:
        """Return a copy keeping only calls at target sites; span is unchanged."""
        kept = tuple(c for c in self.cpgs if CpGSite(self.tid, c.pos) in target_sites)
        return replace(self, cpgs=kept)
