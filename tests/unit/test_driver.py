"""Tests for the aggregation driver."""

from pathlib import Path
import math
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cpgdiscord.core.driver import FdrpCalculator, FdrpStats, compute
from cpgdiscord.core.reservoir import RandomSampler
from cpgdiscord.core.types import CpGCall, CpGSite, ReadRecord


def _read(start, end, calls, tid=0, mapq=40):
    return ReadRecord(
        tid=tid,
        mapq=mapq,
        start=start,
        end=end,
        cpgs=tuple(CpGCall(pos, meth) for pos, meth in calls),
    )


class TestCompute:
    """End-to-end behaviour of compute()."""

    def test_three_reads_one_site(self):
        reads = [
            _read(960, 1040, [(1000, True)]),
            _read(960, 1040, [(1000, True)]),
            _read(960, 1040, [(1000, False)]),
        ]
        result = compute(reads, min_qual=10, max_depth=40, min_overlap=35)

        assert list(result) == [CpGSite(0, 1000)]
        assert round(result[CpGSite(0, 1000)], 3) == 0.667

    def test_low_quality_reads_are_ignored(self):
        reads = [
            _read(960, 1040, [(1000, True)]),
            _read(960, 1040, [(1000, True)]),
            _read(960, 1040, [(1000, False)], mapq=5),
        ]
        result = compute(reads, min_qual=10, max_depth=40, min_overlap=35)
        assert result[CpGSite(0, 1000)] == 0.0

    def test_single_read_site_maps_to_nan(self):
        result = compute([_read(990, 1010, [(1000, True)])], min_overlap=0)
        assert CpGSite(0, 1000) in result
        assert math.isnan(result[CpGSite(0, 1000)])

    def test_results_are_in_site_order(self):
        reads = [
            _read(490, 520, [(500, True), (510, False)], tid=1),
            _read(990, 1010, [(1000, True)], tid=0),
            _read(90, 110, [(100, False)], tid=0),
        ]
        result = compute(reads, min_overlap=0)
        assert list(result) == [
            CpGSite(0, 100),
            CpGSite(0, 1000),
            CpGSite(1, 500),
            CpGSite(1, 510),
        ]

    def test_read_routes_to_every_site_it_carries(self):
        reads = [
            _read(980, 1030, [(1000, True), (1020, True)]),
            _read(980, 1030, [(1000, True), (1020, False)]),
        ]
        result = compute(reads, min_overlap=10)
        # Both anchors see the same pair, which disagrees at 1020
        assert result == {CpGSite(0, 1000): 1.0, CpGSite(0, 1020): 1.0}


class TestRestrictedMode:
    """Target-set restriction drops excluded calls before routing."""

    READS = [
        _read(980, 1030, [(1000, True), (1010, True)]),
        _read(980, 1030, [(1000, True), (1010, False)]),
    ]

    def test_full_mode_scores_both_sites(self):
        result = compute(self.READS, min_overlap=10)
        assert result == {CpGSite(0, 1000): 1.0, CpGSite(0, 1010): 1.0}

    def test_excluded_call_never_registers(self):
        result = compute(self.READS, min_overlap=10, target_sites={CpGSite(0, 1000)})
        assert result == {CpGSite(0, 1000): 0.0}

    def test_target_on_other_chromosome_does_not_match(self):
        result = compute(self.READS, min_overlap=10, target_sites={CpGSite(1, 1000)})
        assert result == {}


class TestFdrpCalculator:
    """Counters, progress reporting and edge cases."""

    def test_stats(self):
        calculator = FdrpCalculator(min_qual=20, min_overlap=0)
        calculator.run(
            [
                _read(990, 1010, [(1000, True)]),
                _read(990, 1010, [(1000, False)], mapq=3),
                _read(990, 1010, []),
            ]
        )
        stats = calculator.stats
        assert stats.total_reads == 3
        assert stats.accepted_reads == 2
        assert stats.low_quality_reads == 1
        assert stats.sites == 1
        assert stats.accepted_percentage == pytest.approx(66.667, rel=1e-3)

    def test_read_outside_window_is_skipped(self):
        calculator = FdrpCalculator(min_overlap=0)
        result = calculator.run([_read(800, 1000, [(1000, True)])])
        assert result == {}
        assert calculator.stats.out_of_window_reads == 1
        assert calculator.stats.accepted_reads == 1

    def test_progress_sink_called_every_interval(self):
        calls = []
        calculator = FdrpCalculator(
            min_qual=10,
            progress=lambda total, accepted: calls.append((total, accepted)),
            progress_interval=2,
        )
        reads = [_read(990, 1010, [(1000, True)], mapq=40 if i % 2 else 0) for i in range(5)]
        calculator.run(reads)
        assert calls == [(2, 1), (4, 2)]

    def test_seeded_runs_are_reproducible(self):
        reads = [
            _read(960 + i, 1040, [(1000, i % 3 == 0), (1030, i % 2 == 0)]) for i in range(30)
        ]
        first = compute(reads, max_depth=5, min_overlap=20, sampler=RandomSampler(7))
        second = compute(reads, max_depth=5, min_overlap=20, sampler=RandomSampler(7))
        assert first == second

    def test_invalid_parameters(self):
        with pytest.raises(ValueError):
            FdrpCalculator(max_depth=0)
        with pytest.raises(ValueError):
            FdrpCalculator(progress_interval=0)

    def test_stats_percentage_without_reads(self):
        assert FdrpStats().accepted_percentage == 0.0
