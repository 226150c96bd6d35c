"""Pytest configuration for CpGDiscord tests."""

import logging
import sys
from pathlib import Path

import pysam
import pytest

# Add src directory to Python path
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

REFERENCES = (("chr1", 100000), ("chr2", 100000))


@pytest.fixture(autouse=True)
def reset_logging_after_test():
    """Reset cpgdiscord logger state after each test.

    setup_logging() sets propagate=False, which breaks caplog in later tests.
    """
    yield
    app_logger = logging.getLogger("cpgdiscord")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True


def xm_string(length, calls=None):
    """Bismark XM string of ``length`` with {query offset: 'Z' | 'z'} calls."""
    xm = ["."] * length
    for offset, call in (calls or {}).items():
        xm[offset] = call
    return "".join(xm)


def build_segment(header, read):
    """Create a pysam AlignedSegment from a read description dict.

    Keys: name, tid (0), start, length, calls ({offset: 'Z'|'z'}), mapq (40),
    reverse (False), xg ("CT"; None to omit), xm (overrides length/calls),
    cigar (defaults to length M), unmapped (False).
    """
    xm = read.get("xm") or xm_string(read["length"], read.get("calls"))
    seg = pysam.AlignedSegment(header)
    seg.query_name = read.get("name", f"read_{read.get('start', 0)}")
    seg.query_sequence = "A" * len(xm)
    seg.query_qualities = pysam.qualitystring_to_array("I" * len(xm))

    if read.get("unmapped"):
        seg.flag = 4
        seg.reference_id = -1
        seg.reference_start = -1
        seg.mapping_quality = 0
    else:
        seg.flag = 16 if read.get("reverse") else 0
        seg.reference_id = read.get("tid", 0)
        seg.reference_start = read["start"]
        seg.mapping_quality = read.get("mapq", 40)
        seg.cigartuples = read.get("cigar") or [(0, len(xm))]

    if not read.get("no_xm"):
        seg.set_tag("XM", xm)
    xg = read.get("xg", "CT")
    if xg is not None:
        seg.set_tag("XG", xg)
    return seg


@pytest.fixture
def make_bam(tmp_path):
    """Factory writing an unsorted Bismark-style BAM from read dicts."""

    def _make(reads, name="reads.bam", references=REFERENCES):
        path = tmp_path / name
        header = {
            "HD": {"VN": "1.6", "SO": "unsorted"},
            "SQ": [{"SN": sn, "LN": ln} for sn, ln in references],
        }
        with pysam.AlignmentFile(str(path), "wb", header=header) as out:
            for read in reads:
                out.write(build_segment(out.header, read))
        return path

    return _make


@pytest.fixture
def three_read_bam(make_bam):
    """Three 81 bp reads over the CpG at chr1:1000; two methylated, one not."""
    reads = [
        {"name": "a", "start": 960, "length": 81, "calls": {40: "Z"}},
        {"name": "b", "start": 960, "length": 81, "calls": {40: "Z"}},
        {"name": "c", "start": 960, "length": 81, "calls": {40: "z"}},
    ]
    return make_bam(reads)
