"""
Window Encoder - compact per-read methylation pattern around one CpG site

A read is encoded against an anchor CpG as a fixed-size uint8 array of
2 * half_length + 1 positions. Index ``half_length`` is the anchor itself and
every other index is the offset from the anchor. Each position holds a
three-bit code built by OR-ing:

- COVERED    (0b001): the read covers the position
- CPG        (0b010): the read carries a CpG call at the position
- METHYLATED (0b100): that call is methylated

so 0b000 is uncovered, 0b001 covered non-CpG, 0b011 unmethylated CpG and
0b111 methylated CpG.
"""

from __future__ import annotations

import numpy as np

from cpgdiscord.constants import COVERED, CPG, MAX_READ_HALF_LENGTH, METHYLATED
from cpgdiscord.core.types import ReadRecord
from cpgdiscord.exceptions import WindowBoundsError


def window_size(half_length: int = MAX_READ_HALF_LENGTH) -> int:
    return 2 * half_length + 1


def relative_index(pos: int, anchor_pos: int, half_length: int = MAX_READ_HALF_LENGTH) -> int:
    """Window index of genomic position ``pos`` relative to ``anchor_pos``."""
    return half_length + (pos - anchor_pos)


def fits_window(read: ReadRecord, anchor_pos: int, half_length: int = MAX_READ_HALF_LENGTH) -> bool:
    """Whether every covered base and every call of ``read`` maps inside the window."""
    size = window_size(half_length)
    lo = relative_index(read.start, anchor_pos, half_length)
    hi = relative_index(read.end, anchor_pos, half_length)
    if lo < 0 or hi >= size:
        return False
    for call in read.cpgs:
        idx = relative_index(call.pos, anchor_pos, half_length)
        if idx < 0 or idx >= size:
            return False
    return True


def encode_window(
    read: ReadRecord, anchor_pos: int, half_length: int = MAX_READ_HALF_LENGTH
) -> np.ndarray:
    """Encode ``read`` against the CpG at ``anchor_pos``.

    Args:
        read: Read whose span contains the anchor
        anchor_pos: Genomic position of the anchor CpG
        half_length: Maximum distance from the anchor that can be encoded

    Returns:
        uint8 array of length ``2 * half_length + 1``

    Raises:
        WindowBoundsError: If the read does not fit the window (see fits_window)
    """
    if not fits_window(read, anchor_pos, half_length):
        raise WindowBoundsError(
            f"Read span {read.start}-{read.end} does not fit the "
            f"{window_size(half_length)} bp window around {anchor_pos}"
        )

    window = np.zeros(window_size(half_length), dtype=np.uint8)

    start = relative_index(read.start, anchor_pos, half_length)
    end = relative_index(read.end, anchor_pos, half_length)
    window[start : end + 1] |= COVERED

    for call in read.cpgs:
        idx = relative_index(call.pos, anchor_pos, half_length)
        window[idx] |= CPG
        if call.methylated:
            window[idx] |= METHYLATED

    return window
