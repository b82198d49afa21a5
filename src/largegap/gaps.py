"""
Transition-gap analysis for Gray codes

For every bit position the analyzer finds the cyclic indices where the
bit flips and measures the distance between successive flips. The
smallest and largest of those distances over all bits certify the
large-gap property of a code.
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator, List, Optional
import logging

from .code import Code, check_width
from .errors import DegenerateCode, InvalidWidth

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Statistics:
    """Gap statistics of one code"""
    width: int
    length: int
    min_gap: int
    max_gap: int

    def as_row(self) -> tuple:
        return (self.width, self.length, self.min_gap, self.max_gap)


@dataclass
class GapRecord:
    """Flip positions and cyclic gaps of a single bit"""
    bit: int
    flip_indices: np.ndarray
    gaps: np.ndarray

    @property
    def flip_count(self) -> int:
        return int(self.flip_indices.size)

    @property
    def min_gap(self) -> int:
        return int(self.gaps.min())

    @property
    def max_gap(self) -> int:
        return int(self.gaps.max())


def gap_records(code: Code) -> List[GapRecord]:
    """
    Per-bit flip indices and cyclic gaps

    Index i is a flip of bit j when word i and word i-1 differ in bit j;
    index 0 is compared with the last word. The gap after the last flip
    wraps around to the first one.

    Raises:
        DegenerateCode: words repeat or adjacent words are not one bit
            apart
    """
    flips = code.validate().flips()
    n = code.length
    records = []
    for bit in range(code.width):
        indices = np.flatnonzero((flips >> flips.dtype.type(bit)) & 1)
        gaps = np.diff(np.append(indices, indices[0] + n))
        records.append(GapRecord(bit=bit, flip_indices=indices, gaps=gaps))
    return records


def compute_gaps(code: Code, width: Optional[int] = None) -> Statistics:
    """
    Reduce a code to its minimum and maximum transition gap

    Args:
        code: Code to analyse
        width: Optional width the caller expects to measure; it must
            match the code

    Returns:
        Statistics for the code
    """
    if width is not None and check_width(width) != code.width:
        raise InvalidWidth(f"Cannot measure a {code.width}-bit code at width {width}")

    records = gap_records(code)
    stats = Statistics(
        width=code.width,
        length=code.length,
        min_gap=min(r.min_gap for r in records),
        max_gap=max(r.max_gap for r in records),
    )
    logger.debug("Width %d: min gap %d, max gap %d", stats.width, stats.min_gap, stats.max_gap)
    return stats


class StatisticsSweep:
    """
    Lazy statistics over a closed range of widths

    Each iteration rebuilds the canonical codes one width at a time, so
    the sweep can be iterated any number of times.
    """

    def __init__(self, min_width: int, max_width: int, builder=None):
        if builder is None:
            from .builder import default_builder
            builder = default_builder()
        check_width(min_width, builder.max_width)
        check_width(max_width, builder.max_width)
        if min_width > max_width:
            raise InvalidWidth(f"Empty width range [{min_width}, {max_width}]")
        self.min_width = int(min_width)
        self.max_width = int(max_width)
        self.builder = builder

    def __len__(self) -> int:
        return self.max_width - self.min_width + 1

    def __iter__(self) -> Iterator[Statistics]:
        for width in range(self.min_width, self.max_width + 1):
            yield compute_gaps(self.builder.build_canonical(width))


def compute_all_statistics(min_width: int = 3, max_width: int = 20,
                           builder=None) -> StatisticsSweep:
    """Statistics of the canonical code for every width in [min_width, max_width]"""
    return StatisticsSweep(min_width, max_width, builder)
