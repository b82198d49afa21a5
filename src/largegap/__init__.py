"""
Large-Gap Gray Codes

Construction of cyclic binary Gray codes in which every bit flips
rarely, and analysis of their transition gaps.
"""

from .errors import LGGCError, InvalidWidth, InvalidParameters, DegenerateCode
from .code import Code, MAX_CONTAINER_WIDTH
from .theorem import ShapeParameters, interleave, candidate_parameters
from .gaps import (
    GapRecord,
    Statistics,
    StatisticsSweep,
    gap_records,
    compute_gaps,
    compute_all_statistics,
)
from .builder import CodeBuilder, default_builder, build_canonical, build_from_parameters
from .codebook import CodeBook

__all__ = [
    'LGGCError',
    'InvalidWidth',
    'InvalidParameters',
    'DegenerateCode',
    'Code',
    'MAX_CONTAINER_WIDTH',
    'ShapeParameters',
    'interleave',
    'candidate_parameters',
    'GapRecord',
    'Statistics',
    'StatisticsSweep',
    'gap_records',
    'compute_gaps',
    'compute_all_statistics',
    'CodeBuilder',
    'default_builder',
    'build_canonical',
    'build_from_parameters',
    'CodeBook',
]
