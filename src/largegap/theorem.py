"""
Theorem 1 construction of Goddyn and Gvozdjak

L. Goddyn, P. Gvozdjak, "Binary Gray codes with long bit runs",
Electronic Journal of Combinatorics 10 (2003), #R27.

An n-bit inner code S and an m-bit outer code T are merged into an
(n+m)-bit code. With G = 2^min(n, m), the steps of the new code are
split into blocks of G; r steps of every block advance along S and s
steps advance along T (on bits n..n+m-1). Read as a walk on the torus
Z_{2^n} x Z_{2^m} the pattern sweeps one diagonal class per step, so
for odd r and s with r + s = G it visits every (inner, outer) word pair
exactly once.

Spreading the r inner steps evenly over each block stretches every
inner gap by about G/r and every outer gap by about G/s.
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import InvalidParameters


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


@dataclass(frozen=True)
class ShapeParameters:
    """
    Theorem 1 shape parameters

    n: width of the inner code
    m: width of the outer code
    r: inner steps per block of 2^min(n, m) steps
    s: outer steps per block
    """
    n: int
    m: int
    r: int
    s: int

    def __post_init__(self):
        for name in ('n', 'm', 'r', 's'):
            value = getattr(self, name)
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                raise InvalidParameters(f"{name} must be an integer, got {value!r}")
            object.__setattr__(self, name, int(value))

        if self.n < 1 or self.m < 1:
            raise InvalidParameters(f"Code widths must be positive, got n={self.n}, m={self.m}")
        if self.r < 1 or self.s < 1:
            raise InvalidParameters(f"r and s must be positive, got r={self.r}, s={self.s}")
        if self.r % 2 == 0 or self.s % 2 == 0:
            raise InvalidParameters(f"r and s must be odd, got r={self.r}, s={self.s}")
        if self.r + self.s != self.block:
            raise InvalidParameters(
                f"r + s must equal 2^min(n, m) = {self.block}, got {self.r + self.s}"
            )

    @property
    def width(self) -> int:
        return self.n + self.m

    @property
    def block(self) -> int:
        """Steps per block, G = 2^min(n, m)"""
        return 1 << min(self.n, self.m)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.n, self.m, self.r, self.s)

    def step_pattern(self) -> np.ndarray:
        """Boolean mask of one block: True where the step advances the inner code"""
        k = np.arange(self.block, dtype=np.int64)
        return ((k + 1) * self.r // self.block - k * self.r // self.block) == 1

    def min_gap_bound(self, inner_min_gap: int, outer_min_gap: int) -> int:
        """
        Guaranteed minimum gap of the merged code

        Two flips of an inner bit that are d inner steps apart sit at
        positions p < q with d + 1 inner steps in [p, q]. Any window of
        L steps holds at most floor(L r / G) + 1 inner steps, hence
        q - p >= ceil(d G / r) - 1. Outer bits behave the same with s.
        """
        inner = _ceil_div(inner_min_gap * self.block, self.r) - 1
        outer = _ceil_div(outer_min_gap * self.block, self.s) - 1
        return min(inner, outer)

    def max_gap_bound(self, inner_max_gap: int, outer_max_gap: int) -> int:
        """Guaranteed maximum gap, using at least floor(L r / G) inner steps per window"""
        inner = _ceil_div((inner_max_gap + 2) * self.block, self.r) - 2
        outer = _ceil_div((outer_max_gap + 2) * self.block, self.s) - 2
        return max(inner, outer)


def interleave(inner: np.ndarray, outer: np.ndarray, params: ShapeParameters) -> np.ndarray:
    """
    Merge two transition sequences into the Theorem 1 transition sequence

    Args:
        inner: Transition sequence of the n-bit code (length 2^n)
        outer: Transition sequence of the m-bit code (length 2^m)
        params: Shape parameters

    Returns:
        Transition sequence of length 2^(n+m); outer bits are shifted up by n
    """
    inner = np.asarray(inner, dtype=np.int64)
    outer = np.asarray(outer, dtype=np.int64)
    if inner.size != (1 << params.n) or outer.size != (1 << params.m):
        raise InvalidParameters(
            f"Component lengths {inner.size}, {outer.size} do not match "
            f"n={params.n}, m={params.m}"
        )

    length = 1 << params.width
    g = min(params.n, params.m)
    is_inner = np.tile(params.step_pattern(), length // params.block)

    merged = np.empty(length, dtype=np.int64)
    merged[is_inner] = np.tile(inner, params.r << (params.m - g))
    merged[~is_inner] = np.tile(outer, params.s << (params.n - g)) + params.n
    return merged


def candidate_parameters(width: int) -> Iterator[ShapeParameters]:
    """Every valid tuple for a width with n >= m, largest n first"""
    for m in range(1, width // 2 + 1):
        n = width - m
        block = 1 << m
        for r in range(1, block, 2):
            yield ShapeParameters(n, m, r, block - r)
