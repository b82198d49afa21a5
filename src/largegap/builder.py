"""
Deterministic builders for large-gap Gray codes

Canonical codes come from an exhaustive search for small widths and
from Theorem 1 applied to smaller canonical codes above that. The
Theorem 1 split for each width is chosen by the gap bounds the
construction guarantees. Up to SEARCH_WIDTH_LIMIT a budgeted search
still replaces the Theorem 1 code when it finds a larger minimum gap.
"""

import numpy as np
from typing import Dict, Optional, Tuple
import logging

from .code import Code, MAX_CONTAINER_WIDTH, check_width
from .errors import InvalidParameters, InvalidWidth
from .gaps import Statistics, compute_gaps
from .search import search_beyond, search_transitions
from .theorem import ShapeParameters, candidate_parameters, interleave

logger = logging.getLogger(__name__)

DEFAULT_MAX_WIDTH = 24
DEFAULT_SEARCH_MAX_WIDTH = 5
# Unbounded searches past this width take too long to run
SEARCH_WIDTH_LIMIT = 6
# Nodes per target when trying to beat a Theorem 1 code by search
SEARCH_NODE_BUDGET = 100_000


class CodeBuilder:
    """Builds canonical and Theorem 1 codes"""

    def __init__(self, max_width: int = DEFAULT_MAX_WIDTH,
                 search_max_width: int = DEFAULT_SEARCH_MAX_WIDTH):
        """
        Initialize builder

        Args:
            max_width: Largest width the builder accepts
            search_max_width: Widths up to this one are found by exhaustive search
        """
        if not 1 <= max_width <= MAX_CONTAINER_WIDTH:
            raise InvalidWidth(f"max_width must lie in [1, {MAX_CONTAINER_WIDTH}], got {max_width}")
        if not 1 <= search_max_width <= SEARCH_WIDTH_LIMIT:
            raise InvalidWidth(
                f"search_max_width must lie in [1, {SEARCH_WIDTH_LIMIT}], got {search_max_width}"
            )
        self.max_width = max_width
        self.search_max_width = search_max_width

        self._transitions: Dict[int, np.ndarray] = {}
        self._statistics: Dict[int, Statistics] = {}
        self._choices: Dict[int, ShapeParameters] = {}

    def build_canonical(self, width: int) -> Code:
        """
        Canonical code of the given width

        Raises:
            InvalidWidth: width is not an integer in [1, max_width]
        """
        width = check_width(width, self.max_width)
        return Code.from_transitions(self._canonical_transitions(width), width)

    def build_from_parameters(self, n: int, m: int, r: int, s: int,
                              inner: Optional[Code] = None,
                              outer: Optional[Code] = None) -> Code:
        """
        Theorem 1 code for shape parameters (n, m, r, s)

        Args:
            n, m: Widths of the inner and outer code; the result has width n + m
            r, s: Odd step counts with r + s = 2^min(n, m)
            inner: n-bit component (defaults to the canonical code)
            outer: m-bit component (defaults to the canonical code)

        Raises:
            InvalidParameters: tuple outside the Theorem 1 domain, or
                component widths that do not match n and m
        """
        params = ShapeParameters(n, m, r, s)
        if params.width > self.max_width:
            raise InvalidParameters(
                f"n + m = {params.width} exceeds the maximum width {self.max_width}"
            )
        inner_t = self._component_transitions(inner, params.n, 'inner')
        outer_t = self._component_transitions(outer, params.m, 'outer')

        code = Code.from_transitions(interleave(inner_t, outer_t, params), params.width)
        return code.validate()

    def canonical_statistics(self, width: int) -> Statistics:
        """Gap statistics of the canonical code, cached"""
        width = check_width(width, self.max_width)
        if width not in self._statistics:
            self._statistics[width] = compute_gaps(self.build_canonical(width))
        return self._statistics[width]

    def canonical_parameters(self, width: int) -> Optional[ShapeParameters]:
        """Theorem 1 tuple behind the canonical code, or None for searched codes"""
        width = check_width(width, self.max_width)
        if width <= self.search_max_width:
            return None
        self._canonical_transitions(width)
        return self._choices[width]

    def _component_transitions(self, code: Optional[Code], width: int, role: str) -> np.ndarray:
        if code is None:
            if width > self.max_width:
                raise InvalidParameters(f"{role} width {width} exceeds {self.max_width}")
            return self._canonical_transitions(width)
        if code.width != width:
            raise InvalidParameters(f"{role} code has width {code.width}, expected {width}")
        return code.validate().transitions

    def _canonical_transitions(self, width: int) -> np.ndarray:
        if width in self._transitions:
            return self._transitions[width]

        if width <= self.search_max_width:
            logger.debug("Searching base code of width %d", width)
            transitions = np.array(search_transitions(width), dtype=np.int64)
        else:
            params = self._choose_parameters(width)
            transitions = interleave(
                self._canonical_transitions(params.n),
                self._canonical_transitions(params.m),
                params,
            )
            if width <= SEARCH_WIDTH_LIMIT:
                min_gap = compute_gaps(Code.from_transitions(transitions, width)).min_gap
                searched = search_beyond(width, min_gap, SEARCH_NODE_BUDGET)
                if searched is not None:
                    transitions = np.array(searched, dtype=np.int64)
                    params = None
            if params is None:
                logger.info("Width %d from budgeted search", width)
            else:
                logger.info("Width %d from Theorem 1 with (n, m, r, s) = %s",
                            width, params.as_tuple())
            self._choices[width] = params

        Code.from_transitions(transitions, width).validate()
        transitions.flags.writeable = False
        self._transitions[width] = transitions
        return transitions

    def _choose_parameters(self, width: int) -> ShapeParameters:
        best: Optional[Tuple[int, int, int]] = None
        chosen = None
        for params in candidate_parameters(width):
            inner = self.canonical_statistics(params.n)
            outer = self.canonical_statistics(params.m)
            key = (
                params.min_gap_bound(inner.min_gap, outer.min_gap),
                -params.max_gap_bound(inner.max_gap, outer.max_gap),
                params.n,
            )
            if best is None or key > best:
                best, chosen = key, params
        logger.debug("Width %d: guaranteed min gap %d with %s", width, best[0], chosen.as_tuple())
        return chosen


_default_builder: Optional[CodeBuilder] = None


def default_builder() -> CodeBuilder:
    """Shared builder with the default limits"""
    global _default_builder
    if _default_builder is None:
        _default_builder = CodeBuilder()
    return _default_builder


def build_canonical(width: int) -> Code:
    return default_builder().build_canonical(width)


def build_from_parameters(n: int, m: int, r: int, s: int,
                          inner: Optional[Code] = None,
                          outer: Optional[Code] = None) -> Code:
    return default_builder().build_from_parameters(n, m, r, s, inner, outer)
