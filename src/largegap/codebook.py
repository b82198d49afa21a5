"""
Per-width registry of codes

A CodeBook holds one code per width. Widths start out with their
canonical code; building a Theorem 1 code installs it at its width, so
later lookups and statistics for that width report the new code while
every other width keeps its own.
"""

from typing import Dict, List, Optional
import logging

from .builder import CodeBuilder, default_builder
from .code import Code, check_width
from .errors import InvalidWidth
from .gaps import Statistics, compute_gaps
from .theorem import ShapeParameters

logger = logging.getLogger(__name__)


class CodeBook:
    """Codes indexed by width, canonical unless replaced"""

    def __init__(self, builder: Optional[CodeBuilder] = None):
        self.builder = builder or default_builder()
        self._codes: Dict[int, Code] = {}
        self._origins: Dict[int, Optional[ShapeParameters]] = {}

    @property
    def max_width(self) -> int:
        return self.builder.max_width

    def get_code(self, width: int) -> Code:
        """Code currently installed at a width"""
        width = check_width(width, self.max_width)
        if width not in self._codes:
            self._codes[width] = self.builder.build_canonical(width)
            self._origins[width] = None
        return self._codes[width]

    def origin(self, width: int) -> Optional[ShapeParameters]:
        """Parameters of an installed Theorem 1 code, None for canonical codes"""
        self.get_code(width)
        return self._origins[width]

    def create_code_from_theorem1(self, n: int, m: int, r: int, s: int) -> Code:
        """
        Build a Theorem 1 code from this book's n- and m-bit codes

        The result replaces the code stored at width n + m.
        """
        params = ShapeParameters(n, m, r, s)
        code = self.builder.build_from_parameters(
            n, m, r, s,
            inner=self.get_code(params.n),
            outer=self.get_code(params.m),
        )
        self._codes[code.width] = code
        self._origins[code.width] = params
        logger.info("Installed Theorem 1 code %s at width %d", params.as_tuple(), code.width)
        return code

    def reset(self, width: Optional[int] = None):
        """Drop installed codes so the width (or every width) is canonical again"""
        if width is None:
            self._codes.clear()
            self._origins.clear()
        else:
            width = check_width(width, self.max_width)
            self._codes.pop(width, None)
            self._origins.pop(width, None)

    def statistics(self, width: int) -> Statistics:
        """Gap statistics of the code installed at a width"""
        return compute_gaps(self.get_code(width), width)

    def all_statistics(self, min_width: int, max_width: int) -> List[Statistics]:
        check_width(min_width, self.max_width)
        check_width(max_width, self.max_width)
        if min_width > max_width:
            raise InvalidWidth(f"Empty width range [{min_width}, {max_width}]")
        return [self.statistics(w) for w in range(min_width, max_width + 1)]
