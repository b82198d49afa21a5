"""
Error types raised by the code builders and the gap analyzer
"""


class LGGCError(ValueError):
    """Base class for all large-gap Gray code errors"""


class InvalidWidth(LGGCError):
    """Requested bit width is outside the supported range"""


class InvalidParameters(LGGCError):
    """Shape parameters lie outside the Theorem 1 domain"""


class DegenerateCode(LGGCError):
    """A sequence fails the Gray-code or all-bits-flip invariant"""
