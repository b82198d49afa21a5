"""
Large-Gap Gray Codes

Deterministic construction of cyclic binary Gray codes whose bits flip
at long, well spaced intervals, and the gap statistics that certify them.
"""

__version__ = "1.0.0"
