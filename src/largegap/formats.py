"""
Text renderings of codes and statistics

All functions are pure except write_code, which only adds the file
handling around a rendering.
"""

import numpy as np
from pathlib import Path
from typing import Iterable, Optional, Union

from .code import Code
from .gaps import Statistics


def _plane_text(bits: np.ndarray) -> str:
    return (bits + ord('0')).astype(np.uint8).tobytes().decode('ascii')


def format_horizontal(code: Code) -> str:
    """One line per bit position (bit 0 first), one character per codeword"""
    planes = code.bit_planes
    return ''.join(_plane_text(row) + '\n' for row in planes)


def format_vertical(code: Code) -> str:
    """One line per codeword, one character per bit (bit 0 first)"""
    rows = code.bit_planes.T
    return ''.join(_plane_text(row) + '\n' for row in rows)


def format_c_array(code: Code, name: Optional[str] = None) -> str:
    """
    C array literal holding every codeword as a zero padded hex integer

    Example for the canonical 2-bit code:

        unsigned int lggc_2[4] = {
            0x0,
            0x1,
            0x3,
            0x2
        };
    """
    name = name or f"lggc_{code.width}"
    digits = -(-code.width // 4)
    entries = [f"\t0x{word:0{digits}x}" for word in code.words.tolist()]
    lines = [f"unsigned int {name}[{code.length}] = {{"]
    lines.append(',\n'.join(entries))
    lines.append('};')
    return '\n'.join(lines) + '\n'


FORMATS = {
    'horizontal': format_horizontal,
    'vertical': format_vertical,
    'c': format_c_array,
}


def render(code: Code, fmt: str = 'horizontal') -> str:
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format '{fmt}', choose from {sorted(FORMATS)}")
    return FORMATS[fmt](code)


def write_code(code: Code, path: Union[str, Path], fmt: str = 'vertical') -> Path:
    """
    Write a rendering of a code to a file

    Args:
        code: Code to write
        path: Destination; parent directories are created
        fmt: 'horizontal', 'vertical' or 'c'

    Returns:
        Path written
    """
    text = render(code, fmt)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        f.write(text)
    return path


def statistics_header() -> str:
    return f"{'Bits':>4}  {'Length':>9}  {'MinGap':>6}  {'MaxGap':>6}"


def format_statistics(stats: Statistics) -> str:
    return f"{stats.width:>4}  {stats.length:>9}  {stats.min_gap:>6}  {stats.max_gap:>6}"


def format_statistics_table(rows: Iterable[Statistics]) -> str:
    lines = [statistics_header()]
    lines.extend(format_statistics(s) for s in rows)
    return '\n'.join(lines) + '\n'
