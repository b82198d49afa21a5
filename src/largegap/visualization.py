"""
Plots for large-gap Gray codes

- Bit planes of a code (long horizontal runs are the point)
- Histogram of transition gaps per bit
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional

from .code import Code
from .gaps import compute_gaps, gap_records


class GapVisualizer:
    """Figures for codes and their gap statistics"""

    def __init__(self, style: str = 'default'):
        """
        Args:
            style: 'publication', 'presentation', or 'default'
        """
        self.style = style
        self._setup_style()

    def _setup_style(self):
        if self.style == 'publication':
            self.fig_size = (12, 6)
            self.dpi = 150
            self.font_size = 10
        elif self.style == 'presentation':
            self.fig_size = (14, 8)
            self.dpi = 100
            self.font_size = 12
        else:
            self.fig_size = (10, 6)
            self.dpi = 100
            self.font_size = 10

    def plot_bit_planes(self, code: Code, title: Optional[str] = None,
                        save_path: Optional[str] = None) -> plt.Figure:
        """Image of the code, one row per bit and one column per codeword"""
        fig, ax = plt.subplots(figsize=self.fig_size, dpi=self.dpi)
        ax.imshow(code.bit_planes, aspect='auto', cmap='Greys', interpolation='nearest')
        ax.set_xlabel('Codeword index', fontsize=self.font_size)
        ax.set_ylabel('Bit', fontsize=self.font_size)
        ax.set_yticks(range(code.width))
        stats = compute_gaps(code)
        ax.set_title(title or f"{code.width}-bit code (min gap {stats.min_gap}, "
                              f"max gap {stats.max_gap})", fontsize=self.font_size + 2)
        fig.tight_layout()
        if save_path:
            fig.savefig(save_path, dpi=self.dpi, bbox_inches='tight')
        return fig

    def plot_gap_histogram(self, code: Code, title: Optional[str] = None,
                           save_path: Optional[str] = None) -> plt.Figure:
        """Stacked histogram of gaps, one layer per bit"""
        records = gap_records(code)
        low = min(r.min_gap for r in records)
        high = max(r.max_gap for r in records)
        bins = np.arange(low, high + 2) - 0.5

        fig, ax = plt.subplots(figsize=self.fig_size, dpi=self.dpi)
        ax.hist([r.gaps for r in records], bins=bins, stacked=True,
                label=[f"bit {r.bit}" for r in records])
        ax.set_xlabel('Gap (steps between flips)', fontsize=self.font_size)
        ax.set_ylabel('Count', fontsize=self.font_size)
        ax.set_title(title or f"Transition gaps of the {code.width}-bit code",
                     fontsize=self.font_size + 2)
        if code.width <= 12:
            ax.legend(fontsize=self.font_size - 2, ncol=2)
        ax.grid(True, alpha=0.3)
        fig.tight_layout()
        if save_path:
            fig.savefig(save_path, dpi=self.dpi, bbox_inches='tight')
        return fig
