# render/grid_render.py
"""
Sudoku grid renderer using matplotlib.

Draws a solution or a puzzle onto a matplotlib axis:
- one square per cell, shaded for given digits
- thin cell lines, thick block lines
- digits centred in their cells, empty (0) cells left blank
"""

import numpy as np
import matplotlib.patches as patches
from typing import Optional, Sequence

from sudokugen.core.types import BLOCK_SIZE, GRID_SIZE

GIVEN_COLOR = "#FFE4B5"
ANSWER_COLOR = "#FFFFFF"
ANSWER_TEXT_COLOR = "#1F4E9A"


class SudokuGridRenderer:
    """
    Render a 9x9 grid of digits using matplotlib.
    Row 0 is drawn at the top.
    """

    def __init__(self, cell_size: float = 1.0, padding: float = 0.25, text_weight: str = 'bold'):
        """
        Initialize the renderer.

        Args:
            cell_size: Side length of one cell in axis units
            padding: Padding around the grid in units of cell_size
            text_weight: Font weight for digits ('normal' or 'bold')
        """
        self.size = float(cell_size)
        self.pad = float(padding)
        self.tw = text_weight

    def _as_matrix(self, values: Sequence[Sequence[int]]) -> np.ndarray:
        matrix = np.asarray(values, dtype=int)
        if matrix.shape != (GRID_SIZE, GRID_SIZE):
            raise ValueError(f"Expected a {GRID_SIZE}x{GRID_SIZE} grid, got shape {matrix.shape}")
        if matrix.min() < 0 or matrix.max() > GRID_SIZE:
            raise ValueError(f"Grid values must be in range 0-{GRID_SIZE}")
        return matrix

    def _draw_cell(self, ax, row: int, col: int, facecolor: str):
        """Draw the background square of one cell."""
        ax.add_patch(patches.Rectangle(
            (col * self.size, row * self.size), self.size, self.size,
            facecolor=facecolor,
            edgecolor='none'
        ))

    def _draw_lines(self, ax):
        """Thin lines between cells, thick lines between blocks."""
        extent = GRID_SIZE * self.size
        for i in np.arange(GRID_SIZE + 1):
            lw = 2.5 if i % BLOCK_SIZE == 0 else 0.8
            pos = i * self.size
            ax.plot([0, extent], [pos, pos], color='black', linewidth=lw)
            ax.plot([pos, pos], [0, extent], color='black', linewidth=lw)

    def render_grid(self, values: Sequence[Sequence[int]], ax=None, *,
                    givens: Optional[Sequence[Sequence[int]]] = None) -> Optional[object]:
        """
        Render a grid.

        Args:
            values: 9x9 digits, 0 = empty
            ax: Optional matplotlib axis (creates new figure if None)
            givens: Optional puzzle the values were solved from; cells that are
                0 in ``givens`` are drawn as answers instead of givens

        Returns:
            Matplotlib axis object
        """
        matrix = self._as_matrix(values)
        given_mask = matrix != 0 if givens is None else self._as_matrix(givens) != 0

        if ax is None:
            import matplotlib.pyplot as plt
            fig, ax = plt.subplots(figsize=(6, 6))

        font_size = max(8, min(28, 18 * self.size))
        for (row, col), value in np.ndenumerate(matrix):
            is_given = bool(given_mask[row, col])
            self._draw_cell(ax, row, col, GIVEN_COLOR if is_given else ANSWER_COLOR)
            if value == 0:
                continue
            ax.text((col + 0.5) * self.size, (row + 0.5) * self.size, str(int(value)),
                    ha='center', va='center',
                    fontsize=font_size,
                    fontweight=self.tw if is_given else 'normal',
                    color='black' if is_given else ANSWER_TEXT_COLOR)

        self._draw_lines(ax)

        # Set up the axis
        extent = GRID_SIZE * self.size
        pad = self.pad * self.size
        ax.set_aspect('equal')
        ax.set_xlim(-pad, extent + pad)
        ax.set_ylim(extent + pad, -pad)  # Invert Y so row 0 is on top
        ax.axis('off')

        return ax
