"""
Cell removal: turns a complete solution into a puzzle.

Every cell gets one coin flip. A cell is blanked when the flip selects it and
its column is not protected (columns 0, 3 and 6 under the default policy).
Protected cells still consume their flip, so the number of draws per grid is
always 81.
"""
import logging
from typing import List, Optional, Sequence

from sudokugen.core.random_source import RandomSource
from sudokugen.core.sudoku_grid import SudokuGrid
from sudokugen.core.types import GRID_SIZE, RemovalPolicy

logger = logging.getLogger(__name__)


def _removal_mask(source: RandomSource, policy: RemovalPolicy) -> List[List[bool]]:
    mask = []
    for row in range(GRID_SIZE):
        flags = []
        for col in range(GRID_SIZE):
            hit = source.random() < policy.probability
            flags.append(hit and not policy.is_protected(col))
        mask.append(flags)
    return mask


def remove_cells(values: Sequence[Sequence[int]], source: RandomSource,
                 policy: Optional[RemovalPolicy] = None) -> List[List[int]]:
    """
    Build a puzzle from a complete solution matrix.

    Args:
        values: 9x9 solution (left untouched)
        source: Randomness provider for the coin flips
        policy: Removal settings, defaults to RemovalPolicy()

    Returns:
        New 9x9 matrix with removed cells set to 0
    """
    policy = policy or RemovalPolicy()
    mask = _removal_mask(source, policy)
    puzzle = [
        [0 if mask[r][c] else values[r][c] for c in range(GRID_SIZE)]
        for r in range(GRID_SIZE)
    ]
    logger.debug("Removed %d of %d cells", sum(map(sum, mask)), GRID_SIZE * GRID_SIZE)
    return puzzle


def remove_cell_values(grid: SudokuGrid, source: RandomSource,
                       policy: Optional[RemovalPolicy] = None) -> int:
    """
    Blank cells of a filled SudokuGrid in place.

    Only ``chosen_value`` changes; rejected values and candidates keep their
    solve-time state.

    Returns:
        Number of cells blanked
    """
    policy = policy or RemovalPolicy()
    mask = _removal_mask(source, policy)
    removed = 0
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            if mask[row][col]:
                grid.set_value(row, col, 0)
                removed += 1
    logger.debug("Removed %d of %d cells", removed, GRID_SIZE * GRID_SIZE)
    return removed
