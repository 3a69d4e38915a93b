"""
Block and coordinate helpers for 9x9 Sudoku grids.
"""
from typing import List, Tuple

from sudokugen.core.types import BLOCK_SIZE, GRID_SIZE


def block_range(index: int) -> range:
    """
    Return the three row (or column) indices of the block containing ``index``.

    Example:
        block_range(0) -> range(0, 3)
        block_range(4) -> range(3, 6)
        block_range(8) -> range(6, 9)
    """
    if not 0 <= index < GRID_SIZE:
        raise ValueError(f"index {index} out of range [0, {GRID_SIZE})")
    start = (index // BLOCK_SIZE) * BLOCK_SIZE
    return range(start, start + BLOCK_SIZE)


def block_origins() -> List[Tuple[int, int]]:
    """Top-left coordinates of the nine blocks, in row-major order."""
    return [(r, c) for r in range(0, GRID_SIZE, BLOCK_SIZE) for c in range(0, GRID_SIZE, BLOCK_SIZE)]


def index_to_coordinate(index: int) -> Tuple[int, int]:
    """Convert a row-major fill index (0..80) to (row, col)."""
    return index // GRID_SIZE, index % GRID_SIZE


def coordinate_to_string(row: int, col: int) -> str:
    """Convert coordinate tuple to string format used in JSON."""
    return f"{row},{col}"


def string_to_coordinate(coord_str: str) -> Tuple[int, int]:
    """Convert string coordinate back to tuple."""
    row, col = coord_str.split(',')
    return int(row), int(col)
