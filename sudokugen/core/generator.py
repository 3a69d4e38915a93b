"""
Public generation entry points.

Each call builds its own SudokuGrid and, unless one is passed in, its own
random source; nothing is shared between calls.
"""
from typing import List, Optional

from sudokugen.core.random_source import RandomSource, SystemRandomSource
from sudokugen.core.remover import remove_cell_values, remove_cells
from sudokugen.core.sudoku_grid import SudokuGrid
from sudokugen.core.types import Cell, RemovalPolicy


def build_solution_grid(source: Optional[RandomSource] = None) -> SudokuGrid:
    """Run the filler and return the owning SudokuGrid (metadata included)."""
    grid = SudokuGrid()
    grid.fill(source or SystemRandomSource())
    return grid


def generate_complete_grid(source: Optional[RandomSource] = None) -> List[List[int]]:
    """
    Generate a complete 9x9 solution.

    Returns:
        9x9 matrix where every cell holds a digit 1-9
    """
    return build_solution_grid(source).values()


def generate_puzzle(source: Optional[RandomSource] = None,
                    policy: Optional[RemovalPolicy] = None) -> List[List[int]]:
    """
    Generate a puzzle: a fresh solution with some cells blanked.

    Returns:
        9x9 matrix of digits 0-9 (0 = empty)
    """
    source = source or SystemRandomSource()
    solution = build_solution_grid(source).values()
    return remove_cells(solution, source, policy)


def generate_puzzle_with_metadata(source: Optional[RandomSource] = None,
                                  policy: Optional[RemovalPolicy] = None) -> List[List[Cell]]:
    """
    Generate a puzzle and keep each cell's search record.

    ``chosen_value`` is the puzzle value (0 when removed); ``rejected_values``
    and ``candidates`` are left as the filler finished them.

    Returns:
        9x9 matrix of Cell records
    """
    source = source or SystemRandomSource()
    grid = build_solution_grid(source)
    remove_cell_values(grid, source, policy)
    return grid.cells
