"""
Sudoku Generator - Core Package
Grid state, backtracking search, cell removal and the public entry points.
"""
from .types import Cell, Exhausted, Placed, RemovalPolicy, SearchStateError, SearchStats, ValidationError
from .random_source import RandomSource, SystemRandomSource, LowestCandidateSource
from .sudoku_grid import SudokuGrid, validate_values
from .remover import remove_cells, remove_cell_values
from .generator import (
    build_solution_grid,
    generate_complete_grid,
    generate_puzzle,
    generate_puzzle_with_metadata,
)

__all__ = [
    'Cell', 'Exhausted', 'Placed', 'RemovalPolicy', 'SearchStateError', 'SearchStats', 'ValidationError',
    'RandomSource', 'SystemRandomSource', 'LowestCandidateSource',
    'SudokuGrid', 'validate_values',
    'remove_cells', 'remove_cell_values',
    'build_solution_grid', 'generate_complete_grid', 'generate_puzzle', 'generate_puzzle_with_metadata',
]
