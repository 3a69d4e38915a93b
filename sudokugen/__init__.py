"""
Sudoku Generator
Complete 9x9 solutions and playable puzzles built by randomized backtracking.
"""
from sudokugen.core import (
    Cell,
    RemovalPolicy,
    SearchStateError,
    generate_complete_grid,
    generate_puzzle,
    generate_puzzle_with_metadata,
)

__version__ = "1.0.0"

__all__ = [
    'Cell',
    'RemovalPolicy',
    'SearchStateError',
    'generate_complete_grid',
    'generate_puzzle',
    'generate_puzzle_with_metadata',
]
