"""
Sudoku Generator - Render Package
matplotlib drawing of solutions and puzzles.
"""
from .grid_render import SudokuGridRenderer

__all__ = ['SudokuGridRenderer']
