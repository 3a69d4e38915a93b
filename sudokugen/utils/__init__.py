"""
Sudoku Generator - Utilities Package
Block and coordinate helper functions.
"""
from .blocks import block_range, block_origins, index_to_coordinate, coordinate_to_string, string_to_coordinate

__all__ = ['block_range', 'block_origins', 'index_to_coordinate', 'coordinate_to_string', 'string_to_coordinate']
