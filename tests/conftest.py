import os
import sys
import pytest

# Add project root to sys.path (so tests can import sudokugen.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from sudokugen.core.random_source import SystemRandomSource
from sudokugen.core.types import BLOCK_SIZE, DIGITS, GRID_SIZE


def column(grid, col):
    return [grid[r][col] for r in range(GRID_SIZE)]


def block(grid, row0, col0):
    return [grid[r][c] for r in range(row0, row0 + BLOCK_SIZE) for c in range(col0, col0 + BLOCK_SIZE)]


def all_units(grid):
    """Rows, columns and blocks of a 9x9 matrix, each as a list of 9 values."""
    units = [list(row) for row in grid]
    units += [column(grid, c) for c in range(GRID_SIZE)]
    units += [block(grid, r, c) for r in range(0, GRID_SIZE, BLOCK_SIZE) for c in range(0, GRID_SIZE, BLOCK_SIZE)]
    return units


def is_permutation(unit):
    return sorted(unit) == list(DIGITS)


def has_no_duplicates(unit):
    filled = [v for v in unit if v != 0]
    return len(filled) == len(set(filled))


@pytest.fixture
def seeded_source():
    """Returns a function that builds a seeded SystemRandomSource."""
    def _make(seed=1234):
        return SystemRandomSource(seed)
    return _make
