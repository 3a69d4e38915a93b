"""
Public API tests:
- Shape and value ranges of solutions, puzzles and metadata grids
- Sudoku rules on solutions, partial rules on puzzles
- Protected columns
- Randomization across calls
- Metadata consistency
- Timing
"""

import json
import time
import warnings

import pytest

from conftest import all_units, column, has_no_duplicates, is_permutation
from sudokugen import generate_complete_grid, generate_puzzle, generate_puzzle_with_metadata
from sudokugen.core.types import Cell, DIGITS, GRID_SIZE

PROTECTED_COLUMNS = (0, 3, 6)


def _assert_shape(grid):
    assert len(grid) == GRID_SIZE, "Grid should have 9 rows"
    for i, row in enumerate(grid):
        assert len(row) == GRID_SIZE, f"Row {i} should have 9 columns"


# =============================================================================
# COMPLETE SOLUTION
# =============================================================================

def test_solution_is_9x9_with_digits_1_to_9():
    grid = generate_complete_grid()
    _assert_shape(grid)
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            assert 1 <= value <= 9, f"Cell [{i}][{j}] should be between 1-9, got {value}"


def test_solution_passes_all_sudoku_rules():
    grid = generate_complete_grid()
    for unit in all_units(grid):
        assert is_permutation(unit), f"Unit {unit} should contain 1-9 exactly once"


def test_solutions_differ_between_calls():
    grids = {json.dumps(generate_complete_grid()) for _ in range(5)}
    assert len(grids) == 5, "All generated solutions should be unique"


# =============================================================================
# PUZZLE
# =============================================================================

def test_puzzle_is_9x9_with_digits_0_to_9():
    grid = generate_puzzle()
    _assert_shape(grid)
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            assert 0 <= value <= 9, f"Cell [{i}][{j}] should be between 0-9, got {value}"


def test_puzzle_has_no_duplicate_filled_numbers():
    grid = generate_puzzle()
    for i, row in enumerate(grid):
        assert has_no_duplicates(row), f"Row {i} should have no duplicate filled numbers"
    for col in range(GRID_SIZE):
        assert has_no_duplicates(column(grid, col)), f"Column {col} should have no duplicate filled numbers"


def test_puzzle_preserves_protected_columns():
    for _ in range(5):
        grid = generate_puzzle()
        for row in range(GRID_SIZE):
            for col in PROTECTED_COLUMNS:
                assert grid[row][col] != 0, f"Cell [{row}][{col}] should not be empty"


def test_puzzle_is_neither_empty_nor_solved():
    grid = generate_puzzle()
    empty = sum(value == 0 for row in grid for value in row)
    # Protected columns make an all-empty puzzle impossible; an all-filled one is
    # possible with probability 2**-54, so it is reported rather than failed.
    assert empty < 81
    if empty == 0:
        warnings.warn("Generated puzzle has no empty cells")


def test_puzzles_differ_between_calls():
    grids = {json.dumps(generate_puzzle()) for _ in range(5)}
    assert len(grids) == 5, "All generated puzzles should be unique"


# =============================================================================
# METADATA
# =============================================================================

def test_metadata_grid_holds_cell_records():
    grid = generate_puzzle_with_metadata()
    _assert_shape(grid)
    for row in grid:
        for cell in row:
            assert isinstance(cell, Cell)
            assert 0 <= cell.chosen_value <= 9


def test_metadata_candidates_and_rejected_values_partition_digits():
    grid = generate_puzzle_with_metadata()
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            rejected = set(cell.rejected_values)
            assert len(rejected) == len(cell.rejected_values), f"Duplicate rejected value at [{i}][{j}]"
            assert rejected.isdisjoint(cell.candidates)
            assert rejected | cell.candidates == set(DIGITS)


def test_metadata_reflects_solve_time_state():
    grid = generate_puzzle_with_metadata()
    empty = 0
    for row in grid:
        for col, cell in enumerate(row):
            # The accepted digit is always the last one drawn
            assert cell.rejected_values, "Every cell was filled before removal"
            if cell.chosen_value == 0:
                empty += 1
                assert col not in PROTECTED_COLUMNS
            else:
                assert cell.chosen_value == cell.rejected_values[-1]
    assert empty < 81


def test_removed_cells_keep_solution_digit_in_metadata(seeded_source):
    # The fill draws first, so the same seed yields the same solution
    solution = generate_complete_grid(seeded_source(31))
    grid = generate_puzzle_with_metadata(seeded_source(31))
    removed = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            assert cell.rejected_values[-1] == solution[r][c]
            if cell.chosen_value == 0:
                removed += 1
            else:
                assert cell.chosen_value == solution[r][c]
    assert removed > 0


def test_metadata_values_form_valid_solution():
    grid = generate_puzzle_with_metadata()
    solution = [[cell.rejected_values[-1] for cell in row] for row in grid]
    for unit in all_units(solution):
        assert is_permutation(unit)


# =============================================================================
# PERFORMANCE
# =============================================================================

@pytest.mark.parametrize("generate", [generate_complete_grid, generate_puzzle])
def test_generation_completes_under_one_second(generate):
    start = time.perf_counter()
    generate()
    duration = (time.perf_counter() - start) * 1000
    assert duration < 1000, f"Generation should take < 1s, took {duration:.2f}ms"


def test_ten_puzzles_average_under_200ms():
    start = time.perf_counter()
    for _ in range(10):
        assert len(generate_puzzle()) == 9
    avg = (time.perf_counter() - start) * 1000 / 10
    assert avg < 200, f"Average generation time should be < 200ms, got {avg:.2f}ms"
