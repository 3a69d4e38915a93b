"""
SudokuGrid - Owned 9x9 grid state for the Sudoku generator.

This module provides the cell-record grid the backtracking search mutates,
the row/column/block membership checks the search relies on, and validation
and export helpers for finished grids.

Fill order is row-major (index 0..80). Membership checks only look at cells
that precede the current one in that order, i.e. cells already committed.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

from sudokugen.core.random_source import RandomSource
from sudokugen.core.types import (
    CELL_COUNT,
    DIGITS,
    GRID_SIZE,
    Cell,
    Exhausted,
    Placed,
    SearchStateError,
    SearchStats,
    TrialOutcome,
    ValidationError,
)
from sudokugen.utils.blocks import (
    block_origins,
    block_range,
    coordinate_to_string,
    index_to_coordinate,
    string_to_coordinate,
)

logger = logging.getLogger(__name__)


class SudokuGrid:
    """
    Grid state manager for 9x9 Sudoku generation.

    Responsibilities:
        - Own one Cell record per (row, col)
        - Run the randomized backtracking fill
        - Check row/column/block membership against committed cells
        - Validate and export the finished grid

    Attributes:
        cells: 9x9 list of Cell records, indexed [row][col]
        stats: Trial/backtrack counters of the last fill
    """

    def __init__(self):
        self.cells: List[List[Cell]] = [[Cell() for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]
        self.stats: SearchStats = SearchStats()

    # =============================================================================
    # CELL QUERIES
    # =============================================================================

    def get_cell(self, row: int, col: int) -> Cell:
        """Return the Cell record at (row, col)."""
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise IndexError(f"cell ({row}, {col}) is outside the {GRID_SIZE}x{GRID_SIZE} grid")
        return self.cells[row][col]

    def get_value(self, row: int, col: int) -> int:
        return self.get_cell(row, col).chosen_value

    def set_value(self, row: int, col: int, value: int) -> None:
        """
        Overwrite the placed digit of a cell, leaving its search metadata alone.

        Args:
            row: Row coordinate
            col: Column coordinate
            value: Digit 1-9, or 0 to blank the cell
        """
        if not 0 <= value <= GRID_SIZE:
            raise ValueError(f"value {value} out of range (0-{GRID_SIZE})")
        self.get_cell(row, col).chosen_value = value

    def values(self) -> List[List[int]]:
        """Freshly allocated 9x9 matrix of placed digits (0 = empty)."""
        return [[cell.chosen_value for cell in row] for row in self.cells]

    def is_complete(self) -> bool:
        return all(cell.chosen_value != 0 for row in self.cells for cell in row)

    # =============================================================================
    # MEMBERSHIP CHECKS (committed cells only)
    # =============================================================================

    def _in_row(self, value: int, row: int, col: int) -> bool:
        """True if ``value`` sits in the same row left of ``col``."""
        for c in range(col):
            if self.cells[row][c].chosen_value == value:
                return True
        return False

    def _in_column(self, value: int, row: int, col: int) -> bool:
        """True if ``value`` sits in the same column above ``row``."""
        for r in range(row):
            if self.cells[r][col].chosen_value == value:
                return True
        return False

    def _in_block(self, value: int, row: int, col: int) -> bool:
        """True if ``value`` sits in the same block before (row, col) in row-major order."""
        for r in block_range(row):
            for c in block_range(col):
                if r > row or (r == row and c >= col):
                    continue
                if self.cells[r][c].chosen_value == value:
                    return True
        return False

    def conflicts(self, value: int, row: int, col: int) -> bool:
        """True if placing ``value`` at (row, col) breaks a row, column or block rule."""
        return (
            self._in_row(value, row, col)
            or self._in_column(value, row, col)
            or self._in_block(value, row, col)
        )

    # =============================================================================
    # BACKTRACKING SEARCH
    # =============================================================================

    def _draw_candidate(self, row: int, col: int, source: RandomSource) -> int:
        """
        Move one random candidate of the cell into its rejected list and place it.

        Candidates are drawn from the sorted set so a given source always
        produces the same sequence of digits.
        """
        cell = self.cells[row][col]
        if not cell.candidates:
            raise SearchStateError(
                f"Cell ({row}, {col}) has no candidates left but only "
                f"{len(cell.rejected_values)} rejected values"
            )

        ordered = sorted(cell.candidates)
        digit = ordered[source.randbelow(len(ordered))]

        cell.candidates.remove(digit)
        cell.rejected_values.append(digit)
        cell.chosen_value = digit
        return digit

    def try_cell(self, row: int, col: int, source: RandomSource) -> TrialOutcome:
        """
        Run the trial loop for one cell.

        Args:
            row: Row coordinate
            col: Column coordinate
            source: Randomness provider

        Returns:
            Placed(digit) when a digit fits, Exhausted() once all nine digits
            were rejected (the cell is reset to its start state)
        """
        cell = self.cells[row][col]
        while True:
            if cell.is_exhausted():
                cell.restore()
                return Exhausted()

            digit = self._draw_candidate(row, col, source)
            self.stats.trials += 1
            if not self.conflicts(digit, row, col):
                return Placed(digit)

    def fill(self, source: RandomSource) -> SearchStats:
        """
        Fill every cell in row-major order, retreating one cell at a time on exhaustion.

        Args:
            source: Randomness provider

        Returns:
            SearchStats for this fill

        Raises:
            SearchStateError: if the first cell runs out of digits
        """
        index = 0
        while index < CELL_COUNT:
            row, col = index_to_coordinate(index)
            outcome = self.try_cell(row, col, source)

            if isinstance(outcome, Placed):
                index += 1
                continue

            if index == 0:
                raise SearchStateError("Cell (0, 0) exhausted every digit; nothing left to retreat to")

            # Retreat exactly one cell; it keeps its remaining candidates
            self.stats.backtracks += 1
            index -= 1

        logger.debug("Filled grid in %d trials with %d backtracks",
                     self.stats.trials, self.stats.backtracks)
        return self.stats

    # =============================================================================
    # VALIDATION
    # =============================================================================

    def validate(self, allow_empty: bool = False) -> List[ValidationError]:
        """
        Return a list[ValidationError]. Empty list == VALID.

        Args:
            allow_empty: Accept 0 cells (puzzles); otherwise an empty cell is an error
        """
        return validate_values(self.values(), allow_empty=allow_empty)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get grid statistics.

        Returns:
            Dict with cell counts, removal ratio and search counters
        """
        empty = sum(1 for row in self.cells for cell in row if cell.chosen_value == 0)
        errors = self.validate(allow_empty=True)
        return {
            "filled_cells": CELL_COUNT - empty,
            "empty_cells": empty,
            "removal_ratio": empty / CELL_COUNT,
            "trials": self.stats.trials,
            "backtracks": self.stats.backtracks,
            "errors": len([e for e in errors if e.severity == "error"]),
        }

    # =============================================================================
    # JSON IMPORT/EXPORT
    # =============================================================================

    def to_json(self, grid_id: str = "generated_grid") -> Dict[str, Any]:
        """
        Export the grid to a JSON-compatible dict.

        - values: 9x9 matrix of digits (0 = empty)
        - metadata: per-cell rejected values and remaining candidates, keyed "row,col"
        - statistics: search counters
        """
        metadata = {}
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                cell = self.cells[row][col]
                metadata[coordinate_to_string(row, col)] = {
                    "rejected_values": list(cell.rejected_values),
                    "candidates": sorted(cell.candidates),
                }

        return {
            "id": grid_id,
            "size": GRID_SIZE,
            "values": self.values(),
            "metadata": metadata,
            "statistics": {
                "trials": self.stats.trials,
                "backtracks": self.stats.backtracks,
            },
        }

    @classmethod
    def from_json(cls, json_data: Dict[str, Any]) -> 'SudokuGrid':
        """
        Create a SudokuGrid from exported JSON data.

        Cells without a metadata entry keep the start-state candidates.
        """
        values = json_data.get("values")
        _check_shape(values)

        grid = cls()
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                grid.set_value(row, col, int(values[row][col]))

        for key, info in json_data.get("metadata", {}).items():
            row, col = string_to_coordinate(key)
            cell = grid.get_cell(row, col)
            rejected = [int(v) for v in info.get("rejected_values", [])]
            if any(v not in DIGITS for v in rejected):
                raise ValueError(f"Cell {key} has rejected values outside 1-{GRID_SIZE}: {rejected}")
            if len(set(rejected)) != len(rejected):
                raise ValueError(f"Cell {key} has duplicate rejected values: {rejected}")
            cell.rejected_values = rejected
            cell.candidates = set(DIGITS) - set(rejected)

        stats = json_data.get("statistics", {})
        grid.stats = SearchStats(trials=stats.get("trials", 0), backtracks=stats.get("backtracks", 0))
        return grid


def _check_shape(values: Optional[Sequence[Sequence[int]]]) -> None:
    if values is None or len(values) != GRID_SIZE:
        raise ValueError(f"Expected {GRID_SIZE} rows")
    for i, row in enumerate(values):
        if len(row) != GRID_SIZE:
            raise ValueError(f"Row {i} has {len(row)} cells, expected {GRID_SIZE}")


def validate_values(values: Sequence[Sequence[int]], allow_empty: bool = False) -> List[ValidationError]:
    """
    Validate a plain 9x9 matrix of digits.

    Rules (hard errors):
    - Values must be in range [0..9] (0 only when allow_empty)
    - No digit repeats within a row, column or block (0 is ignored)

    Raises:
        ValueError: if the matrix is not 9x9
    """
    _check_shape(values)
    errors: List[ValidationError] = []

    # ---------------------------
    # A) Value ranges
    # ---------------------------
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            value = values[row][col]
            if value == 0:
                if not allow_empty:
                    errors.append(ValidationError("error", "Empty cell in complete grid", location=(row, col)))
            elif value not in DIGITS:
                errors.append(ValidationError(
                    "error",
                    f"Value {value} out of range (1-{GRID_SIZE})",
                    location=(row, col)
                ))

    # ---------------------------
    # B) Duplicates per unit
    # ---------------------------
    units = []
    for i in range(GRID_SIZE):
        units.append((f"row {i}", [(i, c) for c in range(GRID_SIZE)]))
        units.append((f"column {i}", [(r, i) for r in range(GRID_SIZE)]))
    for r0, c0 in block_origins():
        cells = [(r, c) for r in block_range(r0) for c in block_range(c0)]
        units.append((f"block at ({r0}, {c0})", cells))

    for name, cells in units:
        seen = {}
        for (r, c) in cells:
            value = values[r][c]
            if value == 0:
                continue
            if value in seen:
                errors.append(ValidationError(
                    "error",
                    f"Duplicate value {value} in {name}",
                    location=(r, c)
                ))
            else:
                seen[value] = (r, c)

    return errors
