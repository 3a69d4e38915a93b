"""
Shared types for the Sudoku generator.
Separated to avoid circular imports between modules.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple, Union

GRID_SIZE = 9
BLOCK_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
DIGITS: Tuple[int, ...] = tuple(range(1, GRID_SIZE + 1))


class SearchStateError(RuntimeError):
    """Raised when the backtracking search reaches a state it can never legally reach."""


@dataclass
class Cell:
    """
    Search-time record for one grid cell.

    Attributes:
        chosen_value: Digit currently placed, 0 when unfilled
        candidates: Digits not yet tried at this cell during the current attempt
        rejected_values: Digits already tried, in the order they were drawn
    """
    chosen_value: int = 0
    candidates: Set[int] = field(default_factory=lambda: set(DIGITS))
    rejected_values: List[int] = field(default_factory=list)

    def is_exhausted(self) -> bool:
        """True once every digit has been tried and rejected at this cell."""
        return not self.candidates and len(self.rejected_values) == GRID_SIZE

    def restore(self) -> None:
        """Return the cell to its start state (used on backtrack)."""
        self.candidates.update(self.rejected_values)
        self.rejected_values.clear()
        self.chosen_value = 0


@dataclass(frozen=True)
class Placed:
    """Trial outcome: the digit was accepted at the cell."""
    digit: int


@dataclass(frozen=True)
class Exhausted:
    """Trial outcome: no digit fits, the search must retreat one cell."""


TrialOutcome = Union[Placed, Exhausted]


@dataclass
class SearchStats:
    """Counters collected while filling a grid."""
    trials: int = 0
    backtracks: int = 0


@dataclass(frozen=True)
class RemovalPolicy:
    """
    Cell removal settings.

    Columns whose index is a multiple of ``block_width`` are never blanked.
    """
    probability: float = 0.5
    block_width: int = BLOCK_SIZE

    def __post_init__(self):
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError(f"probability must be in [0, 1], got {self.probability}")
        if self.block_width < 1:
            raise ValueError(f"block_width must be >= 1, got {self.block_width}")

    def is_protected(self, col: int) -> bool:
        return col % self.block_width == 0


class ValidationError:
    """Represents a validation error with severity and description."""
    def __init__(self, severity: str, message: str, location: Optional[Tuple[int, int]] = None):
        self.severity = severity  # "error", "warning", "info"
        self.message = message
        self.location = location

    def __str__(self):
        loc_str = f" at {self.location}" if self.location else ""
        return f"{self.severity.upper()}: {self.message}{loc_str}"

    def __repr__(self):
        return f"ValidationError({self.severity!r}, {self.message!r}, location={self.location!r})"
