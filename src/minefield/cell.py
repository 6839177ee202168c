"""
Cell module for the minefield engine.

Represents individual grid cells with their visibility
(hidden/open/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visibility states of a cell."""

    HIDDEN = auto()
    OPEN = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single cell in the minefield grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Fixed at generation.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Not meaningful for mine cells.
        state: Current visibility state (hidden, open, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell was opened, False if it was already open
            or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.OPEN
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on this cell.

        Returns:
            True if the flag was toggled, False if the cell is open.
        """
        if self.state == CellState.OPEN:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_open(self) -> bool:
        """Check if cell is open."""
        return self.state == CellState.OPEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Open cell with adjacent mine count
            9: Open mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
