"""
Board module for the minefield engine.

Implements the game board with random mine placement, flood-fill
revealing, and outcome evaluation.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Deque, List, Optional, Sequence, Set, Tuple

import numpy as np

from .cell import Cell, CellState


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MINE_OBSERVATION = 9

# Text for observation values that are not plain counts
_OBSERVATION_CHARS = {-1: ".", -2: "F", 0: " ", MINE_OBSERVATION: "*"}


class Outcome(Enum):
    """Classification of the game derived from the board."""

    IN_PROGRESS = auto()
    WIN = auto()
    LOSS = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.IN_PROGRESS


class InvalidConfiguration(ValueError):
    """Raised when a board cannot be built from the requested size/mines."""


@dataclass
class BoardConfig:
    """
    Configuration for a square minefield board.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place.
    """

    size: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size <= 0:
            raise InvalidConfiguration("Board size must be positive")
        if self.num_mines <= 0:
            raise InvalidConfiguration("Number of mines must be positive")
        max_mines = self.size * self.size - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minefield game board.

    Owns the grid of cells. Open/flag state only changes through
    ``reveal`` and ``toggle_flag``; the mine layout never changes once
    the board is generated.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize an empty grid unless one was supplied."""
        if not self._grid:
            self._init_grid()

    @property
    def size(self) -> int:
        return self.config.size

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.size)]
            for _ in range(self.size)
        ]

    def _place_mines(self, rng: random.Random) -> None:
        """
        Place mines by rejection sampling over the whole grid.

        A coordinate is drawn uniformly and accepted only if it does not
        already hold a mine, until ``num_mines`` mines are placed. Since
        at least one cell always stays free this terminates almost surely.

        Args:
            rng: Random source used for sampling.
        """
        placed = 0
        draws = 0
        while placed < self.config.num_mines:
            row = rng.randrange(self.size)
            col = rng.randrange(self.size)
            draws += 1
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1
        logger.debug(
            "placed %d mines on %dx%d board in %d draws",
            placed, self.size, self.size, draws,
        )

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row in range(self.size):
            for col in range(self.size):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    @classmethod
    def from_layout(cls, layout: Sequence[str]) -> "Board":
        """
        Build a board with a fixed mine layout.

        Args:
            layout: One string per row, ``*`` marks a mine and ``.`` a
                safe cell. All rows must have the same length as the
                number of rows.

        Returns:
            A freshly generated board with counts filled in.

        Raises:
            InvalidConfiguration: If a row is not a string of ``*``/``.``,
                the layout is not square or the mine count is out of range.
        """
        size = len(layout)
        for line in layout:
            if not isinstance(line, str) or set(line) - {"*", "."}:
                raise InvalidConfiguration(
                    f"Layout rows must be strings of '*' and '.', got {line!r}"
                )
            if len(line) != size:
                raise InvalidConfiguration("Layout must be square")
        num_mines = sum(line.count("*") for line in layout)
        board = cls(BoardConfig(size, num_mines))
        for row, line in enumerate(layout):
            for col, char in enumerate(line):
                board._grid[row][col].is_mine = char == "*"
        board._calculate_adjacent_mines()
        return board

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up-to-8 neighbors that lie
            on the board.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> Outcome:
        """
        Reveal the cell at the given position.

        Out-of-bounds, open and flagged targets are ignored, as is any
        reveal once the game is over. A mine ends the game as a loss and
        only that mine is opened. A zero-count cell opens its whole
        connected zero region plus the numbered cells bordering it.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            The outcome after the reveal.
        """
        outcome = self.evaluate()
        if outcome.is_terminal or not self._can_reveal(row, col):
            return outcome

        cell = self._grid[row][col]
        if cell.is_mine:
            cell.open()
        else:
            self._flood_fill(row, col)

        outcome = self.evaluate()
        if outcome.is_terminal:
            logger.debug("reveal at (%d, %d) ended game: %s", row, col, outcome.name)
        return outcome

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if not self.is_valid_position(row, col):
            return False
        return self._grid[row][col].state == CellState.HIDDEN

    def _flood_fill(self, row: int, col: int) -> int:
        """
        Open a safe cell and spread through zero-count cells.

        Iterative over a worklist of coordinates, each cell opened at most
        once. Every neighbor is queued with its own coordinates; flagged,
        open and mine cells are never queued.

        Returns:
            Number of cells opened.
        """
        frontier: Deque[Tuple[int, int]] = deque([(row, col)])
        visited: Set[Tuple[int, int]] = {(row, col)}
        opened = 0

        while frontier:
            current_row, current_col = frontier.popleft()
            cell = self._grid[current_row][current_col]
            if not cell.open():
                continue
            opened += 1

            if cell.adjacent_mines != 0:
                continue
            for neighbor in self.neighbors(current_row, current_col):
                if neighbor in visited:
                    continue
                neighbor_cell = self._grid[neighbor[0]][neighbor[1]]
                if neighbor_cell.is_mine or not neighbor_cell.is_hidden:
                    continue
                visited.add(neighbor)
                frontier.append(neighbor)

        return opened

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a hidden or flagged cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self.evaluate().is_terminal:
            return False
        if not self.is_valid_position(row, col):
            return False
        return self._grid[row][col].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def evaluate(self) -> Outcome:
        """
        Derive the outcome from a full scan of the grid.

        Returns:
            LOSS if a mine is open, WIN if every safe cell is open,
            IN_PROGRESS otherwise.
        """
        all_safe_open = True
        for line in self._grid:
            for cell in line:
                if cell.is_mine:
                    if cell.is_open:
                        return Outcome.LOSS
                elif not cell.is_open:
                    all_safe_open = False
        return Outcome.WIN if all_safe_open else Outcome.IN_PROGRESS

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def cells(self):
        """Iterate over ``(row, col, cell)`` in row-major order."""
        for row, line in enumerate(self._grid):
            for col, cell in enumerate(line):
                yield row, col, cell

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Positions of every mine on the board."""
        return [(row, col) for row, col, cell in self.cells() if cell.is_mine]

    def count_open(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_open)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = open with adjacent count
                9 = open mine
        """
        obs = np.zeros((self.size, self.size), dtype=np.int8)
        for row, col, cell in self.cells():
            obs[row, col] = cell.to_observation()
        return obs

    def get_mine_mask(self) -> np.ndarray:
        """Boolean array, True where a mine lies."""
        mask = np.zeros((self.size, self.size), dtype=bool)
        for row, col in self.mine_positions():
            mask[row, col] = True
        return mask

    def render(self, show_mines: bool = False) -> str:
        """
        Render board as text, one line per row.

        Built from the observation array: ``.`` hidden, ``F`` flagged,
        blank for an open zero, digits for counts and ``*`` for mines.
        With ``show_mines`` every mine is drawn, hidden or flagged.
        """
        obs = self.get_observation()
        if show_mines:
            obs = np.where(self.get_mine_mask(), MINE_OBSERVATION, obs)
        return "\n".join(
            " ".join(_OBSERVATION_CHARS.get(int(value), str(value)) for value in line)
            for line in obs
        )


# ============================================================================
# Module API
# ============================================================================

def generate(
    size: int, mine_count: int, rng: Optional[random.Random] = None
) -> Board:
    """
    Generate a new board with mines placed uniformly at random.

    Args:
        size: Number of rows and columns.
        mine_count: Number of mines, ``0 < mine_count < size * size``.
        rng: Optional random source for reproducible layouts.

    Returns:
        A board with no open or flagged cells and all counts computed.

    Raises:
        InvalidConfiguration: If size or mine_count is out of range.
    """
    config = BoardConfig(size, mine_count)
    board = Board(config)
    board._place_mines(rng if rng is not None else random.Random())
    board._calculate_adjacent_mines()
    return board


def new_game(
    size: int = 10, mine_count: int = 10, rng: Optional[random.Random] = None
) -> Board:
    """Start a new game on a freshly generated board."""
    return generate(size, mine_count, rng)


def reveal(board: Board, row: int, col: int) -> Tuple[Board, Outcome]:
    """Reveal a cell in place and return the board with its outcome."""
    outcome = board.reveal(row, col)
    return board, outcome


def toggle_flag(board: Board, row: int, col: int) -> Board:
    """Flip the flag of an unopened cell in place."""
    board.toggle_flag(row, col)
    return board


def evaluate(board: Board) -> Outcome:
    """Outcome of the board, computed from scratch."""
    return board.evaluate()
