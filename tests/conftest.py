"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, GameClock, generate


class FakeTime:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Generate a default 10x10 board with 10 mines."""
    return generate(10, 10, rng)


@pytest.fixture
def corner_mine_board() -> Board:
    """10x10 board with a single mine in the top-left corner."""
    return Board.from_layout(["*........."] + [".........."] * 9)


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board split by a column of mines.

        . . * . .
        . . * . .
        . . * . .
        . . * . .
        . . * . .
    """
    return Board.from_layout(["..*.."] * 5)


@pytest.fixture
def small_board() -> Board:
    """3x3 board with a mine in the centre."""
    return Board.from_layout(["...", ".*.", "..."])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration / Clock Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(10, 10)


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def clock(fake_time: FakeTime) -> GameClock:
    """Stopped clock driven by fake_time."""
    return GameClock(time_source=fake_time)
