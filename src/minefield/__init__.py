"""
Minefield game module.

Provides the core engine: board generation, flood-fill reveal,
outcome evaluation and elapsed-time tracking.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    InvalidConfiguration,
    Outcome,
    evaluate,
    generate,
    new_game,
    reveal,
    toggle_flag,
)
from .clock import GameClock, format_time
from .session import Game

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "InvalidConfiguration",
    "Outcome",
    "evaluate",
    "generate",
    "new_game",
    "reveal",
    "toggle_flag",
    "GameClock",
    "format_time",
    "Game",
]
