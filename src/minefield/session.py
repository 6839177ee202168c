"""
Game session controller.

Ties a board to its clock and to the display state a front end needs.
The outcome is always read from the board, never kept alongside it.
"""
import logging
import random
from typing import Optional

from .board import Board, BoardConfig, Outcome, evaluate, new_game, reveal, toggle_flag
from .clock import GameClock, format_time


logger = logging.getLogger(__name__)


class Game:
    """
    One running game plus restart support.

    Attributes:
        config: Board configuration used for every new board.
        board: The current board.
        clock: Elapsed-time clock, stopped once the game ends.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[GameClock] = None,
    ) -> None:
        self.config = config or BoardConfig()
        self.rng = rng
        self.clock = clock or GameClock()
        self.board: Board = self._new_board()
        self.clock.start()

    def _new_board(self) -> Board:
        return new_game(self.config.size, self.config.num_mines, self.rng)

    @property
    def outcome(self) -> Outcome:
        """Outcome of the current board, recomputed on every read."""
        return evaluate(self.board)

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def show_all_mines(self) -> bool:
        """True after a loss, so renderers display every mine."""
        return self.outcome is Outcome.LOSS

    def _stop_clock_if_over(self, outcome: Outcome) -> None:
        if outcome.is_terminal and self.clock.stop():
            logger.info(
                "game finished: %s after %s",
                outcome.name, format_time(self.clock.elapsed),
            )

    def open_cell(self, row: int, col: int) -> Outcome:
        """
        Reveal a cell and stop the clock when the game ends.

        Input after the game has ended is ignored.
        """
        before = self.outcome
        if before.is_terminal:
            self._stop_clock_if_over(before)
            return before

        _, after = reveal(self.board, row, col)
        self._stop_clock_if_over(after)
        return after

    def toggle_flag(self, row: int, col: int) -> None:
        outcome = self.outcome
        if outcome.is_terminal:
            self._stop_clock_if_over(outcome)
            return
        toggle_flag(self.board, row, col)

    def restart(self) -> None:
        """Replace the board wholesale and restart the clock."""
        self.board = self._new_board()
        self.clock.restart()

    @property
    def elapsed_text(self) -> str:
        return format_time(self.clock.elapsed)

    def render(self) -> str:
        return self.board.render(show_mines=self.show_all_mines)
